# bindweaver

bindweaver turns a description of a C++ interface into the source of a
pybind11 extension module. You describe namespaces, classes, functions,
enums and variables with the dataclasses in `bindweaver.ir`. bindweaver then
writes the `PYBIND11_MODULE` translation unit that exposes them to Python.

## What it handles

- Namespaces become submodules, nested as deep as you like. Each one gets a
  unique module variable such as `MyModule_sub_subsub`.
- Free functions, member functions, static functions and constructors become
  `def`, `def_static` and `def(py::init<...>())`. Overloads are written with
  explicit function pointer casts. When every argument has a name, the
  arguments are exposed as keywords with `py::arg`.
- Functions that return a pointer get `py::return_value_policy::reference`.
- Operators map to Python's special methods: `+` becomes `__add__`, `[]`
  becomes `__getitem__`, `()` becomes `__call__`, and so on. Assignment,
  shift, increment and decrement operators are left out.
- Member variables become `def_readonly` or `def_readwrite`, with a
  `_static` variant for static members. Global variables become module
  attributes.
- Scoped enums get `py::arithmetic()`. Unscoped enums export their values.
- Classes with virtual or pure virtual functions get a trampoline class in
  the `Tolc_` namespace, so they can be subclassed from Python.
- A class is held by `std::shared_ptr` when a `std::shared_ptr` of it has
  been seen in a type checked before the class is built.
- Specialised class templates get flattened names. `MyClass<std::map<char,
  std::vector<int>>>` becomes `MyClass_map_char_vector_int`.
- The generated file includes the pybind11 headers the types need:
  `stl.h`, `functional.h`, `complex.h` and `stl/filesystem.h`. Containers
  pybind11 has no conversion for (queues, stacks, multimaps and the like)
  are logged as errors through the `logging` module.
- Documentation strings are carried over into the docstrings.

## Generating a module

```python
from bindweaver.frontend import create_module
from bindweaver.ir import Namespace

root = Namespace()
for path, content in create_module(root, "MyModule"):
    print(path)      # MyModule_python.cpp
    print(content)   # the pybind11 source
```

`create_module` takes the global namespace and the name of the extension
module. It returns the files to write as `(path, content)` pairs of a
`pathlib.Path` and a string.

A function, member function or operator that takes a `std::unique_ptr`
argument cannot be bound, because Python cannot give up ownership of an
object. If the interface contains one, `create_module` raises
`bindweaver.builders.function.UnsupportedArgumentError`. Constructors that
take a `std::unique_ptr` are quietly left out instead.

## Working with the pieces

The builders in `bindweaver.builders` (`build_function`, `build_class`,
`build_enum`, `build_attribute`, `build_module`, `build_module_file`) turn
interface descriptions into proxy objects. The proxies in `bindweaver.proxy`
render themselves as pybind11 code through their `pybind()` methods, and you
can use them directly:

```python
from bindweaver.proxy.function import Function

f = Function("f", "MyNamespace::f")
f.add_argument("int", "i")
print(f.pybind())   # def("f", &MyNamespace::f, "", py::arg("i"))
```

## What it does not do

bindweaver does not read C++ headers: there is no parser, so the interface
has to be described with the `bindweaver.ir` types by the caller. It has no
command line tool, does not write the generated files to disk and does not
compile or build the extension module.