from bindweaver.proxy.enum import Enum
from bindweaver.proxy.function import Function
from bindweaver.proxy.klass import Class


def test_empty_class():
    c = Class("myClass", "myClass")
    assert 'py::class_<myClass>(myModule, "myClass"' in c.pybind("myModule")


def test_class_with_functions():
    c = Class("myOtherClass", "myOtherClass")
    functions = ["f", "calculate", "foo"]
    for function in functions:
        c.add_function(Function(function, function))
    code = c.pybind("myModule")
    for function in functions:
        assert f'\t.def("{function}", &{function}' in code


def test_class_with_constructor():
    c = Class("myFreshClass", "myFreshClass")
    arguments = ["const std::string&", "int"]
    constructor = Function("myFreshClass", "myFreshClass")
    for argument in arguments:
        constructor.add_argument(argument)
    constructor.is_constructor = True
    c.add_constructor(constructor)
    assert "\t.def(py::init<const std::string&, int>()" in c.pybind("myModule")


def test_class_with_member_variables():
    class_name = "SuperbClass"
    c = Class(class_name, class_name)
    const_variables = ["myInt", "var", "yes"]
    for variable in const_variables:
        c.add_member_variable(variable, "", True, False)
    non_const_variables = ["myOtherInt", "var2", "no"]
    for variable in non_const_variables:
        c.add_member_variable(variable, "", False, False)

    code = c.pybind("NewlyMadeModule")
    for variable in const_variables:
        assert f'\t.def_readonly("{variable}", &{class_name}::{variable}' in code
    for variable in non_const_variables:
        assert f'\t.def_readwrite("{variable}", &{class_name}::{variable}' in code


def test_static_member_variable():
    c = Class("S", "S")
    c.add_member_variable("v0", "", True, True)
    assert '.def_readonly_static("v0", &S::v0' in c.pybind("m")


def test_class_without_enums_ends_with_statement():
    c = Class("S", "S")
    c.add_function(Function("f", "S::f"))
    assert c.pybind("m").endswith(");\n")


def test_shared_and_inherited_and_trampoline():
    c = Class("Dog", "NS::Dog")
    c.inherited.extend(["NS::Animal"])
    c.add_trampoline_class("Tolc_::PyNS_Dog")
    c.managed_by_shared = True
    code = c.pybind("m")
    assert (
        "py::class_<NS::Dog, std::shared_ptr<NS::Dog>, NS::Animal, Tolc_::PyNS_Dog>"
        '(m, "Dog"' in code
    )


def test_documentation_of_class():
    c = Class("Documentation", "Documentation")
    c.documentation = "Documentation carries over"
    assert 'R"_tolc_docs(Documentation carries over)_tolc_docs"' in c.pybind("m")