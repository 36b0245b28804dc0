import pytest

from bindweaver.proxy.function import (
    Function,
    ReturnValuePolicy,
    return_value_policy_to_string,
)


def test_static_global_function():
    f = Function("f", "MyNamespace::f")
    f.is_static = True
    assert 'def_static("f", &MyNamespace::f' in f.pybind()


def test_signature_if_no_overloads():
    f = Function("f", "f")
    f.documentation = "This is a function"
    for arg in ["i", "j", "k"]:
        f.add_argument("int", arg)
    code = f.pybind()
    assert 'def("f", &f, R"_tolc_docs(This is a function)_tolc_docs"' in code


def test_signature_of_overloaded_function():
    f = Function("f", "f")
    for arg in ["i", "j", "k"]:
        f.add_argument("int", arg)
    f.is_overloaded = True
    assert "(void(*)(int, int, int))" in f.pybind()


def test_simple_function_within_namespace():
    f = Function("f", "MyNamespace::f")
    assert 'def("f", &MyNamespace::f' in f.pybind()


def test_simple_function_full_output():
    f = Function("f", "MyNamespace::f")
    assert f.pybind() == 'def("f", &MyNamespace::f, "")'


def test_function_with_arguments():
    f = Function("f", "f")
    args = ["i", "j", "k"]
    for arg in args:
        f.add_argument("int", arg)
    code = f.pybind()
    assert 'def("f", &f' in code
    for arg in args:
        assert f'py::arg("{arg}")' in code


def test_function_with_unnamed_arguments():
    f = Function("f", "f")
    args = ["i", "", "k"]
    for arg in args:
        f.add_argument("int", arg)
    code = f.pybind()
    assert 'def("f", &f' in code
    for arg in args:
        assert f'py::arg("{arg}")' not in code


@pytest.mark.parametrize(
    "policy",
    [
        ReturnValuePolicy.AUTOMATIC,
        ReturnValuePolicy.TAKE_OWNERSHIP,
        ReturnValuePolicy.COPY,
        ReturnValuePolicy.MOVE,
        ReturnValuePolicy.REFERENCE,
        ReturnValuePolicy.REFERENCE_INTERNAL,
        ReturnValuePolicy.AUTOMATIC_REFERENCE,
    ],
)
def test_return_value_policy(policy):
    f = Function("f", "f")
    f.return_value_policy = policy
    assert f", py::{return_value_policy_to_string(policy)}" in f.pybind()


@pytest.mark.parametrize(
    "policy, expected",
    [
        (ReturnValuePolicy.TAKE_OWNERSHIP, "return_value_policy::take_ownership"),
        (ReturnValuePolicy.COPY, "return_value_policy::copy"),
        (ReturnValuePolicy.MOVE, "return_value_policy::move"),
        (ReturnValuePolicy.REFERENCE, "return_value_policy::reference"),
        (
            ReturnValuePolicy.REFERENCE_INTERNAL,
            "return_value_policy::reference_internal",
        ),
        (ReturnValuePolicy.AUTOMATIC, "return_value_policy::automatic"),
        (
            ReturnValuePolicy.AUTOMATIC_REFERENCE,
            "return_value_policy::automatic_reference",
        ),
    ],
)
def test_return_value_policy_to_string(policy, expected):
    assert return_value_policy_to_string(policy) == expected


def test_constructor_uses_init():
    f = Function("MyClass", "MyClass")
    f.add_argument("const std::string&", "s")
    f.is_constructor = True
    assert f.pybind() == 'def(py::init<const std::string&>(), "", py::arg("s"))'


def test_python_name_defaults_to_name_and_can_be_overridden():
    f = Function("operator+", "MyClass::operator+")
    assert f.python_name == "operator+"
    f.python_name = "__add__"
    assert f.python_name == "__add__"
    assert 'def("__add__", &MyClass::operator+' in f.pybind()


def test_argument_types_and_names():
    f = Function("f", "f")
    f.add_argument("int", "i")
    f.add_argument("double", "d")
    assert f.argument_types() == "int, double"
    assert f.argument_types(True) == "int i, double d"
    assert f.argument_names() == "i, d"