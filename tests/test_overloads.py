from bindweaver.ir import Function, Operator
from bindweaver.overloads import overloaded_functions


def _f(representation):
    return Function(name=representation.split("::")[-1], representation=representation)


def test_no_functions():
    assert overloaded_functions([]) == set()


def test_unique_functions_are_not_overloaded():
    assert overloaded_functions([_f("a"), _f("b"), _f("NS::a")]) == set()


def test_duplicate_is_overloaded():
    functions = [_f("sayHello"), _f("sayHello"), _f("safety")]
    assert overloaded_functions(functions) == {"sayHello"}


def test_triplicate_reported_once():
    functions = [_f("add"), _f("add"), _f("add")]
    assert overloaded_functions(functions) == {"add"}


def test_operator_pairs():
    functions = [
        (Operator.CALL, _f("MyClass::operator()")),
        (Operator.CALL, _f("MyClass::operator()")),
        (Operator.ADDITION, _f("MyClass::operator+")),
    ]
    assert overloaded_functions(functions) == {"MyClass::operator()"}


def test_result_is_subset_of_representations():
    functions = [_f("x"), _f("y"), _f("x"), _f("z"), _f("y")]
    result = overloaded_functions(functions)
    assert result <= {f.representation for f in functions}
    assert result == {"x", "y"}