"""Python special method names for C++ operators."""

from __future__ import annotations

from typing import Optional

from bindweaver.ir import Operator

_OPERATOR_NAMES = {
    Operator.ADDITION: "__add__",
    Operator.ADD_EQUAL: "__iadd__",
    Operator.SUBTRACTION: "__sub__",
    Operator.SUB_EQUAL: "__isub__",
    Operator.MULTIPLICATION: "__mul__",
    Operator.MUL_EQUAL: "__imul__",
    Operator.DIVISION: "__truediv__",
    Operator.DIV_EQUAL: "__itruediv__",
    Operator.MODULUS: "__mod__",
    Operator.MOD_EQUAL: "__imod__",
    Operator.EQUAL: "__eq__",
    Operator.NOT_EQUAL: "__ne__",
    Operator.GREATER_THAN: "__gt__",
    Operator.GREATER_THAN_OR_EQUAL_TO: "__ge__",
    Operator.LESS_THAN: "__lt__",
    Operator.LESS_THAN_OR_EQUAL_TO: "__le__",
    Operator.SUBSCRIPT: "__getitem__",
    Operator.CALL: "__call__",
}


def operator_name(op: Operator) -> Optional[str]:
    """The Python name for an operator, or None if it has no translation."""
    return _OPERATOR_NAMES.get(op)