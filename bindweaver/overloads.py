"""Finding overloaded functions by their qualified name."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from bindweaver.ir import Function, Operator


def overloaded_functions(
    functions: Iterable[Union[Function, tuple[Operator, Function]]],
) -> set[str]:
    """Representations that occur more than once among the functions.

    Accepts plain functions or (operator, function) pairs.
    """
    seen: set[str] = set()
    overloaded: set[str] = set()
    for item in functions:
        function = item[1] if isinstance(item, tuple) else item
        if function.representation in seen:
            overloaded.add(function.representation)
        else:
            seen.add(function.representation)
    return overloaded