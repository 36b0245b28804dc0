"""Trampoline classes that let Python subclasses override C++ virtual functions."""

from __future__ import annotations

from collections.abc import Iterable

from bindweaver.proxy.function import Function
from bindweaver.text import split

_VIRTUAL_TEMPLATE = (
    "\n"
    "\t{return_type} {name}({arguments}) override {{\n"
    "\t\tPYBIND11_OVERRIDE_{pure}NAME(\n"
    "\t\t\t{return_type},\n"
    "\t\t\t{parent_class},\n"
    '\t\t\t"{python_name}",\n'
    "\t\t\t{name},\n"
    "\t\t\t{argument_names}\n"
    "\t\t);\n"
    "\t}}\n"
)

_CLASS_TEMPLATE = (
    "\n"
    "class {trampoline} : public {fully_qualified_name} {{\n"
    "public:\n"
    "\t/* Inherit the constructors */\n"
    "\tusing {fully_qualified_name}::{class_name};\n"
    "\n"
    "\t/* Virtual trampoline functions */\n"
    "{virtuals}\n"
    "\t/* Pure virtual trampoline functions */\n"
    "{pure_virtuals}\n"
    "}};\n"
)


def _join_virtual(
    parent_class: str, virtuals: Iterable[Function], is_pure: bool
) -> str:
    return "".join(
        _VIRTUAL_TEMPLATE.format(
            return_type=f.return_type,
            name=f.name,
            arguments=f.argument_types(True),
            pure="PURE_" if is_pure else "",
            parent_class=parent_class,
            python_name=f.python_name,
            argument_names=f.argument_names(),
        )
        for f in virtuals
    )


def trampoline_class_name(fully_qualified_name: str) -> str:
    """Name of the trampoline for a class, e.g. 'NS::Animal' gives 'PyNS_Animal'."""
    return "Py" + "_".join(split(fully_qualified_name, "::"))


def trampoline_class(
    class_name: str,
    fully_qualified_name: str,
    virtual_functions: Iterable[Function],
    pure_virtual_functions: Iterable[Function],
) -> tuple[str, str]:
    """Return (trampoline class name, trampoline class definition)."""
    name = trampoline_class_name(fully_qualified_name)
    definition = _CLASS_TEMPLATE.format(
        trampoline=name,
        fully_qualified_name=fully_qualified_name,
        class_name=class_name,
        virtuals=_join_virtual(fully_qualified_name, virtual_functions, False),
        pure_virtuals=_join_virtual(fully_qualified_name, pure_virtual_functions, True),
    )
    return name, definition