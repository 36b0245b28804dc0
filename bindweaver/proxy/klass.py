"""Proxy for a class exposed through pybind11."""

from __future__ import annotations

from dataclasses import dataclass

from bindweaver.proxy.enum import Enum
from bindweaver.proxy.function import Function
from bindweaver.text import documentation_parameter


@dataclass
class MemberVariable:
    name: str
    documentation: str = ""
    is_const: bool = False
    is_static: bool = False


class Class:
    """A class to be bound with its constructors, functions, members and enums."""

    def __init__(self, name: str, fully_qualified_name: str) -> None:
        self.name = name
        self.fully_qualified_name = fully_qualified_name
        self.documentation = ""
        self.inherited: list[str] = []
        self.constructors: list[Function] = []
        self.functions: list[Function] = []
        self.member_variables: list[MemberVariable] = []
        self.enums: list[Enum] = []
        # Held by std::shared_ptr on the Python side instead of std::unique_ptr
        self.managed_by_shared = False

    def add_enum(self, e: Enum) -> None:
        self.enums.append(e)

    def add_function(self, function: Function) -> None:
        self.functions.append(function)

    def add_constructor(self, constructor: Function) -> None:
        self.constructors.append(constructor)

    def add_member_variable(
        self, name: str, documentation: str, is_const: bool, is_static: bool
    ) -> None:
        self.member_variables.append(
            MemberVariable(name, documentation, is_const, is_static)
        )

    def add_trampoline_class(self, trampoline_class: str) -> None:
        """Register the trampoline class that lets Python override virtual functions."""
        self.inherited.append(trampoline_class)

    def pybind(self, module_name: str) -> str:
        """The pybind11 definition of this class within the given module."""
        managed = (
            f", std::shared_ptr<{self.fully_qualified_name}>"
            if self.managed_by_shared
            else ""
        )
        inherited = f", {', '.join(self.inherited)}" if self.inherited else ""
        docs = documentation_parameter(self.documentation)
        out = (
            f"\tpy::class_<{self.fully_qualified_name}{managed}{inherited}>"
            f'({module_name}, "{self.name}", {docs})\n'
        )

        for constructor in self.constructors:
            out += f"\t\t.{constructor.pybind()}\n"

        for function in self.functions:
            out += f"\t\t.{function.pybind()}\n"

        for variable in self.member_variables:
            accessor = "readonly" if variable.is_const else "readwrite"
            staticness = "_static" if variable.is_static else ""
            out += (
                f'\t\t.def_{accessor}{staticness}("{variable.name}", '
                f"&{self.fully_qualified_name}::{variable.name}, "
                f"{documentation_parameter(variable.documentation)})\n"
            )

        out = out[:-1] + ";\n"

        if self.enums:
            out += "\n"
            out += "".join(f"{e.pybind(self.name)}\n" for e in self.enums)
            # Drop the trailing blank line and the enum's final newline
            out = out[:-2]

        return out