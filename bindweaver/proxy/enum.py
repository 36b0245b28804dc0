"""Proxy for an enum exposed through pybind11."""

from __future__ import annotations

from bindweaver.text import documentation_parameter


class Enum:
    """An enum to be bound; values are bare names such as 'MyValue'."""

    def __init__(self, name: str, fully_qualified_name: str) -> None:
        self.name = name
        self.fully_qualified_name = fully_qualified_name
        self.documentation = ""
        self.values: list[str] = []
        self.is_scoped = False

    def add_value(self, value: str) -> None:
        """Add a value by its bare name, not qualified by the enum."""
        self.values.append(value)

    def pybind(self, module_or_class: str) -> str:
        """The pybind11 definition of this enum within the given module or class."""
        out = (
            f"\t\tpy::enum_<{self.fully_qualified_name}>"
            f'({module_or_class}, "{self.name}"'
        )
        if self.is_scoped:
            out += ", py::arithmetic()"
        out += f", {documentation_parameter(self.documentation)})\n"

        for value in self.values:
            out += f'\t\t.value("{value}", {self.fully_qualified_name}::{value})\n'

        if not self.is_scoped:
            out += "\t\t.export_values()\n"

        return out[:-1] + ";\n"