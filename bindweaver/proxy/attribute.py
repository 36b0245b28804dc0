"""Proxy for a global variable exposed as a module attribute."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Attribute:
    """A global value; Python drops constness so it is always mutable there."""

    name: str
    fully_qualified_name: str

    def pybind(self) -> str:
        """The pybind11 attribute assignment, e.g. attr("i") = &NS::i;"""
        return f'\tattr("{self.name}") = &{self.fully_qualified_name};\n'