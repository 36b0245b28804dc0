"""Proxy for a module or submodule in the generated bindings."""

from __future__ import annotations

from dataclasses import dataclass

from bindweaver.proxy.attribute import Attribute
from bindweaver.proxy.enum import Enum
from bindweaver.proxy.function import Function
from bindweaver.proxy.klass import Class
from bindweaver.text import documentation_parameter


@dataclass
class Submodule:
    """A child module; variable is the C++ name referring to it, e.g. 'NS_Nested'."""

    name: str
    variable: str
    documentation: str = ""


class Module:
    """Functions, classes, enums and attributes defined in one module."""

    def __init__(self, variable_name: str) -> None:
        self.variable_name = variable_name
        self.submodules: list[Submodule] = []
        self.functions: list[Function] = []
        self.classes: list[Class] = []
        self.enums: list[Enum] = []
        self.attributes: list[Attribute] = []

    def add_function(self, function: Function) -> None:
        self.functions.append(function)

    def add_class(self, cls: Class) -> None:
        self.classes.append(cls)

    def add_enum(self, e: Enum) -> None:
        self.enums.append(e)

    def add_attribute(self, attribute: Attribute) -> None:
        self.attributes.append(attribute)

    def add_submodule(self, name: str, variable_name: str, documentation: str) -> None:
        self.submodules.append(Submodule(name, variable_name, documentation))

    def pybind(self) -> str:
        """The pybind11 code defining everything in this module."""
        var = self.variable_name
        out = "".join(f"{cls.pybind(var)}\n" for cls in self.classes)
        out += "".join(f"{e.pybind(var)}\n" for e in self.enums)
        out += "".join(f"{var}.{a.pybind()}\n" for a in self.attributes)
        out += "".join(f"\t{var}.{f.pybind()};\n" for f in self.functions)
        out += "".join(
            f"\tauto {sub.variable} = {var}.def_submodule"
            f'("{sub.name}", {documentation_parameter(sub.documentation)});\n'
            for sub in self.submodules
        )
        return out