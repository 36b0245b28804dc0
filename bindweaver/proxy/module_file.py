"""Proxy for the whole generated binding source file."""

from __future__ import annotations

from pathlib import Path

from bindweaver.proxy.module import Module
from bindweaver.typeinfo import TypeInfo


def extra_functions(type_info: TypeInfo) -> str:
    """A namespace holding the trampoline classes, or '' if there are none."""
    if not type_info.trampoline_classes:
        return ""
    joined = "\n".join(sorted(type_info.trampoline_classes))
    return f"\nnamespace {type_info.extra_functions_namespace} {{\n{joined}\n}}\n"


class ModuleFile:
    """A source file defining a pybind11 module and all its submodules."""

    def __init__(self, root_module: Module, library_name: str) -> None:
        self.root_module_name = root_module.variable_name
        self.library_name = library_name
        # Emitted in the order added; modules know which are their submodules
        self.modules: list[Module] = [root_module]
        self.type_info = TypeInfo()

    @property
    def filepath(self) -> Path:
        """Name of the generated file, e.g. 'MyModule_python.cpp'."""
        return Path(f"{self.library_name}_python.cpp")

    def add_module(self, module: Module) -> None:
        self.modules.append(module)

    def set_type_info(self, info: TypeInfo) -> None:
        """Copy info into this file, adding the base pybind11 include."""
        self.type_info = TypeInfo(
            includes=set(info.includes) | {"#include <pybind11/pybind11.h>"},
            classes_marked_shared=set(info.classes_marked_shared),
            extra_functions_namespace=info.extra_functions_namespace,
            trampoline_classes=set(info.trampoline_classes),
        )

    def pybind(self) -> str:
        """The complete content of the generated source file."""
        includes = "\n".join(sorted(self.type_info.includes))
        out = (
            f"\n{includes}\n\nnamespace py = pybind11;\n"
            f"{extra_functions(self.type_info)}\n"
            f"PYBIND11_MODULE({self.library_name}, {self.root_module_name})"
        )
        out += " {\n"
        out += "".join(m.pybind() for m in self.modules)
        return out + "}"