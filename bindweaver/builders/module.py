"""Building module proxies from namespaces."""

from __future__ import annotations

from bindweaver import ir
from bindweaver.builders.attribute import build_attribute
from bindweaver.builders.enum import build_enum
from bindweaver.builders.function import build_function
from bindweaver.builders.klass import build_class
from bindweaver.overloads import overloaded_functions
from bindweaver.proxy.module import Module
from bindweaver.text import split
from bindweaver.typeinfo import TypeInfo


def module_variable_name(qualified_name: str, root_module_name: str) -> str:
    """A unique C++ variable name for a module: 'MyNS::Math', 'root' gives 'root_MyNS_Math'.

    The root name is always prefixed so a namespace named like the root
    module does not clash with it; the global namespace gives the root name.
    """
    parts = split(qualified_name, "::")
    if parts == [""]:
        parts = []
    return "_".join([root_module_name, *parts])


def build_module(
    ns: ir.Namespace, root_module_name: str, type_info: TypeInfo
) -> Module:
    """Build a module proxy for one namespace, adding its children only as submodules.

    Raises UnsupportedArgumentError if any function takes a std::unique_ptr.
    """
    module = Module(module_variable_name(ns.representation, root_module_name))

    overloaded = overloaded_functions(ns.functions)
    for function in ns.functions:
        proxy = build_function(function, type_info)
        if function.representation in overloaded:
            proxy.is_overloaded = True
        module.add_function(proxy)

    for variable in ns.variables:
        module.add_attribute(build_attribute(ns.representation, variable, type_info))

    for struct in ns.structs:
        module.add_class(build_class(struct, type_info))

    for e in ns.enums:
        module.add_enum(build_enum(e))

    for sub in ns.namespaces:
        module.add_submodule(
            sub.name,
            module_variable_name(sub.representation, root_module_name),
            sub.documentation,
        )

    return module