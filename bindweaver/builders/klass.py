"""Building class proxies from parsed structs."""

from __future__ import annotations

from collections.abc import Iterable

from bindweaver import ir
from bindweaver.builders.enum import build_enum
from bindweaver.builders.function import UnsupportedArgumentError, build_function
from bindweaver.operators import operator_name
from bindweaver.overloads import overloaded_functions
from bindweaver.proxy.function import Function
from bindweaver.proxy.klass import Class
from bindweaver.trampoline import trampoline_class
from bindweaver.typeinfo import TypeInfo, check_type
from bindweaver.typestring import build_type_string


def template_parameter_string(parameters: Iterable[ir.Type]) -> str:
    """Suffix naming a template instantiation, e.g. [int, char] gives '_int_char'."""
    return "".join(f"_{build_type_string(parameter)}" for parameter in parameters)


def _mark_member(
    proxy: Function, cpp_function: ir.Function, overloaded: set[str]
) -> None:
    if cpp_function.is_static:
        proxy.is_static = True
    if cpp_function.representation in overloaded:
        proxy.is_overloaded = True


class _Trampoline:
    def __init__(self) -> None:
        self.virtual: list[Function] = []
        self.pure_virtual: list[Function] = []

    def add_if_virtual(self, polymorphic: ir.Polymorphic, proxy: Function) -> None:
        if polymorphic == ir.Polymorphic.PURE_VIRTUAL:
            self.pure_virtual.append(proxy)
        elif polymorphic == ir.Polymorphic.VIRTUAL:
            self.virtual.append(proxy)

    def __bool__(self) -> bool:
        return bool(self.virtual or self.pure_virtual)


def build_class(cpp_class: ir.Struct, type_info: TypeInfo) -> Class:
    """Turn a parsed struct into a class proxy.

    A struct with an implicit default constructor gets one added. Raises
    UnsupportedArgumentError if a member function or operator takes a
    std::unique_ptr; such constructors are left out instead.
    """
    py_class = Class(
        ir.remove_cpp_template(cpp_class.name)
        + template_parameter_string(cpp_class.template_arguments),
        cpp_class.representation,
    )
    py_class.documentation = cpp_class.documentation
    py_class.inherited.extend(cpp_class.public.inherited)
    trampoline = _Trampoline()

    overloaded = overloaded_functions(cpp_class.public.functions)
    for function in cpp_class.public.functions:
        proxy = build_function(function, type_info)
        _mark_member(proxy, function, overloaded)
        trampoline.add_if_virtual(function.polymorphic, proxy)
        py_class.add_function(proxy)

    overloaded_ops = overloaded_functions(cpp_class.public.operators)
    for op, function in cpp_class.public.operators:
        proxy = build_function(function, type_info)
        python_name = operator_name(op)
        if python_name is None:
            continue
        proxy.python_name = python_name
        _mark_member(proxy, function, overloaded_ops)
        trampoline.add_if_virtual(function.polymorphic, proxy)
        py_class.add_function(proxy)

    constructors = cpp_class.public.constructors
    for constructor in constructors:
        try:
            proxy = build_function(constructor, type_info)
        except UnsupportedArgumentError:
            continue
        if constructor.is_static:
            proxy.is_static = True
        if len(constructors) > 1:
            proxy.is_overloaded = True
        proxy.is_constructor = True
        trampoline.add_if_virtual(constructor.polymorphic, proxy)
        py_class.add_constructor(proxy)

    for variable in cpp_class.public.member_variables:
        check_type(variable.type, type_info)
        py_class.add_member_variable(
            variable.name,
            variable.documentation,
            variable.type.is_const,
            variable.is_static,
        )

    if cpp_class.has_implicit_default_constructor:
        default = Function(py_class.name, py_class.name)
        default.is_constructor = True
        py_class.add_constructor(default)

    for e in cpp_class.public.enums:
        py_class.add_enum(build_enum(e))

    if trampoline:
        name, definition = trampoline_class(
            cpp_class.name,
            cpp_class.representation,
            trampoline.virtual,
            trampoline.pure_virtual,
        )
        type_info.trampoline_classes.add(definition)
        py_class.add_trampoline_class(
            f"{type_info.extra_functions_namespace}::{name}"
        )

    if cpp_class.representation in type_info.classes_marked_shared:
        py_class.managed_by_shared = True

    return py_class