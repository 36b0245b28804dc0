"""Building function proxies."""

from __future__ import annotations

from bindweaver import ir
from bindweaver.proxy.function import Function, ReturnValuePolicy
from bindweaver.typeinfo import TypeInfo, check_type


class UnsupportedArgumentError(ValueError):
    """A function takes an argument that cannot be passed from Python."""


def build_function(cpp_function: ir.Function, type_info: TypeInfo) -> Function:
    """Turn a parsed function into a function proxy.

    Raises UnsupportedArgumentError if an argument is a std::unique_ptr, since
    Python cannot hand ownership of an object to a function.
    """
    proxy = Function(
        ir.remove_cpp_template(cpp_function.name), cpp_function.representation
    )

    for arg in cpp_function.arguments:
        if ir.is_container_type(arg.type, ir.ContainerType.UNIQUE_PTR):
            raise UnsupportedArgumentError(
                f"The function {cpp_function.representation} takes a "
                "std::unique_ptr as one of its argument. Python cannot give up "
                "ownership of an object to a function."
            )
        check_type(arg.type, type_info)
        proxy.add_argument(arg.type.representation, arg.name)

    check_type(cpp_function.return_type, type_info)
    proxy.return_type = cpp_function.return_type.representation
    proxy.documentation = cpp_function.documentation

    if cpp_function.return_type.num_pointers > 0:
        proxy.return_value_policy = ReturnValuePolicy.REFERENCE

    return proxy