"""Underscore separated names for types, used to name template instantiations."""

from __future__ import annotations

from bindweaver.ir import (
    BaseType,
    Container,
    ContainerType,
    EnumValue,
    FunctionType,
    Integral,
    Type,
    UserDefined,
    Value,
)

_CONTAINER_NAMES = {
    ContainerType.ARRAY: "array",
    ContainerType.DEQUE: "deque",
    ContainerType.FORWARD_LIST: "forwardlist",
    ContainerType.LIST: "list",
    ContainerType.MAP: "map",
    ContainerType.MULTI_MAP: "multimap",
    ContainerType.MULTI_SET: "multiset",
    ContainerType.OPTIONAL: "optional",
    ContainerType.PAIR: "pair",
    ContainerType.PRIORITY_QUEUE: "priorityqueue",
    ContainerType.QUEUE: "queue",
    ContainerType.SET: "set",
    ContainerType.SHARED_PTR: "sharedptr",
    ContainerType.STACK: "stack",
    ContainerType.TUPLE: "tuple",
    ContainerType.UNIQUE_PTR: "uniqueptr",
    ContainerType.UNORDERED_MAP: "unorderedmap",
    ContainerType.UNORDERED_MULTI_MAP: "unorderedmultimap",
    ContainerType.UNORDERED_MULTI_SET: "unorderedmultiset",
    ContainerType.UNORDERED_SET: "unorderedset",
    ContainerType.VALARRAY: "valarray",
    ContainerType.VARIANT: "variant",
    ContainerType.VECTOR: "vector",
    # Allocator, EqualTo, Greater, Hash and Less hide in defaulted template
    # parameters and get no name.
}

_BASE_NAMES = {
    BaseType.BOOL: "bool",
    BaseType.CHAR16_T: "char16t",
    BaseType.CHAR32_T: "char32t",
    BaseType.CHAR: "char",
    BaseType.COMPLEX: "complex",
    BaseType.DOUBLE: "double",
    BaseType.FILESYSTEM_PATH: "string",
    BaseType.FLOAT: "float",
    BaseType.INT: "int",
    BaseType.LONG_DOUBLE: "longdouble",
    BaseType.LONG_INT: "longint",
    BaseType.LONG_LONG_INT: "longlongint",
    BaseType.SHORT_INT: "shortint",
    BaseType.SIGNED_CHAR: "signedchar",
    BaseType.STRING: "string",
    BaseType.STRING_VIEW: "stringview",
    BaseType.UNSIGNED_CHAR: "unsignedchar",
    BaseType.UNSIGNED_INT: "unsignedint",
    BaseType.UNSIGNED_LONG_INT: "unsignedlongint",
    BaseType.UNSIGNED_LONG_LONG_INT: "unsignedlonglongint",
    BaseType.UNSIGNED_SHORT_INT: "unsignedshortint",
    BaseType.VOID: "void",
    BaseType.WCHAR_T: "wchart",
}


def base_type_to_string(base: BaseType) -> str:
    """Short name of a base type, e.g. 'longint'."""
    return _BASE_NAMES.get(base, "")


def container_type_to_string(container: ContainerType) -> str:
    """Short name of a container, or '' for hidden helpers such as allocators."""
    return _CONTAINER_NAMES.get(container, "")


def _container_string(container: Container) -> str:
    # Depth first, left to right: map<int, vector<char>> -> map_int_vector_char
    start = container_type_to_string(container.container)
    parts = [start] if start else []
    stack = list(reversed(container.contained_types))
    while stack:
        current = stack.pop()
        kind = current.kind
        if isinstance(kind, Value):
            parts.append(base_type_to_string(kind.base))
        elif isinstance(kind, Container):
            name = container_type_to_string(kind.container)
            if name:
                parts.append(name)
                stack.extend(reversed(kind.contained_types))
        elif isinstance(kind, (EnumValue, UserDefined)):
            parts.append(kind.representation)
        elif isinstance(kind, FunctionType):
            parts.append("f")
        elif isinstance(kind, Integral):
            parts.append(current.representation)
    return "_".join(parts)


def build_type_string(type_: Type) -> str:
    """An underscore separated spelling, e.g. std::map<int, std::string> -> map_int_string."""
    kind = type_.kind
    if isinstance(kind, Value):
        return base_type_to_string(kind.base)
    if isinstance(kind, Container):
        return _container_string(kind)
    if isinstance(kind, (EnumValue, UserDefined)):
        return kind.representation
    if isinstance(kind, FunctionType):
        return "f"
    if isinstance(kind, Integral):
        return type_.representation
    return ""