"""Intermediate representation of parsed C++ declarations and helpers to inspect it."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Union


class BaseType(enum.Enum):
    """Fundamental value types."""

    BOOL = enum.auto()
    CHAR16_T = enum.auto()
    CHAR32_T = enum.auto()
    CHAR = enum.auto()
    COMPLEX = enum.auto()
    DOUBLE = enum.auto()
    FILESYSTEM_PATH = enum.auto()
    FLOAT = enum.auto()
    INT = enum.auto()
    LONG_DOUBLE = enum.auto()
    LONG_INT = enum.auto()
    LONG_LONG_INT = enum.auto()
    SHORT_INT = enum.auto()
    SIGNED_CHAR = enum.auto()
    STRING = enum.auto()
    STRING_VIEW = enum.auto()
    UNSIGNED_CHAR = enum.auto()
    UNSIGNED_INT = enum.auto()
    UNSIGNED_LONG_INT = enum.auto()
    UNSIGNED_LONG_LONG_INT = enum.auto()
    UNSIGNED_SHORT_INT = enum.auto()
    VOID = enum.auto()
    WCHAR_T = enum.auto()


class ContainerType(enum.Enum):
    """Standard library templates that hold other types."""

    ALLOCATOR = enum.auto()
    ARRAY = enum.auto()
    DEQUE = enum.auto()
    EQUAL_TO = enum.auto()
    FORWARD_LIST = enum.auto()
    GREATER = enum.auto()
    HASH = enum.auto()
    LESS = enum.auto()
    LIST = enum.auto()
    MAP = enum.auto()
    MULTI_MAP = enum.auto()
    MULTI_SET = enum.auto()
    OPTIONAL = enum.auto()
    PAIR = enum.auto()
    PRIORITY_QUEUE = enum.auto()
    QUEUE = enum.auto()
    SET = enum.auto()
    SHARED_PTR = enum.auto()
    STACK = enum.auto()
    TUPLE = enum.auto()
    UNIQUE_PTR = enum.auto()
    UNORDERED_MAP = enum.auto()
    UNORDERED_MULTI_MAP = enum.auto()
    UNORDERED_MULTI_SET = enum.auto()
    UNORDERED_SET = enum.auto()
    VALARRAY = enum.auto()
    VARIANT = enum.auto()
    VECTOR = enum.auto()


class Operator(enum.Enum):
    """Overloadable operators."""

    ADDITION = enum.auto()
    ADD_EQUAL = enum.auto()
    SUBTRACTION = enum.auto()
    SUB_EQUAL = enum.auto()
    MULTIPLICATION = enum.auto()
    MUL_EQUAL = enum.auto()
    DIVISION = enum.auto()
    DIV_EQUAL = enum.auto()
    MODULUS = enum.auto()
    MOD_EQUAL = enum.auto()
    EQUAL = enum.auto()
    NOT_EQUAL = enum.auto()
    GREATER_THAN = enum.auto()
    GREATER_THAN_OR_EQUAL_TO = enum.auto()
    LESS_THAN = enum.auto()
    LESS_THAN_OR_EQUAL_TO = enum.auto()
    SUBSCRIPT = enum.auto()
    CALL = enum.auto()
    ASSIGNMENT = enum.auto()
    LEFT_SHIFT = enum.auto()
    RIGHT_SHIFT = enum.auto()
    INCREMENT = enum.auto()
    DECREMENT = enum.auto()


class Polymorphic(enum.Enum):
    """Whether a member function is virtual."""

    NA = enum.auto()
    VIRTUAL = enum.auto()
    PURE_VIRTUAL = enum.auto()


@dataclass
class Value:
    """A fundamental value type such as int or std::string."""

    base: BaseType = BaseType.VOID


@dataclass
class Container:
    """A standard container together with the types it holds."""

    container: ContainerType
    contained_types: list[Type] = field(default_factory=list)


@dataclass
class EnumValue:
    """A value of a user defined enum."""

    representation: str = ""


@dataclass
class UserDefined:
    """A user defined class or struct."""

    representation: str = ""


@dataclass
class FunctionType:
    """A std::function type."""

    representation: str = ""


@dataclass
class Integral:
    """An integral template argument, e.g. the 3 in std::array<int, 3>."""

    value: str = ""


TypeKind = Union[Value, Container, EnumValue, UserDefined, FunctionType, Integral]


@dataclass
class Type:
    """A complete type with qualifiers and its spelled-out representation."""

    representation: str = ""
    kind: TypeKind = field(default_factory=Value)
    is_const: bool = False
    is_reference: bool = False
    num_pointers: int = 0


@dataclass
class Argument:
    name: str = ""
    type: Type = field(default_factory=Type)


@dataclass
class Variable:
    name: str = ""
    type: Type = field(default_factory=Type)
    documentation: str = ""
    is_static: bool = False


@dataclass
class Function:
    name: str = ""
    representation: str = ""
    arguments: list[Argument] = field(default_factory=list)
    return_type: Type = field(default_factory=Type)
    documentation: str = ""
    is_static: bool = False
    polymorphic: Polymorphic = Polymorphic.NA


@dataclass
class EnumDef:
    name: str = ""
    representation: str = ""
    values: list[str] = field(default_factory=list)
    is_scoped: bool = False
    documentation: str = ""


@dataclass
class AccessScope:
    """Members of a struct under one access specifier."""

    functions: list[Function] = field(default_factory=list)
    operators: list[tuple[Operator, Function]] = field(default_factory=list)
    constructors: list[Function] = field(default_factory=list)
    member_variables: list[Variable] = field(default_factory=list)
    enums: list[EnumDef] = field(default_factory=list)
    inherited: list[str] = field(default_factory=list)


@dataclass
class Struct:
    name: str = ""
    representation: str = ""
    documentation: str = ""
    public: AccessScope = field(default_factory=AccessScope)
    template_arguments: list[Type] = field(default_factory=list)
    has_implicit_default_constructor: bool = False


@dataclass
class Namespace:
    name: str = ""
    representation: str = ""
    documentation: str = ""
    functions: list[Function] = field(default_factory=list)
    variables: list[Variable] = field(default_factory=list)
    structs: list[Struct] = field(default_factory=list)
    enums: list[EnumDef] = field(default_factory=list)
    namespaces: list[Namespace] = field(default_factory=list)


def get_container(type_: Type) -> Optional[Container]:
    """Return the container if the type is one, otherwise None."""
    return type_.kind if isinstance(type_.kind, Container) else None


def get_user_defined(type_: Type) -> Optional[UserDefined]:
    """Return the user defined part if the type is one, otherwise None."""
    return type_.kind if isinstance(type_.kind, UserDefined) else None


def is_base_type(type_: Type, base: BaseType) -> bool:
    """True iff the type is a value of the given base type."""
    return isinstance(type_.kind, Value) and type_.kind.base == base


def is_container_type(type_: Type, container: ContainerType) -> bool:
    """True iff the type is the given container."""
    found = get_container(type_)
    return found is not None and found.container == container


def is_function_type(type_: Type) -> bool:
    """True iff the type is a std::function."""
    return isinstance(type_.kind, FunctionType)


def remove_cpp_template(name: str) -> str:
    """Strip template parameters: 'MyClass<int>' becomes 'MyClass'."""
    return name.split("<", 1)[0]


_CONTAINER_NAMES = {
    ContainerType.ALLOCATOR: "std::allocator",
    ContainerType.ARRAY: "std::array",
    ContainerType.DEQUE: "std::deque",
    ContainerType.EQUAL_TO: "std::equal_to",
    ContainerType.FORWARD_LIST: "std::forward_list",
    ContainerType.GREATER: "std::greater",
    ContainerType.HASH: "std::hash",
    ContainerType.LESS: "std::less",
    ContainerType.LIST: "std::list",
    ContainerType.MAP: "std::map",
    ContainerType.MULTI_MAP: "std::multimap",
    ContainerType.MULTI_SET: "std::multiset",
    ContainerType.OPTIONAL: "std::optional",
    ContainerType.PAIR: "std::pair",
    ContainerType.PRIORITY_QUEUE: "std::priority_queue",
    ContainerType.QUEUE: "std::queue",
    ContainerType.SET: "std::set",
    ContainerType.SHARED_PTR: "std::shared_ptr",
    ContainerType.STACK: "std::stack",
    ContainerType.TUPLE: "std::tuple",
    ContainerType.UNIQUE_PTR: "std::unique_ptr",
    ContainerType.UNORDERED_MAP: "std::unordered_map",
    ContainerType.UNORDERED_MULTI_MAP: "std::unordered_multimap",
    ContainerType.UNORDERED_MULTI_SET: "std::unordered_multiset",
    ContainerType.UNORDERED_SET: "std::unordered_set",
    ContainerType.VALARRAY: "std::valarray",
    ContainerType.VARIANT: "std::variant",
    ContainerType.VECTOR: "std::vector",
}


def container_to_string(container: ContainerType) -> str:
    """The C++ spelling of a container, e.g. 'std::vector'."""
    return _CONTAINER_NAMES[container]