"""Collects module-wide information about the types used in an interface."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from bindweaver.ir import (
    BaseType,
    ContainerType,
    Type,
    container_to_string,
    get_container,
    get_user_defined,
    is_base_type,
    is_function_type,
)

logger = logging.getLogger(__name__)


@dataclass
class TypeInfo:
    """Includes, shared classes and trampoline classes needed by the whole module."""

    includes: set[str] = field(default_factory=set)
    classes_marked_shared: set[str] = field(default_factory=set)
    extra_functions_namespace: str = "Tolc_"
    trampoline_classes: set[str] = field(default_factory=set)


_STL_CONTAINERS = frozenset(
    {
        ContainerType.ARRAY,
        ContainerType.DEQUE,
        ContainerType.LIST,
        ContainerType.MAP,
        ContainerType.OPTIONAL,
        ContainerType.SET,
        ContainerType.UNORDERED_MAP,
        ContainerType.UNORDERED_SET,
        ContainerType.VALARRAY,
        ContainerType.VARIANT,
        ContainerType.VECTOR,
    }
)

_UNSUPPORTED_CONTAINERS = frozenset(
    {
        ContainerType.FORWARD_LIST,
        ContainerType.MULTI_MAP,
        ContainerType.MULTI_SET,
        ContainerType.PRIORITY_QUEUE,
        ContainerType.QUEUE,
        ContainerType.STACK,
        ContainerType.UNORDERED_MULTI_MAP,
        ContainerType.UNORDERED_MULTI_SET,
    }
)


def container_include(container: ContainerType) -> Optional[str]:
    """The pybind11 header a container needs, or None."""
    if container in _STL_CONTAINERS:
        return "<pybind11/stl.h>"
    if container in _UNSUPPORTED_CONTAINERS:
        logger.error(
            "Container type %s does not currently have a direct translation via "
            "pybind11. The translation might not work.",
            container_to_string(container),
        )
    return None


def extract_include(type_: Type) -> Optional[str]:
    """The extra pybind11 header this type needs by itself, or None."""
    container = get_container(type_)
    if container is not None:
        return container_include(container.container)
    if is_function_type(type_):
        return "<pybind11/functional.h>"
    if is_base_type(type_, BaseType.FILESYSTEM_PATH):
        return "<pybind11/stl/filesystem.h>"
    if is_base_type(type_, BaseType.COMPLEX):
        return "<pybind11/complex.h>"
    return None


def extract_shared(type_: Type) -> Optional[str]:
    """The class held by a std::shared_ptr, if the type is one of a user defined class."""
    container = get_container(type_)
    if container is None or container.container != ContainerType.SHARED_PTR:
        return None
    if not container.contained_types:
        return None
    user_defined = get_user_defined(container.contained_types[0])
    return user_defined.representation if user_defined is not None else None


def check_type(type_: Type, info: TypeInfo) -> None:
    """Record in info everything the type and the types inside it require."""
    pending = deque([type_])
    while pending:
        current = pending.popleft()

        include = extract_include(current)
        if include is not None:
            info.includes.add(f"#include {include}")

        shared = extract_shared(current)
        if shared is not None:
            info.classes_marked_shared.add(shared)

        container = get_container(current)
        if container is not None:
            pending.extend(container.contained_types)