"""Building attribute proxies from global variables."""

from __future__ import annotations

from bindweaver.ir import Variable
from bindweaver.proxy.attribute import Attribute
from bindweaver.typeinfo import TypeInfo, check_type


def build_attribute(
    parent_namespace: str, variable: Variable, type_info: TypeInfo
) -> Attribute:
    """Turn a variable in a namespace into an attribute, recording its type needs."""
    attribute = Attribute(variable.name, f"{parent_namespace}::{variable.name}")
    check_type(variable.type, type_info)
    return attribute