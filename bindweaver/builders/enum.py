"""Building enum proxies."""

from __future__ import annotations

from bindweaver.ir import EnumDef
from bindweaver.proxy.enum import Enum


def build_enum(e: EnumDef) -> Enum:
    """Turn a parsed enum into an enum proxy."""
    proxy = Enum(e.name, e.representation)
    proxy.is_scoped = e.is_scoped
    proxy.documentation = e.documentation
    for value in e.values:
        proxy.add_value(value)
    return proxy