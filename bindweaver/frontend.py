"""Entry point turning a parsed namespace tree into pybind11 binding files."""

from __future__ import annotations

from pathlib import Path

from bindweaver import ir
from bindweaver.builders.module_file import build_module_file


def create_module(root_namespace: ir.Namespace, module_name: str) -> list[tuple[Path, str]]:
    """Return the generated files as (path, content) pairs.

    Raises UnsupportedArgumentError if the interface cannot be bound.
    """
    module_file = build_module_file(root_namespace, module_name)
    return [(module_file.filepath, module_file.pybind())]