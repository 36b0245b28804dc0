"""Building a complete binding file from a namespace tree."""

from __future__ import annotations

from collections import deque

from bindweaver import ir
from bindweaver.builders.module import build_module
from bindweaver.proxy.module_file import ModuleFile
from bindweaver.typeinfo import TypeInfo


def build_module_file(root_namespace: ir.Namespace, root_module_name: str) -> ModuleFile:
    """Walk the namespace tree breadth first and collect every module into one file.

    Raises UnsupportedArgumentError if any function takes a std::unique_ptr.
    """
    type_info = TypeInfo()
    root_module = build_module(root_namespace, root_module_name, type_info)
    module_file = ModuleFile(root_module, root_module_name)

    pending = deque(
        (sub, build_module(sub, root_module_name, type_info))
        for sub in root_namespace.namespaces
    )
    while pending:
        namespace, module = pending.popleft()
        module_file.add_module(module)
        pending.extend(
            (sub, build_module(sub, root_module_name, type_info))
            for sub in namespace.namespaces
        )

    module_file.set_type_info(type_info)
    return module_file