"""Proxy for a function or constructor exposed through pybind11."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

from bindweaver.text import documentation_parameter, remove_substring


class ReturnValuePolicy(enum.Enum):
    """Return value policies, one to one with pybind11."""

    TAKE_OWNERSHIP = "take_ownership"
    COPY = "copy"
    MOVE = "move"
    REFERENCE = "reference"
    REFERENCE_INTERNAL = "reference_internal"
    AUTOMATIC = "automatic"
    AUTOMATIC_REFERENCE = "automatic_reference"


def return_value_policy_to_string(policy: ReturnValuePolicy) -> str:
    """The pybind11 spelling of a policy, e.g. 'return_value_policy::copy'."""
    return f"return_value_policy::{policy.value}"


@dataclass
class FunctionArgument:
    """One argument: for f(int i), type_name is 'int' and name is 'i'."""

    type_name: str
    name: str = ""


class Function:
    """A function to be bound, with everything needed to emit its pybind11 definition."""

    def __init__(self, name: str, fully_qualified_name: str) -> None:
        self.name = name
        self.fully_qualified_name = fully_qualified_name
        self.documentation = ""
        self.return_type = "void"
        self.return_value_policy: Optional[ReturnValuePolicy] = None
        self.arguments: list[FunctionArgument] = []
        self.is_constructor = False
        self.is_overloaded = False
        self.is_static = False
        self._python_name: Optional[str] = None

    @property
    def python_name(self) -> str:
        """The name as seen from Python; defaults to the C++ name."""
        return self._python_name if self._python_name is not None else self.name

    @python_name.setter
    def python_name(self, value: str) -> None:
        self._python_name = value

    def add_argument(self, type_name: str, name: str = "") -> None:
        """Append an argument; an empty name means an unnamed argument."""
        self.arguments.append(FunctionArgument(type_name, name))

    def argument_types(self, with_names: bool = False) -> str:
        """Comma separated argument types, optionally followed by their names."""
        if with_names:
            return ", ".join(f"{arg.type_name} {arg.name}" for arg in self.arguments)
        return ", ".join(arg.type_name for arg in self.arguments)

    def argument_names(self) -> str:
        """Comma separated argument names."""
        return ", ".join(arg.name for arg in self.arguments)

    def signature(self) -> str:
        """A function pointer cast selecting this overload, e.g. '(void(*)(int))'."""
        scope = remove_substring(self.fully_qualified_name, self.name)
        return f"({self.return_type}({scope}*)({self.argument_types()}))"

    def pybind(self) -> str:
        """The pybind11 definition call, without the receiving object."""
        docs = documentation_parameter(self.documentation)
        if self.is_constructor:
            out = f"def(py::init<{self.argument_types()}>(), {docs}"
        else:
            static = "_static" if self.is_static else ""
            overload = self.signature() if self.is_overloaded else ""
            out = (
                f'def{static}("{self.python_name}", {overload}'
                f"&{self.fully_qualified_name}, {docs}"
            )
            if self.return_value_policy is not None:
                out += f", py::{return_value_policy_to_string(self.return_value_policy)}"

        # Named arguments are only usable if every argument has a name
        if all(arg.name for arg in self.arguments):
            out += "".join(f', py::arg("{arg.name}")' for arg in self.arguments)
        return out + ")"