"""Small string helpers used when generating binding code."""

from __future__ import annotations

from collections.abc import Iterable


def split(s: str, delimiter: str) -> list[str]:
    """Split on every occurrence of delimiter, keeping empty pieces."""
    return s.split(delimiter)


def remove_substring(s: str, substr: str) -> str:
    """Remove the first occurrence of substr from s, if any."""
    return s.replace(substr, "", 1)


def documentation_parameter(documentation: str) -> str:
    """A C++ string literal holding the documentation, usable as a pybind11 docstring."""
    if not documentation:
        return '""'
    return f'R"_tolc_docs({documentation})_tolc_docs"'


def combine(result: set, to_be_added: Iterable) -> None:
    """Add every element of to_be_added to result."""
    result.update(to_be_added)