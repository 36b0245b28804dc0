"""Generate pybind11 binding source code from a description of a C++ interface."""

__version__ = "0.1.0"