"""Proxy objects that render themselves as pybind11 binding code."""