"""Builders that turn interface descriptions into pybind11 proxy objects."""