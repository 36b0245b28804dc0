[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bindweaver"
version = "0.1.0"
description = "Generate pybind11 binding source code from a description of a C++ interface"
requires-python = ">=3.10"
dependencies = []
keywords = ["pybind11", "bindings", "code generation", "c++", "extension modules"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Programming Language :: C++",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bindweaver"]

[tool.hatch.build.targets.sdist]
include = ["bindweaver", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
