"""
Python code generator module.

Generates active-record style Python classes with typed accessors.
"""

from .generator import PythonGenerator, create_python_generator
from .types import PYTHON_TYPES, PythonType, python_type

__all__ = [
    "PythonGenerator",
    "create_python_generator",
    "PythonType",
    "PYTHON_TYPES",
    "python_type",
]
