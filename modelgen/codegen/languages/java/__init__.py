"""
Java code generator module.

Generates ActiveJDBC model classes with typed accessors for every column.
"""

from .generator import JavaGenerator, create_java_generator
from .types import JAVA_TYPES, JavaType, imports_for, java_type

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "JavaType",
    "JAVA_TYPES",
    "java_type",
    "imports_for",
]
