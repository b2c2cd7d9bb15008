"""
Python type system for accessor generation.

Maps semantic column types to annotation names and the imports they need.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ...core.schema import SemanticType


@dataclass(frozen=True)
class PythonType:
    """An annotation name plus the module it is imported from, if any."""

    name: str
    module: Optional[str] = None


PYTHON_TYPES: Dict[SemanticType, PythonType] = {
    SemanticType.TEXT: PythonType("str"),
    SemanticType.DATE: PythonType("date", "datetime"),
    SemanticType.TIME: PythonType("time", "datetime"),
    SemanticType.TIMESTAMP: PythonType("datetime", "datetime"),
    SemanticType.INTEGER: PythonType("int"),
    SemanticType.DECIMAL: PythonType("float"),
    SemanticType.GENERIC: PythonType("Any", "typing"),
}


def python_type(semantic_type: SemanticType) -> PythonType:
    """Get the Python type for a semantic type."""
    return PYTHON_TYPES[semantic_type]


def import_lines(semantic_types: Iterable[SemanticType]) -> List[str]:
    """``from module import a, b`` lines for the given types, sorted."""
    names_by_module: Dict[str, set] = {}
    for semantic_type in semantic_types:
        py_type = PYTHON_TYPES[semantic_type]
        if py_type.module:
            names_by_module.setdefault(py_type.module, set()).add(py_type.name)

    return [
        f"from {module} import {', '.join(sorted(names))}"
        for module, names in sorted(names_by_module.items())
    ]
