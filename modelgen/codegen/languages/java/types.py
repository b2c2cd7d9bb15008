"""
Java type system for accessor generation.

Maps semantic column types to the Java types used in accessor signatures.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from ...core.schema import SemanticType


@dataclass(frozen=True)
class JavaType:
    """A Java type name plus the import it needs, if any."""

    name: str
    import_path: Optional[str] = None


JAVA_TYPES: Dict[SemanticType, JavaType] = {
    SemanticType.TEXT: JavaType("String"),
    SemanticType.DATE: JavaType("Date", "java.util.Date"),
    SemanticType.TIME: JavaType("Time", "java.sql.Time"),
    SemanticType.TIMESTAMP: JavaType("Timestamp", "java.sql.Timestamp"),
    SemanticType.INTEGER: JavaType("Integer"),
    SemanticType.DECIMAL: JavaType("Double"),
    SemanticType.GENERIC: JavaType("Object"),
}


def java_type(semantic_type: SemanticType) -> JavaType:
    """Get the Java type for a semantic type."""
    return JAVA_TYPES[semantic_type]


def imports_for(semantic_types: Iterable[SemanticType]) -> List[str]:
    """Sorted, de-duplicated imports needed by the given semantic types."""
    imports = {
        JAVA_TYPES[semantic_type].import_path
        for semantic_type in semantic_types
        if JAVA_TYPES[semantic_type].import_path
    }
    return sorted(imports)
