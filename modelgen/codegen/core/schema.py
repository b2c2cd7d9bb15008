"""
Core schema representation for code generation.

Holds the column metadata read from the database and the language-neutral
description of the unit that generators render.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
from enum import Enum


class SemanticType(Enum):
    """Narrowed value types assigned to columns."""

    TEXT = "text"
    DATE = "date"
    TIME = "time"
    TIMESTAMP = "timestamp"
    INTEGER = "integer"
    DECIMAL = "decimal"
    GENERIC = "generic"  # No narrowing possible

    @property
    def accessor_kind(self) -> str:
        """Suffix selecting the typed read/write operation on the base entity."""
        return _ACCESSOR_KINDS[self]


_ACCESSOR_KINDS = {
    SemanticType.TEXT: "String",
    SemanticType.DATE: "Date",
    SemanticType.TIME: "Time",
    SemanticType.TIMESTAMP: "Timestamp",
    SemanticType.INTEGER: "Integer",
    SemanticType.DECIMAL: "Double",
    SemanticType.GENERIC: "",
}


@dataclass(frozen=True)
class ColumnDescriptor:
    """Metadata for a single table column, as reported by the database."""

    raw_name: str
    sql_type_code: int
    ordinal_position: int


@dataclass(frozen=True)
class BaseTypeRef:
    """
    Symbolic reference to the data-mapping base entity.

    Generated units only need the base type's name and the names of its two
    keyed operations: typed read (``get`` + kind) and typed write
    (``set`` + kind).
    """

    qualified_name: str
    read_operation: str = "get"
    write_operation: str = "set"

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def module(self) -> str:
        """Package/module part of the qualified name ('' when unqualified)."""
        if "." not in self.qualified_name:
            return ""
        return self.qualified_name.rsplit(".", 1)[0]

    def read_call(self, accessor_kind: str) -> str:
        return f"{self.read_operation}{accessor_kind}"

    def write_call(self, accessor_kind: str) -> str:
        return f"{self.write_operation}{accessor_kind}"


@dataclass(frozen=True)
class AccessorPair:
    """Getter/setter declaration generated for one column."""

    column_name: str
    semantic_type: SemanticType
    accessor_kind: str
    getter_name: str
    setter_name: str
    parameter_name: str
    read_operation: str
    write_operation: str

    @property
    def is_generic(self) -> bool:
        return self.semantic_type == SemanticType.GENERIC


@dataclass(frozen=True)
class GeneratedUnit:
    """Language-neutral description of one generated source unit."""

    simple_name: str
    namespace: str
    base_type: BaseTypeRef
    accessors: Tuple[AccessorPair, ...] = field(default_factory=tuple)
    source_entity: Optional[str] = None
    table_name: Optional[str] = None

    @property
    def qualified_name(self) -> str:
        if not self.namespace:
            return self.simple_name
        return f"{self.namespace}.{self.simple_name}"

    @property
    def semantic_types(self) -> Tuple[SemanticType, ...]:
        """Distinct semantic types used, in first-use order."""
        seen = []
        for accessor in self.accessors:
            if accessor.semantic_type not in seen:
                seen.append(accessor.semantic_type)
        return tuple(seen)


@dataclass(frozen=True)
class EntityDescriptor:
    """
    A source entity that needs a generated unit.

    Args:
        qualified_name: Dotted name of the source entity (e.g. ``com.acme.User``)
        table: Explicit table name; overrides the entity's simple name
        connection_config: Path to the connection config for this entity
    """

    qualified_name: str
    table: Optional[str] = None
    connection_config: Optional[str] = None

    @property
    def simple_name(self) -> str:
        return self.qualified_name.rsplit(".", 1)[-1]

    @property
    def namespace(self) -> str:
        """Containing package, or '' when the entity is not in one."""
        if "." not in self.qualified_name:
            return ""
        return self.qualified_name.rsplit(".", 1)[0]

    @property
    def table_name(self) -> str:
        return self.table or self.simple_name
