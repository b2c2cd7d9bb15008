"""
Error types for code generation.

Every failure that stops generation for an entity is a ``GeneratorError``;
the subclass tells which stage failed.
"""

from typing import Optional


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    def __init__(
        self, message: str, entity: Optional[str] = None, table: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.entity = entity
        self.table = table

    def __str__(self) -> str:
        context = []
        if self.entity:
            context.append(f"entity={self.entity}")
        if self.table:
            context.append(f"table={self.table}")
        if not context:
            return self.message
        return f"{self.message} [{', '.join(context)}]"


class ConfigError(GeneratorError):
    """Configuration missing, unreadable or invalid."""

    pass


class DatabaseConnectionError(GeneratorError):
    """Database driver missing or connection failed."""

    pass


class SchemaError(GeneratorError):
    """Table not found or metadata retrieval failed."""

    pass


class EmissionError(GeneratorError):
    """Writing a generated unit failed after generation succeeded."""

    pass
