"""
Core code generation components.

Provides the translation pipeline (type mapping, naming, introspection,
synthesis) and the base classes used by all language generators.
"""

from .errors import (
    GeneratorError,
    ConfigError,
    DatabaseConnectionError,
    SchemaError,
    EmissionError,
)
from .schema import (
    SemanticType,
    ColumnDescriptor,
    BaseTypeRef,
    AccessorPair,
    GeneratedUnit,
    EntityDescriptor,
)
from .types import SqlType, map_type, sql_type_code
from .naming import to_pascal_case, to_camel_case
from .config import (
    GeneratorConfig,
    ConnectionConfig,
    ConfigManager,
    load_config,
    load_connection_config,
)
from .templates import TemplateEngine, TemplateError, create_template_engine
from .generator import CodeGenerator, GenerationResult
from .database import open_connection
from .introspect import introspect
from .synthesizer import synthesize
from .emitter import Emitter, FileEmitter, ConsoleEmitter
from .pipeline import (
    Stage,
    Outcome,
    StageReport,
    BatchResult,
    generate_for_entity,
    run_batch,
)

__all__ = [
    # Errors
    "GeneratorError",
    "ConfigError",
    "DatabaseConnectionError",
    "SchemaError",
    "EmissionError",
    # Data model
    "SemanticType",
    "ColumnDescriptor",
    "BaseTypeRef",
    "AccessorPair",
    "GeneratedUnit",
    "EntityDescriptor",
    # Translation
    "SqlType",
    "map_type",
    "sql_type_code",
    "to_pascal_case",
    "to_camel_case",
    "introspect",
    "synthesize",
    # Configuration
    "GeneratorConfig",
    "ConnectionConfig",
    "ConfigManager",
    "load_config",
    "load_connection_config",
    # Rendering and emission
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    "CodeGenerator",
    "GenerationResult",
    "Emitter",
    "FileEmitter",
    "ConsoleEmitter",
    # Pipeline
    "open_connection",
    "Stage",
    "Outcome",
    "StageReport",
    "BatchResult",
    "generate_for_entity",
    "run_batch",
]
