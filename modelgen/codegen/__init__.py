"""
Model Code Generation Module

Generates data-mapping units with typed accessors from database table
metadata.
"""

from typing import Any, Dict, Iterable, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult
from .core.schema import (
    SemanticType,
    ColumnDescriptor,
    BaseTypeRef,
    AccessorPair,
    GeneratedUnit,
    EntityDescriptor,
)
from .core.config import GeneratorConfig, ConfigManager, load_config
from .core.errors import (
    GeneratorError,
    ConfigError,
    DatabaseConnectionError,
    SchemaError,
    EmissionError,
)
from .core.emitter import Emitter, FileEmitter, ConsoleEmitter
from .core.pipeline import (
    BatchResult,
    StageReport,
    generate_for_entity,
    run_batch,
)

# Version info
__version__ = "0.1.0"


# Convenience functions
def generate_entity(
    entity: Union[str, EntityDescriptor],
    language: str = "java",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str]] = None,
    emitter: Optional[Emitter] = None,
) -> GenerationResult:
    """
    Generate the unit for one source entity.

    Args:
        entity: Qualified entity name or descriptor
        language: Target language name or alias
        config: Generator configuration (object, dict, or file path)
        emitter: Sink for the code; defaults to a FileEmitter when the
            config names an output directory

    Returns:
        GenerationResult with generated code and stage reports
    """
    if isinstance(entity, str):
        entity = EntityDescriptor(entity)

    generator = get_generator(language, config)
    if emitter is None and generator.config.output_dir:
        emitter = FileEmitter(generator.config.output_dir, generator.file_extension)

    return generate_for_entity(entity, generator, emitter)


def generate_entities(
    entities: Iterable[Union[str, EntityDescriptor]],
    language: str = "java",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str]] = None,
    emitter: Optional[Emitter] = None,
    fail_fast: Optional[bool] = None,
) -> BatchResult:
    """
    Generate units for several source entities.

    Returns:
        BatchResult with one result per processed entity
    """
    descriptors = [
        EntityDescriptor(e) if isinstance(e, str) else e for e in entities
    ]

    generator = get_generator(language, config)
    if emitter is None and generator.config.output_dir:
        emitter = FileEmitter(generator.config.output_dir, generator.file_extension)

    return run_batch(descriptors, generator, emitter, fail_fast=fail_fast)


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "SemanticType",
    "ColumnDescriptor",
    "BaseTypeRef",
    "AccessorPair",
    "GeneratedUnit",
    "EntityDescriptor",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "GeneratorError",
    "ConfigError",
    "DatabaseConnectionError",
    "SchemaError",
    "EmissionError",
    "Emitter",
    "FileEmitter",
    "ConsoleEmitter",
    "BatchResult",
    "StageReport",
    "generate_for_entity",
    "run_batch",
    "generate_entity",
    "generate_entities",
    "get_generator",
    "get_language_info",
    "list_all_language_info",
    "list_supported_languages",
]
