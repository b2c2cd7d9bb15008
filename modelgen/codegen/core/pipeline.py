"""
Generation pipeline.

Runs one source entity at a time through the fixed stage order:
load connection config, connect, resolve the table, introspect, synthesize,
render, emit. Each stage leaves a ``StageReport`` on the result so callers
can render what happened without parsing log output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig, load_connection_config
from .database import open_connection
from .emitter import Emitter
from .errors import ConfigError, EmissionError, GeneratorError
from .generator import CodeGenerator, GenerationResult
from .introspect import introspect
from .schema import BaseTypeRef, EntityDescriptor, GeneratedUnit
from .synthesizer import synthesize
from .templates import TemplateError

logger = get_logger(__name__)


class Stage(Enum):
    """Pipeline stages, in execution order."""

    CONFIG = "config"
    CONNECT = "connect"
    RESOLVE = "resolve"
    INTROSPECT = "introspect"
    SYNTHESIZE = "synthesize"
    RENDER = "render"
    EMIT = "emit"


class Outcome(Enum):
    OK = "ok"
    FAILED = "failed"


@dataclass(frozen=True)
class StageReport:
    """What one stage did for one entity."""

    entity: str
    stage: Stage
    outcome: Outcome
    detail: str = ""


@dataclass
class BatchResult:
    """Results of a generation run over several entities."""

    results: List[GenerationResult] = field(default_factory=list)
    aborted: bool = False

    @property
    def success(self) -> bool:
        return not self.aborted and all(r.success for r in self.results)

    @property
    def succeeded(self) -> List[GenerationResult]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> List[GenerationResult]:
        return [r for r in self.results if not r.success]

    @property
    def reports(self) -> List[StageReport]:
        return [report for r in self.results for report in r.reports]


def base_type_from_config(config: GeneratorConfig) -> BaseTypeRef:
    """Build the base entity reference described by a config."""
    return BaseTypeRef(
        qualified_name=config.base_type,
        read_operation=config.read_operation,
        write_operation=config.write_operation,
    )


def generate_for_entity(
    entity: EntityDescriptor,
    generator: CodeGenerator,
    emitter: Optional[Emitter] = None,
    config: Optional[GeneratorConfig] = None,
) -> GenerationResult:
    """
    Generate the accessor unit for one source entity.

    Failures never escape: they are returned as a failed result whose last
    report names the failing stage. An entity outside any package fails in
    the resolve stage before a connection is opened. The database connection
    is closed before this function returns, whatever happened.

    Args:
        entity: Source entity to generate for
        generator: Target language generator
        emitter: Sink for the rendered code; None skips emission
        config: Generator configuration, defaults to the generator's

    Returns:
        GenerationResult; on emission failure it still carries the unit and
        code, with an ``EmissionError`` as its exception
    """
    config = config or generator.config
    name = entity.qualified_name
    reports: List[StageReport] = []
    stage = Stage.CONFIG
    unit: Optional[GeneratedUnit] = None
    code = ""

    def passed(detail: str = "") -> None:
        reports.append(StageReport(name, stage, Outcome.OK, detail))

    logger.info("Processing: %s", name)

    try:
        # Stage: resolve, namespace part (checked before config and connect)
        if not entity.namespace:
            stage = Stage.RESOLVE
            raise ConfigError(
                "Entity is not in a package", entity=name, table=entity.table_name
            )

        # Stage: config
        config_path = entity.connection_config or config.connection_config
        if not config_path:
            raise ConfigError("No connection config given", entity=name)
        try:
            connection_config = load_connection_config(config_path)
        except ConfigError as e:
            e.entity = e.entity or name
            raise
        passed(str(config_path))

        # Stage: connect (connection released when the block exits)
        stage = Stage.CONNECT
        with open_connection(connection_config, entity=name) as connection:
            passed()

            stage = Stage.RESOLVE
            table_name = entity.table_name
            passed(table_name)

            stage = Stage.INTROSPECT
            columns = introspect(connection, table_name, entity_name=name)
            passed(f"{len(columns)} column(s)")

        stage = Stage.SYNTHESIZE
        unit = synthesize(
            entity.simple_name,
            entity.namespace,
            base_type_from_config(config),
            columns,
            prefix=config.class_prefix,
            table_name=table_name,
        )
        logger.info("Generating: %s in package %s", unit.simple_name, unit.namespace)
        passed(unit.qualified_name)

        stage = Stage.RENDER
        warnings = generator.validate_unit(unit)
        code = generator.format_code(generator.generate(unit))
        passed(f"{len(code.splitlines())} line(s)")

        result = GenerationResult(
            code,
            unit=unit,
            warnings=warnings,
            metadata={
                "language": generator.language_name,
                "file_extension": generator.file_extension,
                "entity": name,
                "table": table_name,
                "unit": unit.qualified_name,
                "accessor_count": len(unit.accessors),
                "generic_count": sum(1 for a in unit.accessors if a.is_generic),
            },
        )

        if emitter is not None:
            stage = Stage.EMIT
            path = emitter.emit(unit, code)
            result.output_path = path
            passed(str(path) if path else "")

    except EmissionError as e:
        logger.error("Generated %s but emission failed: %s", name, e)
        result = GenerationResult.error(
            f"Emission failed: {e}", exception=e, unit=unit, code=code
        )
        reports.append(StageReport(name, stage, Outcome.FAILED, str(e)))
    except (GeneratorError, TemplateError) as e:
        logger.error("Generation failed for %s at %s: %s", name, stage.value, e)
        result = GenerationResult.error(f"Code generation failed: {e}", exception=e)
        reports.append(StageReport(name, stage, Outcome.FAILED, str(e)))
    except Exception as e:
        logger.exception("Unexpected failure for %s at %s", name, stage.value)
        result = GenerationResult.error(f"Unexpected failure: {e}", exception=e)
        reports.append(StageReport(name, stage, Outcome.FAILED, str(e)))

    result.reports = reports
    return result


def run_batch(
    entities: Iterable[EntityDescriptor],
    generator: CodeGenerator,
    emitter: Optional[Emitter] = None,
    config: Optional[GeneratorConfig] = None,
    fail_fast: Optional[bool] = None,
) -> BatchResult:
    """
    Generate units for several entities, one after another.

    Args:
        entities: Entities to process, in order
        generator: Target language generator
        emitter: Sink for rendered code
        config: Generator configuration, defaults to the generator's
        fail_fast: Stop at the first failed entity; defaults to
            ``config.fail_fast``

    Returns:
        BatchResult with one result per processed entity
    """
    config = config or generator.config
    if fail_fast is None:
        fail_fast = config.fail_fast

    batch = BatchResult()
    for entity in entities:
        result = generate_for_entity(entity, generator, emitter, config)
        batch.results.append(result)
        if not result.success and fail_fast:
            logger.warning("Stopping after failure of %s", entity.qualified_name)
            batch.aborted = True
            break

    logger.info(
        "Generated %d of %d unit(s)", len(batch.succeeded), len(batch.results)
    )
    return batch
