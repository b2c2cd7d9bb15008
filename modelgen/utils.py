"""Utility functions for loading generation manifests.

A manifest is the explicit list of source entities that need generated
units. It is a JSON object of the form::

    {
        "connection": "db.json",
        "entities": [
            {"entity": "com.acme.User", "table": "users"},
            {"entity": "com.acme.Order", "connection": "orders-db.json"}
        ]
    }

Entity entries may also be plain strings holding the qualified name.
Relative connection paths are resolved against the manifest's directory.
"""

import json
from pathlib import Path
from typing import Any

from .codegen.core.errors import ConfigError
from .codegen.core.schema import EntityDescriptor
from .logging_config import get_logger

logger = get_logger(__name__)


class ManifestError(ConfigError):
    """Raised when a manifest cannot be read or is malformed."""

    pass


def _resolve_path(value: Any, base_dir: Path, where: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ManifestError(f"{where}: connection must be a non-empty string")

    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path)


def _parse_entity(item: Any, index: int, base_dir: Path) -> EntityDescriptor:
    where = f"entities[{index}]"

    if isinstance(item, str):
        item = {"entity": item}
    if not isinstance(item, dict):
        raise ManifestError(f"{where}: expected an object or a string")

    name = item.get("entity")
    if not isinstance(name, str) or not name.strip():
        raise ManifestError(f"{where}: 'entity' is required")

    table = item.get("table")
    if table is not None and (not isinstance(table, str) or not table):
        raise ManifestError(f"{where}: 'table' must be a non-empty string")

    unknown = set(item) - {"entity", "table", "connection"}
    if unknown:
        logger.warning("%s: ignoring unknown key(s) %s", where, sorted(unknown))

    return EntityDescriptor(
        qualified_name=name.strip(),
        table=table,
        connection_config=_resolve_path(item.get("connection"), base_dir, where),
    )


def load_manifest(
    file_path: str | Path,
) -> tuple[list[EntityDescriptor], str | None]:
    """Load entity descriptors from a manifest file.

    Args:
        file_path: Path to the manifest JSON file.

    Returns:
        Tuple of (entity descriptors in file order, default connection
        config path or None).

    Raises:
        ManifestError: If the file is missing, unreadable, or malformed.
    """
    file_path = Path(file_path)
    logger.debug("Loading manifest: %s", file_path)

    if not file_path.exists():
        logger.error("Manifest not found: %s", file_path)
        raise ManifestError(f"Manifest file not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in manifest %s: %s", file_path, e)
        raise ManifestError(f"Invalid JSON in manifest {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading manifest %s: %s", file_path, e)
        raise ManifestError(f"Error reading manifest {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestError(f"Manifest must be a JSON object: {file_path}")

    entries = data.get("entities")
    if not isinstance(entries, list):
        raise ManifestError(f"Manifest needs an 'entities' list: {file_path}")

    base_dir = file_path.parent
    default_connection = _resolve_path(data.get("connection"), base_dir, "connection")
    entities = [_parse_entity(item, i, base_dir) for i, item in enumerate(entries)]

    logger.info("Loaded %d entit(ies) from %s", len(entities), file_path)
    return entities, default_connection
