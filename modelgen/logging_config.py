"""Logging configuration for modelgen.

All modules obtain their logger through ``get_logger(__name__)``. Output goes
to stderr through rich so it never mixes with generated code printed to
stdout.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "modelgen"
DEFAULT_LEVEL = logging.WARNING

_configured = False


def configure_logging(level: int | str = DEFAULT_LEVEL, *, force: bool = False) -> None:
    """Attach a rich handler to the package logger.

    Args:
        level: Logging level name or number.
        force: Replace handlers installed by an earlier call.
    """
    global _configured
    root = logging.getLogger(ROOT_LOGGER_NAME)

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = DEFAULT_LEVEL

    if _configured and not force:
        root.setLevel(level)
        return

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
