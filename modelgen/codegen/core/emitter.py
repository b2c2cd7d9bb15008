"""
Emission sinks for generated units.

A sink receives the unit and its rendered code and makes it available
somewhere: a source tree on disk, or the console.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.syntax import Syntax

from ...logging_config import get_logger
from .errors import EmissionError
from .schema import GeneratedUnit

logger = get_logger(__name__)


class Emitter(ABC):
    """Destination for rendered units."""

    @abstractmethod
    def emit(self, unit: GeneratedUnit, code: str) -> Optional[Path]:
        """
        Emit rendered code for a unit.

        Returns:
            Path written to, or None when nothing was written to disk

        Raises:
            EmissionError: If the code cannot be emitted
        """
        pass


class FileEmitter(Emitter):
    """Writes units into a source tree, one file per unit."""

    def __init__(self, output_dir: Union[str, Path], file_extension: str):
        self.output_dir = Path(output_dir)
        self.file_extension = file_extension

    def path_for(self, unit: GeneratedUnit) -> Path:
        """``<output_dir>/<namespace as directories>/<unit name><extension>``."""
        directory = self.output_dir
        if unit.namespace:
            directory = directory.joinpath(*unit.namespace.split("."))
        return directory / f"{unit.simple_name}{self.file_extension}"

    def emit(self, unit: GeneratedUnit, code: str) -> Path:
        path = self.path_for(unit)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(code, encoding="utf-8")
        except OSError as e:
            raise EmissionError(
                f"Failed to write {path}: {e}",
                entity=unit.source_entity,
                table=unit.table_name,
            )

        logger.info("Wrote %s", path)
        return path


class ConsoleEmitter(Emitter):
    """
    Prints units to the console.

    On a terminal the code is syntax highlighted under a header line. When
    output is redirected the code is written exactly as rendered, so the
    stream can be saved as a source file.
    """

    def __init__(self, language: str, console: Optional[Console] = None):
        self.language = language
        self.console = console or Console()

    def emit(self, unit: GeneratedUnit, code: str) -> None:
        if not self.console.is_terminal:
            self.console.file.write(code)
            self.console.file.flush()
            return None

        border = "═" * 20
        self.console.print(
            f"[green]{border} 📄 {unit.qualified_name} {border}[/green]"
        )
        self.console.print(
            Syntax(code, self.language, theme="monokai", word_wrap=True)
        )
        return None
