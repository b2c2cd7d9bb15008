"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement and the
per-entity result container.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Any, Optional
from pathlib import Path

from .config import GeneratorConfig
from .naming import is_valid_identifier
from .schema import GeneratedUnit
from .templates import TemplateEngine, create_template_engine


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate(self, unit: GeneratedUnit) -> str:
        """
        Render source code for a generated unit.

        Args:
            unit: Unit produced by the declaration synthesizer

        Returns:
            Generated code as a string
        """
        pass

    def get_import_statements(self, unit: GeneratedUnit) -> List[str]:
        """
        Get any required import statements for the generated code.

        Args:
            unit: Unit being generated

        Returns:
            List of import statements (can be empty)
        """
        return []

    def validate_unit(self, unit: GeneratedUnit) -> List[str]:
        """
        Check a unit for issues worth reporting.

        Nothing here stops generation; language generators add their own
        checks on top.

        Args:
            unit: Unit to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        if not unit.accessors:
            warnings.append(f"Table '{unit.table_name}' has no columns")

        for accessor in unit.accessors:
            if accessor.is_generic:
                warnings.append(
                    f"Column {unit.table_name}.{accessor.column_name} has an "
                    f"unmapped type, using generic accessors"
                )
            if not is_valid_identifier(accessor.getter_name):
                warnings.append(
                    f"Column {unit.table_name}.{accessor.column_name} does not "
                    f"produce a valid identifier: {accessor.getter_name}"
                )

        # Column names are assumed unique, but case conversion can still collide
        counts = Counter(accessor.getter_name for accessor in unit.accessors)
        for name, count in sorted(counts.items()):
            if count > 1:
                warnings.append(f"Accessor {name} is generated {count} times")

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code, ending with a single newline
        """
        # Basic cleanup - remove excessive blank lines
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for one entity's generation outcome and metadata."""

    def __init__(
        self,
        code: str,
        unit: Optional[GeneratedUnit] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            unit: Generated unit the code was rendered from
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.unit = unit
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.reports = []
        self.output_path = None
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(
        cls,
        message: str,
        exception: Exception = None,
        unit: Optional[GeneratedUnit] = None,
        code: str = "",
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code=code, unit=unit)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result

    @property
    def generated(self) -> bool:
        """True when code was produced, even if emitting it failed."""
        return bool(self.code)
