"""
Java code generator implementation.

Generates abstract ActiveJDBC-style model classes whose accessors delegate
to the base model's typed ``get``/``set`` operations.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.schema import AccessorPair, GeneratedUnit
from ...core.templates import TemplateError
from .types import imports_for, java_type


class JavaGenerator(CodeGenerator):
    """Code generator for Java model classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Java generator with configuration."""
        super().__init__(config)
        self.indent = " " * self.config.indent_size
        self.add_comments = self.config.add_comments

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    def generate(self, unit: GeneratedUnit) -> str:
        """Generate the Java class for a unit using templates."""
        if not self.template_exists("unit.java.j2"):
            raise TemplateError("unit.java.j2 template not found")

        template_context = {
            "description": self._description(unit),
            "package": unit.namespace,
            "imports": self.get_import_statements(unit),
            "class_name": unit.simple_name,
            "base_name": unit.base_type.simple_name,
            "indent": self.indent,
            "accessors": [self._accessor_data(a) for a in unit.accessors],
        }

        return self.render_template("unit.java.j2", template_context)

    def _description(self, unit: GeneratedUnit) -> Optional[str]:
        if not self.add_comments or not unit.table_name:
            return None
        return f"Generated from table {unit.table_name}. Do not edit."

    def _accessor_data(self, accessor: AccessorPair) -> Dict[str, Any]:
        """Build template data for one accessor pair."""
        return {
            "column": accessor.column_name,
            "getter": accessor.getter_name,
            "setter": accessor.setter_name,
            "param": accessor.parameter_name,
            "type": java_type(accessor.semantic_type).name,
            "read_call": accessor.read_operation,
            "write_call": accessor.write_operation,
        }

    def get_import_statements(self, unit: GeneratedUnit) -> List[str]:
        """Imports for the base type and the value types in use."""
        imports = set(imports_for(unit.semantic_types))

        base_package = unit.base_type.module
        if base_package and base_package not in ("java.lang", unit.namespace):
            imports.add(unit.base_type.qualified_name)

        return sorted(imports)

    def validate_unit(self, unit: GeneratedUnit) -> List[str]:
        """Validate a unit for Java generation."""
        warnings = super().validate_unit(unit)

        if not unit.namespace:
            warnings.append(
                f"{unit.simple_name} will be generated in the default package"
            )

        if unit.simple_name == unit.base_type.simple_name:
            warnings.append(
                f"{unit.simple_name} has the same simple name as its base type"
            )

        return warnings


def create_java_generator(config: Optional[Dict[str, Any]] = None) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    return JavaGenerator(load_config("java", custom_config=config))
