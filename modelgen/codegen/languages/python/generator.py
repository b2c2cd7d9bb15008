"""
Python code generator implementation.

Generates classes that extend an active-record style base model and expose
one typed getter/setter pair per column.
"""

import keyword
from typing import Any, Dict, List, Optional
from pathlib import Path

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator
from ...core.schema import AccessorPair, GeneratedUnit
from ...core.templates import TemplateError
from .types import import_lines, python_type


class PythonGenerator(CodeGenerator):
    """Code generator for Python model classes."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Python generator with configuration."""
        super().__init__(config)
        self.indent = " " * self.config.indent_size
        self.add_comments = self.config.add_comments

    def get_template_directory(self) -> Optional[Path]:
        """Return the Python templates directory."""
        template_dir = Path(__file__).parent / "templates"
        return template_dir if template_dir.exists() else None

    @property
    def language_name(self) -> str:
        return "python"

    @property
    def file_extension(self) -> str:
        return ".py"

    def generate(self, unit: GeneratedUnit) -> str:
        """Generate the Python class for a unit using templates."""
        if not self.template_exists("unit.py.j2"):
            raise TemplateError("unit.py.j2 template not found")

        template_context = {
            "description": self._description(unit),
            "imports": self.get_import_statements(unit),
            "base_import": self._base_import(unit),
            "class_name": unit.simple_name,
            "base_name": unit.base_type.simple_name,
            "indent": self.indent,
            "accessors": [self._accessor_data(a) for a in unit.accessors],
        }

        return self.render_template("unit.py.j2", template_context)

    def _description(self, unit: GeneratedUnit) -> Optional[str]:
        if not self.add_comments or not unit.table_name:
            return None
        return f"Generated from table {unit.table_name}. Do not edit."

    def _base_import(self, unit: GeneratedUnit) -> Optional[str]:
        if not unit.base_type.module:
            return None
        return f"from {unit.base_type.module} import {unit.base_type.simple_name}"

    def parameter_name(self, accessor: AccessorPair) -> str:
        """Setter parameter name, with a trailing underscore if it is a keyword."""
        name = accessor.parameter_name
        if keyword.iskeyword(name):
            return f"{name}_"
        return name

    def _accessor_data(self, accessor: AccessorPair) -> Dict[str, Any]:
        """Build template data for one accessor pair."""
        return {
            "column": accessor.column_name,
            "getter": accessor.getter_name,
            "setter": accessor.setter_name,
            "param": self.parameter_name(accessor),
            "type": python_type(accessor.semantic_type).name,
            "read_call": accessor.read_operation,
            "write_call": accessor.write_operation,
        }

    def get_import_statements(self, unit: GeneratedUnit) -> List[str]:
        """Standard library imports needed by the annotations."""
        return import_lines(unit.semantic_types)

    def validate_unit(self, unit: GeneratedUnit) -> List[str]:
        """Validate a unit for Python generation."""
        warnings = super().validate_unit(unit)

        for accessor in unit.accessors:
            # '$' passes the shared check but not Python's
            if "$" in accessor.getter_name:
                warnings.append(
                    f"{accessor.getter_name} is not a valid Python identifier"
                )
            if keyword.iskeyword(accessor.parameter_name):
                warnings.append(
                    f"Parameter {accessor.parameter_name} of {accessor.setter_name} "
                    f"renamed to {accessor.parameter_name}_"
                )

        return warnings


def create_python_generator(
    config: Optional[Dict[str, Any]] = None,
) -> PythonGenerator:
    """Create a Python generator with default configuration."""
    return PythonGenerator(load_config("python", custom_config=config))
