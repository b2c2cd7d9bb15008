"""
Configuration management for code generation.

Handles loading and merging generator configuration from JSON files,
providing per-language defaults, and loading database connection settings.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields

from .errors import ConfigError


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Target
    language: str = "java"
    output_dir: Optional[str] = None

    # Generated unit
    class_prefix: str = "Model"
    base_type: str = "org.javalite.activejdbc.Model"
    read_operation: str = "get"
    write_operation: str = "set"

    # Code style settings
    indent_size: int = 2
    add_comments: bool = True

    # Pipeline
    connection_config: Optional[str] = None
    fail_fast: bool = False

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ConnectionConfig:
    """
    Database connection settings.

    Loaded from a JSON object using the keys ``db.url`` (any SQLAlchemy
    URL, required), ``db.username``, ``db.password`` and ``db.driver``
    (replaces the URL's driver name, e.g. ``postgresql+psycopg``).
    """

    url: str
    username: Optional[str] = None
    password: Optional[str] = None
    driver: Optional[str] = None
    source: Optional[str] = None

    @classmethod
    def from_dict(
        cls, data: Dict[str, Any], source: Optional[str] = None
    ) -> "ConnectionConfig":
        url = data.get("db.url")
        if not url:
            raise ConfigError(f"Connection config is missing 'db.url': {source}")
        return cls(
            url=str(url),
            username=data.get("db.username"),
            password=data.get("db.password"),
            driver=data.get("db.driver"),
            source=source,
        )


def _read_json_object(path: Path, what: str) -> Dict[str, Any]:
    """Read a JSON file that must hold an object."""
    if not path.exists():
        raise ConfigError(f"{what} file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {what.lower()} file {path}: {str(e)}")
    except OSError as e:
        raise ConfigError(f"Failed to read {what.lower()} file {path}: {str(e)}")

    if not isinstance(data, dict):
        raise ConfigError(f"{what} file must contain a JSON object: {path}")

    return data


def load_connection_config(config_path: Union[str, Path]) -> ConnectionConfig:
    """
    Load database connection settings from a JSON file.

    Args:
        config_path: Path to the connection config file

    Returns:
        Parsed connection settings

    Raises:
        ConfigError: If the file is missing, unreadable or incomplete
    """
    path = Path(config_path)
    data = _read_json_object(path, "Connection config")
    return ConnectionConfig.from_dict(data, source=str(path))


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        # ActiveJDBC models
        self._configs["java"] = {
            "language": "java",
            "base_type": "org.javalite.activejdbc.Model",
            "indent_size": 2,
            "add_comments": True,
        }

        # Python active-record style models
        self._configs["python"] = {
            "language": "python",
            "base_type": "activerecord.Model",
            "indent_size": 4,
            "add_comments": True,
        }

    def get_config(
        self,
        language: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Later sources win: language defaults, then the config file, then
        custom overrides. When ``language`` is omitted it is taken from the
        file or the overrides, defaulting to Java.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        file_config = self._load_config_file(config_file) if config_file else {}
        overrides = dict(custom_config or {})

        language = (
            language
            or overrides.get("language")
            or file_config.get("language")
            or "java"
        ).lower()

        # Start with defaults
        base_config = self._configs.get(language, {}).copy()
        base_config.update(file_config)
        base_config.update(overrides)
        base_config["language"] = language

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        return _read_json_object(path, "Configuration")

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        config = GeneratorConfig(**config_args)

        problems = self.validate_config(config)
        if problems:
            raise ConfigError("; ".join(problems))

        return config

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate a configuration.

        Returns:
            List of validation errors
        """
        errors = []

        if not config.class_prefix or not config.class_prefix.isidentifier():
            errors.append(f"Invalid class_prefix: {config.class_prefix!r}")

        if not config.base_type or not all(
            part.isidentifier() for part in config.base_type.split(".")
        ):
            errors.append(f"Invalid base_type: {config.base_type!r}")

        for name in ("read_operation", "write_operation"):
            value = getattr(config, name)
            if not value or not value.isidentifier():
                errors.append(f"Invalid {name}: {value!r}")

        if not isinstance(config.indent_size, int) or config.indent_size < 1:
            errors.append(f"Invalid indent_size: {config.indent_size!r}")

        return errors


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)
