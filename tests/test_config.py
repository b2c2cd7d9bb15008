import json

import pytest

from modelgen.codegen.core.config import (
    ConfigManager,
    ConnectionConfig,
    GeneratorConfig,
    load_config,
    load_connection_config,
)
from modelgen.codegen.core.errors import ConfigError


def write_json(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadConfig:
    def test_java_defaults(self):
        config = load_config("java")

        assert config.language == "java"
        assert config.class_prefix == "Model"
        assert config.base_type == "org.javalite.activejdbc.Model"
        assert config.indent_size == 2
        assert config.fail_fast is False

    def test_python_defaults(self):
        config = load_config("python")

        assert config.base_type == "activerecord.Model"
        assert config.indent_size == 4

    def test_language_defaults_to_java(self):
        assert load_config().language == "java"

    def test_file_then_overrides(self, tmp_path):
        path = write_json(
            tmp_path / "gen.json",
            {"class_prefix": "Base", "indent_size": 3, "output_dir": "out"},
        )
        config = load_config(
            "java", custom_config={"indent_size": 8}, config_file=path
        )

        assert config.class_prefix == "Base"
        assert config.indent_size == 8
        assert config.output_dir == "out"

    def test_language_from_file(self, tmp_path):
        path = write_json(tmp_path / "gen.json", {"language": "python"})
        config = load_config(config_file=path)

        assert config.language == "python"
        assert config.base_type == "activerecord.Model"

    def test_unknown_keys_go_to_custom(self):
        config = load_config("java", custom_config={"team": "billing"})
        assert config.custom == {"team": "billing"}

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(config_file=tmp_path / "missing.json")

    def test_not_json_suffix(self, tmp_path):
        path = tmp_path / "gen.yaml"
        path.write_text("class_prefix: Base", encoding="utf-8")

        with pytest.raises(ConfigError, match="must be JSON"):
            load_config(config_file=path)

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "gen.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigError):
            load_config(config_file=path)

    def test_not_an_object(self, tmp_path):
        path = write_json(tmp_path / "gen.json", ["java"])

        with pytest.raises(ConfigError):
            load_config(config_file=path)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"class_prefix": "1Bad"},
            {"base_type": "org..Model"},
            {"read_operation": ""},
            {"indent_size": 0},
        ],
    )
    def test_invalid_values(self, overrides):
        with pytest.raises(ConfigError):
            load_config("java", custom_config=overrides)


class TestConfigManager:
    def test_validate_default_config(self):
        assert ConfigManager().validate_config(GeneratorConfig()) == []

    def test_validate_reports_every_problem(self):
        config = GeneratorConfig(class_prefix="", indent_size=0)
        problems = ConfigManager().validate_config(config)

        assert len(problems) == 2
        assert any("class_prefix" in p for p in problems)
        assert any("indent_size" in p for p in problems)

    def test_unknown_language_uses_base_defaults(self):
        config = ConfigManager().get_config("kotlin")

        assert config.language == "kotlin"
        assert config.class_prefix == "Model"


class TestConnectionConfig:
    def test_load(self, tmp_path):
        path = write_json(
            tmp_path / "db.json",
            {
                "db.url": "postgresql://localhost/app",
                "db.username": "app",
                "db.password": "secret",
                "db.driver": "postgresql+psycopg",
            },
        )
        config = load_connection_config(path)

        assert config == ConnectionConfig(
            url="postgresql://localhost/app",
            username="app",
            password="secret",
            driver="postgresql+psycopg",
            source=str(path),
        )

    def test_missing_url(self, tmp_path):
        path = write_json(tmp_path / "db.json", {"db.username": "app"})

        with pytest.raises(ConfigError, match="db.url"):
            load_connection_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError):
            load_connection_config(tmp_path / "missing.json")

