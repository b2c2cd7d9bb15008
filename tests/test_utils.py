import json

import pytest

from modelgen.codegen.core.errors import ConfigError
from modelgen.codegen.core.schema import EntityDescriptor
from modelgen.utils import ManifestError, load_manifest


def write_manifest(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadManifest:
    def test_entities_in_order(self, tmp_path):
        path = write_manifest(
            tmp_path / "entities.json",
            {
                "connection": "db.json",
                "entities": [
                    {"entity": "com.acme.User", "table": "users"},
                    "com.acme.Order",
                ],
            },
        )
        entities, connection = load_manifest(path)

        assert entities == [
            EntityDescriptor("com.acme.User", table="users"),
            EntityDescriptor("com.acme.Order"),
        ]
        assert connection == str(tmp_path / "db.json")

    def test_entity_connection_relative_to_manifest(self, tmp_path):
        (tmp_path / "conf").mkdir()
        path = write_manifest(
            tmp_path / "conf" / "entities.json",
            {"entities": [{"entity": "com.acme.User", "connection": "orders.json"}]},
        )
        entities, connection = load_manifest(path)

        assert connection is None
        assert entities[0].connection_config == str(tmp_path / "conf" / "orders.json")

    def test_absolute_connection_is_kept(self, tmp_path):
        absolute = tmp_path / "db.json"
        path = write_manifest(
            tmp_path / "entities.json",
            {"connection": str(absolute), "entities": []},
        )
        assert load_manifest(path) == ([], str(absolute))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ManifestError, match="not found"):
            load_manifest(tmp_path / "missing.json")

    def test_is_a_config_error(self, tmp_path):
        with pytest.raises(ConfigError):
            load_manifest(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "entities.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ManifestError, match="Invalid JSON"):
            load_manifest(path)

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"entities": "com.acme.User"},
            {"entities": [{"table": "users"}]},
            {"entities": [{"entity": "com.acme.User", "table": ""}]},
            {"entities": [42]},
            {"connection": 3, "entities": []},
        ],
    )
    def test_malformed(self, tmp_path, data):
        path = write_manifest(tmp_path / "entities.json", data)

        with pytest.raises(ManifestError):
            load_manifest(path)
