import pytest

from modelgen.codegen.core.config import load_config
from modelgen.codegen.core.schema import BaseTypeRef, ColumnDescriptor
from modelgen.codegen.core.synthesizer import synthesize
from modelgen.codegen.core.types import SqlType
from modelgen.codegen.languages.python import PythonGenerator

BASE = BaseTypeRef("activerecord.Model")

USERS_COLUMNS = [
    ColumnDescriptor("id", SqlType.INTEGER, 1),
    ColumnDescriptor("user_name", SqlType.VARCHAR, 2),
    ColumnDescriptor("created_at", SqlType.TIMESTAMP, 3),
]

EXPECTED_USERS = '''\
# Generated from table users. Do not edit.

from datetime import datetime

from activerecord import Model


class ModelUser(Model):
    def getId(self) -> int:
        return self.getInteger("id")

    def setId(self, Id: int) -> None:
        self.setInteger("id", Id)

    def getUserName(self) -> str:
        return self.getString("user_name")

    def setUserName(self, UserName: str) -> None:
        self.setString("user_name", UserName)

    def getCreatedAt(self) -> datetime:
        return self.getTimestamp("created_at")

    def setCreatedAt(self, CreatedAt: datetime) -> None:
        self.setTimestamp("created_at", CreatedAt)
'''


@pytest.fixture
def generator():
    return PythonGenerator(load_config("python"))


def render(generator, unit):
    return generator.format_code(generator.generate(unit))


class TestPythonGenerator:
    def test_language_info(self, generator):
        assert generator.language_name == "python"
        assert generator.file_extension == ".py"
        assert generator.config.indent_size == 4

    def test_users_unit(self, generator):
        unit = synthesize("User", "app.models", BASE, USERS_COLUMNS, table_name="users")
        assert render(generator, unit) == EXPECTED_USERS

    def test_generic_column(self, generator):
        columns = [ColumnDescriptor("payload", SqlType.BLOB, 1)]
        code = render(generator, synthesize("Blob", "app.models", BASE, columns))

        assert "from typing import Any\n" in code
        assert "def getPayload(self) -> Any:" in code
        assert 'return self.get("payload")' in code
        assert 'self.set("payload", Payload)' in code

    def test_date_types_share_one_import(self, generator):
        columns = [
            ColumnDescriptor("published", SqlType.DATE, 1),
            ColumnDescriptor("opens_at", SqlType.TIME, 2),
            ColumnDescriptor("updated_at", SqlType.TIMESTAMP, 3),
        ]
        code = render(generator, synthesize("Doc", "app.models", BASE, columns))
        assert "from datetime import date, datetime, time\n" in code

    def test_empty_unit(self, generator):
        code = render(generator, synthesize("Empty", "app.models", BASE, []))
        assert code.endswith("class ModelEmpty(Model):\n    pass\n")

    def test_unqualified_base_type_has_no_import(self, generator):
        unit = synthesize("User", "app.models", BaseTypeRef("Model"), USERS_COLUMNS[:1])
        code = render(generator, unit)

        assert "import Model" not in code
        assert "class ModelUser(Model):" in code

    def test_keyword_parameter_is_renamed(self, generator):
        columns = [ColumnDescriptor("none", SqlType.VARCHAR, 1)]
        unit = synthesize("Flag", "app.models", BASE, columns)

        assert "def setNone(self, None_: str) -> None:" in render(generator, unit)
        assert any("None_" in w for w in generator.validate_unit(unit))
