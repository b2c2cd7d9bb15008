import pytest
from sqlalchemy import create_engine

from modelgen.codegen.core.config import ConnectionConfig, load_connection_config
from modelgen.codegen.core.database import build_url, open_connection
from modelgen.codegen.core.errors import (
    ConfigError,
    DatabaseConnectionError,
    SchemaError,
)
from modelgen.codegen.core.introspect import introspect
from modelgen.codegen.core.types import SqlType


@pytest.fixture
def connection(db_path):
    engine = create_engine(f"sqlite:///{db_path}")
    with engine.connect() as conn:
        yield conn
    engine.dispose()


class TestIntrospect:
    def test_users_columns_in_ordinal_order(self, connection):
        columns = introspect(connection, "users")

        assert [c.raw_name for c in columns] == ["id", "user_name", "created_at"]
        assert [c.ordinal_position for c in columns] == [1, 2, 3]
        assert [c.sql_type_code for c in columns] == [
            SqlType.INTEGER,
            SqlType.VARCHAR,
            SqlType.TIMESTAMP,
        ]

    def test_type_codes_are_plain_ints(self, connection):
        columns = introspect(connection, "users")
        assert all(type(c.sql_type_code) is int for c in columns)

    def test_documents_columns(self, connection):
        columns = introspect(connection, "documents")

        assert [c.sql_type_code for c in columns] == [
            SqlType.INTEGER,
            SqlType.NVARCHAR,
            SqlType.BLOB,
            SqlType.DECIMAL,
            SqlType.REAL,
            SqlType.DATE,
            SqlType.TIME,
        ]

    def test_missing_table_names_table_and_entity(self, connection):
        with pytest.raises(SchemaError) as exc_info:
            introspect(connection, "ghosts", entity_name="com.acme.Ghost")

        error = exc_info.value
        assert error.table == "ghosts"
        assert error.entity == "com.acme.Ghost"
        assert "ghosts" in str(error)
        assert "com.acme.Ghost" in str(error)


class TestOpenConnection:
    def test_connection_closed_after_block(self, connection_file):
        config = load_connection_config(connection_file)

        with open_connection(config) as conn:
            assert not conn.closed

        assert conn.closed

    def test_connection_closed_after_error(self, connection_file):
        config = load_connection_config(connection_file)

        with pytest.raises(SchemaError):
            with open_connection(config) as conn:
                introspect(conn, "ghosts")

        assert conn.closed

    def test_unknown_driver(self):
        config = ConnectionConfig(url="nosuchdialect://host/db")

        with pytest.raises(DatabaseConnectionError):
            with open_connection(config, entity="com.acme.User"):
                pass

    def test_unreachable_database(self, tmp_path):
        missing = tmp_path / "no" / "such" / "dir" / "app.db"
        config = ConnectionConfig(url=f"sqlite:///{missing}")

        with pytest.raises(DatabaseConnectionError) as exc_info:
            with open_connection(config, entity="com.acme.User"):
                pass

        assert exc_info.value.entity == "com.acme.User"

    def test_invalid_url(self):
        with pytest.raises(ConfigError):
            build_url(ConnectionConfig(url="not a url"))

    def test_credentials_and_driver_override_url(self):
        url = build_url(
            ConnectionConfig(
                url="postgresql://localhost:5432/app",
                username="app",
                password="secret",
                driver="postgresql+psycopg",
            )
        )

        assert url.drivername == "postgresql+psycopg"
        assert url.username == "app"
        assert url.password == "secret"
        assert url.database == "app"
