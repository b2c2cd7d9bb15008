import json

import pytest
from sqlalchemy import create_engine, text

from modelgen.codegen.core.config import load_config

USERS_DDL = """
CREATE TABLE users (
    id INTEGER PRIMARY KEY,
    user_name VARCHAR(50),
    created_at TIMESTAMP
)
"""

DOCUMENTS_DDL = """
CREATE TABLE documents (
    doc_id INTEGER,
    title NVARCHAR(200),
    body BLOB,
    price DECIMAL(10, 2),
    ratio REAL,
    published DATE,
    opens_at TIME
)
"""


@pytest.fixture
def db_path(tmp_path):
    """SQLite database with a users and a documents table."""
    path = tmp_path / "app.db"
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as connection:
        connection.execute(text(USERS_DDL))
        connection.execute(text(DOCUMENTS_DDL))
    engine.dispose()
    return path


@pytest.fixture
def connection_file(tmp_path, db_path):
    path = tmp_path / "db.json"
    path.write_text(json.dumps({"db.url": f"sqlite:///{db_path}"}), encoding="utf-8")
    return path


@pytest.fixture
def broken_connection_file(tmp_path):
    path = tmp_path / "broken-db.json"
    path.write_text(json.dumps({"db.url": "nosuchdialect://host/db"}), encoding="utf-8")
    return path


@pytest.fixture
def java_config(connection_file):
    return load_config("java", custom_config={"connection_config": str(connection_file)})


@pytest.fixture
def python_config(connection_file):
    return load_config(
        "python", custom_config={"connection_config": str(connection_file)}
    )
