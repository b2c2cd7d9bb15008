"""
Table introspection.

Reads column metadata for one table from a live connection.
"""

from typing import List, Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Connection
from sqlalchemy.exc import NoSuchTableError, SQLAlchemyError

from ...logging_config import get_logger
from .errors import SchemaError
from .schema import ColumnDescriptor
from .types import sql_type_code

logger = get_logger(__name__)


def introspect(
    connection: Connection,
    table_name: str,
    entity_name: Optional[str] = None,
    schema: Optional[str] = None,
) -> List[ColumnDescriptor]:
    """
    Describe the columns of a table.

    Columns come back in the order the database reports them (ordinal
    position ascending). Nothing is filtered out: key and audit columns are
    included like any other.

    Args:
        connection: Open database connection
        table_name: Table to describe
        entity_name: Entity being generated, for error context
        schema: Database schema containing the table

    Returns:
        Column descriptors in ordinal order

    Raises:
        SchemaError: If the table does not exist or metadata cannot be read
    """
    try:
        inspector = inspect(connection)
        if not inspector.has_table(table_name, schema=schema):
            raise SchemaError(
                f"Table '{table_name}' does not exist",
                entity=entity_name,
                table=table_name,
            )
        columns = inspector.get_columns(table_name, schema=schema)
    except NoSuchTableError:
        raise SchemaError(
            f"Table '{table_name}' does not exist",
            entity=entity_name,
            table=table_name,
        )
    except SQLAlchemyError as e:
        raise SchemaError(
            f"Failed to read metadata for table '{table_name}': {e}",
            entity=entity_name,
            table=table_name,
        )

    descriptors = [
        ColumnDescriptor(
            raw_name=column["name"],
            sql_type_code=int(sql_type_code(column["type"])),
            ordinal_position=position,
        )
        for position, column in enumerate(columns, start=1)
    ]

    logger.info("Table %s has %d column(s)", table_name, len(descriptors))
    return descriptors
