"""
SQL type mapping for code generation.

Maps standard SQL type codes (the JDBC/ODBC numbering) to semantic types,
and derives those codes from reflected SQLAlchemy column types.
"""

from enum import IntEnum
from typing import Dict, List, Tuple, Type

from sqlalchemy import types as sqltypes

from .schema import SemanticType


class SqlType(IntEnum):
    """Standard SQL type codes."""

    BIT = -7
    TINYINT = -6
    SMALLINT = 5
    INTEGER = 4
    BIGINT = -5
    FLOAT = 6
    REAL = 7
    DOUBLE = 8
    NUMERIC = 2
    DECIMAL = 3
    CHAR = 1
    VARCHAR = 12
    LONGVARCHAR = -1
    DATE = 91
    TIME = 92
    TIMESTAMP = 93
    BINARY = -2
    VARBINARY = -3
    LONGVARBINARY = -4
    NULL = 0
    OTHER = 1111
    JAVA_OBJECT = 2000
    ARRAY = 2003
    BLOB = 2004
    CLOB = 2005
    BOOLEAN = 16
    NCHAR = -15
    NVARCHAR = -9
    LONGNVARCHAR = -16
    NCLOB = 2011
    SQLXML = 2009
    TIME_WITH_TIMEZONE = 2013
    TIMESTAMP_WITH_TIMEZONE = 2014


# Explicit allow-list; every other code degrades to GENERIC
SQL_TYPE_MAP: Dict[int, SemanticType] = {
    SqlType.CHAR: SemanticType.TEXT,
    SqlType.VARCHAR: SemanticType.TEXT,
    SqlType.LONGVARCHAR: SemanticType.TEXT,
    SqlType.NCHAR: SemanticType.TEXT,
    SqlType.NVARCHAR: SemanticType.TEXT,
    SqlType.LONGNVARCHAR: SemanticType.TEXT,
    SqlType.DATE: SemanticType.DATE,
    SqlType.TIME: SemanticType.TIME,
    SqlType.TIME_WITH_TIMEZONE: SemanticType.TIME,
    SqlType.TIMESTAMP: SemanticType.TIMESTAMP,
    SqlType.TIMESTAMP_WITH_TIMEZONE: SemanticType.TIMESTAMP,
    SqlType.INTEGER: SemanticType.INTEGER,
    SqlType.DECIMAL: SemanticType.DECIMAL,
    SqlType.DOUBLE: SemanticType.DECIMAL,
}


def map_type(sql_type_code: int) -> Tuple[SemanticType, str]:
    """
    Map a SQL type code to its semantic type and accessor kind.

    Unknown codes are not an error: they map to ``SemanticType.GENERIC``
    with an empty accessor kind.

    Args:
        sql_type_code: Standard SQL type code

    Returns:
        Tuple of (semantic type, accessor kind)
    """
    semantic_type = SQL_TYPE_MAP.get(sql_type_code, SemanticType.GENERIC)
    return semantic_type, semantic_type.accessor_kind


# Checked in order, so subclasses must precede their bases
_SQLALCHEMY_TYPE_CODES: List[Tuple[Type[sqltypes.TypeEngine], SqlType]] = [
    (sqltypes.NCHAR, SqlType.NCHAR),
    (sqltypes.CHAR, SqlType.CHAR),
    (sqltypes.NVARCHAR, SqlType.NVARCHAR),
    (sqltypes.CLOB, SqlType.CLOB),
    (sqltypes.UnicodeText, SqlType.LONGNVARCHAR),
    (sqltypes.Text, SqlType.LONGVARCHAR),
    (sqltypes.Unicode, SqlType.NVARCHAR),
    (sqltypes.String, SqlType.VARCHAR),
    (sqltypes.Date, SqlType.DATE),
    (sqltypes.SmallInteger, SqlType.SMALLINT),
    (sqltypes.BigInteger, SqlType.BIGINT),
    (sqltypes.Integer, SqlType.INTEGER),
    (sqltypes.Double, SqlType.DOUBLE),
    (sqltypes.REAL, SqlType.REAL),
    (sqltypes.Float, SqlType.FLOAT),
    (sqltypes.DECIMAL, SqlType.DECIMAL),
    (sqltypes.NUMERIC, SqlType.NUMERIC),
    (sqltypes.Numeric, SqlType.DECIMAL),
    (sqltypes.Boolean, SqlType.BOOLEAN),
    (sqltypes.BLOB, SqlType.BLOB),
    (sqltypes.VARBINARY, SqlType.VARBINARY),
    (sqltypes.BINARY, SqlType.BINARY),
    (sqltypes.LargeBinary, SqlType.BLOB),
    (sqltypes.ARRAY, SqlType.ARRAY),
]


def sql_type_code(column_type: sqltypes.TypeEngine) -> int:
    """
    Derive the standard SQL type code for a reflected SQLAlchemy type.

    Args:
        column_type: Type instance from ``Inspector.get_columns()``

    Returns:
        SQL type code, ``SqlType.OTHER`` when the type is not recognized
    """
    # Timezone-aware variants carry the flag on the instance
    if isinstance(column_type, sqltypes.DateTime):
        if getattr(column_type, "timezone", False):
            return SqlType.TIMESTAMP_WITH_TIMEZONE
        return SqlType.TIMESTAMP
    if isinstance(column_type, sqltypes.Time):
        if getattr(column_type, "timezone", False):
            return SqlType.TIME_WITH_TIMEZONE
        return SqlType.TIME

    for type_class, code in _SQLALCHEMY_TYPE_CODES:
        if isinstance(column_type, type_class):
            return code

    return SqlType.OTHER
