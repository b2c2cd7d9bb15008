"""
Scoped database connections.

Connections are opened through SQLAlchemy and always released, whatever
happens inside the ``with`` block.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, URL, make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError, SQLAlchemyError

from ...logging_config import get_logger
from .config import ConnectionConfig
from .errors import ConfigError, DatabaseConnectionError

logger = get_logger(__name__)


def build_url(config: ConnectionConfig) -> URL:
    """
    Build the SQLAlchemy URL for a connection config.

    Username, password and driver from the config replace whatever the URL
    itself carries.

    Raises:
        ConfigError: If ``db.url`` cannot be parsed
    """
    try:
        url = make_url(config.url)
    except ArgumentError as e:
        raise ConfigError(f"Invalid database URL in {config.source}: {e}")

    changes = {}
    if config.driver:
        changes["drivername"] = config.driver
    if config.username is not None:
        changes["username"] = config.username
    if config.password is not None:
        changes["password"] = config.password

    return url.set(**changes) if changes else url


@contextmanager
def open_connection(
    config: ConnectionConfig, entity: Optional[str] = None
) -> Iterator[Connection]:
    """
    Open a database connection for the duration of a ``with`` block.

    Args:
        config: Connection settings
        entity: Entity name used for error context

    Yields:
        Open SQLAlchemy connection

    Raises:
        DatabaseConnectionError: If the driver is missing or connecting fails
    """
    url = build_url(config)
    safe_url = url.render_as_string(hide_password=True)

    try:
        engine = create_engine(url)
    except (NoSuchModuleError, ImportError) as e:
        raise DatabaseConnectionError(
            f"Database driver not available for {safe_url}: {e}", entity=entity
        )
    except (ArgumentError, SQLAlchemyError) as e:
        raise DatabaseConnectionError(
            f"Cannot create engine for {safe_url}: {e}", entity=entity
        )

    try:
        try:
            connection = engine.connect()
        except SQLAlchemyError as e:
            raise DatabaseConnectionError(
                f"Failed to connect to {safe_url}: {e}", entity=entity
            )

        logger.debug("Connected to %s", safe_url)
        try:
            yield connection
        finally:
            connection.close()
            logger.debug("Closed connection to %s", safe_url)
    finally:
        engine.dispose()
