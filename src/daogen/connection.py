"""
Database connection management.

Creates the SQLAlchemy engine used for schema reflection and turns
connection problems into ConnectionFailureError before any file is written.
"""

from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.exc import SQLAlchemyError

from daogen.config import DatabaseSettings
from daogen.core.errors import ConnectionFailureError
from daogen.logging import get_logger

logger = get_logger("daogen.connection")


def connect(settings: DatabaseSettings) -> Engine:
    """
    Create an engine and verify the database is reachable.

    Raises:
        ConfigurationError: If the connection settings cannot form a URL
        ConnectionFailureError: If the driver is missing, the server is
            unreachable, the credentials are rejected or the driver refuses
            a connect argument
    """
    url = settings.url()
    target = url.render_as_string(hide_password=True)

    try:
        engine = create_engine(url)
    except (SQLAlchemyError, ImportError) as e:
        raise ConnectionFailureError(target, str(e)) from e

    try:
        with engine.connect():
            pass
    except SQLAlchemyError as e:
        engine.dispose()
        raise ConnectionFailureError(target, str(e.__cause__ or e)) from e
    except TypeError as e:
        # DB-API connect() rejected a query argument from the URL
        engine.dispose()
        raise ConnectionFailureError(target, f"invalid connect argument: {e}") from e

    logger.info("Connected to database", url=target)
    return engine


@contextmanager
def connection_scope(settings: DatabaseSettings) -> Generator[Engine, None, None]:
    """
    Context manager yielding a verified engine.

    The engine's pool is disposed on exit.
    """
    engine = connect(settings)
    try:
        yield engine
    finally:
        engine.dispose()
