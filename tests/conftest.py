"""
Shared test fixtures.
"""

import logging
from io import StringIO

import pytest
from sqlalchemy import create_engine, text

from daogen.codegen.generator import PackageLayout
from daogen.core.emitter import Emitter
from daogen.core.types import SchemaModel
from daogen.introspection.base import RawColumn, StaticSchemaProvider
from daogen.introspection.introspector import introspect
from daogen.logging.config import ROOT_LOGGER
from daogen.logging.context import clear_log_context

# === Providers ===


@pytest.fixture
def user_provider() -> StaticSchemaProvider:
    """The canonical two-column table: an autoincrement id and a name."""
    return StaticSchemaProvider({
        "user": [
            RawColumn(name="id", sql_type_name="INT", sql_type_code=4, is_auto_increment=True),
            RawColumn(name="user_name", sql_type_name="VARCHAR", sql_type_code=12),
        ],
    })


@pytest.fixture
def shop_provider() -> StaticSchemaProvider:
    """Several tables covering every semantic type and a keyless table."""
    return StaticSchemaProvider({
        "customer": [
            RawColumn(name="customer_id", sql_type_name="INT", is_auto_increment=True),
            RawColumn(name="full_name", sql_type_name="VARCHAR(255)"),
            RawColumn(name="is_active", sql_type_name="TINYINT"),
            RawColumn(name="created_at", sql_type_name="DATETIME"),
        ],
        "order_item": [
            RawColumn(name="id", sql_type_name="INT", is_auto_increment=True),
            RawColumn(name="price", sql_type_name="DOUBLE"),
            RawColumn(name="quantity", sql_type_name="INT"),
            RawColumn(name="weight", sql_type_name="FLOAT"),
            RawColumn(name="total_cents", sql_type_name="DECIMAL(12,0)"),
            RawColumn(name="note", sql_type_name="TEXT"),
        ],
        "status": [
            RawColumn(name="code", sql_type_name="VARCHAR"),
            RawColumn(name="label", sql_type_name="VARCHAR"),
        ],
    })


# === Schemas ===


@pytest.fixture
def user_schema(user_provider: StaticSchemaProvider) -> SchemaModel:
    return introspect(user_provider)


@pytest.fixture
def shop_schema(shop_provider: StaticSchemaProvider) -> SchemaModel:
    return introspect(shop_provider)


# === Emission ===


@pytest.fixture
def layout() -> PackageLayout:
    return PackageLayout("Shop")


@pytest.fixture
def buffer() -> StringIO:
    return StringIO()


@pytest.fixture
def emitter(buffer: StringIO) -> Emitter:
    """Emitter writing to an in-memory buffer with two-space indents."""
    return Emitter(spacing=2, stream=buffer)


# === Database ===


@pytest.fixture
def engine():
    """In-memory SQLite database with a small schema."""
    engine = create_engine("sqlite:///:memory:", echo=False)
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE user ("
            "id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "user_name VARCHAR(50))"
        ))
        conn.execute(text(
            "CREATE TABLE order_item ("
            "id INTEGER PRIMARY KEY, "
            "price DOUBLE, "
            "created_at DATETIME, "
            "payload BLOB)"
        ))
        conn.execute(text(
            "CREATE TABLE tag (name VARCHAR(20), label TEXT)"
        ))
    yield engine
    engine.dispose()


# === Logging ===


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging() so caplog sees daogen records in every test."""
    yield
    root = logging.getLogger(ROOT_LOGGER)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    clear_log_context()
