"""SQLAlchemy engines built from driver-native DSNs."""

import sqlite3
from collections.abc import Callable
from typing import Any

from sqlalchemy import Engine, create_engine

from ._drivers import DriverRegistry
from ._schemes import DEFAULT_SCHEMES, SchemeRegistry


def sqlalchemy_constructor(
    dialect_url: str,
    connect: Callable[[str], Any],
    **engine_kwargs: Any,
) -> Callable[[str], Engine]:
    """Build a constructor returning an engine whose connections use ``connect(dsn)``.

    Args:
        dialect_url: Bare SQLAlchemy URL selecting the dialect (e.g. "sqlite://")
        connect: DBAPI connect function accepting the driver-native DSN
        engine_kwargs: Extra keyword arguments for ``create_engine``
    """

    def constructor(dsn: str) -> Engine:
        return create_engine(dialect_url, creator=lambda: connect(dsn), **engine_kwargs)

    return constructor


def connect_sqlite(dsn: str) -> sqlite3.Connection:
    """Open a SQLite DSN, switching to URI mode when it carries options."""
    if "?" in dsn:
        return sqlite3.connect(f"file:{dsn}", uri=True)
    return sqlite3.connect(dsn)


def connect_postgres(dsn: str) -> Any:
    import psycopg2

    return psycopg2.connect(dsn)


def default_drivers(schemes: SchemeRegistry = DEFAULT_SCHEMES) -> DriverRegistry:
    """Driver registry with SQLite and the PostgreSQL family wired to SQLAlchemy."""
    drivers = DriverRegistry(schemes)
    drivers.register("sqlite3", sqlalchemy_constructor("sqlite://", connect_sqlite))
    postgres = sqlalchemy_constructor("postgresql+psycopg2://", connect_postgres)
    for name in ("postgres", "redshift", "cockroachdb"):
        drivers.register(name, postgres)
    return drivers
