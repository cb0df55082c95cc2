"""Tests for SQLAlchemy-backed driver constructors."""

from sqlalchemy import Engine, text

from urldsn import default_drivers, sqlalchemy_constructor
from urldsn._engines import connect_sqlite


def test_default_drivers_registers_sqlite_and_postgres():
    drivers = default_drivers()
    assert drivers.is_registered("sqlite3")
    assert drivers.is_registered("postgres")
    assert drivers.is_registered("redshift")
    assert drivers.is_registered("cockroachdb")
    assert not drivers.is_registered("mysql")


def test_open_sqlite_memory():
    engine = default_drivers().open("sqlite::memory:")
    assert isinstance(engine, Engine)
    with engine.connect() as conn:
        assert conn.execute(text("SELECT 1")).scalar() == 1
    engine.dispose()


def test_open_sqlite_file(tmp_path):
    db_path = tmp_path / "app.db"
    drivers = default_drivers()

    engine = drivers.open(f"sqlite:{db_path}")
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE t (x INTEGER)"))
        conn.execute(text("INSERT INTO t VALUES (42)"))
    engine.dispose()

    assert db_path.exists()
    engine = drivers.open(f"sq:{db_path}?mode=ro")
    with engine.connect() as conn:
        assert conn.execute(text("SELECT x FROM t")).scalar() == 42
    engine.dispose()


def test_connect_sqlite_uses_uri_mode_for_options(tmp_path):
    db_path = tmp_path / "opts.db"
    conn = connect_sqlite(f"{db_path}?mode=rwc")
    conn.execute("CREATE TABLE t (x INTEGER)")
    conn.close()
    assert db_path.exists()


def test_sqlalchemy_constructor_passes_engine_kwargs():
    calls = []

    def connect(dsn):
        import sqlite3

        calls.append(dsn)
        return sqlite3.connect(":memory:")

    constructor = sqlalchemy_constructor("sqlite://", connect, echo=True)
    engine = constructor("some-dsn")
    assert engine.echo is True
    assert calls == []

    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))
    assert calls == ["some-dsn"]
    engine.dispose()
