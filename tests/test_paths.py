"""Tests for path segment normalization."""

import pytest

from urldsn import (
    InvalidPathShapeError,
    Location,
    TooManyPathSegmentsError,
    Transport,
    UnsupportedComponentError,
    normalize,
    parse,
)
from urldsn._paths import resolve_transport


def _normalize(raw: str, schemes) -> Location:
    parsed = parse(raw, schemes)
    return normalize(parsed, schemes.resolve(parsed.driver))


def test_mssql_instance_and_dbname(schemes):
    location = _normalize("mssql://u:p@h/instance/dbname", schemes)
    assert location.instance == "instance"
    assert location.dbname == "dbname"


def test_mssql_dbname_only(schemes):
    location = _normalize("mssql://u:p@h/dbname", schemes)
    assert location.instance == ""
    assert location.dbname == "dbname"


def test_mssql_no_path(schemes):
    location = _normalize("mssql://u:p@h", schemes)
    assert location.instance == ""
    assert location.dbname == ""


def test_mssql_too_many_segments(schemes):
    with pytest.raises(InvalidPathShapeError) as excinfo:
        _normalize("mssql://u:p@h/a/b/c", schemes)
    assert excinfo.value.driver == "mssql"
    assert excinfo.value.segments == ("a", "b", "c")


def test_oracle_single_sid(schemes):
    assert _normalize("oracle://u:p@h/ORCL", schemes).dbname == "ORCL"


@pytest.mark.parametrize("raw", ["oracle://u:p@h/a/b", "ora://u:p@h/a/b/c"])
def test_oracle_rejects_multiple_segments(schemes, raw):
    with pytest.raises(TooManyPathSegmentsError):
        _normalize(raw, schemes)


def test_oracle_requires_sid(schemes):
    with pytest.raises(InvalidPathShapeError, match="SID"):
        _normalize("oracle://u:p@h", schemes)


def test_dbname_convention(schemes):
    assert _normalize("pg://h/mydb", schemes).dbname == "mydb"
    assert _normalize("pg://h", schemes).dbname == ""


def test_dbname_convention_rejects_nested_path(schemes):
    with pytest.raises(InvalidPathShapeError) as excinfo:
        _normalize("pg://h/a/b", schemes)
    assert excinfo.value.driver == "postgres"


def test_file_path_keeps_leading_slash(schemes):
    location = _normalize("sqlite:/var/lib/data.db", schemes)
    assert location.path == "/var/lib/data.db"
    assert location.transport is Transport.IN_PROCESS


def test_file_path_relative(schemes):
    assert _normalize("sqlite:data/app.db", schemes).path == "data/app.db"


def test_file_path_after_host_is_relative(schemes):
    location = _normalize("adodb://Microsoft.ACE.OLEDB.12.0/data/db.accdb", schemes)
    assert location.path == "data/db.accdb"


def test_segments_convention(schemes):
    location = _normalize("sf://u:p@account/db/schema", schemes)
    assert location.segments == ("db", "schema")
    assert location.dbname == "db"


def test_segments_convention_limit(schemes):
    with pytest.raises(TooManyPathSegmentsError, match="at most 2"):
        _normalize("sf://u:p@account/db/schema/extra", schemes)


def test_unix_socket_from_opaque_form(schemes):
    location = _normalize("mysql:/var/run/mysqld/mysqld.sock", schemes)
    assert location.transport is Transport.UNIX
    assert location.socket == "/var/run/mysqld/mysqld.sock"
    assert location.dbname == ""


def test_unix_socket_with_dbname(schemes):
    location = _normalize("mysql:/var/run/mysqld/mysqld.sock/app", schemes)
    assert location.socket == "/var/run/mysqld/mysqld.sock"
    assert location.dbname == "app"


def test_unix_socket_without_sock_suffix(schemes):
    location = _normalize("pg:/var/run/postgresql", schemes)
    assert location.transport is Transport.UNIX
    assert location.socket == "/var/run/postgresql"


def test_unix_socket_from_modifier(schemes):
    location = _normalize("mysql+unix://root@/tmp/mysql.sock/app", schemes)
    assert location.transport is Transport.UNIX
    assert location.socket == "/tmp/mysql.sock"
    assert location.dbname == "app"


def test_unix_socket_must_be_absolute(schemes):
    with pytest.raises(InvalidPathShapeError, match="absolute"):
        _normalize("mysql:tmp/mysql.sock", schemes)


def test_unix_socket_rejects_host(schemes):
    with pytest.raises(UnsupportedComponentError, match="host"):
        _normalize("mysql+unix://localhost/tmp/mysql.sock", schemes)


def test_unix_socket_rejects_extra_segments(schemes):
    with pytest.raises(InvalidPathShapeError):
        _normalize("mysql:/tmp/mysql.sock/app/extra", schemes)


def test_resolve_transport(schemes):
    def transport(raw):
        parsed = parse(raw)
        return resolve_transport(parsed, schemes.resolve(parsed.driver))

    assert transport("mysql://h/db") is Transport.TCP
    assert transport("mysql:") is Transport.TCP
    assert transport("mysql:/tmp/mysql.sock") is Transport.UNIX
    assert transport("mssql+np://h/db") is Transport.NAMED_PIPE
    assert transport("pg+tcp:/mydb") is Transport.TCP
    assert transport("mysql+tcp:/tmp/mysql.sock") is Transport.TCP
    assert transport("sqlite:x.db") is Transport.IN_PROCESS
    assert transport("odbc+unix://h/db") is Transport.TCP
