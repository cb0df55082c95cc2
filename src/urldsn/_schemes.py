"""Scheme alias registry mapping URL scheme tokens to canonical drivers."""

from collections.abc import Iterable, Iterator

from ._errors import UnknownSchemeError
from ._generators import GENERATORS
from ._models import DriverDescriptor, PathConvention

_TCP_UNIX = ("tcp", "unix")


class SchemeRegistry:
    """Immutable lookup table from scheme token to driver descriptor.

    Every token (a canonical name or one of its aliases) maps to exactly one
    descriptor. The registry is built in one step and never mutated; use
    :meth:`extend` to derive a registry with additional drivers.
    """

    def __init__(self, descriptors: Iterable[DriverDescriptor]):
        self._descriptors: dict[str, DriverDescriptor] = {}
        self._tokens: dict[str, DriverDescriptor] = {}
        for descriptor in descriptors:
            if descriptor.generator not in GENERATORS:
                raise ValueError(
                    f"Driver '{descriptor.name}' uses unknown generator '{descriptor.generator}'"
                )
            for token in descriptor.tokens:
                existing = self._tokens.get(token)
                if existing is not None:
                    raise ValueError(
                        f"Scheme '{token}' is claimed by both '{existing.name}' and '{descriptor.name}'"
                    )
                self._tokens[token] = descriptor
            self._descriptors[descriptor.name] = descriptor

    def resolve(self, token: str) -> DriverDescriptor:
        """Resolve a scheme token (case-sensitive) to its driver descriptor."""
        descriptor = self._tokens.get(token)
        if descriptor is None:
            raise UnknownSchemeError(token)
        return descriptor

    def extend(self, *descriptors: DriverDescriptor) -> "SchemeRegistry":
        """Return a new registry with extra drivers added."""
        return SchemeRegistry([*self._descriptors.values(), *descriptors])

    def drivers(self) -> list[str]:
        """Canonical driver names, in registration order."""
        return list(self._descriptors)

    def descriptors(self) -> list[DriverDescriptor]:
        return list(self._descriptors.values())

    def aliases(self, driver: str) -> tuple[str, ...]:
        """Aliases of a canonical driver."""
        return self.resolve(driver).aliases

    def __contains__(self, token: object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)


BUILTIN_DRIVERS: tuple[DriverDescriptor, ...] = (
    DriverDescriptor(
        name="postgres",
        aliases=("pg", "postgresql", "pgsql"),
        generator="postgres",
        transports=_TCP_UNIX,
        description="PostgreSQL",
    ),
    DriverDescriptor(
        name="redshift",
        aliases=("rs",),
        generator="postgres",
        default_port="5439",
        transports=("tcp",),
        description="Amazon Redshift",
    ),
    DriverDescriptor(
        name="cockroachdb",
        aliases=("cr", "cockroach", "crdb", "cdb"),
        generator="postgres",
        defaults={"sslmode": "disable"},
        default_port="26257",
        transports=_TCP_UNIX,
        description="CockroachDB",
    ),
    DriverDescriptor(
        name="mysql",
        aliases=("my", "mariadb", "maria", "percona", "aurora"),
        generator="mysql",
        default_port="3306",
        transports=_TCP_UNIX,
        description="MySQL",
    ),
    DriverDescriptor(
        name="memsql",
        aliases=("me",),
        generator="mysql",
        default_port="3306",
        transports=_TCP_UNIX,
        description="MemSQL",
    ),
    DriverDescriptor(
        name="tidb",
        aliases=("ti",),
        generator="mysql",
        default_port="4000",
        transports=_TCP_UNIX,
        description="TiDB",
    ),
    DriverDescriptor(
        name="vitess",
        aliases=("vt",),
        generator="mysql",
        default_port="3306",
        transports=_TCP_UNIX,
        description="Vitess",
    ),
    DriverDescriptor(
        name="mssql",
        aliases=("ms", "sqlserver"),
        generator="sqlserver",
        convention=PathConvention.INSTANCE_DB,
        transports=("tcp", "np"),
        description="Microsoft SQL Server",
    ),
    DriverDescriptor(
        name="oracle",
        aliases=("or", "ora", "oci", "oci8", "odpi", "odpi-c"),
        generator="oracle",
        convention=PathConvention.SINGLE_ID,
        default_port="1521",
        description="Oracle Database",
    ),
    DriverDescriptor(
        name="sqlite3",
        aliases=("sq", "sqlite", "file"),
        generator="file",
        convention=PathConvention.PATH,
        description="SQLite3",
    ),
    DriverDescriptor(
        name="ql",
        aliases=("cznic", "cznicql"),
        generator="file",
        convention=PathConvention.PATH,
        description="Cznic QL",
    ),
    DriverDescriptor(
        name="adodb",
        aliases=("ad", "ado"),
        generator="adodb",
        convention=PathConvention.PATH,
        description="Microsoft ADODB",
    ),
    DriverDescriptor(
        name="oleodbc",
        aliases=("oo", "ole"),
        generator="oleodbc",
        modifier_is_driver=True,
        description="OLE ODBC",
    ),
    DriverDescriptor(
        name="odbc",
        aliases=("od",),
        generator="odbc",
        modifier_is_driver=True,
        description="ODBC",
    ),
    DriverDescriptor(
        name="sqlany",
        aliases=("sa", "sybase", "any"),
        generator="sybase",
        convention=PathConvention.INSTANCE_DB,
        description="SAP SQL Anywhere",
    ),
    DriverDescriptor(
        name="clickhouse",
        aliases=("ch",),
        generator="clickhouse",
        default_port="9000",
        description="ClickHouse",
    ),
    DriverDescriptor(
        name="cql",
        aliases=("ca", "cassandra", "datastax", "scy", "scylla"),
        generator="cassandra",
        default_port="9042",
        description="Cassandra",
    ),
    DriverDescriptor(
        name="snowflake",
        aliases=("sf",),
        generator="snowflake",
        convention=PathConvention.SEGMENTS,
        max_segments=2,
        description="Snowflake",
    ),
    DriverDescriptor(
        name="presto",
        aliases=("pr", "prestodb", "prs"),
        generator="presto",
        convention=PathConvention.SEGMENTS,
        max_segments=2,
        default_port="8080",
        description="Presto",
    ),
    DriverDescriptor(
        name="spanner",
        aliases=("gs", "google", "span"),
        generator="spanner",
        convention=PathConvention.SEGMENTS,
        max_segments=2,
        description="Google Spanner",
    ),
)

DEFAULT_SCHEMES = SchemeRegistry(BUILTIN_DRIVERS)
