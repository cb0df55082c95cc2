"""Pydantic models for parsed URLs, generated DSNs and API payloads."""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Annotated
from urllib.parse import quote, urlencode

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

REDACTED = "xxxxx"


def encode_query(options: Mapping[str, str]) -> str:
    """Percent-encode query options. Spaces become %20 and slashes %2F."""
    return urlencode(list(options.items()), safe=":@,", quote_via=quote)


def quote_userinfo(value: str) -> str:
    return quote(value, safe="")


def format_host(host: str, port: str | None = None) -> str:
    """Join host and port, bracketing IPv6 literals."""
    if ":" in host:
        host = f"[{host}]"
    return f"{host}:{port}" if port else host


ReadOnlyOptions = Annotated[
    Mapping[str, str],
    AfterValidator(lambda value: MappingProxyType(dict(value))),
    PlainSerializer(dict),
]


# === Core ===


class Transport(str, Enum):
    """Connection medium a generated DSN targets."""

    TCP = "tcp"
    UNIX = "unix-socket"
    NAMED_PIPE = "named-pipe"
    IN_PROCESS = "in-process"


class PathConvention(str, Enum):
    """How a driver interprets URL path segments."""

    PATH = "path"
    INSTANCE_DB = "instance-db"
    SINGLE_ID = "single-id"
    DBNAME = "dbname"
    SEGMENTS = "segments"


class DriverDescriptor(BaseModel):
    """Static description of a canonical driver and how to format its DSN."""

    model_config = ConfigDict(frozen=True)

    name: str
    aliases: tuple[str, ...] = ()
    generator: str
    convention: PathConvention = PathConvention.DBNAME
    defaults: ReadOnlyOptions = Field(default_factory=dict, validate_default=True)
    default_port: str | None = None
    transports: tuple[str, ...] = ()
    max_segments: int = 0
    modifier_is_driver: bool = False
    description: str = ""

    @property
    def tokens(self) -> tuple[str, ...]:
        """Canonical name followed by its aliases."""
        return (self.name, *self.aliases)


class ParsedURL(BaseModel):
    """A URL broken into components, with percent-decoding applied."""

    model_config = ConfigDict(frozen=True)

    raw: str
    scheme: str
    driver: str
    modifier: str = ""
    user: str = ""
    password: str | None = None
    host: str | None = None
    port: str | None = None
    segments: tuple[str, ...] = ()
    absolute: bool = False
    query: ReadOnlyOptions = Field(default_factory=dict, validate_default=True)
    fragment: str | None = None
    opaque: bool = False

    @property
    def full_scheme(self) -> str:
        return f"{self.scheme}+{self.modifier}" if self.modifier else self.scheme

    def userinfo(self, password: str | None = None) -> str:
        """Escaped ``user[:pass]@`` prefix, or an empty string without a user."""
        if not self.user and self.password is None:
            return ""
        info = quote_userinfo(self.user)
        password = self.password if password is None else password
        if password is not None:
            info += ":" + quote_userinfo(password)
        return info + "@"

    def to_url(self, scheme: str | None = None, password: str | None = None) -> str:
        """Reassemble the URL, optionally under another scheme."""
        scheme = scheme or self.full_scheme
        path = "/".join(quote(s, safe="") for s in self.segments)
        if self.absolute:
            path = "/" + path
        if self.opaque:
            url = f"{scheme}:{path}"
        else:
            netloc = self.userinfo(password) + format_host(self.host or "", self.port)
            url = f"{scheme}://{netloc}{path}"
        if self.query:
            url += "?" + encode_query(self.query)
        if self.fragment is not None:
            url += "#" + quote(self.fragment, safe="")
        return url

    def redacted(self) -> str:
        """The URL with any password masked."""
        if not self.password:
            return self.to_url()
        return self.to_url(password=REDACTED)


class Location(BaseModel):
    """Driver-specific reading of the URL path."""

    model_config = ConfigDict(frozen=True)

    transport: Transport = Transport.TCP
    dbname: str = ""
    instance: str = ""
    path: str = ""
    socket: str = ""
    segments: tuple[str, ...] = ()


class ConnectionSpec(BaseModel):
    """Output of a generator: a driver-native DSN and its transport."""

    model_config = ConfigDict(frozen=True)

    driver: str
    transport: Transport
    dsn: str

    def __str__(self) -> str:
        return self.dsn


# === Base class for camelCase serialization ===


class CamelModel(BaseModel):
    """Base model that serializes to camelCase."""

    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )


def success_envelope(data: CamelModel | None = None) -> dict:
    """Wrap response data in success envelope."""
    if data is None:
        return {"status": "success", "data": None}
    return {"status": "success", "data": data.model_dump(by_alias=True)}


# === Requests ===


class UrlRequest(CamelModel):
    """Request body carrying a generic connection URL."""

    url: str


# === Responses ===


class DsnResponse(CamelModel):
    """Response for URL translation."""

    driver: str
    transport: str
    dsn: str


class ParseResponse(CamelModel):
    """Response for URL parsing. The password itself is never echoed."""

    scheme: str
    driver: str
    modifier: str
    user: str
    has_password: bool
    host: str | None = None
    port: str | None = None
    segments: list[str]
    query: dict[str, str]
    fragment: str | None = None
    opaque: bool
    redacted: str


class SchemeInfo(CamelModel):
    """A canonical driver and the scheme tokens resolving to it."""

    driver: str
    description: str
    aliases: list[str]
    transports: list[str]
    default_port: str | None = None


class SchemesResponse(CamelModel):
    """Response for listing schemes."""

    schemes: list[SchemeInfo]


class ConnectionInfo(CamelModel):
    """A named connection from the config file."""

    name: str
    driver: str
    url: str


class ConnectionsResponse(CamelModel):
    """Response for listing named connections."""

    connections: list[ConnectionInfo]


# === Errors ===


class ErrorDetail(BaseModel):
    """Error details."""

    message: str
    type: str


class ErrorResponse(BaseModel):
    """Error response."""

    status: str = "error"
    error: ErrorDetail
