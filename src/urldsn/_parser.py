"""Generic URL parser producing :class:`ParsedURL`."""

import logging
import re
from urllib.parse import unquote, unquote_plus

from ._errors import MissingSchemeError, ParseError, UnsupportedComponentError
from ._models import ParsedURL
from ._schemes import DEFAULT_SCHEMES, SchemeRegistry

logger = logging.getLogger(__name__)

_MODIFIER_RE = re.compile(r"^[A-Za-z0-9+.\-]*$")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _unescape(raw: str, value: str, plus_as_space: bool = False) -> str:
    """Percent-decode a URL component, rejecting malformed escapes."""
    if _BAD_ESCAPE_RE.search(value):
        raise ParseError(raw, f"invalid percent-encoding in '{value}'")
    try:
        if plus_as_space:
            return unquote_plus(value, errors="strict")
        return unquote(value, errors="strict")
    except UnicodeDecodeError as exc:
        raise ParseError(raw, f"percent-encoding in '{value}' is not valid UTF-8") from exc


def _split_hostport(raw: str, hostport: str) -> tuple[str | None, str | None]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end == -1:
            raise ParseError(raw, "unterminated IPv6 address")
        host, after = hostport[1:end], hostport[end + 1 :]
        if after and not after.startswith(":"):
            raise ParseError(raw, f"unexpected text after IPv6 address: '{after}'")
        port = after[1:]
    else:
        host, _, port = hostport.partition(":")
        if ":" in port:
            raise ParseError(raw, f"too many colons in host '{hostport}'")
    if port and not (port.isascii() and port.isdigit()):
        raise ParseError(raw, f"invalid port '{port}'")
    host = _unescape(raw, host)
    return host or None, port or None


def _split_authority(raw: str, authority: str) -> tuple[str, str | None, str | None, str | None]:
    """Split ``user:pass@host:port`` into its decoded parts."""
    userinfo, at, hostport = authority.rpartition("@")
    user, password = "", None
    if at:
        name, colon, secret = userinfo.partition(":")
        user = _unescape(raw, name)
        if colon:
            try:
                password = _unescape(raw, secret)
            except ParseError:
                raise ParseError(raw, "invalid percent-encoding in password") from None
    host, port = _split_hostport(raw, hostport)
    return user, password, host, port


def _split_path(raw: str, path: str) -> tuple[tuple[str, ...], bool]:
    absolute = path.startswith("/")
    body = path[1:] if absolute else path
    if not body:
        return (), absolute
    return tuple(_unescape(raw, segment) for segment in body.split("/")), absolute


def parse_query(raw: str, query: str) -> dict[str, str]:
    """Parse a query string. When a key repeats, its last value wins."""
    options: dict[str, str] = {}
    for pair in query.split("&"):
        if not pair:
            continue
        key, _, value = pair.partition("=")
        key = _unescape(raw, key, plus_as_space=True)
        if not key:
            raise ParseError(raw, f"empty query key in '{pair}'")
        options[key] = _unescape(raw, value, plus_as_space=True)
    return options


def parse(raw: str, schemes: SchemeRegistry = DEFAULT_SCHEMES) -> ParsedURL:
    """Parse a generic connection URL.

    Accepts ``scheme://[user[:pass]@]host[:port][/path][?query][#fragment]``
    and the authority-less ``scheme:path[?query][#fragment]`` form. The
    scheme (without any ``+modifier``) is resolved through ``schemes`` before
    anything else is validated.

    Raises:
        MissingSchemeError: No ``scheme:`` prefix.
        UnknownSchemeError: Scheme is not registered.
        ParseError: Malformed authority, port, escape or query.
        UnsupportedComponentError: The scheme modifier is not a transport the
            driver accepts.
    """
    scheme, colon, rest = raw.partition(":")
    if not colon or not scheme or "/" in scheme:
        raise MissingSchemeError(raw)

    token, _, modifier = scheme.partition("+")
    descriptor = schemes.resolve(token)

    if not _MODIFIER_RE.match(modifier):
        raise ParseError(raw, f"invalid scheme '{scheme}'")
    if modifier and not descriptor.modifier_is_driver and modifier not in descriptor.transports:
        raise UnsupportedComponentError(descriptor.name, f"transport '{modifier}'")

    rest, hash_sign, fragment = rest.partition("#")
    rest, _, query = rest.partition("?")

    user, password, host, port = "", None, None, None
    opaque = not rest.startswith("//")
    if opaque:
        path = rest
    else:
        authority, slash, path = rest[2:].partition("/")
        path = slash + path
        user, password, host, port = _split_authority(raw, authority)

    segments, absolute = _split_path(raw, path)

    parsed = ParsedURL(
        raw=raw,
        scheme=token,
        driver=descriptor.name,
        modifier=modifier,
        user=user,
        password=password,
        host=host,
        port=port,
        segments=segments,
        absolute=absolute,
        query=parse_query(raw, query),
        fragment=_unescape(raw, fragment) if hash_sign else None,
        opaque=opaque,
    )
    logger.debug("Parsed %s as driver '%s'", parsed.redacted(), parsed.driver)
    return parsed
