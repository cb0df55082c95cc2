"""Driver-specific interpretation of URL path segments."""

from collections.abc import Sequence

from ._errors import InvalidPathShapeError, TooManyPathSegmentsError, UnsupportedComponentError
from ._models import DriverDescriptor, Location, ParsedURL, PathConvention, Transport

_SOCKET_SUFFIX = ".sock"


def resolve_transport(parsed: ParsedURL, descriptor: DriverDescriptor) -> Transport:
    """Pick the transport implied by the scheme modifier and URL form.

    An explicit ``+tcp``, ``+unix`` or ``+np`` modifier wins. Otherwise an
    authority-less URL with a path selects a Unix socket for drivers that
    accept one. File-based drivers always run in-process.
    """
    if descriptor.convention is PathConvention.PATH:
        return Transport.IN_PROCESS
    modifier = "" if descriptor.modifier_is_driver else parsed.modifier
    if modifier == "tcp":
        return Transport.TCP
    if modifier == "unix":
        return Transport.UNIX
    if modifier == "np":
        return Transport.NAMED_PIPE
    if parsed.opaque and parsed.segments and "unix" in descriptor.transports:
        return Transport.UNIX
    return Transport.TCP


def _dbname(driver: str, segments: Sequence[str]) -> str:
    if len(segments) > 1:
        raise InvalidPathShapeError(driver, segments, "expected at most one database name")
    return segments[0] if segments else ""


def _split_socket(parsed: ParsedURL, descriptor: DriverDescriptor) -> Location:
    """Split a path into a socket path and a trailing database name.

    The socket path ends at the first segment named ``*.sock``; without one,
    the whole path is the socket.
    """
    segments = parsed.segments
    if parsed.host:
        raise UnsupportedComponentError(descriptor.name, "host with a unix socket")
    if not parsed.absolute or not segments:
        raise InvalidPathShapeError(descriptor.name, segments, "socket path must be absolute")

    cut = len(segments)
    for i, segment in enumerate(segments):
        if segment.endswith(_SOCKET_SUFFIX):
            cut = i + 1
            break

    return Location(
        transport=Transport.UNIX,
        socket="/" + "/".join(segments[:cut]),
        dbname=_dbname(descriptor.name, segments[cut:]),
        segments=segments,
    )


def normalize(parsed: ParsedURL, descriptor: DriverDescriptor) -> Location:
    """Interpret the URL path according to the driver's path convention."""
    transport = resolve_transport(parsed, descriptor)
    if transport is Transport.UNIX:
        return _split_socket(parsed, descriptor)

    name = descriptor.name
    segments = parsed.segments
    convention = descriptor.convention

    if convention is PathConvention.PATH:
        path = "/".join(segments)
        if segments and parsed.absolute and not parsed.host:
            path = "/" + path
        return Location(transport=transport, path=path, segments=segments)

    if convention is PathConvention.INSTANCE_DB:
        if len(segments) > 2:
            raise TooManyPathSegmentsError(name, segments, "expected /instance/dbname")
        instance, dbname = ("", *segments)[-2:] if segments else ("", "")
        return Location(transport=transport, instance=instance, dbname=dbname, segments=segments)

    if convention is PathConvention.SINGLE_ID:
        if len(segments) > 1:
            raise TooManyPathSegmentsError(name, segments, "expected a single SID or service name")
        if not segments or not segments[0]:
            raise InvalidPathShapeError(name, segments, "a SID or service name is required")
        return Location(transport=transport, dbname=segments[0], segments=segments)

    if convention is PathConvention.SEGMENTS:
        if len(segments) > descriptor.max_segments:
            raise TooManyPathSegmentsError(
                name, segments, f"expected at most {descriptor.max_segments} segment(s)"
            )
        return Location(
            transport=transport,
            dbname=segments[0] if segments else "",
            segments=segments,
        )

    return Location(transport=transport, dbname=_dbname(name, segments), segments=segments)
