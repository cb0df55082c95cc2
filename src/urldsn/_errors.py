"""Error types and HTTP error handling."""

import re
from collections.abc import Sequence

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ._models import REDACTED

_AUTHORITY_RE = re.compile(r"^(?P<head>[^/?#]*//)(?P<authority>[^/?#]*)")


def mask_password(raw: str) -> str:
    """Replace the password in a raw URL's userinfo, leaving the rest untouched."""
    match = _AUTHORITY_RE.match(raw)
    if match is None:
        return raw
    userinfo, at, hostport = match["authority"].rpartition("@")
    user, colon, _ = userinfo.partition(":")
    if not (at and colon):
        return raw
    return f"{match['head']}{user}:{REDACTED}@{hostport}{raw[match.end():]}"


class UrlDsnError(Exception):
    """Base class for URL translation errors."""


class MissingSchemeError(UrlDsnError):
    """Input has no ``scheme:`` prefix."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Missing scheme in URL: '{mask_password(raw)}'")


class UnknownSchemeError(UrlDsnError):
    """Scheme token is not a known driver or alias."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown scheme: '{token}'")


class ParseError(UrlDsnError):
    """Malformed authority, percent-encoding or query string."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Invalid URL '{mask_password(raw)}': {reason}")


class InvalidPathShapeError(UrlDsnError):
    """Path segments do not fit the driver's path convention."""

    def __init__(self, driver: str, segments: Sequence[str], reason: str):
        self.driver = driver
        self.segments = tuple(segments)
        self.reason = reason
        super().__init__(
            f"Invalid path for driver '{driver}' ({len(self.segments)} segment(s) "
            f"{list(self.segments)}): {reason}"
        )


class TooManyPathSegmentsError(InvalidPathShapeError):
    """More path segments than the driver can represent."""


class UnsupportedComponentError(UrlDsnError):
    """URL component the target driver cannot represent."""

    def __init__(self, driver: str, component: str):
        self.driver = driver
        self.component = component
        super().__init__(f"Driver '{driver}' does not support URL component: {component}")


class GenerationError(UrlDsnError):
    """Driver-specific formatting failure."""

    def __init__(self, driver: str, reason: str):
        self.driver = driver
        self.reason = reason
        super().__init__(f"Cannot generate DSN for driver '{driver}': {reason}")


class DriverNotRegisteredError(UrlDsnError):
    """No connection constructor registered for a canonical driver."""

    def __init__(self, driver: str):
        self.driver = driver
        super().__init__(f"No driver registered for: '{driver}'")


class ApiError(Exception):
    """Custom API error with HTTP status code."""

    def __init__(self, status_code: int, error_type: str, message: str):
        self.status_code = status_code
        self.error_type = error_type
        self.message = message
        super().__init__(message)


def connection_not_found(name: str) -> ApiError:
    """Create a connection not found error."""
    return ApiError(404, "ConnectionNotFound", f"Unknown connection: '{name}'")


def from_translation_error(exc: UrlDsnError) -> ApiError:
    """Convert a translation error into an API error."""
    status_code = 404 if isinstance(exc, DriverNotRegisteredError) else 400
    error_type = type(exc).__name__.removesuffix("Error")
    return ApiError(status_code, error_type, str(exc))


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers on the FastAPI app."""

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "error": {"type": exc.error_type, "message": exc.message},
            },
        )

    @app.exception_handler(UrlDsnError)
    async def handle_translation_error(request: Request, exc: UrlDsnError) -> JSONResponse:
        return await handle_api_error(request, from_translation_error(exc))
