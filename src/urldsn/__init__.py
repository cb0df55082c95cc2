"""Translate generic database URLs into driver-native connection strings."""

from importlib.metadata import version

from ._app import create_app
from ._config import load_connections_from_yaml
from ._connections import ConnectionRegistry
from ._drivers import DriverRegistry
from ._engines import default_drivers, sqlalchemy_constructor
from ._errors import (
    DriverNotRegisteredError,
    GenerationError,
    InvalidPathShapeError,
    MissingSchemeError,
    ParseError,
    TooManyPathSegmentsError,
    UnknownSchemeError,
    UnsupportedComponentError,
    UrlDsnError,
)
from ._models import (
    ConnectionSpec,
    DriverDescriptor,
    Location,
    ParsedURL,
    PathConvention,
    Transport,
)
from ._parser import parse
from ._paths import normalize
from ._schemes import BUILTIN_DRIVERS, DEFAULT_SCHEMES, SchemeRegistry
from ._translate import generate, translate

__version__ = version("urldsn")
__all__ = [
    "BUILTIN_DRIVERS",
    "DEFAULT_SCHEMES",
    "ConnectionRegistry",
    "ConnectionSpec",
    "DriverDescriptor",
    "DriverNotRegisteredError",
    "DriverRegistry",
    "GenerationError",
    "InvalidPathShapeError",
    "Location",
    "MissingSchemeError",
    "ParseError",
    "ParsedURL",
    "PathConvention",
    "SchemeRegistry",
    "TooManyPathSegmentsError",
    "Transport",
    "UnknownSchemeError",
    "UnsupportedComponentError",
    "UrlDsnError",
    "create_app",
    "default_drivers",
    "generate",
    "load_connections_from_yaml",
    "normalize",
    "parse",
    "sqlalchemy_constructor",
    "translate",
]
