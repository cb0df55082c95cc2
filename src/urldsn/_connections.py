"""Registry of named connection URLs."""

from typing import Any

from ._drivers import DriverRegistry
from ._models import ConnectionSpec, ParsedURL
from ._parser import parse
from ._schemes import DEFAULT_SCHEMES, SchemeRegistry
from ._translate import generate


class ConnectionRegistry:
    """Named connection URLs, parsed when registered."""

    def __init__(self, schemes: SchemeRegistry = DEFAULT_SCHEMES):
        self._schemes = schemes
        self._urls: dict[str, ParsedURL] = {}

    def register(self, name: str, url: str) -> None:
        """Register a named connection URL.

        Args:
            name: Connection name
            url: Generic connection URL (e.g., "pg://user:pass@localhost/db")

        Raises:
            UrlDsnError: If the URL cannot be parsed
        """
        self._urls[name] = parse(url, self._schemes)

    def get_parsed(self, name: str) -> ParsedURL:
        """Get the parsed URL for a connection name."""
        if name not in self._urls:
            raise KeyError(f"Unknown connection: '{name}'")
        return self._urls[name]

    def get_url(self, name: str) -> str:
        """Get the URL as registered."""
        return self.get_parsed(name).raw

    def spec(self, name: str) -> ConnectionSpec:
        """Generate the driver-native DSN for a named connection."""
        return generate(self.get_parsed(name), self._schemes)

    def open(self, name: str, drivers: DriverRegistry) -> Any:
        """Open a named connection through the driver registry."""
        return drivers.open(self.get_url(name))

    def list_connections(self) -> list[str]:
        """List available connection names."""
        return list(self._urls.keys())

    def has_connection(self, name: str) -> bool:
        """Check if a connection name is registered."""
        return name in self._urls

    def get_driver(self, name: str) -> str | None:
        """Get the canonical driver for a connection, or None if unknown."""
        parsed = self._urls.get(name)
        return parsed.driver if parsed is not None else None
