"""Shared FastAPI dependencies for routes."""

from .._connections import ConnectionRegistry
from .._schemes import SchemeRegistry


def get_registry() -> ConnectionRegistry:
    """Dependency placeholder, overridden by the app factory."""
    raise RuntimeError("ConnectionRegistry not initialized")


def get_schemes() -> SchemeRegistry:
    """Dependency placeholder, overridden by the app factory."""
    raise RuntimeError("SchemeRegistry not initialized")
