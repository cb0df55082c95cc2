"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from urldsn import DEFAULT_SCHEMES, ConnectionRegistry, SchemeRegistry, create_app


@pytest.fixture
def schemes() -> SchemeRegistry:
    """The built-in scheme registry."""
    return DEFAULT_SCHEMES


@pytest.fixture
def registry() -> ConnectionRegistry:
    """Create a connection registry with a couple of named connections."""
    registry = ConnectionRegistry()
    registry.register("warehouse", "pg://analyst:s3cret@db.internal/warehouse?sslmode=require")
    registry.register("local", "sqlite:local.sqlite3")
    return registry


@pytest.fixture
def app(registry: ConnectionRegistry):
    """Create a test app with the fixture registry."""
    return create_app(registry)


@pytest.fixture
def client(app) -> TestClient:
    """Create a test client."""
    return TestClient(app)
