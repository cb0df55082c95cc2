"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from ._connections import ConnectionRegistry
from ._errors import register_error_handlers
from ._routes import _connections, _health, _translate
from ._routes._dependencies import get_registry, get_schemes
from ._schemes import DEFAULT_SCHEMES, SchemeRegistry

logger = logging.getLogger(__name__)


def _make_lifespan(registry: ConnectionRegistry, schemes: SchemeRegistry):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan handler."""
        app.state.registry = registry
        app.state.schemes = schemes
        logger.info(
            "Serving %d scheme(s) and %d named connection(s)",
            len(schemes),
            len(registry.list_connections()),
        )
        yield

    return lifespan


def create_app(
    registry: ConnectionRegistry,
    schemes: SchemeRegistry = DEFAULT_SCHEMES,
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="urldsn REST API",
        description="Translate generic database URLs into driver-native DSNs",
        lifespan=_make_lifespan(registry, schemes),
    )

    # Set up dependency overrides
    app.dependency_overrides[get_registry] = lambda: registry
    app.dependency_overrides[get_schemes] = lambda: schemes

    # CORS (consumer configurable)
    if cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Register error handlers
    register_error_handlers(app)

    # Create /api/v1 router and register sub-routes
    api_v1 = APIRouter(prefix="/api/v1")
    api_v1.include_router(_health.router)
    api_v1.include_router(_translate.router)
    api_v1.include_router(_connections.router)

    # Mount the versioned API
    app.include_router(api_v1)

    return app
