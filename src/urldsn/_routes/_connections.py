"""Named connection routes."""

from fastapi import APIRouter, Depends

from .._connections import ConnectionRegistry
from .._errors import connection_not_found
from .._models import ConnectionInfo, ConnectionsResponse, DsnResponse, success_envelope
from ._dependencies import get_registry

router = APIRouter(prefix="/connections", tags=["connections"])


@router.get("")
def list_connections(registry: ConnectionRegistry = Depends(get_registry)) -> dict:
    """List named connections with redacted URLs."""
    infos = []
    for name in registry.list_connections():
        parsed = registry.get_parsed(name)
        infos.append(ConnectionInfo(name=name, driver=parsed.driver, url=parsed.redacted()))
    return success_envelope(ConnectionsResponse(connections=infos))


@router.get("/{name}/dsn")
def connection_dsn(name: str, registry: ConnectionRegistry = Depends(get_registry)) -> dict:
    """Generate the driver-native DSN for a named connection."""
    if not registry.has_connection(name):
        raise connection_not_found(name)
    spec = registry.spec(name)
    return success_envelope(
        DsnResponse(driver=spec.driver, transport=spec.transport.value, dsn=spec.dsn)
    )
