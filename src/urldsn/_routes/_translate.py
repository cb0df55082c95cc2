"""URL parsing and translation routes."""

from fastapi import APIRouter, Depends

from .._models import (
    DsnResponse,
    ParseResponse,
    SchemeInfo,
    SchemesResponse,
    UrlRequest,
    success_envelope,
)
from .._parser import parse
from .._schemes import SchemeRegistry
from .._translate import generate
from ._dependencies import get_schemes

router = APIRouter(tags=["translate"])


@router.get("/schemes")
def list_schemes(schemes: SchemeRegistry = Depends(get_schemes)) -> dict:
    """List canonical drivers with their aliases."""
    infos = [
        SchemeInfo(
            driver=d.name,
            description=d.description,
            aliases=list(d.aliases),
            transports=list(d.transports),
            default_port=d.default_port,
        )
        for d in schemes.descriptors()
    ]
    return success_envelope(SchemesResponse(schemes=infos))


@router.post("/parse")
def parse_url(body: UrlRequest, schemes: SchemeRegistry = Depends(get_schemes)) -> dict:
    """Break a URL into its components."""
    parsed = parse(body.url, schemes)
    return success_envelope(
        ParseResponse(
            scheme=parsed.scheme,
            driver=parsed.driver,
            modifier=parsed.modifier,
            user=parsed.user,
            has_password=parsed.password is not None,
            host=parsed.host,
            port=parsed.port,
            segments=list(parsed.segments),
            query=dict(parsed.query),
            fragment=parsed.fragment,
            opaque=parsed.opaque,
            redacted=parsed.redacted(),
        )
    )


@router.post("/dsn")
def translate_url(body: UrlRequest, schemes: SchemeRegistry = Depends(get_schemes)) -> dict:
    """Translate a URL into its driver-native DSN."""
    spec = generate(parse(body.url, schemes), schemes)
    return success_envelope(
        DsnResponse(driver=spec.driver, transport=spec.transport.value, dsn=spec.dsn)
    )
