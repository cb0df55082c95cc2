"""URL to DSN translation pipeline."""

import logging

from ._generators import GENERATORS
from ._models import ConnectionSpec, ParsedURL
from ._parser import parse
from ._paths import normalize
from ._schemes import DEFAULT_SCHEMES, SchemeRegistry

logger = logging.getLogger(__name__)


def generate(parsed: ParsedURL, schemes: SchemeRegistry = DEFAULT_SCHEMES) -> ConnectionSpec:
    """Format a parsed URL as its driver's native connection string."""
    descriptor = schemes.resolve(parsed.driver)
    location = normalize(parsed, descriptor)
    generator = GENERATORS.get(descriptor.generator)
    if generator is None:
        raise RuntimeError(
            f"No generator '{descriptor.generator}' for driver '{descriptor.name}'"
        )
    spec = generator(parsed, location, descriptor)
    logger.debug("Generated %s DSN over %s", spec.driver, spec.transport.value)
    return spec


def translate(raw: str, schemes: SchemeRegistry = DEFAULT_SCHEMES) -> ConnectionSpec:
    """Parse a generic URL and generate its driver-native DSN."""
    return generate(parse(raw, schemes), schemes)
