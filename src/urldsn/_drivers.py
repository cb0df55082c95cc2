"""Open facade: hand generated DSNs to registered driver constructors."""

import logging
from collections.abc import Callable
from typing import Any

from ._errors import DriverNotRegisteredError, UnknownSchemeError
from ._schemes import DEFAULT_SCHEMES, SchemeRegistry
from ._translate import translate

logger = logging.getLogger(__name__)

Constructor = Callable[[str], Any]


class DriverRegistry:
    """Registry of connection constructors keyed by canonical driver name."""

    def __init__(self, schemes: SchemeRegistry = DEFAULT_SCHEMES):
        self._schemes = schemes
        self._constructors: dict[str, Constructor] = {}

    @property
    def schemes(self) -> SchemeRegistry:
        return self._schemes

    def register(self, driver: str, constructor: Constructor) -> None:
        """Register a constructor called with the DSN string.

        Args:
            driver: Canonical driver name or any of its aliases
            constructor: Callable accepting a DSN and returning a connection
        """
        name = self._schemes.resolve(driver).name
        self._constructors[name] = constructor

    def is_registered(self, driver: str) -> bool:
        """Whether a constructor is registered for the driver or alias."""
        try:
            name = self._schemes.resolve(driver).name
        except UnknownSchemeError:
            return False
        return name in self._constructors

    def list_drivers(self) -> list[str]:
        """Canonical names with a registered constructor."""
        return list(self._constructors)

    def open(self, raw: str) -> Any:
        """Translate ``raw`` and open it with the driver's constructor.

        Exactly one attempt is made; errors raised by the constructor
        propagate unchanged.
        """
        spec = translate(raw, self._schemes)
        constructor = self._constructors.get(spec.driver)
        if constructor is None:
            raise DriverNotRegisteredError(spec.driver)
        logger.info("Opening %s connection over %s", spec.driver, spec.transport.value)
        return constructor(spec.dsn)
