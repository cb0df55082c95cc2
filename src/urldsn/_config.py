"""YAML connection configuration loading."""

import logging
from pathlib import Path

import yaml

from ._connections import ConnectionRegistry
from ._schemes import DEFAULT_SCHEMES, SchemeRegistry

logger = logging.getLogger(__name__)


def load_connections_from_yaml(
    path: str | Path, schemes: SchemeRegistry = DEFAULT_SCHEMES
) -> ConnectionRegistry:
    """Load a ConnectionRegistry from a YAML config file.

    Expected format:
        connections:
          name:
            url: "pg://user:pass@localhost/db?sslmode=disable"

    URLs are parsed while loading, so bad schemes or malformed URLs fail here
    rather than on first use.
    """
    with open(path) as f:
        config = yaml.safe_load(f)

    if not isinstance(config, dict) or "connections" not in config:
        raise ValueError("Config file must have a top-level 'connections' key")

    registry = ConnectionRegistry(schemes)

    for name, conn_config in (config["connections"] or {}).items():
        if not isinstance(conn_config, dict) or "url" not in conn_config:
            raise ValueError(f"Connection '{name}' is missing required 'url' key")
        unknown = set(conn_config) - {"url"}
        if unknown:
            raise ValueError(f"Connection '{name}' has unknown keys: {', '.join(sorted(unknown))}")
        registry.register(name, conn_config["url"])

    logger.info("Loaded %d connection(s) from %s", len(registry.list_connections()), path)
    return registry
