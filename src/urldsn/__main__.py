"""CLI entry point for urldsn."""

import argparse
import logging
import sys

import uvicorn

from ._app import create_app
from ._config import load_connections_from_yaml
from ._connections import ConnectionRegistry
from ._errors import UrlDsnError
from ._translate import translate


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="urldsn REST API server")
    parser.add_argument(
        "--dsn",
        metavar="URL",
        help="Print the driver, transport and DSN for URL, then exit.",
    )
    parser.add_argument(
        "--connections",
        help="Path to connections YAML config file",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to listen on (default: 8000)",
    )
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--cors-origins",
        nargs="*",
        help="Allowed CORS origins",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.dsn:
        try:
            spec = translate(args.dsn)
        except UrlDsnError as exc:
            print(f"error: {exc}", file=sys.stderr)
            sys.exit(1)
        print(f"{spec.driver} {spec.transport.value} {spec.dsn}")
        return

    if args.connections:
        registry = load_connections_from_yaml(args.connections)
    else:
        registry = ConnectionRegistry()

    app = create_app(registry, cors_origins=args.cors_origins)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
