"""Command-line interface for shobergen."""

import argparse
import sys

import uvicorn

from shobergen import __version__
from shobergen.config import get_settings
from shobergen.logging_config import configure_logging


def main(args: list[str] | None = None) -> int:
    """Run the shobergen API server.

    Args:
        args: Command-line arguments. If None, uses sys.argv[1:].

    Returns:
        Exit code (0 for success).
    """
    settings = get_settings()

    parser = argparse.ArgumentParser(
        prog="shobergen",
        description="Shobergen - genome codec and breeding engine API",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to bind to (default: {settings.port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    parsed = parser.parse_args(args)

    configure_logging(settings=settings)

    print(f"Starting shobergen API at http://{parsed.host}:{parsed.port}")
    print("Press Ctrl+C to stop")

    uvicorn.run(
        "shobergen.server.app:app",
        host=parsed.host,
        port=parsed.port,
        reload=parsed.reload,
        log_config=None,
    )

    return 0


if __name__ == "__main__":
    sys.exit(main())
