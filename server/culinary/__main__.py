"""
Run the Culinary Haven recipe service.

Usage:
    python -m culinary
    python -m culinary --port 8080 --reload
    CULINARY_RECIPES_FILE=./my-recipes.json python -m culinary
"""

import argparse
from typing import Optional, Sequence

import uvicorn

from culinary.config import get_settings

LOG_LEVELS = ["debug", "info", "warning", "error", "critical"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="culinary",
        description="Recipe listing, suggestion and shopping list service",
    )
    parser.add_argument("--host", help="Bind address (default: CULINARY_HOST)")
    parser.add_argument("--port", type=int, help="Bind port (default: CULINARY_PORT)")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="uvicorn log level (default: CULINARY_LOG_LEVEL)",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None):
    """Parse arguments, fall back to settings, start uvicorn."""
    args = build_parser().parse_args(argv)
    settings = get_settings()

    host = args.host or settings.host
    port = args.port or settings.port

    print(f"Culinary Haven on http://{host}:{port} (docs at /docs, Ctrl+C to stop)")
    uvicorn.run(
        "culinary.main:app",
        host=host,
        port=port,
        reload=args.reload or settings.debug,
        log_level=args.log_level or settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
