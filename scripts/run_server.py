"""Run the plan API with uvicorn using the configured host and port."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn

from fitplan.config import get_settings
from fitplan.logging_config import configure_logging


logger = logging.getLogger("scripts.run_server")


def parse_args() -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Serve the weekly fitness plan API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Serve on APP_HOST:APP_PORT from .env
  python scripts/run_server.py

  # Local development with auto-reload
  python scripts/run_server.py --host 127.0.0.1 --port 3000 --reload
        """
    )
    parser.add_argument("--host", default=settings.app_host, help="Interface to bind")
    parser.add_argument("--port", type=int, default=settings.app_port, help="Port to bind")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG regardless of LOG_LEVEL"
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging("DEBUG" if args.verbose else None)
    settings = get_settings()

    if not settings.ai_configured:
        logger.warning("ANTHROPIC_API_KEY is not set; all plans will use the fallback generator")

    logger.info("Starting plan API on http://%s:%d", args.host, args.port)
    uvicorn.run(
        "fitplan.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="debug" if args.verbose else settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
