#!/usr/bin/env python3
"""
Neon City Portfolio API server.

Usage:
    python main.py [--host HOST] [--port PORT] [--reload]
"""

import argparse
import logging

import uvicorn

from neoncity.config import load_config

logger = logging.getLogger(__name__)


def main():
    """Run the API server."""
    config = load_config()

    parser = argparse.ArgumentParser(description="Neon City Portfolio API")
    parser.add_argument("--host", default=config.server.host, help="Bind address (default: %(default)s)")
    parser.add_argument("--port", type=int, default=config.server.port, help="Port (default: %(default)s)")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = parser.parse_args()

    logging.basicConfig(
        level=config.server.log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger.info(f"Starting Neon City Portfolio API on {args.host}:{args.port}...")
    logger.info(f"GitHub account: {config.github.username}")
    logger.info(f"CV resource: {config.cv_path}")

    uvicorn.run("api.main:app", host=args.host, port=args.port, reload=args.reload)


if __name__ == "__main__":
    main()
