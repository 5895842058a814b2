#!/usr/bin/env python3
"""
Start the PokéDex HTTP service.

Usage:
    python scripts/run_server.py --data /path/to/data.json --port 8080

No snapshot ships with the repository. Without --data the service reads
POKEDEX_DATA_PATH, falling back to data/data.json at the repository root,
and refuses to start when that file is missing.
"""

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pokedex.api.server import create_app  # noqa: E402
from pokedex.config import ServiceConfig  # noqa: E402
from pokedex.data.loader import load_pokedex  # noqa: E402


def parse_args(config: ServiceConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="PokéDex query service")
    parser.add_argument("--data", type=Path, default=config.data_path, help="Path to data.json")
    parser.add_argument("--host", default=config.host)
    parser.add_argument("--port", type=int, default=config.port)
    parser.add_argument("--log-level", default=config.log_level)
    return parser.parse_args()


def main():
    config = ServiceConfig.from_env()
    args = parse_args(config)
    config.data_path = args.data
    config.host = args.host
    config.port = args.port
    config.log_level = args.log_level.upper()

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logger = logging.getLogger(__name__)

    pokedex = load_pokedex(config.data_path)
    app = create_app(pokedex=pokedex, config=config)

    logger.info("starting server on %s:%d", config.host, config.port)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
