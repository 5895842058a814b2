"""
Service configuration.

Usage:
    from pokedex.config import ServiceConfig

    # Defaults, overridden by POKEDEX_* environment variables
    config = ServiceConfig.from_env()
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[1] / "data" / "data.json"


@dataclass
class ServiceConfig:
    """Settings for the HTTP service."""

    data_path: Path = field(default_factory=lambda: DEFAULT_DATA_PATH)
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        env = os.environ if environ is None else environ
        config = cls()
        if env.get("POKEDEX_DATA_PATH"):
            config.data_path = Path(env["POKEDEX_DATA_PATH"])
        if env.get("POKEDEX_HOST"):
            config.host = env["POKEDEX_HOST"]
        if env.get("POKEDEX_PORT"):
            config.port = int(env["POKEDEX_PORT"])
        if env.get("POKEDEX_LOG_LEVEL"):
            config.log_level = env["POKEDEX_LOG_LEVEL"].upper()
        return config
