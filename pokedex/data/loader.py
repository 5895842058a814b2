"""Load the Pokédex snapshot (types, pokemons, moves) from data.json."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

from pokedex.config import DEFAULT_DATA_PATH
from pokedex.core.models import Dataset
from pokedex.core.resolver import Pokedex

logger = logging.getLogger(__name__)


class DatasetError(RuntimeError):
    """The snapshot exists but could not be decoded into a Dataset."""


class DataRepository:
    """Reads one JSON snapshot and keeps the validated Dataset."""

    def __init__(self, data_path: Optional[Path] = None):
        self.data_path = Path(data_path) if data_path else DEFAULT_DATA_PATH
        self._dataset: Optional[Dataset] = None

    @property
    def dataset(self) -> Dataset:
        if self._dataset is None:
            self._dataset = self._parse(self._load_json())
            logger.info(
                "Loaded %d pokemons, %d types and %d moves",
                len(self._dataset.pokemons),
                len(self._dataset.types),
                len(self._dataset.moves),
            )
        return self._dataset

    def _load_json(self) -> Dict[str, Any]:
        path = self.data_path
        if not path.exists():
            raise FileNotFoundError(
                f"Required data file '{path.name}' not found in {path.parent}. "
                "Point POKEDEX_DATA_PATH at a Pokédex snapshot."
            )
        with path.open("r", encoding="utf-8") as handle:
            try:
                payload = json.load(handle)
            except json.JSONDecodeError as exc:
                raise DatasetError(f"{path} is not valid JSON: {exc}") from exc
        logger.info("Successfully read %s", path.name)
        return payload

    def _parse(self, payload: Dict[str, Any]) -> Dataset:
        try:
            return Dataset.model_validate(payload)
        except ValidationError as exc:
            raise DatasetError(f"{self.data_path} does not match the Pokédex schema: {exc}") from exc


def load_pokedex(data_path: Optional[Path] = None) -> Pokedex:
    """Read the snapshot once and wrap it in a Pokedex."""
    return Pokedex(DataRepository(data_path).dataset)
