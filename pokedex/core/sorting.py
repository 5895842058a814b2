"""Sort keys over Pokémon records."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Iterable, List, Sequence

from .models import Pokemon

logger = logging.getLogger(__name__)

WEIGHT_SUFFIX = " kg"
HEIGHT_SUFFIX = " m"


class InvalidSortKeyError(ValueError):
    """Raised when a sort key is not part of the vocabulary."""

    def __init__(self, key: str):
        super().__init__(f"Unknown sort key '{key}'")
        self.key = key


def parse_measurement(text: str, suffix: str) -> float:
    """
    Parse a measurement such as ``"6,9 kg"`` or ``"0,71 m"``.

    The dataset uses a comma as decimal separator. Anything that does not
    parse after stripping the unit becomes 0.0.
    """
    raw = text.replace(",", ".", 1).replace(suffix, "", 1)
    try:
        return float(raw)
    except ValueError:
        return 0.0


# (key function, label used in the log line)
_SORTERS: Dict[str, tuple[Callable[[Pokemon], Any], str]] = {
    "number": (lambda p: p.number, "number"),
    "id": (lambda p: p.number, "number"),
    "name": (lambda p: p.name, "name"),
    "weight": (lambda p: parse_measurement(p.weight, WEIGHT_SUFFIX), "weight"),
    "height": (lambda p: parse_measurement(p.height, HEIGHT_SUFFIX), "height"),
    "baseattack": (lambda p: p.base_attack, "base attack"),
    "basedefence": (lambda p: p.base_defense, "base defense"),
    "basedefense": (lambda p: p.base_defense, "base defense"),
    "basestamina": (lambda p: p.base_stamina, "base stamina"),
}

SORT_KEYS = tuple(_SORTERS)


def sort_pokemons(pokemons: Iterable[Pokemon], key: str) -> List[Pokemon]:
    """
    Return a new list ordered ascending by ``key`` (case-insensitive).

    Ties keep their input order. Raises InvalidSortKeyError for keys outside
    SORT_KEYS, even when ``pokemons`` is empty.
    """
    entry = _SORTERS.get(key.lower())
    if entry is None:
        raise InvalidSortKeyError(key)
    key_func, label = entry
    result = sorted(pokemons, key=key_func)
    logger.info("Sorted pokemons by %s.", label)
    return result


def reverse_pokemons(pokemons: Sequence[Pokemon]) -> List[Pokemon]:
    """
    Reverse ``pokemons``.

    A list is reversed in place and returned; any other sequence, such as the
    dataset tuples, is copied into a new reversed list.
    """
    if isinstance(pokemons, list):
        pokemons.reverse()
        return pokemons
    return list(reversed(pokemons))
