"""Predicate filters selecting Pokémon by type, name or move."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List

from .models import Pokemon

logger = logging.getLogger(__name__)


def includes_name(names: Iterable[str], value: str) -> bool:
    """Case-insensitive membership test."""
    wanted = value.lower()
    return any(name.lower() == wanted for name in names)


def _by_type(pokemon: Pokemon, value: str) -> bool:
    return includes_name(pokemon.type_i, value) or includes_name(pokemon.type_ii, value)


def _by_name(pokemon: Pokemon, value: str) -> bool:
    return pokemon.name.lower() == value.lower()


def _by_fast_attack(pokemon: Pokemon, value: str) -> bool:
    return includes_name(pokemon.fast_attacks, value)


def _by_special_attack(pokemon: Pokemon, value: str) -> bool:
    return includes_name(pokemon.special_attacks, value)


_PREDICATES: Dict[str, Callable[[Pokemon, str], bool]] = {
    "type": _by_type,
    "name": _by_name,
    "fastattack": _by_fast_attack,
    "specialattack": _by_special_attack,
}

FILTER_CRITERIA = tuple(_PREDICATES)


def filter_pokemons(pokemons: Iterable[Pokemon], criterion: str, value: str) -> List[Pokemon]:
    """
    Return the Pokémon matching ``criterion``, keeping their input order.

    An unknown criterion yields an empty list rather than an error.
    """
    predicate = _PREDICATES.get(criterion)
    if predicate is None:
        # TODO: decide whether an unknown criterion should become a usage error
        logger.debug("Unknown filter criterion %r, returning no pokemons", criterion)
        return []
    return [pokemon for pokemon in pokemons if predicate(pokemon, value)]
