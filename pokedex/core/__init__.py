"""Query engine: filters, sort keys, cross references and text rendering."""

from .filters import FILTER_CRITERIA, filter_pokemons
from .models import Dataset, Move, Pokemon, PokemonType
from .resolver import MoveKind, MoveUsage, Pokedex
from .sorting import SORT_KEYS, InvalidSortKeyError, parse_measurement, reverse_pokemons, sort_pokemons

__all__ = [
    "Dataset",
    "FILTER_CRITERIA",
    "InvalidSortKeyError",
    "Move",
    "MoveKind",
    "MoveUsage",
    "Pokedex",
    "Pokemon",
    "PokemonType",
    "SORT_KEYS",
    "filter_pokemons",
    "parse_measurement",
    "reverse_pokemons",
    "sort_pokemons",
]
