"""Cross-reference lookups over one immutable Dataset."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Union

from . import formatter
from .filters import filter_pokemons
from .models import Dataset, Move, Pokemon, PokemonType
from .sorting import reverse_pokemons, sort_pokemons


class MoveKind(str, Enum):
    FAST = "Fast Attack"
    SPECIAL = "Special Attack"


@dataclass(frozen=True)
class MoveUsage:
    """Derived kind of a move and the Pokémon that know it."""

    kind: MoveKind
    pokemons: List[Pokemon]


Renderable = Union[Pokemon, PokemonType, Move, Sequence[Pokemon]]


class Pokedex:
    """
    Query facade over a loaded Dataset.

    The dataset is injected once and never modified; every method is a
    read-only scan, so one instance can serve concurrent requests.
    """

    def __init__(self, dataset: Dataset):
        self.dataset = dataset

    @property
    def pokemons(self) -> Sequence[Pokemon]:
        return self.dataset.pokemons

    @property
    def types(self) -> Sequence[PokemonType]:
        return self.dataset.types

    @property
    def moves(self) -> Sequence[Move]:
        return self.dataset.moves

    # --- filters and ordering -------------------------------------------

    def filter_pokemons(self, criterion: str, value: str) -> List[Pokemon]:
        return filter_pokemons(self.dataset.pokemons, criterion, value)

    def sort_pokemons(self, pokemons: Iterable[Pokemon], key: str) -> List[Pokemon]:
        return sort_pokemons(pokemons, key)

    def reverse(self, pokemons: Sequence[Pokemon]) -> List[Pokemon]:
        return reverse_pokemons(pokemons)

    # --- single entity lookups ------------------------------------------

    def resolve_type(self, name: str) -> Optional[PokemonType]:
        wanted = name.lower()
        return next((typ for typ in self.dataset.types if typ.name.lower() == wanted), None)

    def resolve_move(self, name: str) -> Optional[Move]:
        wanted = name.lower()
        return next((move for move in self.dataset.moves if move.name.lower() == wanted), None)

    def resolve_pokemon(self, name: str) -> List[Pokemon]:
        """All Pokémon with this name; duplicates in the dataset are kept."""
        return self.filter_pokemons("name", name)

    # --- cross references -----------------------------------------------

    def pokemons_of_type(self, type_name: str) -> List[Pokemon]:
        return self.filter_pokemons("type", type_name)

    def move_users(self, move_name: str) -> MoveUsage:
        """
        Classify a move and collect its users.

        A move is a fast attack as soon as one Pokémon lists it that way;
        otherwise it is a special attack, even when nobody knows it.
        """
        users = self.filter_pokemons("fastattack", move_name)
        if users:
            return MoveUsage(MoveKind.FAST, users)
        return MoveUsage(MoveKind.SPECIAL, self.filter_pokemons("specialattack", move_name))

    # --- rendering ------------------------------------------------------

    def render(self, entity: Renderable) -> str:
        if isinstance(entity, Pokemon):
            return formatter.format_pokemon(entity)
        if isinstance(entity, PokemonType):
            return formatter.format_type(entity, self.pokemons_of_type(entity.name))
        if isinstance(entity, Move):
            return formatter.format_move(entity, self.move_users(entity.name))
        return formatter.format_pokemons(entity)
