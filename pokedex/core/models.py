"""Shared models for the in-memory Pokédex dataset.

Field aliases follow the keys of the JSON snapshot, so a record can be
validated straight from ``json.load`` output. Entities only hold names of the
entities they refer to; lookups across collections go through the resolver.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PokemonType(_Record):
    """Elemental type and its effectiveness relationships."""

    name: str
    # 2x damage against these types
    effective_against: Tuple[str, ...] = Field(default=(), alias="effectiveAgainst")
    # 0.5x damage against these types
    weak_against: Tuple[str, ...] = Field(default=(), alias="weakAgainst")


class Candy(_Record):
    name: str = Field(default="", alias="Name")
    family_id: int = Field(default=0, alias="FamilyID")


class EvolutionRequirements(_Record):
    amount: int = Field(default=0, alias="Amount")
    family: int = Field(default=0, alias="Family")
    name: str = Field(default="", alias="Name")


class EvolutionRef(_Record):
    number: str = Field(default="", alias="Number")
    name: str = Field(default="", alias="Name")


class Pokemon(_Record):
    """One species record."""

    number: str = Field(default="", alias="Number")
    name: str = Field(default="", alias="Name")
    classification: str = Field(default="", alias="Classification")
    type_i: Tuple[str, ...] = Field(default=(), alias="Type I")
    type_ii: Tuple[str, ...] = Field(default=(), alias="Type II")
    weaknesses: Tuple[str, ...] = Field(default=(), alias="Weaknesses")
    fast_attacks: Tuple[str, ...] = Field(default=(), alias="Fast Attack(s)")
    special_attacks: Tuple[str, ...] = Field(default=(), alias="Special Attack(s)")
    weight: str = Field(default="", alias="Weight")
    height: str = Field(default="", alias="Height")
    candy: Candy = Field(default_factory=Candy, alias="Candy")
    next_evolution_requirements: Optional[EvolutionRequirements] = Field(
        default=None, alias="Next Evolution Requirements"
    )
    next_evolutions: Tuple[EvolutionRef, ...] = Field(default=(), alias="Next evolution(s)")
    previous_evolutions: Tuple[EvolutionRef, ...] = Field(
        default=(), alias="Previous evolution(s)"
    )
    base_attack: int = Field(default=0, alias="BaseAttack")
    base_defense: int = Field(default=0, alias="BaseDefense")
    base_stamina: int = Field(default=0, alias="BaseStamina")
    capture_rate: float = Field(default=0.0, alias="CaptureRate")
    flee_rate: float = Field(default=0.0, alias="FleeRate")
    buddy_distance_needed: int = Field(default=0, alias="BuddyDistanceNeeded")


class Move(_Record):
    """Attack information. Whether it is fast or special is derived, not stored."""

    id: int = 0
    name: str = ""
    type: str = ""
    # damage the target takes
    damage: int = 0
    energy: int = 0
    # damage per second
    dps: float = 0.0
    duration: int = 0


class Dataset(_Record):
    """Whole snapshot as read from data.json."""

    types: Tuple[PokemonType, ...] = ()
    pokemons: Tuple[Pokemon, ...] = ()
    moves: Tuple[Move, ...] = ()
