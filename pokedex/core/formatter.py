"""Plain-text rendering of Pokémon, types and moves."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List

from .models import Move, Pokemon, PokemonType

if TYPE_CHECKING:
    from .resolver import MoveUsage, Pokedex


HELP_TEXT = (
    "-----PokéDex API Help-----\n\n"
    "Display this help message: / or /help\n\n"
    "---Listing Pokemons, Types and Moves---\n\n"
    "List all pokemons, moves and types: /list\n"
    "List all pokemons: /list?pokemons\n"
    "List all types: /list?types\n"
    "List all moves: /list?moves\n"
    "List all pokemons for a given type: /list?type={type}\n"
    "Get valid attributes to sort Pokemons by: /list?type={type}&sortby\n"
    "List all pokemons for a given type and sort them by an attribute: "
    "/list?type={type}&sortby={attribute}\n"
    "List all pokemons for a given type and sort them by an attribute in reversed order: "
    "/list?type={type}&sortby={attribute}&reversed\n"
    "\n---Getting information about a Pokemon, Type or Move---\n\n"
    "/{resourceName}\n"
)


def _block(title: str, items: Iterable[str], indent: str) -> List[str]:
    return [f"\n{indent}{title}:"] + [f"\n{indent}\t{item}" for item in items]


def format_pokemon(pokemon: Pokemon) -> str:
    """
    Render one Pokémon as a tab-indented block.

    Type II, the evolution blocks and the evolution requirements only appear
    when the record has data for them.
    """
    parts = [
        f"{pokemon.name}:",
        f"\n\tNumber: {pokemon.number}",
        f"\n\tType I: {', '.join(pokemon.type_i)}",
    ]
    if pokemon.type_ii:
        parts.append(f"\n\tType II: {', '.join(pokemon.type_ii)}")
    parts += [
        f"\n\tWeight: {pokemon.weight}",
        f"\n\tHeight: {pokemon.height}",
        f"\n\tBase Attack: {pokemon.base_attack}",
        f"\n\tBase Defense: {pokemon.base_defense}",
        f"\n\tBase Stamina: {pokemon.base_stamina}",
    ]
    parts += _block("Fast Attack(s)", pokemon.fast_attacks, "\t")
    if pokemon.previous_evolutions:
        parts += _block("Previous Evolution(s)", (e.name for e in pokemon.previous_evolutions), "\t")
    if pokemon.next_evolutions:
        parts += _block("Next Evolution(s)", (e.name for e in pokemon.next_evolutions), "\t")
        requirements = pokemon.next_evolution_requirements
        parts.append("\n\tNext Evolution Requirements:")
        parts.append(f"\n\t\tAmount: {requirements.amount if requirements else 0}")
        parts.append(f"\n\t\tName: {requirements.name if requirements else ''}")
    parts += _block("Special Attack(s)", pokemon.special_attacks, "\t")
    return "".join(parts)


def format_pokemons(pokemons: Iterable[Pokemon]) -> str:
    return "".join(format_pokemon(pokemon) + "\n" for pokemon in pokemons)


def _bullets(items: Iterable[str]) -> str:
    return "".join(f"\n- {item}" for item in items)


def format_type(typ: PokemonType, examples: Iterable[Pokemon]) -> str:
    return (
        f"Pokemon Type {typ.name}:"
        f"\nEffective Against:{_bullets(typ.effective_against)}"
        f"\nWeak Against:{_bullets(typ.weak_against)}"
        f"\nExample Pokemons: {_bullets(p.name for p in examples)}"
        "\n"
    )


def format_move(move: Move, usage: MoveUsage) -> str:
    return (
        f"Pokemon Move {usage.kind.value} {move.name}:"
        f"\nNumber: {move.id}"
        f"\nDamage: {move.damage}"
        f"\nEnergy: {move.energy}"
        f"\nDps: {move.dps:.2f}"
        f"\nDuration: {move.duration}"
        f"\nPokemons with this move: {_bullets(p.name for p in usage.pokemons)}"
        "\n"
    )


def format_types(pokedex: Pokedex) -> str:
    return "".join(pokedex.render(typ) + "\n" for typ in pokedex.types)


def format_moves(pokedex: Pokedex) -> str:
    return "".join(pokedex.render(move) + "\n" for move in pokedex.moves)


def format_everything(pokedex: Pokedex) -> str:
    return (
        "-----Pokemons-----\n"
        + format_pokemons(pokedex.pokemons)
        + "-----Types-----\n"
        + format_types(pokedex)
        + "-----Moves-----\n"
        + format_moves(pokedex)
    )
