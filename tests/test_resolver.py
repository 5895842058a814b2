from pokedex.core.models import Dataset, Move, Pokemon, PokemonType
from pokedex.core.resolver import MoveKind, Pokedex


def _names(pokemons):
    return [p.name for p in pokemons]


def test_resolve_type_is_case_insensitive(pokedex):
    grass = pokedex.resolve_type("grass")
    assert grass is not None
    assert grass.name == "Grass"
    assert pokedex.resolve_type("Ghost") is None


def test_resolve_move_and_pokemon(pokedex):
    assert pokedex.resolve_move("EMBER").id == 209
    assert pokedex.resolve_move("Hyper Beam") is None
    assert _names(pokedex.resolve_pokemon("charizard")) == ["Charizard"]
    assert pokedex.resolve_pokemon("MissingNo") == []


def test_pokemons_of_type_uses_dataset_order(pokedex):
    assert _names(pokedex.pokemons_of_type("GRASS")) == ["Bulbasaur", "Ivysaur"]
    assert pokedex.pokemons_of_type("Dragon") == []


def test_fast_move_usage(pokedex):
    usage = pokedex.move_users("tackle")
    assert usage.kind is MoveKind.FAST
    assert _names(usage.pokemons) == ["Bulbasaur", "Squirtle"]


def test_special_move_usage(pokedex):
    usage = pokedex.move_users("Flamethrower")
    assert usage.kind is MoveKind.SPECIAL
    assert _names(usage.pokemons) == ["Charmander", "Charizard"]


def test_unused_move_defaults_to_special(pokedex):
    usage = pokedex.move_users("Dragon Pulse")
    assert usage.kind is MoveKind.SPECIAL
    assert usage.pokemons == []


def test_fast_classification_wins_over_special():
    both = Pokemon(name="Mixed", fast_attacks=("Struggle",))
    other = Pokemon(name="Other", special_attacks=("Struggle",))
    dex = Pokedex(Dataset(pokemons=(other, both)))
    usage = dex.move_users("struggle")
    assert usage.kind is MoveKind.FAST
    assert usage.pokemons == [both]
    assert MoveKind.FAST.value == "Fast Attack"


def test_duplicate_names_resolve_to_first_match():
    first = PokemonType(name="Fire", effective_against=("Grass",))
    second = PokemonType(name="FIRE")
    dex = Pokedex(Dataset(types=(first, second), moves=(Move(id=1, name="Ember"), Move(id=2, name="ember"))))
    assert dex.resolve_type("fire") is first
    assert dex.resolve_move("EMBER").id == 1


def test_facade_sort_and_reverse(pokedex):
    fire = pokedex.filter_pokemons("type", "fire")
    ordered = pokedex.sort_pokemons(fire, "weight")
    assert _names(ordered) == ["Charmander", "Charizard"]
    assert _names(pokedex.reverse(ordered)) == ["Charizard", "Charmander"]


def test_render_dispatches_on_entity(pokedex):
    assert pokedex.render(pokedex.resolve_type("fire")).startswith("Pokemon Type Fire:")
    assert pokedex.render(pokedex.resolve_move("ember")).startswith("Pokemon Move Fast Attack Ember:")
    assert pokedex.render(pokedex.resolve_pokemon("squirtle")).startswith("Squirtle:\n")
    assert pokedex.render([]) == ""


def test_facade_reverse_on_dataset_sequence(pokedex):
    assert pokedex.reverse(pokedex.reverse(pokedex.pokemons)) == list(pokedex.pokemons)
    assert _names(pokedex.reverse(pokedex.pokemons))[0] == "Charizard"
