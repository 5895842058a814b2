from pathlib import Path

import pytest

from pokedex.data.loader import load_pokedex

DATA_PATH = Path(__file__).parent / "data" / "data.json"


@pytest.fixture
def pokedex():
    return load_pokedex(DATA_PATH)


@pytest.fixture
def pokemons(pokedex):
    return list(pokedex.pokemons)
