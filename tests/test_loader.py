import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from pokedex.data.loader import DataRepository, DatasetError, load_pokedex

DATA_PATH = Path(__file__).parent / "data" / "data.json"


def test_loads_fixture_snapshot():
    dataset = DataRepository(DATA_PATH).dataset
    assert len(dataset.pokemons) == 5
    assert len(dataset.types) == 5
    assert len(dataset.moves) == 4

    bulbasaur = dataset.pokemons[0]
    assert bulbasaur.type_i == ("Grass",)
    assert bulbasaur.type_ii == ("Poison",)
    assert bulbasaur.candy.family_id == 1
    assert bulbasaur.next_evolution_requirements.amount == 25
    assert [e.name for e in bulbasaur.next_evolutions] == ["Ivysaur", "Venusaur"]
    assert bulbasaur.capture_rate == pytest.approx(0.16)
    assert bulbasaur.buddy_distance_needed == 3


def test_optional_fields_default_to_empty():
    squirtle = load_pokedex(DATA_PATH).resolve_pokemon("Squirtle")[0]
    assert squirtle.type_ii == ()
    assert squirtle.next_evolutions == ()
    assert squirtle.next_evolution_requirements is None


def test_dataset_is_immutable():
    dataset = DataRepository(DATA_PATH).dataset
    with pytest.raises(ValidationError):
        dataset.pokemons[0].name = "Renamed"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        DataRepository(tmp_path / "data.json").dataset


def test_invalid_json(tmp_path):
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(DatasetError):
        DataRepository(path).dataset


def test_schema_mismatch(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(json.dumps({"pokemons": [{"Name": "Broken", "BaseAttack": "strong"}]}), encoding="utf-8")
    with pytest.raises(DatasetError):
        load_pokedex(path)
