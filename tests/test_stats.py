from pokearena.battle.factory import derive_stat, derive_stats
from pokearena.data.loader import find_by_name, all_species, get_species, SpeciesNotFound
import pytest


def test_hp_formula_example():
    assert derive_stat(45, 50, is_hp=True) == 105


def test_non_hp_formula():
    assert derive_stat(50, 50) == 55
    assert derive_stat(90, 50) == 95


def test_stats_are_pure():
    sq = find_by_name("Squirtle")
    a = derive_stats(sq.base_stats, 50)
    b = derive_stats(sq.base_stats, 50)
    assert a == b == {"hp": 104, "atk": 53, "def": 70, "speed": 48}


def test_catalog_order_and_lookup():
    names = [s.name for s in all_species()]
    assert names[:4] == ["Bulbasaur", "Charmander", "Squirtle", "Pikachu"]
    assert len(names) == 10
    assert find_by_name("  pIkAcHu ").id == 25
    assert find_by_name("Missingno") is None
    assert get_species(150).name == "Mewtwo"
    with pytest.raises(SpeciesNotFound):
        get_species(9999)
