import random
from dataclasses import replace

from pokearena.battle.factory import battler_from_species, learnable_moves
from pokearena.data.loader import find_by_name
from pokearena.data.moves import all_moves


def test_battler_starts_at_full_health():
    b = battler_from_species(find_by_name("Bulbasaur"), 20, 4, random.Random(1))
    assert b.current_hp == b.max_hp
    assert b.types == ("grass", "poison")
    assert b.status == "none"


def test_moves_are_distinct_and_from_pool():
    sp = find_by_name("Garchomp")
    for seed in range(20):
        b = battler_from_species(sp, 60, 4, random.Random(seed))
        names = [m.name for m in b.moves]
        assert len(names) == len(set(names)) == 4
        assert set(names) <= set(sp.move_pool)


def test_fewer_available_than_requested():
    sp = find_by_name("Pikachu")
    b = battler_from_species(sp, 30, 10, random.Random(2))
    assert len(b.moves) == len(learnable_moves(sp)) == 4


def test_pool_without_catalog_moves_gives_no_moves():
    sp = replace(find_by_name("Pikachu"), move_pool=("Splash",))
    b = battler_from_species(sp, 30, 4, random.Random(3))
    assert b.moves == []


def test_catalog_untouched():
    before = all_moves()
    b = battler_from_species(find_by_name("Mewtwo"), 70, 4, random.Random(4))
    assert b.moves
    assert all_moves() == before
