import pytest

from pokearena.cli import parse_command, CommandError, build_parser, apply_overrides


@pytest.mark.parametrize("line,expected", [
    ("list", ("list_all_pokemon", {})),
    ("info pikachu", ("get_pokemon_by_name", {"name": "pikachu"})),
    ("info pikachu 30", ("get_pokemon_by_name", {"name": "pikachu", "level": 30})),
    ("random", ("get_random_pokemon", {})),
    ("random 12", ("get_random_pokemon", {"level": 12})),
    ("battle Pikachu Squirtle", ("start_battle", {"pokemon1_name": "Pikachu", "pokemon2_name": "Squirtle"})),
    ("battle Pikachu Squirtle 50 40", ("start_battle", {"pokemon1_name": "Pikachu", "pokemon2_name": "Squirtle",
                                                        "pokemon1_level": 50, "pokemon2_level": 40})),
    ("attack Pikachu Thunder Shock", ("attack", {"attacker_name": "Pikachu", "move_name": "Thunder Shock"})),
    ('attack Pikachu "Thunder Shock"', ("attack", {"attacker_name": "Pikachu", "move_name": "Thunder Shock"})),
    ("status", ("get_battle_status", {})),
    ("types fire grass", ("get_type_effectiveness", {"attacking_type": "fire", "defending_type": "grass"})),
    ("types fire", ("get_type_effectiveness", {"attacking_type": "fire"})),
    ("", ("help", {})),
    ("QUIT", ("quit", {})),
])
def test_parse_command(line, expected):
    assert parse_command(line) == expected


@pytest.mark.parametrize("line", ["dance", "info", "battle Pikachu", "attack Pikachu", "random ten", "types"])
def test_parse_errors(line):
    with pytest.raises(CommandError):
        parse_command(line)


def test_serve_overrides(settings):
    ns = build_parser().parse_args(["serve", "--transport", "http", "--port", "8123"])
    apply_overrides(settings, ns)
    assert settings.data.transport == "http"
    assert settings.data.port == 8123


def test_play_seed():
    ns = build_parser().parse_args(["play", "--seed", "7"])
    assert ns.command == "play" and ns.seed == 7
