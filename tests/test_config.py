from pathlib import Path

import msgspec
import pytest

from trivia_simulator.simulation.config import SimulationConfig


def write_toml(tmp_path: Path, text: str) -> str:
    path = tmp_path / "sim.toml"
    path.write_text(text)
    return str(path)


def test_defaults_match_classic_driver():
    config = SimulationConfig()

    assert config.players == ["Chet", "Pat", "Sue"]
    assert config.games == 1
    assert config.wrong_answer_odds == 9
    assert config.die_sides == 5


def test_from_toml(tmp_path: Path):
    path = write_toml(
        tmp_path,
        """
players = ["Ann", "Ben"]
games = 4
seed = 10
max_turns_per_game = 200
""",
    )

    config = SimulationConfig.from_toml(path)

    assert config.players == ["Ann", "Ben"]
    assert config.max_turns_per_game == 200
    assert list(config.seeds()) == [10, 11, 12, 13]
    assert config.die_sides == 5


def test_example_config_loads():
    example = Path(__file__).parent.parent / "configs" / "example.toml"

    config = SimulationConfig.from_toml(str(example))

    assert config.games == 20


@pytest.mark.parametrize(
    "text",
    [
        'players = ["Solo"]',
        'players = ["", "Bob"]',
        "games = 0",
        "wrong_answer_odds = 0",
        "die_sides = -2",
        "board_size = 20",
    ],
)
def test_invalid_config_is_rejected(tmp_path: Path, text: str):
    path = write_toml(tmp_path, text)

    with pytest.raises(msgspec.ValidationError):
        SimulationConfig.from_toml(path)
