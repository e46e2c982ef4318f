"""Configuration schema for batch game simulations using msgspec."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import msgspec

PositiveInt = Annotated[int, msgspec.Meta(ge=1)]
PlayerName = Annotated[str, msgspec.Meta(min_length=1)]


class SimulationConfig(msgspec.Struct, forbid_unknown_fields=True):
    """
    TOML-backed configuration for batch trivia simulations.

    Defaults reproduce the classic driver: three players, a five-sided die and
    a one-in-nine chance of answering wrong.
    """

    players: Annotated[list[PlayerName], msgspec.Meta(min_length=2)] = (
        msgspec.field(default_factory=lambda: ["Chet", "Pat", "Sue"])
    )

    games: PositiveInt = 1
    # Game i is played with seed + i
    seed: int = 0
    max_turns_per_game: PositiveInt = 1000

    wrong_answer_odds: PositiveInt = 9
    die_sides: PositiveInt = 5

    @classmethod
    def from_toml(cls, path: str) -> SimulationConfig:
        """Load configuration from a TOML file path."""
        with Path(path).open("rb") as f:
            return msgspec.toml.decode(f.read(), type=cls)

    def seeds(self) -> range:
        return range(self.seed, self.seed + self.games)
