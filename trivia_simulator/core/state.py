from dataclasses import dataclass
from typing_extensions import override


@dataclass(slots=True, eq=False)
class Player:
    name: str
    ordinal: int
    location: int = 0

    @property
    def repr(self) -> str:
        return f"{self.ordinal}:{self.name}"

    # Location is play state, not identity
    @override
    def __eq__(self, other: object):
        if not isinstance(other, Player):
            return NotImplemented
        return self.name == other.name and self.ordinal == other.ordinal

    @override
    def __hash__(self):
        return hash((self.name, self.ordinal))


@dataclass(slots=True)
class LogContext:
    """Per-engine values that the logging filter stamps onto every record."""

    engine_id: int
    total_turn: int = 0
    turn_log_count: int = 0
    current_player_repr: str = "_"

    def inc_log_count(self) -> None:
        self.turn_log_count += 1

    def start_turn(self, player_repr: str) -> None:
        self.total_turn += 1
        self.turn_log_count = 0
        self.current_player_repr = player_repr
