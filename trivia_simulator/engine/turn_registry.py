from dataclasses import dataclass, field

from trivia_simulator.core.errors import GameStateError
from trivia_simulator.core.state import Player


@dataclass(slots=True)
class TurnRegistry:
    """
    Join order and whose turn it is.

    Players are only ever appended, so once the cursor exists it always points
    at a valid index.
    """

    players: list[Player] = field(default_factory=list)
    _current_idx: int | None = None

    @property
    def count(self) -> int:
        return len(self.players)

    @property
    def current(self) -> Player:
        if self._current_idx is None:
            raise GameStateError("No players have been added yet.")
        return self.players[self._current_idx]

    def add(self, name: str) -> Player:
        player = Player(name=name, ordinal=self.count)
        self.players.append(player)
        if self._current_idx is None:
            self._current_idx = 0
        return player

    def move(self, offset: int) -> None:
        if offset <= 0:
            raise ValueError(f"Move offset must be positive, got {offset}.")
        self.current.location += offset

    def give_turn_to_next_player(self) -> Player:
        if self._current_idx is None:
            raise GameStateError("Cannot change turns without players.")
        self._current_idx = (self._current_idx + 1) % self.count
        return self.players[self._current_idx]
