from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from trivia_simulator.core.types import AnswerOutcome
    from trivia_simulator.engine.game_engine import GameEngine


@dataclass(slots=True)
class PlayerResult:
    ordinal: int
    name: str

    turns_taken: int = 0
    sum_dice_rolled: int = 0
    correct_answers: int = 0
    wrong_answers: int = 0
    penalty_escape_rolls: int = 0

    final_coins: int = 0
    final_location: int = 0
    in_penalty_box: bool = False


@dataclass(slots=True)
class TurnRecord:
    """Lightweight record of a single turn's key outcome."""

    turn_index: int
    player_ordinal: int
    dice_roll: int
    outcome: AnswerOutcome


@dataclass(slots=True)
class MetricsAggregator:
    """
    Accumulates per-player stats while a driver plays out a game.
    """

    results: dict[int, PlayerResult] = field(default_factory=dict)
    turn_history: list[TurnRecord] = field(default_factory=list)

    def initialize_players(self, engine: GameEngine) -> None:
        """
        Pre-populate results for all players in the engine.
        MUST be called before recording turns.
        """
        for player in engine.registry.players:
            self.results[player.ordinal] = PlayerResult(
                ordinal=player.ordinal,
                name=player.name,
            )

    def on_turn_end(
        self,
        *,
        turn_index: int,
        player_ordinal: int,
        dice_roll: int,
        outcome: AnswerOutcome,
        escaped_penalty_box: bool,
    ) -> None:
        stats = self.results[player_ordinal]
        stats.turns_taken += 1
        stats.sum_dice_rolled += dice_roll
        if outcome == "correct":
            stats.correct_answers += 1
        else:
            stats.wrong_answers += 1
        if escaped_penalty_box:
            stats.penalty_escape_rolls += 1

        self.turn_history.append(
            TurnRecord(
                turn_index=turn_index,
                player_ordinal=player_ordinal,
                dice_roll=dice_roll,
                outcome=outcome,
            ),
        )

    def finalize_metrics(self, engine: GameEngine) -> list[PlayerResult]:
        """Copy end-of-game snapshot values and return results in join order."""
        output: list[PlayerResult] = []
        for player in engine.registry.players:
            # We trust initialize_players was called; if this fails, crash loudly
            stats = self.results[player.ordinal]

            stats.final_coins = engine.purse_of(player.ordinal)
            stats.final_location = player.location
            stats.in_penalty_box = engine.is_in_penalty_box(player.ordinal)

            output.append(stats)

        return output
