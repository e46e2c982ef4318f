"""Plays whole games by feeding dice rolls and answer outcomes to an engine."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from trivia_simulator.engine.game_engine import GameEngine
from trivia_simulator.simulation.telemetry import (
    MetricsAggregator,
    PlayerResult,
    TurnRecord,
)

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from trivia_simulator.core.collaborators import Presenter
    from trivia_simulator.core.types import AnswerOutcome
    from trivia_simulator.simulation.config import SimulationConfig

logger = logging.getLogger("trivia_simulator")

# The classic driver answers wrong when rand.Next(9) == 7
WRONG_ANSWER_DRAW: int = 7


@dataclass(slots=True)
class GameResult:
    seed: int
    turn_count: int
    aborted: bool
    winner: str | None
    players: list[PlayerResult] = field(default_factory=list)
    turn_history: list[TurnRecord] = field(default_factory=list)
    execution_time_ms: float = 0.0


def draw_outcome(rng: random.Random, wrong_answer_odds: int) -> AnswerOutcome:
    if rng.randrange(wrong_answer_odds) == WRONG_ANSWER_DRAW % wrong_answer_odds:
        return "wrong"
    return "correct"


def run_single_game(
    players: Sequence[str],
    seed: int,
    *,
    max_turns: int = 1000,
    wrong_answer_odds: int = 9,
    die_sides: int = 5,
    presenter: Presenter | None = None,
) -> GameResult:
    rng = random.Random(seed)
    engine = GameEngine.create(presenter=presenter)
    for name in players:
        engine.add_player(name)

    metrics = MetricsAggregator()
    metrics.initialize_players(engine)

    start = time.perf_counter()

    winner: str | None = None
    turn_count = 0
    for turn_index in range(max_turns):
        player = engine.current_player
        was_boxed = engine.is_in_penalty_box(player.ordinal)

        roll = rng.randint(1, die_sides)
        engine.roll(roll)

        outcome = draw_outcome(rng, wrong_answer_odds)
        if outcome == "wrong":
            not_a_winner = engine.answered_incorrectly()
        else:
            not_a_winner = engine.answered_correctly()

        metrics.on_turn_end(
            turn_index=turn_index,
            player_ordinal=player.ordinal,
            dice_roll=roll,
            outcome=outcome,
            escaped_penalty_box=was_boxed and roll % 2 != 0,
        )
        turn_count = turn_index + 1

        if not not_a_winner:
            winner = player.name
            break
    else:
        logger.warning("Game with seed %d aborted after %d turns", seed, max_turns)

    return GameResult(
        seed=seed,
        turn_count=turn_count,
        aborted=winner is None,
        winner=winner,
        players=metrics.finalize_metrics(engine),
        turn_history=metrics.turn_history,
        execution_time_ms=(time.perf_counter() - start) * 1000,
    )


def run_simulations(
    config: SimulationConfig,
    presenter: Presenter | None = None,
) -> Iterator[GameResult]:
    for seed in config.seeds():
        yield run_single_game(
            config.players,
            seed,
            max_turns=config.max_turns_per_game,
            wrong_answer_odds=config.wrong_answer_odds,
            die_sides=config.die_sides,
            presenter=presenter,
        )
