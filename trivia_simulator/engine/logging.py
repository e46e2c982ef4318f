from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, get_args

from typing_extensions import override

from rich.logging import RichHandler

from trivia_simulator.core.types import Category

if TYPE_CHECKING:
    from trivia_simulator.core.state import LogContext
    from trivia_simulator.engine.game_engine import GameEngine

CATEGORY_NAMES = set(get_args(Category))


# Precompiled regex patterns for highlighting
CATEGORY_PATTERN = re.compile(rf"\b({'|'.join(map(re.escape, CATEGORY_NAMES))})\b")
COINS_PATTERN = re.compile(r"\b(\d+ Gold Coins)\b")
ROLL_PATTERN = re.compile(r"\b(rolled a \d+)\b")


# Simple color theme for Rich
COLOR = {
    "correct": "bold green",
    "wrong": "bold red",
    "penalty": "bold magenta",
    "category": "bold blue",
    "coins": "bold yellow",
    "roll": "cyan",
    "warning": "bold red",
    "prefix": "dim",
}


class ContextFilter(logging.Filter):
    """Inject per-engine runtime context into every log record."""

    def __init__(self, engine: GameEngine, name: str = "") -> None:
        super().__init__(name)
        self.engine: GameEngine = engine

    @override
    def filter(self, record: logging.LogRecord) -> bool:
        logctx: LogContext = self.engine.log_context
        record.total_turn = logctx.total_turn
        record.turn_log_count = logctx.turn_log_count
        record.player_repr = logctx.current_player_repr
        record.engine_id = logctx.engine_id
        logctx.inc_log_count()
        return True


class RichMarkupFormatter(logging.Formatter):
    @override
    def format(self, record: logging.LogRecord) -> str:
        total_turn = getattr(record, "total_turn", 0)
        turn_log_count = getattr(record, "turn_log_count", 0)
        player_repr = getattr(record, "player_repr", "_")
        engine_id = getattr(record, "engine_id", 0)
        prefix = f"{engine_id} {total_turn}.{player_repr}.{turn_log_count}"

        styled = record.getMessage()

        # Answers
        styled = re.sub(
            r"\bAnswer was correct\b",
            f"[{COLOR['correct']}]Answer was correct[/{COLOR['correct']}]",
            styled,
        )
        styled = re.sub(
            r"\bincorrectly answered\b",
            f"[{COLOR['wrong']}]incorrectly answered[/{COLOR['wrong']}]",
            styled,
        )

        # Penalty box
        styled = re.sub(
            r"\bpenalty box\b",
            f"[{COLOR['penalty']}]penalty box[/{COLOR['penalty']}]",
            styled,
        )

        styled = CATEGORY_PATTERN.sub(
            rf"[{COLOR['category']}]\1[/{COLOR['category']}]", styled
        )
        styled = COINS_PATTERN.sub(rf"[{COLOR['coins']}]\1[/{COLOR['coins']}]", styled)
        styled = ROLL_PATTERN.sub(rf"[{COLOR['roll']}]\1[/{COLOR['roll']}]", styled)

        if record.levelno >= logging.WARNING:
            styled = f"[{COLOR['warning']}]{styled}[/{COLOR['warning']}]"

        return f"[{COLOR['prefix']}]{prefix}[/{COLOR['prefix']}]  {styled}"


def configure_logging(engine: GameEngine | None = None) -> None:
    logger = logging.getLogger()
    logger.setLevel(logging.INFO)
    handler = RichHandler(markup=True, show_path=False, show_time=False)
    handler.setFormatter(RichMarkupFormatter())
    if engine is not None:
        handler.addFilter(ContextFilter(engine))
    logger.handlers.clear()
    logger.addHandler(handler)
