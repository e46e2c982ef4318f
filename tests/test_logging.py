import logging

from trivia_simulator.engine.game_engine import GameEngine
from trivia_simulator.engine.logging import ContextFilter, RichMarkupFormatter


def make_record(message: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord("trivia_simulator", level, __file__, 1, message, None, None)


def test_context_filter_stamps_engine_context():
    engine = GameEngine.create()
    engine.add_player("Alice")
    record = make_record("Alice is the current player")

    assert ContextFilter(engine).filter(record)

    assert record.player_repr == "0:Alice"
    assert record.total_turn == 1
    assert record.engine_id == engine.log_context.engine_id
    assert engine.log_context.turn_log_count == 1


def test_formatter_prefixes_and_highlights():
    record = make_record("Alice now has 3 Gold Coins.")
    record.engine_id = 2
    record.total_turn = 5
    record.player_repr = "0:Alice"
    record.turn_log_count = 1

    text = RichMarkupFormatter().format(record)

    assert text.startswith("[dim]2 5.0:Alice.1[/dim]")
    assert "[bold yellow]3 Gold Coins[/bold yellow]" in text


def test_formatter_without_context_uses_defaults():
    text = RichMarkupFormatter().format(make_record("The category is Rock"))

    assert text.startswith("[dim]0 0._.0[/dim]")
    assert "[bold blue]Rock[/bold blue]" in text


def test_formatter_flags_warnings():
    text = RichMarkupFormatter().format(make_record("aborted", logging.WARNING))

    assert "[bold red]aborted[/bold red]" in text
