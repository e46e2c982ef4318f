from unittest.mock import MagicMock

from trivia_simulator.core.state import Player
from trivia_simulator.engine.game_engine import GameEngine


class GameScenario:
    """
    A reusable harness that wraps the GameEngine for testing.

    Every collaborator is a MagicMock, so tests can count category and
    question lookups and inspect what was narrated.
    """

    def __init__(self, player_names: list[str], category: str = "Pop"):
        self.category_resolver: MagicMock = MagicMock()
        self.category_resolver.resolve_category.return_value = category

        self.question_supplier: MagicMock = MagicMock()
        self.question_supplier.next_question.return_value = f"{category} Question 0"

        self.presenter: MagicMock = MagicMock()

        self.engine: GameEngine = GameEngine(
            category_resolver=self.category_resolver,
            question_supplier=self.question_supplier,
            presenter=self.presenter,
        )
        for name in player_names:
            self.engine.add_player(name)

    @property
    def questions_asked(self) -> int:
        return self.presenter.present.call_count

    def get_player(self, ordinal: int) -> Player:
        return self.engine.registry.players[ordinal]

    def purse(self, ordinal: int) -> int:
        return self.engine.purse_of(ordinal)

    def play_turn(self, roll: int, *, correct: bool = True) -> bool:
        self.engine.roll(roll)
        if correct:
            return self.engine.answered_correctly()
        return self.engine.answered_incorrectly()
