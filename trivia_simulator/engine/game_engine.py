from __future__ import annotations

import logging
from dataclasses import dataclass, field

from trivia_simulator.core.collaborators import (
    CategoryResolver,
    Presenter,
    QuestionSupplier,
)
from trivia_simulator.core.errors import GameStateError
from trivia_simulator.core.state import LogContext, Player
from trivia_simulator.engine import ENGINE_ID_COUNTER
from trivia_simulator.engine.turn_registry import TurnRegistry

logger = logging.getLogger("trivia_simulator")

MIN_PLAYERS: int = 2
WINNING_PURSE: int = 6


@dataclass
class GameEngine:
    """
    Owns penalty boxes, purses and the roll -> question -> answer -> next turn cycle.

    `is_getting_out_of_penalty_box` is ONE flag shared by every player, not one
    per player. It records whether the most recent roll made from the penalty
    box was odd and is only overwritten by the next such roll. A driver that
    interleaves turns unexpectedly will see one player's flag applied to
    another. This is known fragility; don't build on it.
    """

    category_resolver: CategoryResolver
    question_supplier: QuestionSupplier
    presenter: Presenter
    registry: TurnRegistry = field(default_factory=TurnRegistry)
    log_context: LogContext = field(
        default_factory=lambda: LogContext(engine_id=next(ENGINE_ID_COUNTER)),
    )

    in_penalty_box: dict[int, bool] = field(default_factory=dict)
    purses: dict[int, int] = field(default_factory=dict)
    is_getting_out_of_penalty_box: bool = False

    @classmethod
    def create(cls, presenter: Presenter | None = None) -> GameEngine:
        """Engine on the standard board with the default question deck."""
        from trivia_simulator.providers.board import BoardCategoryResolver
        from trivia_simulator.providers.presenter import LoggingPresenter
        from trivia_simulator.providers.questions import QuestionDeck

        return cls(
            category_resolver=BoardCategoryResolver(),
            question_supplier=QuestionDeck.standard(),
            presenter=presenter if presenter is not None else LoggingPresenter(),
        )

    # ---------- Queries ----------

    @property
    def player_count(self) -> int:
        return self.registry.count

    @property
    def is_playable(self) -> bool:
        return self.player_count >= MIN_PLAYERS

    @property
    def current_player(self) -> Player:
        return self.registry.current

    @property
    def current_player_name(self) -> str:
        return self.registry.current.name

    @property
    def current_player_location(self) -> int:
        return self.registry.current.location

    def purse_of(self, ordinal: int) -> int:
        return self.purses[ordinal]

    def is_in_penalty_box(self, ordinal: int) -> bool:
        return self.in_penalty_box[ordinal]

    # ---------- Setup ----------

    def add_player(self, name: str) -> Player:
        player = self.registry.add(name)
        self.purses[player.ordinal] = 0
        self.in_penalty_box[player.ordinal] = False

        if player.ordinal == 0:
            self.log_context.start_turn(player.repr)

        self.presenter.narrate(f"{name} was added")
        self.presenter.narrate(f"They are player number {self.player_count}")
        return player

    # ---------- Turn ----------

    def roll(self, value: int) -> None:
        if value < 0:
            raise ValueError(f"Invalid roll: {value}")
        if not self.is_playable:
            raise GameStateError(
                f"Cannot roll with {self.player_count} player(s); "
                f"need at least {MIN_PLAYERS}.",
            )

        player = self.current_player
        boxed = self.in_penalty_box[player.ordinal]
        # Outside the box every roll is a move, and a move must be positive
        if not boxed and value == 0:
            raise ValueError(f"A roll of 0 cannot move {player.name}.")

        self.presenter.narrate(f"{player.name} is the current player")
        self.presenter.narrate(f"They have rolled a {value}")

        if not boxed:
            self._move_and_ask(player, value)
            return

        if value % 2 != 0:
            self.is_getting_out_of_penalty_box = True
            self.presenter.narrate(f"{player.name} is getting out of the penalty box")
            self._move_and_ask(player, value)
        else:
            self.is_getting_out_of_penalty_box = False
            self.presenter.narrate(
                f"{player.name} is not getting out of the penalty box",
            )

    def answered_correctly(self) -> bool:
        """
        Settle a correct answer for the current player and pass the turn.

        Returns False only when the player has just reached the winning purse.
        """
        player = self.current_player

        if self.in_penalty_box[player.ordinal]:
            if self.is_getting_out_of_penalty_box:
                return self._score(player)

            self._next_turn()
            return True

        return self._score(player)

    def answered_incorrectly(self) -> bool:
        player = self.current_player
        self.presenter.narrate("Question was incorrectly answered")
        self.presenter.narrate(f"{player.name} was sent to the penalty box")
        self.in_penalty_box[player.ordinal] = True

        self._next_turn()
        return True

    # ---------- Helpers ----------

    def _move_and_ask(self, player: Player, value: int) -> None:
        self.registry.move(value)
        self.presenter.narrate(f"{player.name}'s new location is {player.location}")
        self._ask_question(player)

    def _ask_question(self, player: Player) -> None:
        category = self.category_resolver.resolve_category(player.location)
        question = self.question_supplier.next_question(category)
        logger.debug("Asking %s a %s question", player.repr, category)
        self.presenter.present(category, question)

    def _score(self, player: Player) -> bool:
        self.presenter.narrate("Answer was correct!!!!")
        self.purses[player.ordinal] += 1
        self.presenter.narrate(
            f"{player.name} now has {self.purses[player.ordinal]} Gold Coins.",
        )

        # Literal predicate: True while the player has NOT reached the winning purse
        did_not_win = self.purses[player.ordinal] != WINNING_PURSE
        self._next_turn()
        return did_not_win

    def _next_turn(self) -> None:
        nxt = self.registry.give_turn_to_next_player()
        self.log_context.start_turn(nxt.repr)
