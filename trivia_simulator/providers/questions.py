from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field

from trivia_simulator.providers.board import CATEGORY_CYCLE

QUESTIONS_PER_CATEGORY: int = 50


@dataclass(slots=True)
class QuestionDeck:
    """
    One queue of questions per category.

    Drawing a question moves it to the back of its queue, so a deck never runs
    dry no matter how long a game goes on.
    """

    queues: dict[str, deque[str]] = field(default_factory=dict)

    @classmethod
    def standard(cls, per_category: int = QUESTIONS_PER_CATEGORY) -> QuestionDeck:
        return cls(
            queues={
                category: deque(f"{category} Question {i}" for i in range(per_category))
                for category in CATEGORY_CYCLE
            },
        )

    def next_question(self, category: str) -> str:
        try:
            queue = self.queues[category]
        except KeyError:
            raise KeyError(f"No questions for category '{category}'.") from None
        if not queue:
            raise LookupError(f"Question queue for '{category}' is empty.")

        question = queue.popleft()
        queue.append(question)
        return question
