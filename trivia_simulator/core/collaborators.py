from typing import Protocol, runtime_checkable


@runtime_checkable
class CategoryResolver(Protocol):
    """Maps a raw board location onto the category of the tile it lands on."""

    def resolve_category(self, location: int) -> str: ...


@runtime_checkable
class QuestionSupplier(Protocol):
    """Hands out the next question for a category. May keep per-category state."""

    def next_question(self, category: str) -> str: ...


@runtime_checkable
class Presenter(Protocol):
    """Best-effort sink for prompts and turn narration. Nothing is returned."""

    def present(self, category: str, question: str) -> None: ...
    def narrate(self, message: str) -> None: ...
