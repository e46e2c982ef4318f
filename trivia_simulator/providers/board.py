from dataclasses import dataclass

from trivia_simulator.core.types import Category

CATEGORY_CYCLE: tuple[Category, ...] = ("Pop", "Science", "Sports", "Rock")
BOARD_SIZE: int = 12

STANDARD_TILES: tuple[Category, ...] = tuple(
    CATEGORY_CYCLE[i % len(CATEGORY_CYCLE)] for i in range(BOARD_SIZE)
)


@dataclass(frozen=True, slots=True)
class BoardCategoryResolver:
    """Circular board: a raw location wraps around before its tile is read."""

    tiles: tuple[Category, ...] = STANDARD_TILES

    @property
    def length(self) -> int:
        return len(self.tiles)

    def resolve_category(self, location: int) -> Category:
        if location < 0:
            raise ValueError(f"Board locations are non-negative, got {location}.")
        return self.tiles[location % self.length]
