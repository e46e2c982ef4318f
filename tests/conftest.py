from typing import Callable

import pytest

from tests.test_utils import GameScenario


@pytest.fixture
def scenario() -> Callable[..., GameScenario]:
    """Factory fixture to create scenarios."""

    def _builder(player_names: list[str], category: str = "Pop") -> GameScenario:
        return GameScenario(player_names, category)

    return _builder
