from __future__ import annotations

from typing import Callable, Optional

import pytest

from falling_blocks.game import Button, GameConfig, GameState, InputSnapshot, Phase, new_game, update


@pytest.fixture
def start_game() -> Callable[..., GameState]:
    """Build a seeded game already confirmed into the play phase at t=0."""

    def _start(first_shape: Optional[int] = None, seed: int = 7, start_level: int = 0) -> GameState:
        game = new_game(GameConfig(random_seed=seed, first_shape=first_shape))
        game.start_level = start_level
        update(game, InputSnapshot.tap(Button.A), 0.0)
        assert game.phase is Phase.PLAY
        return game

    return _start
