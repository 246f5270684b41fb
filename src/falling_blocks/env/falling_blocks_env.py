from __future__ import annotations

from dataclasses import replace
from enum import IntEnum
from typing import Any, Dict, Optional, Tuple

import numpy as np
import gymnasium as gym
from gymnasium import spaces

from falling_blocks.game import (
    HEIGHT,
    WIDTH,
    Button,
    GameConfig,
    GameState,
    InputSnapshot,
    Phase,
    new_game,
    update,
)
from falling_blocks.game.rules import FRAMES_PER_SECOND
from falling_blocks.game.shapes import MAX_COLOR_ID
from falling_blocks.visualization.palette import BASE_COLORS


class Action(IntEnum):
    NONE = 0
    LEFT = 1
    RIGHT = 2
    ROTATE = 3
    SOFT_DROP = 4
    HARD_DROP = 5


ACTION_TO_BUTTON: Dict[Action, Button] = {
    Action.LEFT: Button.LEFT,
    Action.RIGHT: Button.RIGHT,
    Action.ROTATE: Button.UP,
    Action.SOFT_DROP: Button.DOWN,
    Action.HARD_DROP: Button.A,
}


def board_with_piece(game: GameState) -> np.ndarray:
    # Overlay the falling piece with negative ids so it can be told apart from the stack
    state = game.grid.clone_state()
    if game.phase is Phase.PLAY:
        for row, col, value in game.piece.cells():
            if game.grid.is_inside(row, col):
                state[row, col] = -value
    return state


class FallingBlocksEnv(gym.Env):
    """Drives the tick engine with one tapped button per step.

    Each step advances simulated time by `frame_skip` frames at 60 fps, so
    gravity and the line-clear pause play out as they would for a human.
    """

    metadata = {"render_modes": ["rgb_array"], "render_fps": 30}

    def __init__(self, config: Optional[GameConfig] = None, render_mode: Optional[str] = None,
                 start_level: int = 0,
                 frame_skip: int = 4,
                 max_episode_steps: int = 10000) -> None:
        super().__init__()
        self.config = config or GameConfig()
        self.render_mode = render_mode
        self.start_level = int(start_level)
        self.frame_skip = int(frame_skip)
        self.max_episode_steps = int(max_episode_steps)

        self.observation_space = spaces.Box(
            low=-MAX_COLOR_ID, high=MAX_COLOR_ID, shape=(HEIGHT, WIDTH), dtype=np.int8
        )
        self.action_space = spaces.Discrete(len(Action))

        self.game: GameState = new_game(self.config)
        self._time = 0.0
        self._steps = 0

    def _get_obs(self) -> np.ndarray:
        return board_with_piece(self.game)

    def _get_info(self) -> Dict[str, Any]:
        return {
            "score": self.game.score,
            "lines": self.game.line_count,
            "level": self.game.level,
            "phase": self.game.phase.value,
            "steps": self._steps,
        }

    def reset(self, *, seed: Optional[int] = None, options: Optional[dict] = None) -> Tuple[np.ndarray, Dict[str, Any]]:
        super().reset(seed=seed)
        # Piece order follows the env RNG so seeded resets replay the same game
        config = replace(self.config, random_seed=int(self.np_random.integers(0, 2**31 - 1)))
        self.game = new_game(config)
        self.game.start_level = self.start_level
        if options and "start_level" in options:
            self.game.start_level = int(options["start_level"])
        self._time = 0.0
        self._steps = 0
        # Confirm on the title screen to begin play
        update(self.game, InputSnapshot.tap(Button.A), self._time)
        return self._get_obs(), self._get_info()

    def step(self, action):
        if self.game.phase is Phase.GAMEOVER:
            return self._get_obs(), 0.0, True, False, self._get_info()

        action = Action(int(action))
        button = ACTION_TO_BUTTON.get(action)
        snapshot = InputSnapshot.tap(button) if button is not None else InputSnapshot()

        score_before = self.game.score
        self._time += self.frame_skip / FRAMES_PER_SECOND
        update(self.game, snapshot, self._time)
        self._steps += 1

        reward = float(self.game.score - score_before)
        terminated = self.game.phase is Phase.GAMEOVER
        truncated = (not terminated) and self._steps >= self.max_episode_steps
        return self._get_obs(), reward, terminated, truncated, self._get_info()

    def render(self) -> Optional[np.ndarray]:
        if self.render_mode != "rgb_array":
            return None
        board = self._get_obs()
        cell = 12
        h, w = board.shape
        img = np.zeros((h * cell, w * cell, 3), dtype=np.uint8)
        for y in range(h):
            for x in range(w):
                color = BASE_COLORS[abs(int(board[y, x]))]
                img[y * cell : (y + 1) * cell, x * cell : (x + 1) * cell, :] = color
        return img

    def close(self) -> None:
        pass
