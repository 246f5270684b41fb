"""Game module for Falling Blocks.

Exports the tick-driven game engine and supporting classes:
- SHAPES / shape_cell_at: Shape catalog with computed rotation
- GameGrid: Playfield matrix and cell access
- ActivePiece / is_valid / merge: Falling piece and legality checks
- find_filled_lines / clear_lines: Line detection and compaction
- ScoringRules / drop_interval / lines_for_next_level: Progression
- GameState / new_game / update: Phase state machine
"""

from .controls import Button, InputSnapshot, NO_INPUT
from .core import (
    GameConfig,
    GameState,
    GameView,
    Phase,
    hard_drop,
    new_game,
    soft_drop,
    spawn_piece,
    update,
)
from .grid import GameGrid, HEIGHT, HIDDEN_ROWS, VISIBLE_HEIGHT, WIDTH
from .lines import clear_lines, find_filled_lines
from .pieces import ActivePiece, is_valid, landing_position, merge
from .rules import ScoringRules, drop_interval, lines_for_next_level, score_for_lines
from .shapes import SHAPES, ShapeKind, shape_cell_at, shape_matrix

__all__ = [
    "ActivePiece",
    "Button",
    "GameConfig",
    "GameGrid",
    "GameState",
    "GameView",
    "HEIGHT",
    "HIDDEN_ROWS",
    "InputSnapshot",
    "NO_INPUT",
    "Phase",
    "SHAPES",
    "ScoringRules",
    "ShapeKind",
    "VISIBLE_HEIGHT",
    "WIDTH",
    "clear_lines",
    "drop_interval",
    "find_filled_lines",
    "hard_drop",
    "is_valid",
    "landing_position",
    "lines_for_next_level",
    "merge",
    "new_game",
    "score_for_lines",
    "shape_cell_at",
    "shape_matrix",
    "soft_drop",
    "spawn_piece",
    "update",
]
