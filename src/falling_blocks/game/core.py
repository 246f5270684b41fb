from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional

import numpy as np

from .controls import Button, InputSnapshot
from .grid import HEIGHT, GameGrid
from .lines import clear_lines, find_filled_lines
from .pieces import ActivePiece, is_valid, landing_position, merge
from .rules import ScoringRules, drop_interval, lines_for_next_level
from .shapes import NUM_SHAPES

logger = logging.getLogger(__name__)

GAME_OVER_ROW = 0


class Phase(Enum):
    START = "start"
    PLAY = "play"
    LINE = "line"
    GAMEOVER = "gameover"


@dataclass
class GameConfig:
    random_seed: Optional[int] = None
    highlight_duration: float = 0.5
    # Shape index forced for the first piece of every game; None keeps it random.
    first_shape: Optional[int] = None


@dataclass(frozen=True)
class GameView:
    """Read-only snapshot of a GameState for renderers and observers."""

    grid: np.ndarray
    piece: ActivePiece
    landing: ActivePiece
    phase: Phase
    level: int
    start_level: int
    score: int
    line_count: int
    filled_rows: np.ndarray
    show_highlight: bool


@dataclass
class GameState:
    config: GameConfig = field(default_factory=GameConfig)
    rules: ScoringRules = field(default_factory=ScoringRules)
    grid: GameGrid = field(default_factory=GameGrid)
    piece: ActivePiece = field(default_factory=lambda: ActivePiece(0))
    phase: Phase = Phase.START
    level: int = 0
    start_level: int = 0
    line_count: int = 0
    pending_line_count: int = 0
    score: int = 0
    filled_rows: np.ndarray = field(default_factory=lambda: np.zeros(HEIGHT, dtype=np.bool_))
    time: float = 0.0
    next_drop_time: float = 0.0
    highlight_end_time: float = 0.0
    rng: random.Random = field(default_factory=random.Random)
    pieces_spawned: int = 0

    @property
    def show_highlight(self) -> bool:
        return self.phase is Phase.LINE

    def view(self) -> GameView:
        grid = self.grid.clone_state()
        grid.flags.writeable = False
        filled = self.filled_rows.copy()
        filled.flags.writeable = False
        return GameView(
            grid=grid,
            piece=replace(self.piece),
            landing=landing_position(self.piece, self.grid),
            phase=self.phase,
            level=self.level,
            start_level=self.start_level,
            score=self.score,
            line_count=self.line_count,
            filled_rows=filled,
            show_highlight=self.show_highlight,
        )


def new_game(config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> GameState:
    config = config or GameConfig()
    return GameState(
        config=config,
        rules=rules or ScoringRules(),
        rng=random.Random(config.random_seed),
    )


def _set_phase(game: GameState, phase: Phase) -> None:
    if game.phase is not phase:
        logger.debug("phase %s -> %s at t=%.3f", game.phase.value, phase.value, game.time)
    game.phase = phase


def spawn_piece(game: GameState) -> None:
    """Replace the active piece with a random shape at the top center.

    Overlap is not checked here; a blocked spawn ends the game through the
    game-over row check in the play phase.
    """
    if game.pieces_spawned == 0 and game.config.first_shape is not None:
        index = game.config.first_shape
    else:
        index = game.rng.randrange(NUM_SHAPES)
    game.piece = ActivePiece(shape_index=index, offset_row=0, offset_col=game.grid.width // 2, rotation=0)
    game.pieces_spawned += 1
    game.next_drop_time = game.time + drop_interval(game.level)
    logger.debug("spawned shape %d, next drop at t=%.3f", index, game.next_drop_time)


def soft_drop(game: GameState) -> bool:
    """Move the piece down one row.

    Returns False when the piece could not move: it is merged where it was
    and a new piece is spawned.
    """
    game.piece.offset_row += 1
    if not is_valid(game.piece, game.grid):
        game.piece.offset_row -= 1
        merge(game.piece, game.grid)
        spawn_piece(game)
        return False
    game.next_drop_time = game.time + drop_interval(game.level)
    return True


def hard_drop(game: GameState) -> None:
    while soft_drop(game):
        pass


def update_start(game: GameState, snapshot: InputSnapshot) -> None:
    if snapshot.pressed(Button.UP):
        game.start_level += 1
    if snapshot.pressed(Button.DOWN) and game.start_level > 0:
        game.start_level -= 1
    if snapshot.pressed(Button.A):
        game.grid.reset()
        game.level = game.start_level
        game.score = 0
        game.line_count = 0
        game.pending_line_count = 0
        game.filled_rows[:] = False
        game.pieces_spawned = 0
        spawn_piece(game)
        _set_phase(game, Phase.PLAY)


def update_play(game: GameState, snapshot: InputSnapshot) -> None:
    d_col = int(snapshot.pressed(Button.RIGHT)) - int(snapshot.pressed(Button.LEFT))
    if d_col:
        moved = game.piece.moved(0, d_col)
        if is_valid(moved, game.grid):
            game.piece = moved
    if snapshot.pressed(Button.UP):
        rotated = game.piece.rotated(1)
        if is_valid(rotated, game.grid):
            game.piece = rotated

    if snapshot.pressed(Button.DOWN):
        soft_drop(game)
    if snapshot.pressed(Button.A):
        hard_drop(game)

    # Gravity catches up if ticks were late.
    while game.time >= game.next_drop_time:
        soft_drop(game)

    game.pending_line_count, game.filled_rows = find_filled_lines(game.grid)
    if game.pending_line_count > 0:
        game.highlight_end_time = game.time + game.config.highlight_duration
        logger.debug("%d filled line(s) found", game.pending_line_count)
        _set_phase(game, Phase.LINE)

    if not game.grid.is_row_empty(GAME_OVER_ROW):
        logger.info("game over: score=%d lines=%d level=%d", game.score, game.line_count, game.level)
        _set_phase(game, Phase.GAMEOVER)


def update_line(game: GameState) -> None:
    if game.time < game.highlight_end_time:
        return
    clear_lines(game.grid, game.filled_rows)
    game.line_count += game.pending_line_count
    game.score += game.rules.score_for_lines(game.level, game.pending_line_count)
    if game.line_count >= lines_for_next_level(game.start_level, game.level):
        game.level += 1
        logger.debug("level up to %d", game.level)
    game.pending_line_count = 0
    game.filled_rows[:] = False
    _set_phase(game, Phase.PLAY)


def update_gameover(game: GameState, snapshot: InputSnapshot) -> None:
    if snapshot.pressed(Button.A):
        _set_phase(game, Phase.START)


def update(game: GameState, snapshot: InputSnapshot, time: float) -> GameState:
    """Advance the game by one tick and return it (mutated in place)."""
    game.time = float(time)
    if game.phase is Phase.START:
        update_start(game, snapshot)
    elif game.phase is Phase.PLAY:
        update_play(game, snapshot)
    elif game.phase is Phase.LINE:
        update_line(game)
    elif game.phase is Phase.GAMEOVER:
        update_gameover(game, snapshot)
    return game
