from __future__ import annotations

from typing import Optional

import pygame

from falling_blocks.game import HIDDEN_ROWS, ActivePiece, GameView, Phase

from .palette import BACKGROUND, BASE_COLORS, DARK_COLORS, HIGHLIGHT, LIGHT_COLORS


class Renderer:
    """Draws a GameView; holds no game state of its own."""

    def __init__(self, cell_size: int = 30, padding_y: int = 60, font: Optional[pygame.font.Font] = None) -> None:
        self.cell_size = cell_size
        self.padding_y = padding_y
        self.font = font

    def window_size(self, view: GameView) -> tuple[int, int]:
        h, w = view.grid.shape
        return w * self.cell_size, h * self.cell_size + self.padding_y

    def _draw_cell(self, screen: pygame.Surface, row: int, col: int, value: int, outline: bool = False) -> None:
        size = self.cell_size
        edge = size // 8
        x = col * size
        y = row * size + self.padding_y
        if outline:
            pygame.draw.rect(screen, BASE_COLORS[value], pygame.Rect(x, y, size, size), 1)
            return
        # Dark under light under base gives a bevelled block
        pygame.draw.rect(screen, DARK_COLORS[value], pygame.Rect(x, y, size, size))
        pygame.draw.rect(screen, LIGHT_COLORS[value], pygame.Rect(x + edge, y + edge, size - edge, size - edge))
        pygame.draw.rect(screen, BASE_COLORS[value], pygame.Rect(x + edge, y + edge, size - edge * 2, size - edge * 2))

    def _draw_piece(self, screen: pygame.Surface, piece: ActivePiece, outline: bool = False) -> None:
        for row, col, value in piece.cells():
            self._draw_cell(screen, row, col, value, outline)

    def _draw_text(self, screen: pygame.Surface, text: str, x: int, y: int, center: bool = False) -> None:
        if self.font is None:
            return
        img = self.font.render(text, True, HIGHLIGHT)
        if center:
            x -= img.get_width() // 2
        screen.blit(img, (x, y))

    def draw(self, screen: pygame.Surface, view: GameView) -> None:
        screen.fill(BACKGROUND)
        h, w = view.grid.shape
        for row in range(h):
            for col in range(w):
                self._draw_cell(screen, row, col, int(view.grid[row, col]))

        if view.phase is Phase.PLAY:
            self._draw_piece(screen, view.piece)
            self._draw_piece(screen, view.landing, outline=True)

        mid_x = w * self.cell_size // 2
        mid_y = h * self.cell_size // 2
        if view.show_highlight:
            for row in range(h):
                if view.filled_rows[row]:
                    rect = pygame.Rect(0, row * self.cell_size + self.padding_y, w * self.cell_size, self.cell_size)
                    pygame.draw.rect(screen, HIGHLIGHT, rect)
        elif view.phase is Phase.GAMEOVER:
            self._draw_text(screen, "GAME OVER", mid_x, mid_y, center=True)
        elif view.phase is Phase.START:
            self._draw_text(screen, "PRESS SPACE TO START", mid_x, mid_y, center=True)
            self._draw_text(screen, f"STARTING LEVEL: {view.start_level}", mid_x, mid_y + 30, center=True)

        # Spawn rows stay hidden
        pygame.draw.rect(screen, BACKGROUND, pygame.Rect(0, self.padding_y, w * self.cell_size, HIDDEN_ROWS * self.cell_size))

        self._draw_text(screen, f"LEVEL: {view.level}", 5, 5)
        self._draw_text(screen, f"SCORE: {view.score}", 5, 35)
        self._draw_text(screen, f"LINES: {view.line_count}", 5, 65)
