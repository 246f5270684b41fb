from __future__ import annotations

from typing import Tuple

Color = Tuple[int, int, int]


def _shade(color: Color, factor: float) -> Color:
    return tuple(max(0, min(255, int(c * factor))) for c in color)  # type: ignore[return-value]


# Indexed by cell value: 0 is the empty board, 1..7 follow the shape catalog order.
BASE_COLORS: Tuple[Color, ...] = (
    (28, 28, 28),
    (0, 240, 240),  # I
    (240, 240, 0),  # O
    (160, 0, 240),  # T
    (0, 240, 0),    # S
    (240, 0, 0),    # Z
    (0, 0, 240),    # J
    (240, 160, 0),  # L
)
LIGHT_COLORS: Tuple[Color, ...] = tuple(_shade(c, 1.35) if i else (44, 44, 44) for i, c in enumerate(BASE_COLORS))
DARK_COLORS: Tuple[Color, ...] = tuple(_shade(c, 0.6) if i else (20, 20, 20) for i, c in enumerate(BASE_COLORS))

HIGHLIGHT = (255, 255, 255)
BACKGROUND = (0, 0, 0)
