from __future__ import annotations

from dataclasses import dataclass


# Frames between gravity drops per level, at 60 frames per second.
FRAMES_PER_DROP: tuple[int, ...] = (
    48, 43, 38, 33, 28, 23, 18, 13, 8, 6,
    5, 5, 5, 4, 4, 4, 3, 3, 3, 2,
    2, 2, 2, 2, 2, 2, 2, 2, 2, 1,
)
FRAMES_PER_SECOND = 60
MAX_LEVEL_INDEX = len(FRAMES_PER_DROP) - 1


def drop_interval(level: int) -> float:
    """Seconds between gravity drops; levels past the table reuse its last entry."""
    level = min(level, MAX_LEVEL_INDEX)
    return FRAMES_PER_DROP[level] / FRAMES_PER_SECOND


@dataclass
class ScoringRules:
    line_clear_scores: tuple[int, int, int, int] = (40, 100, 300, 1200)

    def score_for_lines(self, level: int, lines: int) -> int:
        if 1 <= lines <= 4:
            return self.line_clear_scores[lines - 1] * (level + 1)
        return 0


def score_for_lines(level: int, lines: int) -> int:
    return ScoringRules().score_for_lines(level, lines)


def lines_for_next_level(start_level: int, current_level: int) -> int:
    """Cumulative cleared lines needed to leave `current_level`."""
    first = min(start_level * 10 + 10, max(100, start_level * 10 - 50))
    return first + 10 * (current_level - start_level)
