from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional


class Button(IntEnum):
    LEFT = 0
    RIGHT = 1
    UP = 2  # rotate; raises the start level on the title screen
    DOWN = 3  # soft drop; lowers the start level on the title screen
    A = 4  # hard drop / confirm


@dataclass(frozen=True)
class InputSnapshot:
    """Held buttons for one tick plus the change since the previous tick.

    A delta of +1 means the button went down this tick, -1 means it was released.
    """

    held: frozenset = frozenset()
    deltas: tuple[int, int, int, int, int] = (0, 0, 0, 0, 0)

    @classmethod
    def from_held(cls, held: Iterable[Button], previous: Optional["InputSnapshot"] = None) -> "InputSnapshot":
        now = frozenset(Button(b) for b in held)
        before = previous.held if previous is not None else frozenset()
        deltas = tuple(int(b in now) - int(b in before) for b in Button)
        return cls(held=now, deltas=deltas)  # type: ignore[arg-type]

    @classmethod
    def tap(cls, *buttons: Button) -> "InputSnapshot":
        return cls.from_held(buttons)

    def is_held(self, button: Button) -> bool:
        return button in self.held

    def delta(self, button: Button) -> int:
        return self.deltas[int(button)]

    def pressed(self, button: Button) -> bool:
        """Rising edge only; holding a button does not fire again."""
        return self.deltas[int(button)] > 0


NO_INPUT = InputSnapshot()
