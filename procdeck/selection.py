"""Copy-mode selection: cursor positions and the selected range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Pos:
    """A cell position; ``y`` may be negative for rows in the scrollback."""

    y: int = 0
    x: int = 0


def to_low_high(a: Pos, b: Pos) -> tuple[Pos, Pos]:
    """The two positions ordered by row, then by column."""
    if a.y > b.y:
        return b, a
    if a.y == b.y and a.x > b.x:
        return b, a
    return a, b


def within(start: Pos, end: Pos, target: Pos) -> bool:
    """Whether ``target`` lies in the text range between ``start`` and ``end``."""
    y, x = target.y, target.x
    low, high = to_low_high(start, end)

    if y > low.y:
        if y < high.y:
            return True
        return y == high.y and x <= high.x
    if y == low.y:
        if y < high.y:
            return x >= low.x
        if y == high.y:
            return low.x <= x <= high.x
    return False


@dataclass(frozen=True)
class CopyMode:
    """The copy-mode state of a terminal view.

    With no ``start`` copy mode is off and ``pending`` may hold the position
    where a mouse selection began. With ``start`` only, a selection has been
    started on a frozen ``screen``; with ``end`` as well it is a full range.
    """

    screen: Any = None
    start: Pos | None = None
    end: Pos | None = None
    pending: Pos | None = None

    def __post_init__(self) -> None:
        if self.start is None:
            if self.screen is not None or self.end is not None:
                raise ValueError("an inactive copy mode holds no screen or end")
        else:
            if self.screen is None:
                raise ValueError("an active copy mode needs a screen")
            if self.pending is not None:
                raise ValueError("an active copy mode holds no pending position")

    def is_active(self) -> bool:
        """Whether a selection is in progress."""
        return self.start is not None