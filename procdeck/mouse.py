"""Mouse events as received from the terminal."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import Protocol

from procdeck.key import KeyModifiers


class MouseButton(enum.Enum):
    """A mouse button."""

    LEFT = "left"
    RIGHT = "right"
    MIDDLE = "middle"


class MouseAction(enum.Enum):
    """What the mouse did."""

    DOWN = "down"
    UP = "up"
    DRAG = "drag"
    MOVED = "moved"
    SCROLL_DOWN = "scroll-down"
    SCROLL_UP = "scroll-up"
    SCROLL_LEFT = "scroll-left"
    SCROLL_RIGHT = "scroll-right"

    @property
    def has_button(self) -> bool:
        return self in (MouseAction.DOWN, MouseAction.UP, MouseAction.DRAG)


class _Area(Protocol):
    x: int
    y: int


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at cell ``(x, y)``; ``button`` is set for down, up and drag."""

    kind: MouseAction
    x: int
    y: int
    button: MouseButton | None = None
    mods: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if self.kind.has_button and self.button is None:
            raise ValueError(f"Mouse action {self.kind.value} needs a button")
        if not self.kind.has_button and self.button is not None:
            raise ValueError(f"Mouse action {self.kind.value} takes no button")

    def translate(self, area: _Area) -> MouseEvent:
        """The same event with coordinates relative to ``area``'s origin."""
        return replace(self, x=self.x - area.x, y=self.y - area.y)