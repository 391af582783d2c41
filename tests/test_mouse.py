from dataclasses import dataclass

import pytest

from procdeck.key import KeyModifiers
from procdeck.mouse import MouseAction, MouseButton, MouseEvent


@dataclass
class Area:
    x: int
    y: int


def test_translate_subtracts_origin():
    event = MouseEvent(MouseAction.DOWN, 10, 7, MouseButton.LEFT)
    moved = event.translate(Area(4, 2))
    assert (moved.x, moved.y) == (10 - 4, 7 - 2)


def test_translate_keeps_other_fields():
    event = MouseEvent(
        MouseAction.DRAG, 3, 3, MouseButton.RIGHT, KeyModifiers.CONTROL
    )
    moved = event.translate(Area(1, 1))
    assert moved.kind is MouseAction.DRAG
    assert moved.button is MouseButton.RIGHT
    assert moved.mods == KeyModifiers.CONTROL


def test_translate_can_go_negative():
    event = MouseEvent(MouseAction.SCROLL_UP, 0, 0)
    moved = event.translate(Area(5, 6))
    assert (moved.x, moved.y) == (-5, -6)


def test_translate_round_trip():
    event = MouseEvent(MouseAction.UP, 8, 9, MouseButton.MIDDLE)
    assert event.translate(Area(3, 4)).translate(Area(-3, -4)) == event


def test_translate_does_not_mutate():
    event = MouseEvent(MouseAction.DOWN, 10, 10, MouseButton.LEFT)
    event.translate(Area(2, 2))
    assert (event.x, event.y) == (10, 10)


@pytest.mark.parametrize("kind", [MouseAction.DOWN, MouseAction.UP, MouseAction.DRAG])
def test_button_required(kind):
    with pytest.raises(ValueError):
        MouseEvent(kind, 0, 0)


@pytest.mark.parametrize(
    "kind", [MouseAction.MOVED, MouseAction.SCROLL_DOWN, MouseAction.SCROLL_LEFT]
)
def test_button_rejected(kind):
    with pytest.raises(ValueError):
        MouseEvent(kind, 0, 0, MouseButton.LEFT)