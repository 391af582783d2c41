"""Keyboard keys: codes, modifiers and the ``<C-a>`` text notation."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import ClassVar


class KeyModifiers(enum.Flag):
    """Modifier keys held together with a key."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4


class KeyEventKind(enum.Enum):
    """Whether a key was pressed, repeated or released."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


class KeyParseError(ValueError):
    """Raised when a key description cannot be parsed."""


@dataclass(frozen=True)
class KeyCode:
    """A key code; ``arg`` holds the character of ``Char`` or the number of ``F``."""

    name: str
    arg: str | int | None = None

    BACKSPACE: ClassVar[KeyCode]
    ENTER: ClassVar[KeyCode]
    LEFT: ClassVar[KeyCode]
    RIGHT: ClassVar[KeyCode]
    UP: ClassVar[KeyCode]
    DOWN: ClassVar[KeyCode]
    HOME: ClassVar[KeyCode]
    END: ClassVar[KeyCode]
    PAGE_UP: ClassVar[KeyCode]
    PAGE_DOWN: ClassVar[KeyCode]
    TAB: ClassVar[KeyCode]
    BACK_TAB: ClassVar[KeyCode]
    DELETE: ClassVar[KeyCode]
    INSERT: ClassVar[KeyCode]
    NULL: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]
    CAPS_LOCK: ClassVar[KeyCode]
    SCROLL_LOCK: ClassVar[KeyCode]
    NUM_LOCK: ClassVar[KeyCode]
    PRINT_SCREEN: ClassVar[KeyCode]
    PAUSE: ClassVar[KeyCode]
    MENU: ClassVar[KeyCode]
    KEYPAD_BEGIN: ClassVar[KeyCode]

    @classmethod
    def char(cls, c: str) -> KeyCode:
        """The code of a single character key."""
        if len(c) != 1:
            raise ValueError(f"Expected a single character, got {c!r}")
        return cls("Char", c)

    @classmethod
    def function(cls, n: int) -> KeyCode:
        """The code of function key ``F<n>``."""
        return cls("F", n)

    @property
    def is_char(self) -> bool:
        return self.name == "Char"


for _attr, _name in (
    ("BACKSPACE", "Backspace"),
    ("ENTER", "Enter"),
    ("LEFT", "Left"),
    ("RIGHT", "Right"),
    ("UP", "Up"),
    ("DOWN", "Down"),
    ("HOME", "Home"),
    ("END", "End"),
    ("PAGE_UP", "PageUp"),
    ("PAGE_DOWN", "PageDown"),
    ("TAB", "Tab"),
    ("BACK_TAB", "BackTab"),
    ("DELETE", "Delete"),
    ("INSERT", "Insert"),
    ("NULL", "Null"),
    ("ESC", "Esc"),
    ("CAPS_LOCK", "CapsLock"),
    ("SCROLL_LOCK", "ScrollLock"),
    ("NUM_LOCK", "NumLock"),
    ("PRINT_SCREEN", "PrintScreen"),
    ("PAUSE", "Pause"),
    ("MENU", "Menu"),
    ("KEYPAD_BEGIN", "KeypadBegin"),
):
    setattr(KeyCode, _attr, KeyCode(_name))


_KEYS: dict[str, KeyCode] = {
    "bs": KeyCode.BACKSPACE,
    "enter": KeyCode.ENTER,
    "left": KeyCode.LEFT,
    "right": KeyCode.RIGHT,
    "up": KeyCode.UP,
    "down": KeyCode.DOWN,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
    "pageup": KeyCode.PAGE_UP,
    "pagedown": KeyCode.PAGE_DOWN,
    "tab": KeyCode.TAB,
    "del": KeyCode.DELETE,
    "insert": KeyCode.INSERT,
    "nul": KeyCode.NULL,
    "esc": KeyCode.ESC,
    "lt": KeyCode.char("<"),
    "gt": KeyCode.char(">"),
    "minus": KeyCode.char("-"),
    **{f"f{n}": KeyCode.function(n) for n in range(1, 13)},
}

_SPECIAL_CHARS = {"<": "LT", ">": "GT", "-": "Minus"}

_CODE_NAMES = {
    "Backspace": "BS",
    "BackTab": "S-Tab",
    "Delete": "Del",
    "Null": "Nul",
    "Media": "Nul",
    "Modifier": "Nul",
}

_MOD_CHARS = {
    "c": KeyModifiers.CONTROL,
    "C": KeyModifiers.CONTROL,
    "s": KeyModifiers.SHIFT,
    "S": KeyModifiers.SHIFT,
    "m": KeyModifiers.ALT,
    "M": KeyModifiers.ALT,
}


@dataclass(frozen=True)
class Key:
    """A key code with its modifiers."""

    code: KeyCode
    mods: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS

    @classmethod
    def parse(cls, text: str) -> Key:
        """Parse a key written as ``<C-M-a>``."""
        return parse_key(text)

    def with_mods(self, mods: KeyModifiers) -> Key:
        return replace(self, mods=mods)

    def __str__(self) -> str:
        parts = ["<"]
        if self.mods & KeyModifiers.CONTROL:
            parts.append("C-")
        if self.mods & KeyModifiers.SHIFT:
            parts.append("S-")
        if self.mods & KeyModifiers.ALT:
            parts.append("M-")

        code = self.code
        if code.name == "Char":
            parts.append(_SPECIAL_CHARS.get(code.arg, code.arg))
        elif code.name == "F":
            parts.append(f"F{code.arg}")
        else:
            parts.append(_CODE_NAMES.get(code.name, code.name))

        parts.append(">")
        return "".join(parts)


def _ascii_lower(word: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in word)


def parse_key(text: str) -> Key:
    """Parse a key written as ``<C-M-a>``."""
    if not text.startswith("<"):
        raise KeyParseError('Expected "<"')
    pos = 1

    mods = KeyModifiers.NONE
    while pos + 1 < len(text) and text[pos + 1] == "-":
        ch = text[pos]
        flag = _MOD_CHARS.get(ch)
        if flag is None:
            raise KeyParseError(f'Wrong key modifier: "{ch}"')
        mods |= flag
        pos += 2

    end = pos
    while end < len(text) and text[end].isalnum():
        end += 1
    word = text[pos:end]

    code = _KEYS.get(_ascii_lower(word))
    if code is None:
        if len(word.encode("utf-8")) == 1:
            code = KeyCode.char(word)
        else:
            raise KeyParseError(f'Wrong key code: "{word}"')

    if text[end:end + 1] != ">":
        raise KeyParseError('Expected ">"')

    return Key(code, mods)