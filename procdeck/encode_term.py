"""Encoding of keys and mouse events into the byte sequences a terminal sends."""

from __future__ import annotations

import string
from dataclasses import dataclass

from procdeck.key import Key, KeyCode, KeyEventKind, KeyModifiers
from procdeck.mouse import MouseAction, MouseButton, MouseEvent

CSI = "\x1b["
SS3 = "\x1bO"
_ESC = "\x1b"


@dataclass(frozen=True)
class KeyCodeEncodeModes:
    """Terminal modes that influence how a key is encoded for the pty."""

    enable_csi_u_key_encoding: bool = False
    application_cursor_keys: bool = False
    newline_mode: bool = False


def _has(mods: KeyModifiers, flag: KeyModifiers) -> bool:
    return bool(mods & flag)


def _is_punct(c: str) -> bool:
    return c in string.punctuation


def _is_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_alnum(c: str) -> bool:
    return c.isascii() and c.isalnum()


def _is_ambiguous_ascii_ctrl(c: str) -> bool:
    """Characters whose CTRL form could be a control code or a real key."""
    return c in "iImM[{@"


_CTRL_MAPPING: dict[str, str] = {
    **{c: "\x00" for c in "@` 2"},
    **{c: "\x1b" for c in "[3{"},
    **{c: "\x1c" for c in "\\4|"},
    **{c: "\x1d" for c in "]5}"},
    **{c: "\x1e" for c in "^6~"},
    **{c: "\x1f" for c in "_7/"},
    **{c: "\x7f" for c in "8?"},
}
for _offset, _letter in enumerate(string.ascii_uppercase, start=1):
    _CTRL_MAPPING[_letter] = chr(_offset)
    _CTRL_MAPPING[_letter.lower()] = chr(_offset)


def _encode_modifiers(mods: KeyModifiers) -> int:
    number = 0
    if _has(mods, KeyModifiers.SHIFT):
        number |= 1
    if _has(mods, KeyModifiers.ALT):
        number |= 2
    if _has(mods, KeyModifiers.CONTROL):
        number |= 4
    return number


def _csi_u_encode(c: str, mods: KeyModifiers, enable_csi_u: bool) -> str:
    if enable_csi_u:
        return f"{CSI}{ord(c)};{1 + _encode_modifiers(mods)}u"
    if _has(mods, KeyModifiers.CONTROL) and c in _CTRL_MAPPING:
        c = _CTRL_MAPPING[c]
    prefix = _ESC if _has(mods, KeyModifiers.ALT) else ""
    return prefix + c


def normalize_shift_to_upper_case(code: KeyCode, modifiers: KeyModifiers) -> KeyCode:
    """Normalize a shifted character code; lower-case characters are kept as is."""
    if _has(modifiers, KeyModifiers.SHIFT) and code.is_char and code.arg.islower():
        return KeyCode.char(code.arg)
    return code


_CURSOR_KEYS = {
    "Up": "A",
    "Down": "B",
    "Right": "C",
    "Left": "D",
    "Home": "H",
    "End": "F",
}

_TILDE_KEYS = {"Insert": 2, "Delete": 3, "PageUp": 5, "PageDown": 6}

_SS3_FKEYS = {1: "\x1bOP", 2: "\x1bOQ", 3: "\x1bOR", 4: "\x1bOS"}

_CSI_FKEYS = {
    1: "\x1b[11",
    2: "\x1b[12",
    3: "\x1b[13",
    4: "\x1b[14",
    5: "\x1b[15",
    6: "\x1b[17",
    7: "\x1b[18",
    8: "\x1b[19",
    9: "\x1b[20",
    10: "\x1b[21",
    11: "\x1b[23",
    12: "\x1b[24",
}

_ANY_MOD = KeyModifiers.ALT | KeyModifiers.SHIFT | KeyModifiers.CONTROL


def _encode_char(c: str, mods: KeyModifiers, modes: KeyCodeEncodeModes) -> str:
    ctrl = _has(mods, KeyModifiers.CONTROL)
    alt = _has(mods, KeyModifiers.ALT)
    if _is_ambiguous_ascii_ctrl(c) and ctrl and modes.enable_csi_u_key_encoding:
        return _csi_u_encode(c, mods, modes.enable_csi_u_key_encoding)
    if _is_upper(c) and ctrl:
        return _csi_u_encode(c, mods, modes.enable_csi_u_key_encoding)
    if ctrl and c in _CTRL_MAPPING:
        return (_ESC if alt else "") + _CTRL_MAPPING[c]
    # ESC announces ALT; only for ascii so that altgr-style glyphs pass through.
    if (_is_alnum(c) or _is_punct(c)) and alt:
        return _ESC + c
    if mods == KeyModifiers.NONE:
        return c
    return _csi_u_encode(c, mods, modes.enable_csi_u_key_encoding)


def _encode_tab(mods: KeyModifiers) -> str:
    prefix = _ESC if _has(mods, KeyModifiers.ALT) else ""
    mods = mods & ~KeyModifiers.ALT
    if mods == KeyModifiers.CONTROL:
        return prefix + "\x1b[9;5u"
    if mods == KeyModifiers.CONTROL | KeyModifiers.SHIFT:
        return prefix + "\x1b[1;5Z"
    if mods == KeyModifiers.SHIFT:
        return prefix + "\x1b[Z"
    return prefix + "\t"


def _encode_function(n: int, mods: KeyModifiers) -> str:
    if mods == KeyModifiers.NONE and n < 5:
        return _SS3_FKEYS[n]
    intro = _CSI_FKEYS.get(n)
    if intro is None:
        raise ValueError(f"unhandled fkey number {n}")
    encoded = _encode_modifiers(mods)
    if encoded == 0:
        return f"{intro}~"
    return f"{intro};{1 + encoded}~"


def encode_key(key: Key, modes: KeyCodeEncodeModes | None = None) -> str:
    """The xterm-compatible sequence for ``key`` under ``modes``."""
    if modes is None:
        modes = KeyCodeEncodeModes()
    if key.kind is KeyEventKind.RELEASE:
        return ""

    mods = key.mods
    code = normalize_shift_to_upper_case(key.code, mods)
    if (
        code.is_char
        and (_is_punct(code.arg) or _is_upper(code.arg))
        and _has(mods, KeyModifiers.SHIFT)
    ):
        mods = mods & ~KeyModifiers.SHIFT

    if code == KeyCode.char("\x7f"):
        code = KeyCode.BACKSPACE
    elif code == KeyCode.char("\x08"):
        code = KeyCode.DELETE

    name = code.name
    if name == "Char":
        return _encode_char(code.arg, mods, modes)

    if name in ("Enter", "Esc", "Backspace"):
        c = {"Enter": "\r", "Esc": "\x1b", "Backspace": "\x7f"}[name]
        if _has(mods, KeyModifiers.SHIFT | KeyModifiers.CONTROL):
            return _csi_u_encode(c, mods, modes.enable_csi_u_key_encoding)
        out = (_ESC if _has(mods, KeyModifiers.ALT) else "") + c
        if modes.newline_mode and name == "Enter":
            out += "\n"
        return out

    if name == "Tab":
        return _encode_tab(mods)

    if name == "BackTab":
        return "\x1b[Z"

    if name in _CURSOR_KEYS:
        c = _CURSOR_KEYS[name]
        if _has(mods, _ANY_MOD):
            return f"{CSI}1;{1 + _encode_modifiers(mods)}{c}"
        intro = SS3 if modes.application_cursor_keys else CSI
        return f"{intro}{c}"

    if name in _TILDE_KEYS:
        n = _TILDE_KEYS[name]
        if _has(mods, _ANY_MOD):
            return f"\x1b[{n};{1 + _encode_modifiers(mods)}~"
        return f"\x1b[{n}~"

    if name == "F":
        return _encode_function(code.arg, mods)

    return ""


_PRINT_NAMES = {
    "Backspace": "Backspace",
    "Enter": "Enter",
    "Left": "Left",
    "Right": "Right",
    "Up": "Up",
    "Down": "Down",
    "Home": "Home",
    "End": "End",
    "PageUp": "PgUp",
    "PageDown": "PgDn",
    "Tab": "Tab",
    "BackTab": "BackTab",
    "Delete": "Del",
    "Insert": "Ins",
    "Null": "Null",
    "Esc": "Esc",
}


def print_key(key: Key) -> str:
    """Short display form of a key, such as ``C-a`` or ``PgUp``."""
    parts = []
    if _has(key.mods, KeyModifiers.CONTROL):
        parts.append("C-")
    if _has(key.mods, KeyModifiers.SHIFT):
        parts.append("S-")
    if _has(key.mods, KeyModifiers.ALT):
        parts.append("M-")

    code = key.code
    if code.is_char:
        parts.append(code.arg)
    elif code.name == "F":
        parts.append(f"F{code.arg}")
    elif code.name in _PRINT_NAMES:
        parts.append(_PRINT_NAMES[code.name])
    else:
        raise ValueError(f"Cannot print key code {code.name}")
    return "".join(parts)


_PRESS_BUTTONS = {MouseButton.LEFT: "0", MouseButton.RIGHT: "1", MouseButton.MIDDLE: "2"}
_DRAG_BUTTONS = {MouseButton.LEFT: "32", MouseButton.RIGHT: "33", MouseButton.MIDDLE: "34"}


def encode_mouse_event(mev: MouseEvent) -> str:
    """SGR-encoded mouse event; empty for events that are not reported."""
    kind = mev.kind
    if kind in (MouseAction.DOWN, MouseAction.UP):
        button = _PRESS_BUTTONS[mev.button]
    elif kind is MouseAction.DRAG:
        button = _DRAG_BUTTONS[mev.button]
    elif kind is MouseAction.SCROLL_DOWN:
        button = "65"
    elif kind is MouseAction.SCROLL_UP:
        button = "64"
    else:
        return ""
    final = "m" if kind is MouseAction.UP else "M"
    return f"\x1b[<{button};{mev.x + 1};{mev.y + 1}{final}"