# procdeck

procdeck holds the building blocks of a process manager that runs several
commands side by side, each in its own terminal pane. It has no
dependencies outside the standard library.

- `procdeck.key`: keys with their modifiers, and the `<C-a>` text notation
- `procdeck.encode_term`: the xterm byte sequences for keys and mouse
  events sent to a child's terminal
- `procdeck.mouse`: mouse events and their buttons
- `procdeck.yaml_val`: configuration values that know their path in the
  document and resolve `$select: os` choices
- `procdeck.selection`: copy-mode positions and selected ranges
- `procdeck.framing`: length-prefixed messages over a byte stream
- `procdeck.clipboard`: copying text to the system clipboard

## Keys

```python
from procdeck.key import Key, KeyCode, KeyModifiers

key = Key.parse("<C-M-a>")
key.code                       # KeyCode(name='Char', arg='a')
key.mods                       # KeyModifiers.CONTROL | KeyModifiers.ALT
str(key)                       # '<C-M-a>'

str(Key(KeyCode.char("-")))    # '<Minus>'
str(Key(KeyCode.function(5)))  # '<F5>'
```

Named keys are `BS`, `Enter`, `Left`, `Right`, `Up`, `Down`, `Home`, `End`,
`PageUp`, `PageDown`, `Tab`, `Del`, `Insert`, `Nul`, `Esc`, `LT`, `GT`,
`Minus` and `F1` to `F12`, in any letter case; any other single character
is a character key. Modifiers are `C-`, `S-` and `M-`. A malformed key
raises `KeyParseError`, a `ValueError`.

## Terminal encoding

```python
from procdeck.key import Key
from procdeck.encode_term import KeyCodeEncodeModes, encode_key, print_key
from procdeck.mouse import MouseAction, MouseButton, MouseEvent
from procdeck.encode_term import encode_mouse_event

encode_key(Key.parse("<Up>"))                                   # '\x1b[A'
encode_key(Key.parse("<Up>"),
           KeyCodeEncodeModes(application_cursor_keys=True))   # '\x1bOA'
encode_key(Key.parse("<C-c>"))                                  # '\x03'

print_key(Key.parse("<PageUp>"))                                # 'PgUp'

event = MouseEvent(MouseAction.DOWN, x=4, y=2, button=MouseButton.LEFT)
encode_mouse_event(event)                                       # '\x1b[<0;5;3M'
```

`KeyCodeEncodeModes` has `enable_csi_u_key_encoding`,
`application_cursor_keys` and `newline_mode`, all off by default. Released
keys encode to an empty string, as do mouse moves and sideways scrolls.
`MouseEvent.translate(area)` shifts an event by an area's `x` and `y`.

## Configuration values

`Val` wraps a parsed YAML value (plain Python dicts, lists and scalars) and
names its path in errors:

```python
from procdeck.yaml_val import Val, ConfigError

config = Val({"procs": {"list": {"$select": "os", "windows": "dir", "$else": "ls"}}})
config.as_object()["procs"].as_object()["list"].as_str()   # 'dir' on Windows, else 'ls'

try:
    Val({"width": "wide"}).as_object()["width"].as_usize()
except ConfigError as err:
    print(err)                                              # Expected int at <config>.width
```

`Val` has `as_bool`, `as_usize`, `as_str`, `as_array`, `as_object`,
`error_at` and the `raw` and `path` properties. `value_to_string` renders
a scalar key, and `current_os` gives the name matched by `$select: os`.

## Copy-mode selection

```python
from procdeck.selection import CopyMode, Pos, to_low_high, within

within(Pos(y=0, x=2), Pos(y=1, x=1), Pos(y=0, x=5))   # True
to_low_high(Pos(2, 0), Pos(1, 3))                      # (Pos(y=1, x=3), Pos(y=2, x=0))
CopyMode().is_active()                                 # False
```

## Message framing

Each frame is a 4-byte big-endian length followed by the payload, JSON by
default; other serializers can be passed in.

```python
from procdeck.framing import MsgDecoder, MsgEncoder

frame = MsgEncoder().encode({"width": 80})
decoder = MsgDecoder()
decoder.feed(frame[:3])    # []
decoder.feed(frame[3:])    # [{'width': 80}]
```

Messages that cannot be encoded or decoded raise `FrameError`.

## Clipboard

```python
from procdeck.clipboard import Provider, copy, copy_with, detect_copy_provider

detect_copy_provider()            # e.g. Provider(kind='exec', program='xclip', ...)
copy("some text")                 # uses the detected provider, logs failures
copy_with("some text", Provider.osc52())
```

The provider is `pbcopy` on macOS, `clip` on Windows, and on other systems
`wl-copy`, `xclip`, `xsel`, `termux-clipboard-set` or `tmux`, whichever
suits the environment and is installed; otherwise the text is written to
standard output as an OSC 52 sequence.

## What it does not do

procdeck does not start or supervise processes, draw a screen, read key
presses from a terminal, load configuration files, map keys to actions, or
run a server or client. It has no command-line program.