"""Length-prefixed message framing for the client/server stream."""

from __future__ import annotations

import json
import struct
from typing import Any, Callable

_HEADER = struct.Struct(">I")
_MAX_LEN = 2**32 - 1


class FrameError(ValueError):
    """Raised when a message cannot be encoded or a frame cannot be decoded."""


def _json_dumps(msg: Any) -> bytes:
    return json.dumps(msg, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def _json_loads(data: bytes) -> Any:
    return json.loads(data.decode("utf-8"))


class MsgEncoder:
    """Turns messages into frames: a 4-byte big-endian length, then the payload."""

    def __init__(self, dumps: Callable[[Any], bytes] = _json_dumps) -> None:
        self._dumps = dumps

    def encode(self, msg: Any) -> bytes:
        try:
            payload = self._dumps(msg)
        except (TypeError, ValueError) as err:
            raise FrameError(f"Cannot encode message: {err}") from err
        if len(payload) > _MAX_LEN:
            raise FrameError("Message is too large for one frame")
        return _HEADER.pack(len(payload)) + payload


class MsgDecoder:
    """Collects bytes from a stream and yields the complete messages in them."""

    def __init__(self, loads: Callable[[bytes], Any] = _json_loads) -> None:
        self._loads = loads
        self._buf = bytearray()
        self._pending: int | None = None

    def feed(self, data: bytes) -> list[Any]:
        """Add ``data`` and return every message completed by it, in order."""
        self._buf += data
        messages = []
        while True:
            if self._pending is None:
                if len(self._buf) < _HEADER.size:
                    break
                (self._pending,) = _HEADER.unpack_from(self._buf)
                del self._buf[: _HEADER.size]
            if len(self._buf) < self._pending:
                break
            payload = bytes(self._buf[: self._pending])
            del self._buf[: self._pending]
            self._pending = None
            try:
                messages.append(self._loads(payload))
            except (ValueError, UnicodeDecodeError) as err:
                raise FrameError(f"Cannot decode message: {err}") from err
        return messages