"""Copying text to the system clipboard."""

from __future__ import annotations

import base64
import functools
import logging
import os
import shutil
import subprocess
import sys
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Provider:
    """How text reaches the clipboard: OSC 52, an external program, or nowhere."""

    kind: str
    program: str | None = None
    args: tuple[str, ...] = ()

    OSC52 = "osc52"
    EXEC = "exec"
    NOOP = "noop"

    def __post_init__(self) -> None:
        object.__setattr__(self, "args", tuple(self.args))
        if self.kind not in (self.OSC52, self.EXEC, self.NOOP):
            raise ValueError(f"unknown clipboard provider `{self.kind}`")
        if (self.kind == self.EXEC) != (self.program is not None):
            raise ValueError("only the exec provider names a program")

    @classmethod
    def osc52(cls) -> Provider:
        return cls(cls.OSC52)

    @classmethod
    def exec(cls, program: str, args: tuple[str, ...] | list[str] = ()) -> Provider:
        return cls(cls.EXEC, program, tuple(args))

    @classmethod
    def noop(cls) -> Provider:
        return cls(cls.NOOP)


def _check_prog(program: str, *args: str) -> Provider | None:
    if shutil.which(program) is not None:
        return Provider.exec(program, args)
    return None


def detect_copy_provider() -> Provider:
    """Choose the clipboard mechanism available on this system."""
    platform = sys.platform
    if platform == "win32":
        return _check_prog("clip") or Provider.osc52()
    if platform == "darwin":
        return _check_prog("pbcopy") or Provider.osc52()

    if "WAYLAND_DISPLAY" in os.environ:
        provider = _check_prog("wl-copy", "--type", "text/plain")
        if provider is not None:
            return provider
    if "DISPLAY" in os.environ:
        provider = _check_prog("xclip", "-i", "-selection", "clipboard")
        if provider is not None:
            return provider
        provider = _check_prog("xsel", "-i", "-b")
        if provider is not None:
            return provider
    provider = _check_prog("termux-clipboard-set")
    if provider is not None:
        return provider
    if "TMUX" in os.environ:
        provider = _check_prog("tmux", "load-buffer", "-")
        if provider is not None:
            return provider
    return Provider.osc52()


def copy_with(text: str, provider: Provider) -> None:
    """Copy ``text`` using ``provider``; raises ``OSError`` on failure."""
    if provider.kind == Provider.OSC52:
        encoded = base64.standard_b64encode(text.encode("utf-8")).decode("ascii")
        sys.stdout.write(f"\x1b]52;;{encoded}\x07")
        sys.stdout.flush()
    elif provider.kind == Provider.EXEC:
        subprocess.run(
            [provider.program, *provider.args],
            input=text.encode("utf-8"),
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )


@functools.lru_cache(maxsize=None)
def _provider() -> Provider:
    return detect_copy_provider()


def copy(text: str) -> None:
    """Copy ``text`` to the clipboard, logging instead of raising on failure."""
    try:
        copy_with(text, _provider())
    except OSError as err:
        log.warning("Copying error: %s", err)