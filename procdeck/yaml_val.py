"""Configuration values that remember where in the document they came from."""

from __future__ import annotations

import math
import sys
from typing import Any


class ConfigError(ValueError):
    """Raised when a configuration value has the wrong shape."""


def current_os() -> str:
    """Name of the running operating system as used by ``$select: os``."""
    platform = sys.platform
    for prefix, name in (
        ("linux", "linux"),
        ("darwin", "macos"),
        ("win32", "windows"),
        ("cygwin", "windows"),
        ("freebsd", "freebsd"),
        ("openbsd", "openbsd"),
        ("netbsd", "netbsd"),
        ("dragonfly", "dragonfly"),
        ("sunos", "solaris"),
        ("android", "android"),
        ("ios", "ios"),
    ):
        if platform.startswith(prefix):
            return name
    return platform


def _trace_str(trace: tuple[str, ...]) -> str:
    return "".join(["<config>", *(f".{seg}" for seg in trace)])


def _select(mapping: dict, trace: tuple[str, ...]) -> tuple[Any, tuple[str, ...]]:
    if mapping.get("$select") == "os":
        os_name = current_os()
        if os_name in mapping:
            return mapping[os_name], trace + (os_name,)
        if "$else" in mapping:
            return mapping["$else"], trace + ("$else",)
        raise ConfigError(
            f"No matching condition found at {_trace_str(trace)}. "
            'Use "$else" for default value.'
        )
    raise ConfigError(f'Expected "os" at {_trace_str(trace + ("$select",))}')


class Val:
    """A parsed YAML value with its path; ``$select`` mappings are resolved."""

    __slots__ = ("_value", "_trace")

    def __init__(self, value: Any, trace: tuple[str, ...] = ()) -> None:
        trace = tuple(trace)
        while isinstance(value, dict) and value and next(iter(value)) == "$select":
            value, trace = _select(value, trace)
        self._value = value
        self._trace = trace

    @property
    def raw(self) -> Any:
        return self._value

    @property
    def path(self) -> str:
        return _trace_str(self._trace)

    def __repr__(self) -> str:
        return f"Val({self._value!r} at {self.path})"

    def error_at(self, msg: str) -> ConfigError:
        """An error whose message points at this value."""
        return ConfigError(f"{msg} at {self.path}")

    def as_bool(self) -> bool:
        if not isinstance(self._value, bool):
            raise self.error_at("Expected bool")
        return self._value

    def as_usize(self) -> int:
        value = self._value
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise self.error_at("Expected int")
        return value

    def as_str(self) -> str:
        if not isinstance(self._value, str):
            raise self.error_at("Expected string")
        return self._value

    def as_array(self) -> list[Val]:
        if not isinstance(self._value, list):
            raise self.error_at("Expected array")
        return [
            Val(item, self._trace + (str(i),)) for i, item in enumerate(self._value)
        ]

    def as_object(self) -> dict[Any, Val]:
        if not isinstance(self._value, dict):
            raise self.error_at("Expected object")
        return {
            key: Val(item, self._trace + (value_to_string(key),))
            for key, item in self._value.items()
        }


def value_to_string(value: Any) -> str:
    """Render a scalar YAML value as text."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return ".nan"
        if math.isinf(value):
            return ".inf" if value > 0 else "-.inf"
        return repr(value)
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        raise ConfigError("`primitive_to_string` is not implemented for arrays.")
    if isinstance(value, dict):
        raise ConfigError("`primitive_to_string` is not implemented for objects.")
    raise ConfigError("Yaml tags are not supported")