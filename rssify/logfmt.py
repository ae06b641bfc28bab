"""Structured ``key=value`` logging to stderr for the command line."""

from __future__ import annotations

import sys
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from enum import IntEnum
from typing import Any, TextIO, Union

Fields = Union[Mapping[str, Any], Iterable[tuple[str, Any]]]


class LogLevel(IntEnum):
    """Severity levels; a higher value is more verbose."""

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4

    @classmethod
    def from_verbosity(cls, verbosity: int) -> LogLevel:
        """Map a ``-v`` count to a level: 0 is warn, 1 is info, more is debug."""
        if verbosity <= 0:
            return cls.WARN
        if verbosity == 1:
            return cls.INFO
        return cls.DEBUG

    def __str__(self) -> str:
        return self.name.lower()


def _format_value(value: Any) -> str:
    text = str(value)
    if any(ch.isspace() for ch in text):
        # Keep each value a single token.
        text = "_".join(text.split())
    return text


@dataclass(frozen=True)
class Logger:
    """Writes one ``key=value`` line per event; never writes to stdout."""

    level: LogLevel
    component: str = "cli"
    stream: TextIO | None = None

    def with_component(self, name: str) -> Logger:
        """Return a copy of this logger tagged with another component name."""
        return replace(self, component=name)

    def error(self, op: str, fields: Fields = ()) -> None:
        self._emit(LogLevel.ERROR, op, fields)

    def warn(self, op: str, fields: Fields = ()) -> None:
        if self.level >= LogLevel.WARN:
            self._emit(LogLevel.WARN, op, fields)

    def info(self, op: str, fields: Fields = ()) -> None:
        if self.level >= LogLevel.INFO:
            self._emit(LogLevel.INFO, op, fields)

    def debug(self, op: str, fields: Fields = ()) -> None:
        if self.level >= LogLevel.DEBUG:
            self._emit(LogLevel.DEBUG, op, fields)

    def _emit(self, level: LogLevel, op: str, fields: Fields) -> None:
        ts_ms = time.time_ns() // 1_000_000
        pairs = fields.items() if isinstance(fields, Mapping) else fields
        tokens = [f"ts={ts_ms}", f"level={level}", f"component={self.component}", f"op={op}"]
        tokens.extend(f"{key}={_format_value(value)}" for key, value in pairs)
        stream = self.stream if self.stream is not None else sys.stderr
        try:
            stream.write(" ".join(tokens) + "\n")
        except OSError:
            pass