"""Severity levels, reserved error codes and the logging sink contract.

Level values match the companion logging levels (WARNING=2 .. FATAL=5) so
that an error's level can be handed to a leveled logger unchanged.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

__all__ = [
    "Level",
    "WARNING",
    "ERROR",
    "PANIC",
    "FATAL",
    "MIN_LEVEL",
    "MAX_LEVEL",
    "ErrorCode",
    "ERR_NEW_ARG",
    "Logger",
    "is_valid_level",
    "level_name",
    "parse_level",
]


class Level(IntEnum):
    """Error severity, in ascending order."""

    WARNING = 2
    ERROR = 3
    PANIC = 4
    FATAL = 5

    def __str__(self) -> str:
        return self.name


WARNING = Level.WARNING
ERROR = Level.ERROR
PANIC = Level.PANIC
FATAL = Level.FATAL

MIN_LEVEL = WARNING
MAX_LEVEL = FATAL


class ErrorCode(IntEnum):
    """Error codes reserved by this package.

    Caller-defined codes share the same integer space; only the values
    listed here have a meaning of their own.
    """

    NEW_ARG = 0  # unsupported argument passed to new()


ERR_NEW_ARG = ErrorCode.NEW_ARG


class Logger(Protocol):
    """Sink an error can log itself to.

    Any leveled logger can be adapted to it; see exterr.output.sinks.
    """

    def fatal(self, *args: object) -> None: ...

    def panic(self, *args: object) -> None: ...

    def print(self, *args: object) -> None: ...


def is_valid_level(level: object) -> bool:
    """Return True if level is an int within WARNING..FATAL."""
    if isinstance(level, bool) or not isinstance(level, int):
        return False
    return MIN_LEVEL <= level <= MAX_LEVEL


def level_name(level: object) -> str:
    """Return the name of a level, or "?" for anything else."""
    if not is_valid_level(level):
        return "?"
    return Level(level).name  # type: ignore[arg-type]


def parse_level(value: object) -> Level | None:
    """Convert a level, its numeric value or its name to a Level.

    Names are matched case-insensitively. Returns None when value does not
    denote a valid level.
    """
    if isinstance(value, str):
        name = value.strip().upper()
        if name in Level.__members__:
            return Level[name]
        return None
    if is_valid_level(value):
        return Level(value)  # type: ignore[arg-type]
    return None
