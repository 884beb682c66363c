"""Error values carrying a level, a code and info entries.

Use new() wherever a plain exception message would do:

    err = new("connection lost")

and pass a Desc when more detail is known up front:

    err = new(Desc(level=WARNING, code=0x0102, text="retrying",
                   info=["host=db1", "debug.stack"]))

Details can also be added later through the fluent setters:

    err.set_code(0x0103).add_info("attempt 3").log(logger)

The special info entry "debug.stack" is replaced by a snapshot of all
thread stacks taken where the error was created or the entry was added.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Self

from .levels import ERR_NEW_ARG, ERROR, Level, Logger, is_valid_level, level_name
from .stack import STACK_SENTINEL, capture_stack, trim_frames
from .structured import get_int, get_str

__all__ = ["Desc", "Error", "new"]

# Frames between the caller and the stack capture:
# new -> _from_desc -> _append_info
_NEW_SKIP = 3
# add_info -> _append_info
_ADD_INFO_SKIP = 2


def _empty_info() -> list[str]:
    return []


@dataclass
class Desc:
    """Detailed error information accepted by new().

    A level of 0 (or any invalid level) leaves the error at ERROR.
    """

    level: int = 0
    code: int = 0
    text: str = ""
    info: list[str] = field(default_factory=_empty_info)


class Error(Exception):
    """An error with a severity level, a numeric code and info entries.

    str() renders the text and, when nonzero, the code; info entries are
    never part of the rendering. Instances compare by identity.
    """

    def __init__(self, text: str = "") -> None:
        super().__init__(text)
        self._level: Level = ERROR
        self._code = 0
        self._text = text
        self._info: list[str] = []

    @property
    def level(self) -> Level:
        return self._level

    def set_level(self, level: int) -> Self:
        """Set the level; values outside WARNING..FATAL are ignored."""
        if is_valid_level(level):
            self._level = Level(level)
        return self

    @property
    def code(self) -> int:
        return self._code

    def set_code(self, code: int) -> Self:
        if isinstance(code, int) and not isinstance(code, bool):
            self._code = code
        return self

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> Self:
        self._text = str(text)
        return self

    @property
    def info(self) -> list[str]:
        """Info entries in insertion order (a copy)."""
        return list(self._info)

    def add_info(self, *lines: object) -> Self:
        """Append info entries, expanding "debug.stack" to a stack snapshot."""
        return self._append_info(_ADD_INFO_SKIP, lines)

    def _append_info(self, skip: int, lines: Sequence[object]) -> Self:
        entries = [str(line) for line in lines]
        if STACK_SENTINEL in entries:
            trace = trim_frames(capture_stack(), skip)
            entries = [trace if e == STACK_SENTINEL else e for e in entries]
        self._info.extend(entries)
        return self

    def log(self, logger: Logger) -> Self:
        """Send the error to logger, picking the call by level.

        FATAL goes to fatal(), PANIC to panic(), anything else to print().
        """
        match self._level:
            case Level.FATAL:
                logger.fatal(self)
            case Level.PANIC:
                logger.panic(self)
            case _:
                logger.print(self)
        return self

    def error(self) -> str:
        """Return the text, followed by the code in hex when it is nonzero."""
        if self._code != 0:
            return f"{self._text} (code: 0x{self._code:04x})"
        return self._text

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return f"Error(level={level_name(self._level)}, code={self._code}, text={self._text!r})"


def _info_entries(value: object) -> list[object]:
    """Return the entries of a descriptor info field.

    Lists and tuples give their items, None gives nothing, and any other
    value (a bare str included) is a single entry.
    """
    match value:
        case None:
            return []
        case list() | tuple():
            return list(value)
    return [value]


def _from_desc(desc: Desc) -> Error:
    err = Error(str(desc.text)).set_code(desc.code)
    err._append_info(_NEW_SKIP, _info_entries(desc.info))
    return err.set_level(desc.level)


def _desc_from_mapping(data: Mapping[object, object]) -> Desc:
    table = {k: v for k, v in data.items() if isinstance(k, str)}
    return Desc(
        level=get_int(table, "level") or 0,
        code=get_int(table, "code") or 0,
        text=get_str(table, "text") or "",
        info=[str(e) for e in _info_entries(table.get("info"))],
    )


def new(desc: object) -> Error:
    """Return a new Error built from a message or a descriptor.

    desc may be a str, a Desc, or a mapping with the Desc field names as
    keys. Any other argument yields an error describing the misuse (code
    ERR_NEW_ARG, with the argument's type name and a stack snapshot as
    info) rather than an exception.
    """
    match desc:
        case str():
            return Error(str(desc))
        case Desc():
            return _from_desc(desc)
        case Mapping():
            return _from_desc(_desc_from_mapping(desc))
    type_name = type(desc).__name__
    return _from_desc(
        Desc(
            code=ERR_NEW_ARG,
            text=f"unsupported error descriptor type {type_name}",
            info=[type_name, STACK_SENTINEL],
        )
    )

