"""Concrete sinks for Error.log().

Each class implements exterr.core.levels.Logger. None of them terminates
the process or raises on fatal()/panic(); those calls only pick how loudly
the error is reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from exterr.core.error import Error
from exterr.core.levels import WARNING
from exterr.output.console import ConsoleProtocol, Style

__all__ = ["ConsoleLogger", "LoggingLogger", "MockLogger"]


def _join(args: tuple[object, ...]) -> str:
    return " ".join(str(a) for a in args)


def _errors(args: tuple[object, ...]) -> list[Error]:
    return [a for a in args if isinstance(a, Error)]


class ConsoleLogger:
    """Logger writing to a ConsoleProtocol.

    print() uses the warning style when every error argument is a WARNING,
    the error style otherwise. With show_info, the info entries of each
    error argument follow the message, dimmed.
    """

    def __init__(self, console: ConsoleProtocol, *, show_info: bool = False) -> None:
        self._console = console
        self._show_info = show_info

    def print(self, *args: object) -> None:
        errors = _errors(args)
        if errors and all(e.level == WARNING for e in errors):
            self._console.warning(f"warning: {_join(args)}")
        else:
            self._console.error(f"error: {_join(args)}")
        self._print_info(errors)

    def panic(self, *args: object) -> None:
        self._console.print(f"panic: {_join(args)}", Style.PANIC)
        self._print_info(_errors(args))

    def fatal(self, *args: object) -> None:
        self._console.print(f"fatal: {_join(args)}", Style.FATAL)
        self._print_info(_errors(args))

    def _print_info(self, errors: list[Error]) -> None:
        if not self._show_info:
            return
        for err in errors:
            for entry in err.info:
                for line in entry.rstrip("\n").splitlines():
                    self._console.print(f"  {line}", Style.DIM)


class LoggingLogger:
    """Logger forwarding to a standard library logger.

    print() logs WARNING errors at logging.WARNING and everything else at
    logging.ERROR; panic() logs at ERROR and fatal() at CRITICAL, with a
    [PANIC]/[FATAL] prefix. The first error argument's level name, code and
    info entries are passed as extra fields err_level, err_code, err_info.
    """

    def __init__(self, logger: logging.Logger | logging.LoggerAdapter[logging.Logger]) -> None:
        self._logger = logger

    def print(self, *args: object) -> None:
        errors = _errors(args)
        if errors and all(e.level == WARNING for e in errors):
            self._emit(logging.WARNING, "", args)
        else:
            self._emit(logging.ERROR, "", args)

    def panic(self, *args: object) -> None:
        self._emit(logging.ERROR, "[PANIC] ", args)

    def fatal(self, *args: object) -> None:
        self._emit(logging.CRITICAL, "[FATAL] ", args)

    def _emit(self, level: int, prefix: str, args: tuple[object, ...]) -> None:
        extra: dict[str, object] = {}
        errors = _errors(args)
        if errors:
            first = errors[0]
            extra = {
                "err_level": first.level.name,
                "err_code": first.code,
                "err_info": first.info,
            }
        self._logger.log(level, "%s%s", prefix, _join(args), extra=extra)


@dataclass
class MockLogger:
    """Logger that accumulates output as text, one line per call."""

    log: str = ""

    def print(self, *args: object) -> None:
        self.log += _join(args) + "\n"

    def panic(self, *args: object) -> None:
        self.log += "[PANIC] " + _join(args) + "\n"

    def fatal(self, *args: object) -> None:
        self.log += "[FATAL] " + _join(args) + "\n"

    def clear(self) -> None:
        self.log = ""

    @property
    def lines(self) -> list[str]:
        return self.log.splitlines()
