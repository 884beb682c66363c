"""Console output abstraction.

Sinks and commands write through ConsoleProtocol, so the Rich backend can be
swapped for MockConsole in tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    WARNING = auto()  # Yellow
    ERROR = auto()  # Red
    PANIC = auto()  # Red, bold
    FATAL = auto()  # White on red
    DIM = auto()  # Info entries, stack snapshots

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print, taken literally (no markup)
            style: The style to apply
        """
        ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class RichConsole:
    """Console implementation using Rich."""

    def __init__(self) -> None:
        from rich.console import Console

        self._console = Console(highlight=False)
        self._style_map = {
            Style.DEFAULT: "",
            Style.WARNING: "yellow",
            Style.ERROR: "red",
            Style.PANIC: "red bold",
            Style.FATAL: "bold white on red",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        self._console.print(message, style=rich_style or None, markup=False)

    def warning(self, message: str) -> None:
        self.print(message, Style.WARNING)

    def error(self, message: str) -> None:
        self.print(message, Style.ERROR)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.WARNING))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.ERROR))

    # Test helpers

    def clear(self) -> None:
        self.outputs.clear()

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """All output as a single newline-separated string."""
        return "\n".join(self.messages)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]

    def count(self, style: Style) -> int:
        return sum(1 for o in self.outputs if o.style == style)
