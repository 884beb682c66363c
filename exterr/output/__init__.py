"""Output abstraction layer and logging sinks."""

from .console import (
    ConsoleProtocol,
    MockConsole,
    RichConsole,
    Style,
)
from .sinks import ConsoleLogger, LoggingLogger, MockLogger

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "ConsoleLogger",
    "LoggingLogger",
    "MockLogger",
]
