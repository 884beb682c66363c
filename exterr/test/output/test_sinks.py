"""Tests for exterr.output.sinks module."""

from __future__ import annotations

import logging

import pytest

from exterr.core.error import Desc, new
from exterr.core.levels import FATAL, PANIC, WARNING
from exterr.output.console import MockConsole, Style
from exterr.output.sinks import ConsoleLogger, LoggingLogger, MockLogger


class TestMockLogger:
    def test_labels(self) -> None:
        log = MockLogger()
        log.print("a")
        log.panic("b")
        log.fatal("c", 1)
        assert log.log == "a\n[PANIC] b\n[FATAL] c 1\n"
        assert log.lines == ["a", "[PANIC] b", "[FATAL] c 1"]

    def test_clear(self) -> None:
        log = MockLogger()
        log.print("a")
        log.clear()
        assert log.log == ""


class TestConsoleLogger:
    def test_error_level(self) -> None:
        console = MockConsole()
        new("abc").log(ConsoleLogger(console))
        assert console.outputs[0].message == "error: abc"
        assert console.outputs[0].style == Style.ERROR

    def test_warning_level(self) -> None:
        console = MockConsole()
        new("abc").set_level(WARNING).log(ConsoleLogger(console))
        assert console.outputs[0].message == "warning: abc"
        assert console.outputs[0].style == Style.WARNING

    def test_panic_and_fatal(self) -> None:
        console = MockConsole()
        logger = ConsoleLogger(console)
        new("abc").set_level(PANIC).log(logger).set_level(FATAL).log(logger)
        assert console.messages == ["panic: abc", "fatal: abc"]
        assert [o.style for o in console.outputs] == [Style.PANIC, Style.FATAL]

    def test_plain_arguments(self) -> None:
        console = MockConsole()
        ConsoleLogger(console).print("a", 1)
        assert console.messages == ["error: a 1"]

    def test_info_hidden_by_default(self) -> None:
        console = MockConsole()
        new(Desc(text="abc", info=["detail"])).log(ConsoleLogger(console))
        assert console.messages == ["error: abc"]

    def test_show_info(self) -> None:
        console = MockConsole()
        err = new(Desc(code=1, text="abc", info=["line 1", "two\nlines"]))
        err.log(ConsoleLogger(console, show_info=True))
        assert console.messages == ["error: abc (code: 0x0001)", "  line 1", "  two", "  lines"]
        assert console.count(Style.DIM) == 3


class TestLoggingLogger:
    LOGGER = "exterr.test.sinks"

    def test_error_level(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger(self.LOGGER)
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            new(Desc(code=1, text="abc", info=["x"])).log(LoggingLogger(logger))
        record = caplog.records[0]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "abc (code: 0x0001)"
        assert record.__dict__["err_level"] == "ERROR"
        assert record.__dict__["err_code"] == 1
        assert record.__dict__["err_info"] == ["x"]

    def test_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = LoggingLogger(logging.getLogger(self.LOGGER))
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            err = new("abc").set_level(WARNING).log(logger)
            err.set_level(PANIC).log(logger).set_level(FATAL).log(logger)
        assert [r.levelno for r in caplog.records] == [
            logging.WARNING,
            logging.ERROR,
            logging.CRITICAL,
        ]
        assert [r.getMessage() for r in caplog.records] == ["abc", "[PANIC] abc", "[FATAL] abc"]

    def test_plain_arguments(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = LoggingLogger(logging.getLogger(self.LOGGER))
        with caplog.at_level(logging.DEBUG, logger=self.LOGGER):
            logger.print("a", "b")
        assert caplog.records[0].getMessage() == "a b"
        assert "err_code" not in caplog.records[0].__dict__
