"""new command - build an error from the command line and log it."""

from __future__ import annotations

from pathlib import Path

import typer

from exterr.cli.context import ExitCode, build_context
from exterr.core.error import Desc
from exterr.core.error import new as new_error
from exterr.core.levels import Level, parse_level
from exterr.core.stack import STACK_SENTINEL
from exterr.output.sinks import ConsoleLogger


def _parse_code(value: str) -> int | None:
    try:
        return int(value, 0)
    except ValueError:
        return None


def _parse_level_option(value: str) -> Level | None:
    try:
        return parse_level(int(value))
    except ValueError:
        return parse_level(value)


def new(
    text: str = typer.Argument(..., help="Error text."),
    level: str | None = typer.Option(
        None, "--level", "-l", help="WARNING, ERROR, PANIC or FATAL (or 2-5)."
    ),
    code: str | None = typer.Option(None, "--code", "-c", help="Error code, decimal or 0x hex."),
    info: list[str] | None = typer.Option(None, "--info", "-i", help="Info entry (repeatable)."),
    stack: bool = typer.Option(False, "--stack", help="Attach a stack snapshot."),
    config: Path | None = typer.Option(None, "--config", help="Config file (TOML)."),
) -> None:
    """Create an error and log it to the console."""
    ctx = build_context(config)
    defaults = ctx.config.defaults

    err_level = defaults.level
    if level is not None:
        parsed = _parse_level_option(level)
        if parsed is None:
            ctx.console.error(f"error: unknown level: {level}")
            raise typer.Exit(code=int(ExitCode.USER_ERROR))
        err_level = parsed

    err_code = defaults.code
    if code is not None:
        parsed_code = _parse_code(code)
        if parsed_code is None:
            ctx.console.error(f"error: invalid code: {code}")
            raise typer.Exit(code=int(ExitCode.USER_ERROR))
        err_code = parsed_code

    entries = list(info or [])
    if stack:
        entries.append(STACK_SENTINEL)

    err = new_error(Desc(level=err_level, code=err_code, text=text, info=entries))
    err.log(ConsoleLogger(ctx.console, show_info=ctx.config.output.show_info))
