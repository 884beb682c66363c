from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

import typer

from exterr.core.config import Config, load_config
from exterr.core.result import Err
from exterr.output.console import ConsoleProtocol, RichConsole

DEFAULT_CONFIG_NAME = "exterr.toml"


class ExitCode(IntEnum):
    """Process exit codes of the exterr command."""

    OK = 0
    USER_ERROR = 1


@dataclass(frozen=True, slots=True)
class CLIContext:
    config: Config
    console: ConsoleProtocol


def build_context(config_path: Path | None = None) -> CLIContext:
    """Load the config (explicit path, or exterr.toml in the cwd if present)."""
    console = RichConsole()

    path = config_path
    if path is None:
        candidate = Path.cwd() / DEFAULT_CONFIG_NAME
        if candidate.is_file():
            path = candidate

    config = Config()
    if path is not None:
        result = load_config(path)
        if isinstance(result, Err):
            console.error(f"error: {result.error.message}")
            raise typer.Exit(code=int(ExitCode.USER_ERROR))
        config = result.value

    return CLIContext(config=config, console=console)
