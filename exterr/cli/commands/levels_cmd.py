"""levels command - list severity levels."""

from __future__ import annotations

from exterr.cli.context import build_context
from exterr.core.levels import Level
from exterr.output.console import Style


def levels() -> None:
    """List error levels and their numeric values."""
    console = build_context().console
    for lvl in Level:
        console.print(f"{int(lvl):>3}  {lvl.name}", Style.DEFAULT)
