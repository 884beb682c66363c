"""Result type for boundary code that can fail.

The error values in exterr.core.error never fail; reading configuration
from disk can. Functions doing so return Ok(value) or Err(error) instead of
raising:

    match load_config(path):
        case Ok(config):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result."""

    value: T

    def unwrap_or(self, default: T) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result."""

    error: E

    def unwrap_or[T](self, default: T) -> T:
        return default

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]
