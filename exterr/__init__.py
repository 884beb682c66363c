"""Extended error values.

If a single string does not carry enough information about an error, use
exterr.new() where you would otherwise construct a plain exception message.

new() still accepts a single string. Where more information is available,
pass a Desc (or a mapping with the same keys) instead, or add it later with
the error's fluent setters:

- level tells warnings, regular errors, panics converted to errors and fatal
  errors apart, and picks the logging call in Error.log();
- code allows custom classification and prioritizing, by ranges or bit
  masks;
- info stores arbitrary messages besides the main text; the entry
  "debug.stack" is replaced by a stack snapshot of all threads at the point
  where it is added.
"""

from .core.error import Desc, Error, new
from .core.levels import (
    ERR_NEW_ARG,
    ERROR,
    FATAL,
    PANIC,
    WARNING,
    ErrorCode,
    Level,
    Logger,
    level_name,
    parse_level,
)
from .core.stack import STACK_SENTINEL, capture_stack, trim_frames

__version__ = "0.1.0"

__all__ = [
    "Desc",
    "Error",
    "new",
    "ERR_NEW_ARG",
    "ERROR",
    "FATAL",
    "PANIC",
    "WARNING",
    "ErrorCode",
    "Level",
    "Logger",
    "level_name",
    "parse_level",
    "STACK_SENTINEL",
    "capture_stack",
    "trim_frames",
    "__version__",
]
