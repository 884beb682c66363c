"""Core error types and logic."""

from .config import Config, ConfigError, load_config
from .error import Desc, Error, new
from .levels import (
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
from .result import Err, Ok, Result
from .stack import STACK_SENTINEL, capture_stack, trim_frames

__all__ = [
    # config
    "Config",
    "ConfigError",
    "load_config",
    # error
    "Desc",
    "Error",
    "new",
    # levels
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
    # result
    "Err",
    "Ok",
    "Result",
    # stack
    "STACK_SENTINEL",
    "capture_stack",
    "trim_frames",
]
