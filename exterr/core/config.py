"""Typed configuration for the exterr command.

The config file is TOML:

    [defaults]
    level = "WARNING"   # or 2-5
    code = 0

    [output]
    show_info = true
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .levels import Level, parse_level
from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_bool, get_int, get_table

__all__ = [
    "Config",
    "ConfigError",
    "DefaultsConfig",
    "OutputConfig",
    "load_config",
    "load_config_or_default",
]


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class DefaultsConfig:
    """Values used when the command line does not give them."""

    level: Level = Level.ERROR
    code: int = 0


@dataclass(frozen=True, slots=True)
class OutputConfig:
    """Console output options."""

    show_info: bool = True


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML).

        Raises:
            ValueError: If [defaults] gives an unknown level name or number.
        """
        defaults: StrDict = get_table(data, "defaults") or {}
        output: StrDict = get_table(data, "output") or {}

        level = Level.ERROR
        level_value = defaults.get("level")
        if level_value is not None:
            parsed = parse_level(level_value)
            if parsed is None:
                raise ValueError(f"unknown level {level_value!r}")
            level = parsed

        show_info = get_bool(output, "show_info")
        return cls(
            defaults=DefaultsConfig(level=level, code=get_int(defaults, "code") or 0),
            output=OutputConfig(show_info=True if show_info is None else show_info),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the config file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except ValueError as e:
        return Err(ConfigError(f"Invalid config: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return the default config on any error."""
    return load_config(path).unwrap_or(Config())
