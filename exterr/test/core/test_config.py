"""Tests for exterr.core.config module."""

from __future__ import annotations

from pathlib import Path

import pytest

from exterr.core.config import (
    Config,
    DefaultsConfig,
    OutputConfig,
    load_config,
    load_config_or_default,
)
from exterr.core.levels import Level
from exterr.core.result import Err, Ok


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "exterr.toml"
    path.write_text(content, encoding="utf-8")
    return path


class TestDefaults:
    def test_defaults(self) -> None:
        config = Config()
        assert config.defaults == DefaultsConfig(level=Level.ERROR, code=0)
        assert config.output == OutputConfig(show_info=True)

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Config().defaults.code = 1  # type: ignore[misc]

    def test_from_empty_dict(self) -> None:
        assert Config.from_dict({}) == Config()


class TestLoadConfig:
    def test_full_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            '[defaults]\nlevel = "warning"\ncode = 16\n\n[output]\nshow_info = false\n',
        )
        result = load_config(path)
        assert isinstance(result, Ok)
        assert result.value.defaults.level is Level.WARNING
        assert result.value.defaults.code == 16
        assert result.value.output.show_info is False

    def test_missing_file(self, tmp_path: Path) -> None:
        result = load_config(tmp_path / "missing.toml")
        assert isinstance(result, Err)
        assert "not found" in result.error.message
        assert result.error.path == tmp_path / "missing.toml"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, "[defaults\n"))
        assert isinstance(result, Err)
        assert "Invalid TOML" in result.error.message

    def test_unknown_level(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, '[defaults]\nlevel = "loud"\n'))
        assert isinstance(result, Err)
        assert "loud" in result.error.message

    def test_numeric_level(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, "[defaults]\nlevel = 4\n"))
        assert isinstance(result, Ok)
        assert result.value.defaults.level is Level.PANIC

    @pytest.mark.parametrize("value", ["9", "true", "2.5"])
    def test_invalid_level_values(self, tmp_path: Path, value: str) -> None:
        result = load_config(_write(tmp_path, f"[defaults]\nlevel = {value}\n"))
        assert isinstance(result, Err)
        assert "unknown level" in result.error.message

    def test_wrong_types_use_defaults(self, tmp_path: Path) -> None:
        result = load_config(_write(tmp_path, '[defaults]\ncode = "x"\n[output]\nshow_info = 1\n'))
        assert isinstance(result, Ok)
        assert result.value == Config()

    def test_or_default(self, tmp_path: Path) -> None:
        assert load_config_or_default(tmp_path / "missing.toml") == Config()
