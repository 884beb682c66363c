"""Typed reads from untyped mappings.

Mapping descriptors passed to new() and parsed TOML both arrive as
dict[str, object]. These helpers return the value when it has the expected
type and None otherwise, so callers can fall back to a default without
catching anything.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys)."""
    return as_str_dict(table.get(key))


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value as stored, without stripping."""
    value = table.get(key)
    if isinstance(value, str):
        return value
    return None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an integer value. Booleans are not integers here."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a boolean value."""
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return None
