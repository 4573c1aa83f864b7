"""Helpers for reading untyped TOML tables.

The descriptor is user-written, so every value is validated at the boundary
before it reaches the typed domain objects.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

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


def get_str(table: Mapping[str, object], *keys: str) -> str | None:
    """Get the first string value found under any of `keys`, stripped.

    Returns None if missing, not a str, or empty after stripping.
    """
    for key in keys:
        value = table.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def get_bool(table: Mapping[str, object], *keys: str) -> bool | None:
    """Get the first boolean value found under any of `keys`."""
    for key in keys:
        value = table.get(key)
        if isinstance(value, bool):
            return value
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    return as_str_dict(table.get(key))


def get_str_list(table: Mapping[str, object], key: str) -> tuple[str, ...]:
    """Get a list of non-blank strings; other items are dropped."""
    value = table.get(key)
    if not isinstance(value, list):
        return ()
    items = cast(list[object], value)
    return tuple(s.strip() for s in items if isinstance(s, str) and s.strip())
