"""Environment lists made of ``KEY=VALUE`` strings.

The environment is a plain list of strings. Functions that change it return
a new list and leave the one they were given untouched.
"""

from __future__ import annotations

from collections.abc import Sequence


class EnvError(LookupError):
    """Raised when an environment entry cannot be found or changed."""


def key_of(entry: str | None) -> str | None:
    """Return the part of ``entry`` before the first ``=``, or None."""
    if entry is None or "=" not in entry:
        return None
    return entry.split("=", 1)[0]


def value_part(entry: str | None) -> str | None:
    """Return the part of ``entry`` after the first ``=``, or None."""
    if entry is None or "=" not in entry:
        return None
    return entry.split("=", 1)[1]


def find_line(env: Sequence[str], key: str) -> int | None:
    """Return the index of the first entry whose key starts with ``key``.

    Entries without ``=`` are skipped. None is returned when nothing matches.
    """
    for index, entry in enumerate(env):
        entry_key = key_of(entry)
        if entry_key is not None and entry_key.startswith(key):
            return index
    return None


def value_of(env: Sequence[str], key: str) -> str | None:
    """Return the value of the entry found for ``key``, or None."""
    index = find_line(env, key)
    if index is None:
        return None
    return value_part(env[index])


def set_value_at(env: Sequence[str], index: int, value: str) -> list[str]:
    """Return a copy of ``env`` with the entry at ``index`` given ``value``."""
    if not 0 <= index < len(env):
        raise EnvError(f"no environment entry at index {index}")
    key = key_of(env[index])
    if key is None:
        raise EnvError(f"environment entry {env[index]!r} has no key")
    updated = list(env)
    updated[index] = f"{key}={value}"
    return updated


def set_value(env: Sequence[str], key: str, value: str) -> list[str]:
    """Return a copy of ``env`` with the entry for ``key`` set to ``value``."""
    index = find_line(env, key)
    if index is None:
        raise EnvError(f"{key} is not set")
    return set_value_at(env, index, value)


def add_var(env: Sequence[str], entry: str) -> list[str]:
    """Return a copy of ``env`` with ``entry`` appended."""
    return [*env, entry]


def remove_at(env: Sequence[str], index: int) -> list[str]:
    """Return a copy of ``env`` without the entry at ``index``."""
    if not 0 <= index < len(env):
        raise EnvError(f"no environment entry at index {index}")
    return [entry for position, entry in enumerate(env) if position != index]