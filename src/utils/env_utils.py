"""Environment variable resolution utilities."""

from __future__ import annotations

import logging
import os
from typing import overload

_LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "n", "off"})


def env_value(name: str) -> str | None:
    """Return stripped env var value, or None if empty/not set.

    Parameters
    ----------
    name
        Environment variable name.

    Returns
    -------
    str | None
        Stripped value or None.
    """
    raw = os.environ.get(name)
    if raw is None:
        return None
    stripped = raw.strip()
    return stripped if stripped else None


@overload
def env_text(name: str) -> str | None: ...


@overload
def env_text(name: str, *, default: str) -> str: ...


def env_text(name: str, *, default: str | None = None) -> str | None:
    """Return a stripped environment variable string, falling back to ``default``.

    Returns
    -------
    str | None
        Normalized value or the default when unset or empty.
    """
    value = env_value(name)
    return default if value is None else value


@overload
def env_bool(name: str) -> bool | None: ...


@overload
def env_bool(name: str, *, default: bool) -> bool: ...


def env_bool(name: str, *, default: bool | None = None) -> bool | None:
    """Parse environment variable as boolean.

    Parameters
    ----------
    name
        Environment variable name.
    default
        Default value if unset or invalid. If None, returns None when unset.

    Returns
    -------
    bool | None
        Parsed boolean or default/None.
    """
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    _LOGGER.warning("Invalid boolean for %s: %r", name, raw)
    return default


__all__ = ["env_bool", "env_text", "env_value"]
