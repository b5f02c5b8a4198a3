"""Shared type aliases and small typing helpers."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from msgspec import Meta

type PathLike = str | Path

NonNegativeInt = Annotated[int, Meta(ge=0)]

UNIT_TYPE_PATTERN = "^[A-Za-z][A-Za-z0-9_.-]{0,63}$"

UnitTypeStr = Annotated[
    str,
    Meta(
        pattern=UNIT_TYPE_PATTERN,
        title="Source unit type",
        description="Registry tag selecting the analyzer for a source unit.",
        examples=["GoPackage", "PipPackage"],
    ),
]


def ensure_path(p: PathLike) -> Path:
    """Return a normalized ``Path`` for the provided value.

    Parameters
    ----------
    p:
        String or ``Path`` input to normalize.

    Returns:
    -------
    pathlib.Path
        Normalized path instance.
    """
    return p if isinstance(p, Path) else Path(p)


__all__ = [
    "UNIT_TYPE_PATTERN",
    "NonNegativeInt",
    "PathLike",
    "UnitTypeStr",
    "ensure_path",
]
