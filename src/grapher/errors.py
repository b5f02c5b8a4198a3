"""Grapher error types for analyzer lookup and offset translation."""

from __future__ import annotations

from pathlib import Path


class GrapherError(Exception):
    """Base class for grapher errors."""


class NoGrapherRegisteredError(GrapherError, LookupError):
    """Raised when no analyzer is registered for a source unit type."""

    def __init__(self, unit_type: str) -> None:
        super().__init__(f"no grapher registered for source unit type {unit_type!r}")
        self.unit_type = unit_type


class OffsetTranslationError(GrapherError, RuntimeError):
    """Raised when a referenced source file cannot be read in strict mode."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot translate offsets for {path}: {reason}")
        self.path = path


class PositionOutOfRangeError(GrapherError, IndexError):
    """Raised when a codepoint ordinal falls outside a file's content."""

    def __init__(self, path: Path | None, offset: int, rune_count: int) -> None:
        where = str(path) if path is not None else "<memory>"
        super().__init__(
            f"codepoint offset {offset} out of range for {where} ({rune_count} codepoints)"
        )
        self.path = path
        self.offset = offset
        self.rune_count = rune_count


__all__ = [
    "GrapherError",
    "NoGrapherRegisteredError",
    "OffsetTranslationError",
    "PositionOutOfRangeError",
]
