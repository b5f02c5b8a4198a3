"""Per-file codepoint to byte offset indices.

Analyzers written against decoded text report positions as codepoint (rune)
ordinals. The index maps such an ordinal back to the byte offset at which that
codepoint begins in the raw file content. Bytes that are not valid UTF-8 count
as one codepoint each, matching how Go's ``utf8.DecodeRune`` steps over them.
"""

from __future__ import annotations

import logging
from array import array
from dataclasses import dataclass
from itertools import accumulate
from pathlib import Path

from grapher.errors import OffsetTranslationError, PositionOutOfRangeError

LOGGER = logging.getLogger(__name__)

_ESCAPED_BYTE_LO = 0xDC80
_ESCAPED_BYTE_HI = 0xDCFF


def _utf8_width(char: str) -> int:
    codepoint = ord(char)
    if codepoint < 0x80:
        return 1
    if codepoint < 0x800:
        return 2
    if _ESCAPED_BYTE_LO <= codepoint <= _ESCAPED_BYTE_HI:
        # surrogateescape stand-in for a single undecodable byte
        return 1
    if codepoint < 0x10000:
        return 3
    return 4


@dataclass(frozen=True)
class PositionIndex:
    """Codepoint ordinal to byte offset lookup for one file.

    ``rune_starts[k]`` is the byte offset of codepoint ``k``; the final entry
    is the byte length so the end-of-file ordinal is addressable. ASCII-only
    content stores no table because the mapping is the identity.
    """

    path: Path | None
    byte_length: int
    rune_count: int
    rune_starts: array | None = None

    @classmethod
    def from_bytes(cls, data: bytes, *, path: Path | None = None) -> PositionIndex:
        """Build an index over raw file content.

        Returns
        -------
        PositionIndex
            Index over ``data``.
        """
        text = data.decode("utf-8", errors="surrogateescape")
        if len(text) == len(data):
            return cls(path=path, byte_length=len(data), rune_count=len(text))
        starts = array("q", [0])
        starts.extend(accumulate(_utf8_width(char) for char in text))
        return cls(path=path, byte_length=len(data), rune_count=len(text), rune_starts=starts)

    @property
    def is_identity(self) -> bool:
        """Return whether codepoint and byte offsets coincide for this file."""
        return self.rune_starts is None

    def byte_offset(self, rune_offset: int) -> int:
        """Return the byte offset at which codepoint ``rune_offset`` begins.

        Raises
        ------
        PositionOutOfRangeError
            Raised when ``rune_offset`` is negative or past the end of the file.
        """
        if rune_offset < 0 or rune_offset > self.rune_count:
            raise PositionOutOfRangeError(self.path, rune_offset, self.rune_count)
        if self.rune_starts is None:
            return rune_offset
        return self.rune_starts[rune_offset]


class PositionIndexCache:
    """Lazily built indices scoped to a single translation pass.

    Each path is read at most once. A failed read is remembered as ``None`` so
    later spans in the same file are skipped without another attempt.
    """

    def __init__(self, *, strict_reads: bool = False) -> None:
        self._strict_reads = strict_reads
        self._indexes: dict[Path, PositionIndex | None] = {}

    def get(self, path: Path) -> PositionIndex | None:
        """Return the index for ``path``, building it on first use.

        Returns
        -------
        PositionIndex | None
            Index for the file, or ``None`` when the file could not be read.

        Raises
        ------
        OffsetTranslationError
            Raised on read failure when the cache was built with ``strict_reads``.
        """
        if path in self._indexes:
            return self._indexes[path]
        try:
            data = path.read_bytes()
        except OSError as exc:
            if self._strict_reads:
                raise OffsetTranslationError(path, str(exc)) from exc
            LOGGER.warning("Failed to read %s for offset translation, skipping: %s", path, exc)
            self._indexes[path] = None
            return None
        index = PositionIndex.from_bytes(data, path=path)
        self._indexes[path] = index
        return index

    def __contains__(self, path: object) -> bool:
        return path in self._indexes

    def __len__(self) -> int:
        return sum(1 for index in self._indexes.values() if index is not None)


__all__ = ["PositionIndex", "PositionIndexCache"]
