"""Dict-backed registry base implementation.

Registries that perform richer validation or computed lookups should prefer
composition over inheritance to avoid coupling to the base API.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class MutableRegistry[K, V]:
    """Mutable registry with dict storage."""

    _entries: dict[K, V] = field(default_factory=dict)

    def register(self, key: K, value: V, *, overwrite: bool = False) -> None:
        """Register a value for the provided key.

        Raises
        ------
        ValueError
            Raised when ``key`` is already registered and ``overwrite`` is False.
        """
        if key in self._entries and not overwrite:
            msg = f"Key {key!r} already registered. Use overwrite=True."
            raise ValueError(msg)
        self._entries[key] = value

    def unregister(self, key: K) -> V | None:
        """Remove and return the value registered for ``key``, if any."""
        return self._entries.pop(key, None)

    def get(self, key: K) -> V | None:
        """Retrieve a value by key.

        Returns
        -------
        V | None
            Registered value, or ``None`` when missing.
        """
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["MutableRegistry"]
