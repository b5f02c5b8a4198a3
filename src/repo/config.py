"""Repository-level configuration handed to analyzers."""

from __future__ import annotations

import msgspec

from serde_msgspec import StructBaseCompat


class RepositoryConfig(StructBaseCompat, frozen=True):
    """Settings describing the repository being analyzed."""

    uri: str = ""
    clone_url: str = ""
    commit_id: str = ""
    settings: dict[str, object] = msgspec.field(default_factory=dict)


__all__ = ["RepositoryConfig"]
