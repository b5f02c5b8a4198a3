"""Analyzer output records: definitions, references and docs.

Every record carries a ``file`` plus a start/end offset pair. The names of the
offset fields are listed in ``OFFSET_FIELDS`` so the offset translator can
rewrite them without knowing the record kind. All other fields are opaque to
normalization and are carried through untouched.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import ClassVar

import msgspec

from core_types import NonNegativeInt
from serde_msgspec import StructBaseMutable


class Def(StructBaseMutable):
    """A symbol definition emitted by an analyzer."""

    OFFSET_FIELDS: ClassVar[tuple[str, ...]] = ("def_start", "def_end")

    repo: str = ""
    commit_id: str = msgspec.field(default="", name="CommitID")
    unit_type: str = ""
    unit: str = ""
    path: str = ""
    name: str = ""
    kind: str = ""
    file: str = ""
    def_start: NonNegativeInt = 0
    def_end: NonNegativeInt = 0
    exported: bool = False
    local: bool = False
    test: bool = False
    data: object = None


class Ref(StructBaseMutable):
    """A reference to a definition, possibly in another repository."""

    OFFSET_FIELDS: ClassVar[tuple[str, ...]] = ("start", "end")

    def_repo: str = ""
    def_unit_type: str = ""
    def_unit: str = ""
    def_path: str = ""
    repo: str = ""
    commit_id: str = msgspec.field(default="", name="CommitID")
    unit_type: str = ""
    unit: str = ""
    is_def: bool = msgspec.field(default=False, name="Def")
    file: str = ""
    start: NonNegativeInt = 0
    end: NonNegativeInt = 0


class Doc(StructBaseMutable):
    """A documentation body attached to a definition."""

    OFFSET_FIELDS: ClassVar[tuple[str, ...]] = ("start", "end")

    repo: str = ""
    commit_id: str = msgspec.field(default="", name="CommitID")
    unit_type: str = ""
    unit: str = ""
    path: str = ""
    format: str = ""
    data: str = ""
    file: str = ""
    start: NonNegativeInt = 0
    end: NonNegativeInt = 0


type SpanRecord = Def | Ref | Doc


class Output(StructBaseMutable):
    """Records produced by one analyzer run over one source unit."""

    defs: list[Def] = msgspec.field(default_factory=list)
    refs: list[Ref] = msgspec.field(default_factory=list)
    docs: list[Doc] = msgspec.field(default_factory=list)

    def spans(self) -> Iterator[SpanRecord]:
        """Iterate over defs, then refs, then docs."""
        yield from self.defs
        yield from self.refs
        yield from self.docs

    def counts(self) -> dict[str, int]:
        """Return per-kind record counts."""
        return {"defs": len(self.defs), "refs": len(self.refs), "docs": len(self.docs)}


__all__ = ["Def", "Doc", "Output", "Ref", "SpanRecord"]
