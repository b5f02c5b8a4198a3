"""Canonical OpenTelemetry constants for srcgraph."""

from __future__ import annotations

from enum import StrEnum


class AttributeName(StrEnum):
    """Canonical attribute names."""

    STAGE = "srcgraph.stage"
    STATUS = "status"
    DURATION = "duration_s"
    UNIT_TYPE = "srcgraph.unit_type"
    UNIT_NAME = "srcgraph.unit"
    ROOT_DIR = "srcgraph.root_dir"
    DEF_COUNT = "srcgraph.defs"
    REF_COUNT = "srcgraph.refs"
    DOC_COUNT = "srcgraph.docs"
    FILES_INDEXED = "srcgraph.files_indexed"
    SPAN_FAILURES = "srcgraph.span_failures"


class ScopeName(StrEnum):
    """Canonical instrumentation scope names."""

    GRAPH = "srcgraph.graph"
    OFFSETS = "srcgraph.offsets"
    NORMALIZE = "srcgraph.normalize"
    REPO = "srcgraph.repo"


__all__ = ["AttributeName", "ScopeName"]
