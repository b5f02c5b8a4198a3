"""Canonical OpenTelemetry instrumentation scopes for srcgraph."""

from __future__ import annotations

from obs.otel.constants import ScopeName

SCOPE_GRAPH = ScopeName.GRAPH
SCOPE_OFFSETS = ScopeName.OFFSETS
SCOPE_NORMALIZE = ScopeName.NORMALIZE
SCOPE_REPO = ScopeName.REPO

__all__ = [
    "SCOPE_GRAPH",
    "SCOPE_NORMALIZE",
    "SCOPE_OFFSETS",
    "SCOPE_REPO",
]
