"""OpenTelemetry helpers for srcgraph."""

from obs.otel.scopes import SCOPE_GRAPH, SCOPE_NORMALIZE, SCOPE_OFFSETS, SCOPE_REPO
from obs.otel.tracing import get_tracer, stage_span

__all__ = [
    "SCOPE_GRAPH",
    "SCOPE_NORMALIZE",
    "SCOPE_OFFSETS",
    "SCOPE_REPO",
    "get_tracer",
    "stage_span",
]
