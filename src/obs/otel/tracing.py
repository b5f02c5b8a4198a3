"""Tracing helpers for srcgraph instrumentation."""

from __future__ import annotations

import time
from collections.abc import Iterator, Mapping
from contextlib import contextmanager

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

from obs.otel.attributes import normalize_attributes
from obs.otel.constants import AttributeName


def get_tracer(scope_name: str) -> trace.Tracer:
    """Return a tracer for the given instrumentation scope.

    Returns
    -------
    opentelemetry.trace.Tracer
        Tracer bound to the requested scope.
    """
    return trace.get_tracer(scope_name)


def set_span_attributes(span: Span, attrs: Mapping[str, object] | None) -> None:
    """Attach normalized attributes to a span.

    Parameters
    ----------
    span
        Span to update.
    attrs
        Raw attributes to normalize and attach.
    """
    for key, value in normalize_attributes(attrs).items():
        span.set_attribute(key, value)


def record_exception(span: Span, exc: Exception) -> None:
    """Record an exception on a span and mark it as error."""
    span.record_exception(exc)
    span.set_status(Status(StatusCode.ERROR))


@contextmanager
def stage_span(
    name: str,
    *,
    stage: str,
    scope_name: str,
    attributes: Mapping[str, object] | None = None,
) -> Iterator[Span]:
    """Start a stage span that records duration and status.

    Parameters
    ----------
    name
        Span name.
    stage
        Stage name recorded as an attribute.
    scope_name
        Instrumentation scope name.
    attributes
        Optional span attributes.

    Yields
    ------
    Span
        The started span.
    """
    base_attrs: dict[str, object] = {AttributeName.STAGE: stage}
    if attributes:
        base_attrs.update(attributes)
    tracer = get_tracer(scope_name)
    start = time.monotonic()
    status = "ok"
    with tracer.start_as_current_span(name, attributes=normalize_attributes(base_attrs)) as span:
        span.add_event("stage.start", attributes={"stage": stage})
        try:
            yield span
        except Exception as exc:
            status = "error"
            record_exception(span, exc)
            raise
        finally:
            duration_s = time.monotonic() - start
            set_span_attributes(
                span,
                {AttributeName.DURATION: duration_s, AttributeName.STATUS: status},
            )
            span.add_event(
                "stage.end",
                attributes={"stage": stage, "status": status, "duration_s": duration_s},
            )


__all__ = ["get_tracer", "record_exception", "set_span_attributes", "stage_span"]
