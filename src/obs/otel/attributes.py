"""Normalize OpenTelemetry attributes for srcgraph telemetry."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import cast

from opentelemetry.util.types import AttributeValue


def _is_scalar(value: object) -> bool:
    return isinstance(value, (str, bool, int, float))


def _normalize_sequence(values: Sequence[object]) -> AttributeValue:
    normalized = [item if _is_scalar(item) else str(item) for item in values if item is not None]
    if not normalized:
        return []
    if all(isinstance(item, bool) for item in normalized):
        return [bool(item) for item in normalized]
    if all(isinstance(item, int) and not isinstance(item, bool) for item in normalized):
        return [cast("int", item) for item in normalized]
    return [str(item) for item in normalized]


def _normalize_value(value: object) -> AttributeValue:
    if _is_scalar(value):
        return cast("AttributeValue", value)
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Mapping):
        return json.dumps(value, sort_keys=True, default=str)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _normalize_sequence(list(value))
    return str(value)


def normalize_attributes(attrs: Mapping[str, object] | None) -> dict[str, AttributeValue]:
    """Normalize raw attribute values into OpenTelemetry-safe types.

    ``None`` values are dropped; paths, mappings and other objects are
    stringified.

    Returns
    -------
    dict[str, AttributeValue]
        Normalized attribute mapping.
    """
    if not attrs:
        return {}
    return {str(key): _normalize_value(value) for key, value in attrs.items() if value is not None}


__all__ = ["normalize_attributes"]
