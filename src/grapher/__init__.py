"""Offset translation, ordering and normalization of analyzer output."""

from grapher.config import GrapherConfig
from grapher.errors import (
    GrapherError,
    NoGrapherRegisteredError,
    OffsetTranslationError,
    PositionOutOfRangeError,
)
from grapher.normalize import normalize_output
from grapher.offsets import OffsetTranslator, ensure_byte_offsets
from grapher.output import Def, Doc, Output, Ref
from grapher.position_index import PositionIndex, PositionIndexCache
from grapher.registry import GRAPHERS, Grapher, GrapherRegistration, GrapherRegistry, graph
from grapher.sorting import sort_output
from grapher.unit import SourceUnit, make_id, source_unit_matches_args

__all__ = [
    "GRAPHERS",
    "Def",
    "Doc",
    "Grapher",
    "GrapherConfig",
    "GrapherError",
    "GrapherRegistration",
    "GrapherRegistry",
    "NoGrapherRegisteredError",
    "OffsetTranslationError",
    "OffsetTranslator",
    "Output",
    "PositionIndex",
    "PositionIndexCache",
    "PositionOutOfRangeError",
    "Ref",
    "SourceUnit",
    "ensure_byte_offsets",
    "graph",
    "make_id",
    "normalize_output",
    "sort_output",
    "source_unit_matches_args",
]
