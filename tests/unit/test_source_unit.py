"""Tests for source unit identity and selection."""

from __future__ import annotations

from grapher.unit import SourceUnit, make_id, source_unit_matches_args

_UNIT = SourceUnit(type="PipPackage", name="requests", dir="src")


def test_make_id() -> None:
    """Unit ids combine name and type."""
    assert make_id(_UNIT) == "requests@PipPackage"


def test_empty_selection_matches_everything() -> None:
    """No specs selects every unit."""
    assert source_unit_matches_args([], _UNIT)


def test_selection_by_id_or_name() -> None:
    """Specs match either the unit id or the bare name."""
    assert source_unit_matches_args(["requests@PipPackage"], _UNIT)
    assert source_unit_matches_args(["other", "requests"], _UNIT)
    assert not source_unit_matches_args(["requests@GoPackage"], _UNIT)
