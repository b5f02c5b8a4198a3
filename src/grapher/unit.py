"""Source units: the granularity at which analyzers run."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import msgspec

from core_types import UnitTypeStr
from serde_msgspec import StructBaseCompat

LOGGER = logging.getLogger(__name__)


class SourceUnit(StructBaseCompat, frozen=True):
    """A unit of source code handed to one analyzer invocation."""

    type: UnitTypeStr
    name: str
    dir: str = ""
    files: tuple[str, ...] = ()
    config: dict[str, object] = msgspec.field(default_factory=dict)


def make_id(unit: SourceUnit) -> str:
    """Return the stable identifier for a source unit.

    Returns
    -------
    str
        ``<name>@<type>`` identifier.
    """
    return f"{unit.name}@{unit.type}"


def source_unit_matches_args(specified: Sequence[str], unit: SourceUnit) -> bool:
    """Return whether ``unit`` is selected by the user-supplied unit specs.

    An empty selection matches every unit; otherwise a spec matches when it
    equals the unit id or the unit name.

    Returns
    -------
    bool
        ``True`` when the unit should be processed.
    """
    if not specified:
        return True
    unit_id = make_id(unit)
    if any(spec in {unit_id, unit.name} for spec in specified):
        return True
    LOGGER.debug("Skipping source unit %s", unit_id)
    return False


__all__ = ["SourceUnit", "make_id", "source_unit_matches_args"]
