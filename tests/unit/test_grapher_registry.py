"""Tests for analyzer registration and the graph entry point."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from grapher.errors import NoGrapherRegisteredError
from grapher.output import Def, Output, Ref
from grapher.registry import GrapherRegistry, graph
from grapher.unit import SourceUnit
from repo.config import RepositoryConfig
from tests.typing_helpers import WriteSource


@dataclass
class _StaticGrapher:
    """Analyzer stub returning a fresh copy of fixed records."""

    calls: list[tuple[Path, SourceUnit]] = field(default_factory=list)

    def graph(self, dir: Path, unit: SourceUnit, repo_config: RepositoryConfig) -> Output:
        _ = repo_config
        self.calls.append((dir, unit))
        return Output(
            defs=[
                Def(path="late", file="m.txt", def_start=3, def_end=4),
                Def(path="early", file="m.txt", def_start=1, def_end=2),
            ],
            refs=[Ref(def_path="early", file="m.txt", start=3, end=4)],
        )


def _unit(unit_type: str = "TxtPackage") -> SourceUnit:
    return SourceUnit(type=unit_type, name="m", files=("m.txt",))


def test_graph_translates_codepoint_output(tmp_path: Path, write_source: WriteSource) -> None:
    """Analyzers without the byte-offset flag get their offsets converted."""
    write_source("m.txt", "éééé")
    registry = GrapherRegistry()
    grapher = _StaticGrapher()
    registry.register("TxtPackage", grapher)
    output = graph(tmp_path, _unit(), RepositoryConfig(), registry=registry)
    assert grapher.calls == [(tmp_path, _unit())]
    assert [(d.path, d.def_start, d.def_end) for d in output.defs] == [
        ("early", 2, 4),
        ("late", 6, 8),
    ]
    assert (output.refs[0].start, output.refs[0].end) == (6, 8)


def test_graph_skips_translation_for_byte_offset_analyzers(
    tmp_path: Path,
    write_source: WriteSource,
) -> None:
    """Analyzers registered with byte offsets are only sorted."""
    write_source("m.txt", "éééé")
    registry = GrapherRegistry()
    registry.register("TxtPackage", _StaticGrapher(), byte_offsets=True)
    output = graph(str(tmp_path), _unit(), RepositoryConfig(), registry=registry)
    assert [(d.path, d.def_start, d.def_end) for d in output.defs] == [
        ("early", 1, 2),
        ("late", 3, 4),
    ]


def test_graph_without_registration_raises(tmp_path: Path) -> None:
    """Unknown unit types are reported, not silently ignored."""
    with pytest.raises(NoGrapherRegisteredError, match="GoPackage"):
        graph(tmp_path, _unit("GoPackage"), RepositoryConfig(), registry=GrapherRegistry())


def test_registry_rejects_duplicates_unless_overwriting() -> None:
    """Duplicate registrations require an explicit overwrite."""
    registry = GrapherRegistry()
    first = registry.register("TxtPackage", _StaticGrapher())
    with pytest.raises(ValueError, match="already registered"):
        registry.register("TxtPackage", _StaticGrapher())
    second = registry.register("TxtPackage", _StaticGrapher(), byte_offsets=True, overwrite=True)
    assert registry.lookup("TxtPackage") is second
    assert second is not first
    assert "TxtPackage" in registry
    assert registry.unit_types() == ("TxtPackage",)
    assert registry.unregister("TxtPackage") is second
    assert len(registry) == 0
