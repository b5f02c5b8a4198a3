"""Analyzer registry and the graph entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from core_types import PathLike, ensure_path
from grapher.config import GrapherConfig
from grapher.errors import NoGrapherRegisteredError
from grapher.offsets import ensure_byte_offsets
from grapher.output import Output
from grapher.sorting import sort_output
from grapher.unit import SourceUnit, make_id
from obs.otel.constants import AttributeName
from obs.otel.scopes import SCOPE_GRAPH
from obs.otel.tracing import set_span_attributes, stage_span
from repo.config import RepositoryConfig
from utils.registry_protocol import MutableRegistry

LOGGER = logging.getLogger(__name__)


class Grapher(Protocol):
    """Structural interface for analyzer implementations."""

    def graph(self, dir: Path, unit: SourceUnit, repo_config: RepositoryConfig) -> Output:
        """Analyze ``unit`` (checked out under ``dir``) and return raw output."""
        ...


@dataclass(frozen=True)
class GrapherRegistration:
    """An analyzer plus the offset unit it reports positions in."""

    grapher: Grapher
    byte_offsets: bool = False


@dataclass
class GrapherRegistry:
    """Mapping from source unit type to analyzer registration."""

    _registry: MutableRegistry[str, GrapherRegistration] = field(
        default_factory=MutableRegistry
    )

    def register(
        self,
        unit_type: str,
        grapher: Grapher,
        *,
        byte_offsets: bool = False,
        overwrite: bool = False,
    ) -> GrapherRegistration:
        """Register ``grapher`` for ``unit_type``.

        Parameters
        ----------
        unit_type
            Source unit type tag.
        grapher
            Analyzer implementation.
        byte_offsets
            Whether the analyzer already reports byte offsets. When False its
            output is passed through the offset translator.
        overwrite
            Replace an existing registration instead of raising.

        Returns
        -------
        GrapherRegistration
            The stored registration.
        """
        registration = GrapherRegistration(grapher=grapher, byte_offsets=byte_offsets)
        self._registry.register(unit_type, registration, overwrite=overwrite)
        return registration

    def unregister(self, unit_type: str) -> GrapherRegistration | None:
        return self._registry.unregister(unit_type)

    def lookup(self, unit_type: str) -> GrapherRegistration:
        """Return the registration for ``unit_type``.

        Raises
        ------
        NoGrapherRegisteredError
            Raised when nothing is registered for ``unit_type``.
        """
        registration = self._registry.get(unit_type)
        if registration is None:
            raise NoGrapherRegisteredError(unit_type)
        return registration

    def unit_types(self) -> tuple[str, ...]:
        return tuple(sorted(self._registry))

    def __contains__(self, unit_type: object) -> bool:
        return unit_type in self._registry

    def __len__(self) -> int:
        return len(self._registry)


GRAPHERS = GrapherRegistry()


def graph(
    dir: PathLike,
    unit: SourceUnit,
    repo_config: RepositoryConfig,
    *,
    registry: GrapherRegistry | None = None,
    config: GrapherConfig | None = None,
) -> Output:
    """Run the registered analyzer for ``unit`` and return normalized output.

    Offsets are translated to byte offsets unless the registration declares
    byte offsets, then every record list is sorted.

    Parameters
    ----------
    dir
        Directory the repository is checked out in.
    unit
        Source unit to analyze.
    repo_config
        Repository configuration handed to the analyzer.
    registry
        Registry to resolve the analyzer from; defaults to ``GRAPHERS``.
    config
        Translation settings.

    Returns
    -------
    Output
        Byte-offset, sorted analyzer output.

    Raises
    ------
    NoGrapherRegisteredError
        Raised when no analyzer is registered for ``unit.type``.
    """
    resolved = registry if registry is not None else GRAPHERS
    registration = resolved.lookup(unit.type)
    root = ensure_path(dir)
    with stage_span(
        "grapher.graph",
        stage="graph",
        scope_name=SCOPE_GRAPH,
        attributes={
            AttributeName.UNIT_TYPE: unit.type,
            AttributeName.UNIT_NAME: unit.name,
        },
    ) as span:
        output = registration.grapher.graph(root, unit, repo_config)
        set_span_attributes(
            span,
            {
                AttributeName.DEF_COUNT: len(output.defs),
                AttributeName.REF_COUNT: len(output.refs),
                AttributeName.DOC_COUNT: len(output.docs),
            },
        )
    if not registration.byte_offsets:
        LOGGER.debug("Translating codepoint offsets to byte offsets for %s", make_id(unit))
        ensure_byte_offsets(root, output, config=config)
    return sort_output(output)


__all__ = [
    "GRAPHERS",
    "Grapher",
    "GrapherRegistration",
    "GrapherRegistry",
    "graph",
]
