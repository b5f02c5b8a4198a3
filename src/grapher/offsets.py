"""Rewrite codepoint offsets in analyzer output into byte offsets."""

from __future__ import annotations

import logging
import stat
from pathlib import Path

from core_types import PathLike, ensure_path
from grapher.config import GrapherConfig
from grapher.errors import PositionOutOfRangeError
from grapher.output import Output, SpanRecord
from grapher.position_index import PositionIndexCache
from obs.otel.constants import AttributeName
from obs.otel.scopes import SCOPE_OFFSETS
from obs.otel.tracing import set_span_attributes, stage_span

LOGGER = logging.getLogger(__name__)


class OffsetTranslator:
    """Translate span offsets for files under one root directory.

    A translator owns its ``PositionIndexCache``; create one per batch.
    """

    def __init__(self, root_dir: PathLike, *, config: GrapherConfig | None = None) -> None:
        self._root = ensure_path(root_dir)
        self._config = config or GrapherConfig()
        self._cache = PositionIndexCache(strict_reads=self._config.strict_reads)
        self._skipped: set[Path] = set()
        self.failures = 0

    @property
    def files_indexed(self) -> int:
        """Return the number of files whose index was built in this pass."""
        return len(self._cache)

    def fix(self, span: SpanRecord) -> bool:
        """Rewrite the offsets of one span in place.

        Zero offsets mean "not set" and are left alone. On a lookup failure the
        offsets rewritten so far stay rewritten and the rest keep their
        original values.

        Returns
        -------
        bool
            ``False`` when a lookup failed, ``True`` otherwise (including
            skipped spans).
        """
        if not span.file:
            return True
        path = self._regular_file(span.file)
        if path is None:
            return True
        index = self._cache.get(path)
        if index is None:
            return True
        for field in span.OFFSET_FIELDS:
            offset = getattr(span, field)
            if offset == 0:
                continue
            try:
                setattr(span, field, index.byte_offset(offset))
            except PositionOutOfRangeError as exc:
                LOGGER.warning(
                    "Failed to convert unicode offset to byte offset in file %s "
                    "(did the grapher output a nonexistent offset?); continuing anyway: %s",
                    path,
                    exc,
                )
                self.failures += 1
                return False
        return True

    def translate(self, output: Output) -> Output:
        """Rewrite every span in ``output`` and return it."""
        for span in output.spans():
            self.fix(span)
        return output

    def _regular_file(self, filename: str) -> Path | None:
        # Span filenames stay under the root even when written as absolute paths.
        path = self._root / filename.lstrip("/")
        if path in self._skipped:
            return None
        if path in self._cache:
            return path
        try:
            st = path.stat()
        except FileNotFoundError:
            LOGGER.warning("Source file %s does not exist; leaving its offsets unchanged", path)
            self._skipped.add(path)
            return None
        except OSError as exc:
            LOGGER.warning(
                "Failed to stat source file %s; leaving its offsets unchanged: %s",
                path,
                exc,
            )
            self._skipped.add(path)
            return None
        if not stat.S_ISREG(st.st_mode):
            LOGGER.log(
                logging.INFO if self._config.verbose else logging.DEBUG,
                "Skipping offset translation for non-regular file %s",
                path,
            )
            self._skipped.add(path)
            return None
        return path


def ensure_byte_offsets(
    root_dir: PathLike,
    output: Output,
    *,
    config: GrapherConfig | None = None,
) -> Output:
    """Convert every codepoint offset in ``output`` into a byte offset.

    Only call this for analyzers known to report codepoint offsets; byte
    offsets passed through a second time are mistranslated.

    Parameters
    ----------
    root_dir
        Directory that span filenames are relative to.
    output
        Analyzer output, rewritten in place.
    config
        Translation settings; defaults to ``GrapherConfig()``.

    Returns
    -------
    Output
        The same ``output`` instance.
    """
    translator = OffsetTranslator(root_dir, config=config)
    with stage_span(
        "grapher.ensure_byte_offsets",
        stage="offsets",
        scope_name=SCOPE_OFFSETS,
        attributes={AttributeName.ROOT_DIR: str(root_dir)},
    ) as span:
        translator.translate(output)
        set_span_attributes(
            span,
            {
                AttributeName.FILES_INDEXED: translator.files_indexed,
                AttributeName.SPAN_FAILURES: translator.failures,
            },
        )
    return output


__all__ = ["OffsetTranslator", "ensure_byte_offsets"]
