"""Deterministic ordering of analyzer output.

Each record kind sorts by position first and then by identity fields, so the
order of two distinct records never depends on insertion order:

- ``Def``: file, def_start, def_end, repo, unit_type, unit, path, name, kind,
  commit_id, exported, local, test
- ``Ref``: file, start, end, def_repo, def_unit_type, def_unit, def_path,
  repo, unit_type, unit, def, commit_id
- ``Doc``: file, start, end, repo, unit_type, unit, path, format, data,
  commit_id

``Def.data`` is not part of the key. Records equal on every key are
interchangeable; ``list.sort`` is stable, so they keep their relative order.
"""

from __future__ import annotations

from grapher.output import Def, Doc, Output, Ref
from obs.otel.scopes import SCOPE_NORMALIZE
from obs.otel.tracing import stage_span

type DefKey = tuple[str, int, int, str, str, str, str, str, str, str, bool, bool, bool]
type RefKey = tuple[str, int, int, str, str, str, str, str, str, str, bool, str]
type DocKey = tuple[str, int, int, str, str, str, str, str, str, str]


def def_sort_key(record: Def) -> DefKey:
    return (
        record.file,
        record.def_start,
        record.def_end,
        record.repo,
        record.unit_type,
        record.unit,
        record.path,
        record.name,
        record.kind,
        record.commit_id,
        record.exported,
        record.local,
        record.test,
    )


def ref_sort_key(record: Ref) -> RefKey:
    return (
        record.file,
        record.start,
        record.end,
        record.def_repo,
        record.def_unit_type,
        record.def_unit,
        record.def_path,
        record.repo,
        record.unit_type,
        record.unit,
        record.is_def,
        record.commit_id,
    )


def doc_sort_key(record: Doc) -> DocKey:
    return (
        record.file,
        record.start,
        record.end,
        record.repo,
        record.unit_type,
        record.unit,
        record.path,
        record.format,
        record.data,
        record.commit_id,
    )


def sort_output(output: Output) -> Output:
    """Sort defs, refs and docs in place and return ``output``.

    Returns
    -------
    Output
        The same instance, with each list in canonical order.
    """
    with stage_span(
        "grapher.sort_output",
        stage="sort",
        scope_name=SCOPE_NORMALIZE,
        attributes=output.counts(),
    ):
        output.defs.sort(key=def_sort_key)
        output.refs.sort(key=ref_sort_key)
        output.docs.sort(key=doc_sort_key)
    return output


__all__ = ["def_sort_key", "doc_sort_key", "ref_sort_key", "sort_output"]
