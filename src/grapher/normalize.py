"""Canonicalize cross-repository pointers and order analyzer output."""

from __future__ import annotations

from collections.abc import Callable

from grapher.output import Output
from grapher.sorting import sort_output
from repo.uri import make_uri


def normalize_output(
    output: Output,
    *,
    uri_resolver: Callable[[str], str] = make_uri,
) -> Output:
    """Rewrite ``Ref.def_repo`` into canonical URI form, then sort.

    Parameters
    ----------
    output
        Analyzer output, rewritten in place.
    uri_resolver
        Maps a raw clone identifier to its canonical repository URI.

    Returns
    -------
    Output
        The same ``output`` instance.

    Raises
    ------
    repo.errors.RepositoryURIError
        Raised when a ``def_repo`` value cannot be canonicalized. Refs before
        the failing one have already been rewritten; the output is not sorted.
    """
    for ref in output.refs:
        if ref.def_repo:
            ref.def_repo = uri_resolver(ref.def_repo)
    return sort_output(output)


__all__ = ["normalize_output"]
