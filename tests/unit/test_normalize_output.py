"""Tests for repository URI canonicalization during normalization."""

from __future__ import annotations

import pytest

from grapher.normalize import normalize_output
from grapher.output import Def, Output, Ref
from repo.errors import RepositoryURIError


def test_host_path_def_repo_kept() -> None:
    """An identifier already in host/path form is its own canonical URI."""
    output = Output(refs=[Ref(def_repo="github.com/foo/bar", def_path="X")])
    normalize_output(output)
    assert output.refs[0].def_repo == "github.com/foo/bar"


def test_clone_urls_canonicalized_and_sorted() -> None:
    """Clone URLs are rewritten before refs are ordered."""
    output = Output(
        defs=[Def(path="b", file="m.go", def_start=9), Def(path="a", file="m.go", def_start=2)],
        refs=[
            Ref(def_repo="https://GitHub.com/foo/bar.git", def_path="X", file="m.go", start=8),
            Ref(def_repo="git@github.com:foo/baz.git", def_path="Y", file="m.go", start=4),
            Ref(def_path="Z", file="m.go", start=1),
        ],
    )
    result = normalize_output(output)
    assert result is output
    assert [r.def_repo for r in output.refs] == ["", "github.com/foo/baz", "github.com/foo/bar"]
    assert [d.path for d in output.defs] == ["a", "b"]


def test_custom_resolver() -> None:
    """The URI resolver can be replaced."""
    output = Output(refs=[Ref(def_repo="foo")])
    normalize_output(output, uri_resolver=lambda value: f"example.com/{value}")
    assert output.refs[0].def_repo == "example.com/foo"


def test_invalid_def_repo_raises() -> None:
    """Canonicalization failures surface as RepositoryURIError."""
    output = Output(refs=[Ref(def_repo="https://")])
    with pytest.raises(RepositoryURIError):
        normalize_output(output)
