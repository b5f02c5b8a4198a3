"""Tests for grapher configuration defaults and environment overrides."""

from __future__ import annotations

import pytest

from grapher.config import DEFAULT_TMP_DIR, GrapherConfig
from utils.env_utils import env_bool


def test_defaults() -> None:
    """Defaults favor best-effort translation."""
    config = GrapherConfig()
    assert not config.verbose
    assert not config.strict_reads
    assert config.tmp_dir == DEFAULT_TMP_DIR


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """SRCGRAPH_* variables override the defaults."""
    monkeypatch.setenv("SRCGRAPH_VERBOSE", "yes")
    monkeypatch.setenv("SRCGRAPH_STRICT_READS", "1")
    monkeypatch.setenv("SRCGRAPH_TMP_DIR", " /var/cache/srcgraph ")
    config = GrapherConfig.from_env()
    assert config == GrapherConfig(verbose=True, strict_reads=True, tmp_dir="/var/cache/srcgraph")


def test_from_env_ignores_invalid_booleans(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unparsable booleans fall back to the default."""
    monkeypatch.setenv("SRCGRAPH_STRICT_READS", "maybe")
    monkeypatch.delenv("SRCGRAPH_TMP_DIR", raising=False)
    config = GrapherConfig.from_env()
    assert not config.strict_reads
    assert config.tmp_dir == DEFAULT_TMP_DIR


def test_env_bool_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables return the default."""
    monkeypatch.delenv("SRCGRAPH_UNSET_FLAG", raising=False)
    assert env_bool("SRCGRAPH_UNSET_FLAG") is None
    assert env_bool("SRCGRAPH_UNSET_FLAG", default=True) is True


def test_utils_resolves_to_package() -> None:
    """The shared ``utils`` package is importable from the test tree."""
    import utils

    assert hasattr(utils, "__path__")
    assert utils.env_bool is env_bool
