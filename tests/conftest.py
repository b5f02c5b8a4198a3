"""Shared pytest fixtures for srcgraph tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.typing_helpers import WriteSource


@pytest.fixture
def write_source(tmp_path: Path) -> WriteSource:
    """Return a helper that writes a source file under ``tmp_path``.

    Returns
    -------
    WriteSource
        Callable taking a relative name and text or bytes content.
    """

    def _write(name: str, content: str | bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path

    return _write
