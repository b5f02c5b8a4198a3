"""JSON encoding of analyzer output."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TextIO

from grapher.output import Output
from serde_msgspec import dumps_json, loads_json


def encode_output(output: Output, *, pretty: bool = False) -> bytes:
    """Encode ``output`` as JSON with PascalCase keys and empty lists omitted.

    Returns
    -------
    bytes
        JSON payload.
    """
    return dumps_json(output, pretty=pretty)


def decode_output(payload: bytes | str) -> Output:
    """Decode an analyzer output JSON payload.

    Raises
    ------
    msgspec.ValidationError
        Raised when the payload does not match the output schema.
    """
    return loads_json(payload, target_type=Output)


def read_outputs(
    paths: Sequence[str | Path],
    *,
    stdin: TextIO | None = None,
) -> Iterator[tuple[str, Output]]:
    """Yield ``(name, output)`` pairs from files, or from stdin when ``paths`` is empty."""
    if not paths:
        stream = stdin if stdin is not None else sys.stdin
        yield "<stdin>", decode_output(stream.read())
        return
    for path in paths:
        yield str(path), decode_output(Path(path).read_bytes())


def print_json(value: object, *, stream: TextIO | None = None) -> None:
    """Write ``value`` as indented JSON followed by a newline."""
    target = stream if stream is not None else sys.stdout
    target.write(dumps_json(value, pretty=True).decode("utf-8") + "\n")


__all__ = ["decode_output", "encode_output", "print_json", "read_outputs"]
