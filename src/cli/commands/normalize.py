"""Normalize analyzer output read from files or stdin."""

from __future__ import annotations

import logging
from typing import Annotated

import msgspec
from cyclopts import Parameter

from cli.exit_codes import ExitCode
from grapher.config import GrapherConfig
from grapher.errors import GrapherError
from grapher.io import print_json, read_outputs
from grapher.normalize import normalize_output
from grapher.offsets import ensure_byte_offsets
from repo.errors import RepositoryURIError
from serde_msgspec import validation_error_payload

LOGGER = logging.getLogger(__name__)


def normalize_command(
    files: tuple[str, ...] = (),
    /,
    *,
    dir: Annotated[
        str,
        Parameter(
            name="--dir",
            help="Directory that span filenames are relative to.",
        ),
    ] = ".",
    unicode_offsets: Annotated[
        bool,
        Parameter(
            name="--unicode-offsets",
            help="Input offsets are codepoint offsets; convert them to byte offsets.",
        ),
    ] = False,
    strict_reads: Annotated[
        bool,
        Parameter(
            name="--strict-reads",
            help="Fail when a referenced source file exists but cannot be read.",
            env_var="SRCGRAPH_STRICT_READS",
        ),
    ] = False,
) -> int:
    """Canonicalize, sort and print analyzer output as JSON.

    Parameters
    ----------
    files
        Analyzer output JSON files. Reads stdin when none are given.
    dir
        Directory that span filenames are relative to.
    unicode_offsets
        Translate codepoint offsets into byte offsets before normalizing.
    strict_reads
        Raise instead of skipping unreadable source files.

    Returns
    -------
    int
        Exit status code.
    """
    config = msgspec.structs.replace(GrapherConfig.from_env(), strict_reads=strict_reads)
    try:
        for name, output in read_outputs(files):
            LOGGER.debug("Normalizing %s", name)
            if unicode_offsets:
                ensure_byte_offsets(dir, output, config=config)
            print_json(normalize_output(output))
    except OSError as exc:
        LOGGER.error("Failed to read analyzer output: %s", exc)
        return ExitCode.from_exception(exc)
    except msgspec.ValidationError as exc:
        LOGGER.error("Invalid analyzer output: %s", validation_error_payload(exc))
        return ExitCode.from_exception(exc)
    except msgspec.DecodeError as exc:
        LOGGER.error("Malformed analyzer output: %s", exc)
        return ExitCode.from_exception(exc)
    except (GrapherError, RepositoryURIError) as exc:
        LOGGER.error("Normalization failed: %s", exc)
        return ExitCode.from_exception(exc)
    return ExitCode.SUCCESS


__all__ = ["normalize_command"]
