"""Configuration for offset translation and normalization."""

from __future__ import annotations

from serde_msgspec import StructBaseStrict
from utils.env_utils import env_bool, env_text

ENV_VERBOSE = "SRCGRAPH_VERBOSE"
ENV_STRICT_READS = "SRCGRAPH_STRICT_READS"
ENV_TMP_DIR = "SRCGRAPH_TMP_DIR"

DEFAULT_TMP_DIR = ".srclib-cache"


class GrapherConfig(StructBaseStrict, frozen=True):
    """Explicit settings passed into translation and graphing.

    Attributes
    ----------
    verbose
        Log skipped non-regular source files at INFO instead of DEBUG.
    strict_reads
        Raise ``OffsetTranslationError`` when a referenced regular file cannot
        be read. When False (the default) the file is logged and skipped.
    tmp_dir
        Directory for cached analyzer output files.
    """

    verbose: bool = False
    strict_reads: bool = False
    tmp_dir: str = DEFAULT_TMP_DIR

    @classmethod
    def from_env(cls) -> GrapherConfig:
        """Return a config populated from ``SRCGRAPH_*`` environment variables.

        Returns
        -------
        GrapherConfig
            Config with environment overrides applied over the defaults.
        """
        return cls(
            verbose=env_bool(ENV_VERBOSE, default=False),
            strict_reads=env_bool(ENV_STRICT_READS, default=False),
            tmp_dir=env_text(ENV_TMP_DIR, default=DEFAULT_TMP_DIR),
        )


__all__ = ["DEFAULT_TMP_DIR", "GrapherConfig"]
