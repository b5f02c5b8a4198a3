"""Exit code taxonomy for the srcgraph CLI."""

from __future__ import annotations

from enum import IntEnum

import msgspec

from grapher.errors import GrapherError, NoGrapherRegisteredError
from repo.errors import RepositoryError


class ExitCode(IntEnum):
    """Standard exit codes for CLI commands.

    - 0: Success
    - 1-9: General errors (parse, validation, config)
    - 10-19: Pipeline stage errors
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    PARSE_ERROR = 2
    VALIDATION_ERROR = 3
    CONFIG_ERROR = 4

    GRAPH_ERROR = 10
    NORMALIZATION_ERROR = 11
    REPOSITORY_ERROR = 12

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExitCode:
        """Map an exception to an appropriate exit code.

        Returns
        -------
        ExitCode
            Exit code appropriate for the exception type.
        """
        if isinstance(exc, msgspec.ValidationError):
            return cls.VALIDATION_ERROR
        if isinstance(exc, msgspec.DecodeError):
            return cls.PARSE_ERROR
        if isinstance(exc, NoGrapherRegisteredError):
            return cls.GRAPH_ERROR
        if isinstance(exc, RepositoryError):
            if isinstance(exc, ValueError):
                return cls.NORMALIZATION_ERROR
            return cls.REPOSITORY_ERROR
        if isinstance(exc, GrapherError):
            return cls.NORMALIZATION_ERROR
        if isinstance(exc, (FileNotFoundError, PermissionError)):
            return cls.CONFIG_ERROR
        return cls.GENERAL_ERROR


__all__ = ["ExitCode"]
