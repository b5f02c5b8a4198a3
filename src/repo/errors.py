"""Repository error types."""

from __future__ import annotations


class RepositoryError(Exception):
    """Base class for repository errors."""


class RepositoryURIError(RepositoryError, ValueError):
    """Raised when a clone identifier cannot be turned into a repository URI."""


class RepositoryDetectionError(RepositoryError, FileNotFoundError):
    """Raised when the directory to inspect does not exist."""


__all__ = ["RepositoryDetectionError", "RepositoryError", "RepositoryURIError"]
