"""Repository metadata and canonical repository URIs."""

from repo.config import RepositoryConfig
from repo.detect import Repository, detect_repository, ensure_tmp_dir
from repo.errors import RepositoryDetectionError, RepositoryError, RepositoryURIError
from repo.uri import make_uri

__all__ = [
    "Repository",
    "RepositoryConfig",
    "RepositoryDetectionError",
    "RepositoryError",
    "RepositoryURIError",
    "detect_repository",
    "ensure_tmp_dir",
    "make_uri",
]
