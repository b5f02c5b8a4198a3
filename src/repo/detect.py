"""Repository metadata detection backed by pygit2."""

from __future__ import annotations

import logging
from pathlib import Path

import pygit2

from core_types import PathLike, ensure_path
from obs.otel.constants import AttributeName
from obs.otel.scopes import SCOPE_REPO
from obs.otel.tracing import stage_span
from repo.errors import RepositoryDetectionError
from serde_msgspec import StructBaseStrict

LOGGER = logging.getLogger(__name__)

_GITHUB_SSH_PREFIX = "git@github.com:"
_GITHUB_GIT_PREFIX = "git://github.com/"


class Repository(StructBaseStrict, frozen=True):
    """Detected repository metadata; fields are empty when unknown."""

    clone_url: str = ""
    commit_id: str = ""
    vcs_type: str = ""
    root_dir: str = ""

    def output_file(self, tmp_dir: PathLike) -> Path:
        """Return the cache file path for this repository's analyzer output.

        Returns
        -------
        pathlib.Path
            ``<tmp_dir>/<root dir name>-<commit id>.json``.
        """
        root_name = Path(self.root_dir).resolve().name
        return ensure_path(tmp_dir) / f"{root_name}-{self.commit_id}.json"


def detect_repository(dir: PathLike) -> Repository:
    """Return repository metadata for the git repository containing ``dir``.

    Missing pieces (no repository, unborn HEAD, no ``origin`` remote) leave
    the corresponding fields empty.

    Returns
    -------
    Repository
        Detected metadata.

    Raises
    ------
    RepositoryDetectionError
        Raised when ``dir`` is not an existing directory.
    """
    path = ensure_path(dir)
    if not path.is_dir():
        msg = f"dir does not exist: {path}"
        raise RepositoryDetectionError(msg)
    with stage_span(
        "repo.detect_repository",
        stage="repo",
        scope_name=SCOPE_REPO,
        attributes={AttributeName.ROOT_DIR: str(path)},
    ):
        return _detect(path)


def ensure_tmp_dir(tmp_dir: PathLike) -> Path:
    """Create ``tmp_dir`` (mode 0700) if needed and return it.

    Returns
    -------
    pathlib.Path
        The directory path.
    """
    path = ensure_path(tmp_dir)
    path.mkdir(mode=0o700, parents=True, exist_ok=True)
    return path


def _detect(path: Path) -> Repository:
    try:
        repo_path = pygit2.discover_repository(str(path))
    except (KeyError, ValueError, pygit2.GitError) as exc:
        LOGGER.debug("Failed to find git repository root dir in %s: %s", path, exc)
        return Repository()
    if repo_path is None:
        LOGGER.debug("Failed to detect repository root dir for %s", path)
        return Repository()
    try:
        repo = pygit2.Repository(repo_path)
    except pygit2.GitError as exc:
        LOGGER.debug("Failed to open repository at %s: %s", repo_path, exc)
        return Repository()
    root_dir = str(Path(repo.workdir)) if repo.workdir else str(Path(repo.path))
    commit_id = _head_sha(repo)
    if commit_id is None:
        return Repository(vcs_type="git", root_dir=root_dir)
    return Repository(
        clone_url=_origin_url(repo) or "",
        commit_id=commit_id,
        vcs_type="git",
        root_dir=root_dir,
    )


def _origin_url(repo: pygit2.Repository) -> str | None:
    try:
        remote = repo.remotes["origin"]
    except KeyError:
        return None
    url = remote.url
    if url is None:
        return None
    if url.startswith(_GITHUB_SSH_PREFIX):
        return _GITHUB_GIT_PREFIX + url.removeprefix(_GITHUB_SSH_PREFIX)
    return url


def _head_sha(repo: pygit2.Repository) -> str | None:
    if repo.head_is_unborn:
        return None
    try:
        head = repo.head.peel(pygit2.Commit)
    except (KeyError, ValueError, pygit2.GitError):
        return None
    return str(head.id)


__all__ = ["Repository", "detect_repository", "ensure_tmp_dir"]
