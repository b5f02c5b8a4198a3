"""Print detected repository metadata."""

from __future__ import annotations

import logging
from typing import Annotated

from cyclopts import Parameter

from cli.exit_codes import ExitCode
from grapher.config import GrapherConfig
from grapher.io import print_json
from repo.detect import detect_repository
from repo.errors import RepositoryDetectionError

LOGGER = logging.getLogger(__name__)


def repo_command(
    dir: str = ".",
    /,
    *,
    tmp_dir: Annotated[
        str | None,
        Parameter(
            name="--tmp-dir",
            help="Cache directory used to compute the output file path.",
            env_var="SRCGRAPH_TMP_DIR",
        ),
    ] = None,
) -> int:
    """Detect the repository containing ``dir`` and print it as JSON.

    Returns
    -------
    int
        Exit status code.
    """
    try:
        repository = detect_repository(dir)
    except RepositoryDetectionError as exc:
        LOGGER.error("%s", exc)
        return ExitCode.from_exception(exc)
    payload: dict[str, object] = {
        "CloneURL": repository.clone_url,
        "CommitID": repository.commit_id,
        "VCS": repository.vcs_type,
        "RootDir": repository.root_dir,
    }
    if repository.root_dir and repository.commit_id:
        resolved_tmp = tmp_dir or GrapherConfig.from_env().tmp_dir
        payload["OutputFile"] = str(repository.output_file(resolved_tmp))
    print_json(payload)
    return ExitCode.SUCCESS


__all__ = ["repo_command"]
