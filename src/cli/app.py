"""Main application setup for the srcgraph CLI."""

from __future__ import annotations

import logging
from typing import Annotated, Literal

from cyclopts import App, Parameter

from cli.commands.version import get_version

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HELP_EPILOGUE = """
Examples:
  srcgraph normalize out.json                      Canonicalize and sort a batch
  srcgraph normalize --unicode-offsets --dir . a.json
                                                   Convert codepoint offsets first
  srcgraph repo .                                  Show detected repository

Environment Variables:
  SRCGRAPH_LOG_LEVEL      Default log level (DEBUG, INFO, WARNING, ERROR)
  SRCGRAPH_STRICT_READS   Fail on unreadable source files
  SRCGRAPH_TMP_DIR        Cache directory for analyzer output
"""

app = App(
    name="srcgraph",
    help="Normalize source analysis output: byte offsets and stable ordering.",
    help_epilogue=_HELP_EPILOGUE,
    version=get_version(),
    version_flags=["--version", "-V"],
    default_parameter=Parameter(show_default=True, show_env_var=True),
    result_action="return_value",
    exit_on_error=True,
    print_error=True,
)


def configure_logging(level: str) -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


@app.meta.default
def meta_launcher(
    *tokens: Annotated[str, Parameter(show=False, allow_leading_hyphen=True)],
    log_level: Annotated[
        Literal["DEBUG", "INFO", "WARNING", "ERROR"],
        Parameter(
            name="--log-level",
            help="Logging verbosity level.",
            env_var="SRCGRAPH_LOG_LEVEL",
        ),
    ] = "WARNING",
) -> int:
    """Configure logging, then dispatch to the requested command.

    Returns
    -------
    int
        Exit status code from command execution.
    """
    configure_logging(log_level)
    result = app(tokens)
    return int(result) if isinstance(result, int) else 0


app.command("cli.commands.normalize:normalize_command", name="normalize", alias="n")
app.command("cli.commands.repo:repo_command", name="repo")
app.command("cli.commands.version:version_command", name="version", alias="v")


def main() -> None:
    """Run the srcgraph CLI."""
    raise SystemExit(app.meta())


__all__ = ["LOG_LEVELS", "app", "configure_logging", "main"]
