"""Canonical repository URIs.

A repository URI is the host followed by the repository path, with no scheme,
credentials, port, ``.git`` suffix or trailing slash, and a lowercased host:
``git://github.com/Foo/bar.git`` and ``git@github.com:Foo/bar`` both become
``github.com/Foo/bar``. Identifiers without a scheme are treated as already
being in host/path form.
"""

from __future__ import annotations

import posixpath
import re
from urllib.parse import urlsplit

from repo.errors import RepositoryURIError

_SCP_LIKE_RE = re.compile(r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^:/]+):(?P<path>(?!//).*)$")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")


def _split_clone_url(clone_url: str) -> tuple[str, str]:
    if _SCHEME_RE.match(clone_url):
        try:
            parts = urlsplit(clone_url)
            host = parts.hostname or ""
        except ValueError as exc:
            msg = f"invalid clone URL {clone_url!r}: {exc}"
            raise RepositoryURIError(msg) from exc
        return host, parts.path
    scp = _SCP_LIKE_RE.match(clone_url)
    if scp is not None:
        return scp.group("host"), "/" + scp.group("path").lstrip("/")
    return "", clone_url


def make_uri(clone_url: str) -> str:
    """Return the canonical repository URI for a clone URL.

    Parameters
    ----------
    clone_url
        Clone URL (``https://``, ``git://``, ``ssh://``), scp-style remote
        (``git@host:owner/name``) or an existing ``host/path`` URI.

    Returns
    -------
    str
        Canonical ``host/path`` URI.

    Raises
    ------
    RepositoryURIError
        Raised when ``clone_url`` is empty, unparsable or has no path.
    """
    value = clone_url.strip()
    if not value:
        msg = "cannot make a repository URI from an empty clone URL"
        raise RepositoryURIError(msg)
    host, path = _split_clone_url(value)
    path = path.removesuffix("/").removesuffix(".git")
    if path:
        path = posixpath.normpath(path)
        if path in {".", "/"}:
            path = ""
    if host and path and not path.startswith("/"):
        path = "/" + path
    uri = host.lower() + path
    if not uri:
        msg = f"clone URL {clone_url!r} has no host or path"
        raise RepositoryURIError(msg)
    return uri


__all__ = ["make_uri"]
