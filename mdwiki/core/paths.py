from __future__ import annotations

import os
import posixpath

from mdwiki.core.errors import PathOutsideRepoError
from mdwiki.models import Crumb


METADATA_DIR = ".git"
HIDDEN_PREFIX = "."


def _is_within(root: str, candidate: str) -> bool:
    try:
        return os.path.commonpath([root, candidate]) == root
    except ValueError:
        # different drives on Windows
        return False


def local(root: str, path: str) -> str:
    """Resolve a request path to an absolute path inside the wiki root.

    The root is expected to be canonical already (see ``Wiki.__init__``).
    Both the lexical path and its symlink-resolved target must stay inside
    the root and outside the git metadata directory, otherwise
    PathOutsideRepoError is raised. The lexical path is returned so that
    operations on a symlink act on the link itself.
    """
    relative = (path or "").replace("\\", "/").lstrip("/")
    if "\x00" in relative:
        raise PathOutsideRepoError("path outside of repo", {"path": path})
    lexical = os.path.normpath(os.path.join(root, relative))
    metadata = os.path.join(root, METADATA_DIR)
    for candidate in (lexical, os.path.realpath(lexical)):
        if not _is_within(root, candidate) or _is_within(metadata, candidate):
            raise PathOutsideRepoError("path outside of repo", {"path": path})
    return lexical


def clean_uri(path: str) -> str:
    value = (path or "").replace("\\", "/")
    cleaned = posixpath.normpath("/" + value.lstrip("/"))
    # normpath keeps a leading "//" as-is
    return "/" + cleaned.lstrip("/")


def parent_uri(path: str) -> str:
    return posixpath.dirname(clean_uri(path))


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def breadcrumbs(path: str) -> list[Crumb]:
    split = path.split("/")
    crumbs = [Crumb(name="home", uri="/")]
    for ix, segment in enumerate(split[:-1]):
        if segment:
            crumbs.append(Crumb(name=segment, uri="/".join(split[: ix + 1])))
    return crumbs


__all__ = [
    "METADATA_DIR",
    "breadcrumbs",
    "clean_uri",
    "is_hidden",
    "local",
    "parent_uri",
]
