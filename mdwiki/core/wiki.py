from __future__ import annotations

import os
import posixpath

from mdwiki import config
from mdwiki.core.errors import (
    PageConflictError,
    PageNotFoundError,
    WikiNotConfiguredError,
)
from mdwiki.core.paths import METADATA_DIR, clean_uri, is_hidden, local
from mdwiki.core.vcs import VersionControl
from mdwiki.models import Page, PageInfo


class Wiki:
    """A directory of markdown pages versioned in git.

    Every mutating operation is followed by a commit of the touched path.
    Reads never render markdown; callers use ``Page.process_markdown()``.
    """

    def __init__(self, root: str, vcs: VersionControl | None = None):
        self.root = os.path.realpath(root)
        self.vcs = vcs or VersionControl(self.root)

    @classmethod
    def from_env(cls) -> "Wiki":
        root = config.wiki_root()
        if not root:
            raise WikiNotConfiguredError("WIKI_ROOT is not configured")
        name, email = config.git_identity()
        real = os.path.realpath(root)
        return cls(real, VersionControl(real, author_name=name, author_email=email))

    def local(self, path: str) -> str:
        return local(self.root, path)

    def initialize(self) -> None:
        self.vcs.initialize()

    def commit(self, path: str, message: str) -> bool:
        return self.vcs.commit(path, message)

    def stat(self, path: str) -> str | None:
        p = self.local(path)
        if os.path.isdir(p):
            return "dir"
        if os.path.isfile(p):
            return "file"
        return None

    # mutating operations

    def create(self, path: str) -> Page:
        p = self.local(path)
        if os.path.isdir(p):
            raise PageConflictError("a directory exists at this path", {"path": path})
        try:
            os.makedirs(os.path.dirname(p), exist_ok=True)
            if not os.path.exists(p):
                with open(p, "x", encoding="utf-8", newline="") as f:
                    f.write("# " + path)
        except (FileExistsError, NotADirectoryError) as e:
            raise PageConflictError("a file is in the way of this path", {"path": path}) from e
        self.commit(p, "Created " + path)
        return self.get_page(path)

    def edit(self, path: str, contents: str) -> None:
        p = self.local(path)
        if os.path.isdir(p):
            raise PageConflictError("cannot edit a directory", {"path": path})
        if not os.path.isdir(os.path.dirname(p)):
            raise PageNotFoundError("parent directory does not exist", {"path": path})
        # a symlinked page is edited through its in-root target
        target = os.path.realpath(p)
        with open(target, "w", encoding="utf-8", newline="") as f:
            f.write(contents)
        self.commit(target, "Edit to " + path)

    def remove(self, path: str) -> None:
        p = self.local(path)
        if p == self.root:
            raise PageConflictError("cannot remove the wiki root", {"path": path})
        is_dir = os.path.isdir(p) and not os.path.islink(p)
        try:
            if is_dir:
                os.rmdir(p)
            else:
                os.remove(p)
        except (FileNotFoundError, NotADirectoryError) as e:
            raise PageNotFoundError("page not found", {"path": path}) from e
        except OSError as e:
            raise PageConflictError(f"cannot remove: {e.strerror}", {"path": path}) from e
        # git does not track empty directories
        if not is_dir:
            self.commit(p, "Deleted " + path)

    # read operations

    def get_dir(self, path: str) -> list[PageInfo]:
        p = self.local(path)
        try:
            names = sorted(os.listdir(p))
        except FileNotFoundError as e:
            raise PageNotFoundError("directory not found", {"path": path}) from e
        except NotADirectoryError as e:
            raise PageConflictError("not a directory", {"path": path}) from e
        return [
            PageInfo(
                uri=clean_uri(posixpath.join(clean_uri(path), name)),
                name=name,
                is_dir=os.path.isdir(os.path.join(p, name)),
            )
            for name in names
            if not is_hidden(name)
        ]

    def get_page(self, path: str) -> Page:
        p = self.local(path)
        try:
            with open(p, "rb") as f:
                data = f.read()
        except (FileNotFoundError, NotADirectoryError) as e:
            raise PageNotFoundError("page not found", {"path": path}) from e
        except IsADirectoryError as e:
            raise PageConflictError("path is a directory", {"path": path}) from e
        # invalid UTF-8, e.g. an image dropped into the wiki, decodes to U+FFFD
        return Page(path=p, uri=clean_uri(path), raw=data.decode("utf-8", errors="replace"))

    def walk(self) -> list[str]:
        """URIs of every visible page under the root."""
        uris: list[str] = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            dirnames[:] = [d for d in dirnames if d != METADATA_DIR and not is_hidden(d)]
            rel = os.path.relpath(dirpath, self.root)
            base = "" if rel == os.curdir else rel.replace(os.sep, "/")
            for name in filenames:
                if not is_hidden(name):
                    uris.append(clean_uri(posixpath.join(base, name)))
        return sorted(uris)
