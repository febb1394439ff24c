from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass

from git import Git
from git.exc import GitCommandError, GitCommandNotFound

from mdwiki.core.errors import VersionControlError


logger = logging.getLogger("mdwiki")

DEFAULT_AUTHOR_NAME = "mdwiki"
DEFAULT_AUTHOR_EMAIL = "mdwiki@localhost"


@dataclass
class VersionControl:
    """Drives the git executable with the wiki root as working directory."""

    root: str
    author_name: str = DEFAULT_AUTHOR_NAME
    author_email: str = DEFAULT_AUTHOR_EMAIL

    def __post_init__(self):
        self._git = Git(self.root)

    @property
    def identity_env(self) -> dict[str, str]:
        return {
            "GIT_AUTHOR_NAME": self.author_name,
            "GIT_AUTHOR_EMAIL": self.author_email,
            "GIT_COMMITTER_NAME": self.author_name,
            "GIT_COMMITTER_EMAIL": self.author_email,
        }

    def exec_in(self, subcommand: str, *args: str) -> str:
        runner = getattr(self._git, subcommand.replace("-", "_"))
        try:
            with self._git.custom_environment(**self.identity_env):
                return runner(*args)
        except (GitCommandError, GitCommandNotFound) as e:
            logger.error(json.dumps({
                "msg": "git failed",
                "command": subcommand,
                "args": list(args),
                "status": str(e.status),
                "stderr": str(e.stderr).strip(),
            }))
            raise VersionControlError(
                f"git {subcommand} failed",
                {"status": str(e.status), "stderr": str(e.stderr).strip()},
            ) from e

    def initialize(self) -> None:
        os.makedirs(self.root, exist_ok=True)
        self.exec_in("init")

    def is_repository(self) -> bool:
        try:
            inside = self._git.rev_parse("--is-inside-work-tree")
        except (GitCommandError, GitCommandNotFound, OSError):
            return False
        return inside.strip() == "true"

    def has_staged_changes(self, path: str) -> bool:
        return bool(self.exec_in("status", "--porcelain", "--", path).strip())

    def commit(self, path: str, message: str) -> bool:
        """Stage everything under path and commit it.

        Returns False when there was nothing to commit.
        """
        self.exec_in("add", "--all", path)
        if not self.has_staged_changes(path):
            logger.info(json.dumps({"msg": "nothing to commit", "path": path}))
            return False
        self.exec_in("commit", "-m", message)
        logger.info(json.dumps({"msg": "commit", "path": path, "message": message}))
        return True
