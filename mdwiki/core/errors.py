from __future__ import annotations

from typing import Any


class WikiError(Exception):
    status_code = 500
    code = "wiki_error"

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        *,
        status_code: int | None = None,
        code: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code


class PathOutsideRepoError(WikiError):
    status_code = 400
    code = "path_outside_repo"


class PageNotFoundError(WikiError):
    status_code = 404
    code = "not_found"


class PageConflictError(WikiError):
    status_code = 409
    code = "conflict"


class VersionControlError(WikiError):
    status_code = 500
    code = "vcs_error"


class WikiNotConfiguredError(WikiError):
    status_code = 503
    code = "not_configured"


__all__ = [
    "WikiError",
    "PathOutsideRepoError",
    "PageNotFoundError",
    "PageConflictError",
    "VersionControlError",
    "WikiNotConfiguredError",
]
