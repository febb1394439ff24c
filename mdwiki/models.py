from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class Crumb(BaseModel):
    name: str
    uri: str


class PageInfo(BaseModel):
    uri: str
    name: str
    is_dir: bool = False


class Page(BaseModel):
    path: str = Field(..., description="Absolute path of the markdown file on disk")
    uri: str = Field(..., description="Canonical request URI, e.g. '/notes/todo'")
    raw: str = ""
    body: str = Field(default="", description="Sanitized HTML, filled by process_markdown()")

    def process_markdown(self) -> "Page":
        from mdwiki.core.render import render_markdown

        self.body = render_markdown(self.raw)
        return self

    def crumbs(self) -> list[Crumb]:
        from mdwiki.core.paths import breadcrumbs

        return breadcrumbs(self.uri)


class HealthResponse(BaseModel):
    ok: bool


class ReadyResponse(BaseModel):
    ready: bool
    reason: Optional[str] = None


class ErrorResponse(BaseModel):
    code: str
    message: str
    details: dict[str, Any] | None = None


class TreeStats(BaseModel):
    page_count: int
    root_counts: dict[str, int]


class TreeResponse(BaseModel):
    roots: dict[str, Any]
    stats: TreeStats
