from __future__ import annotations

import copy

import markdown
import nh3


MARKDOWN_EXTENSIONS = ["tables", "fenced_code", "sane_lists", "toc"]
LINK_REL = "nofollow noopener noreferrer"
_HEADINGS = ("h1", "h2", "h3", "h4", "h5", "h6")


def _ugc_attributes() -> dict[str, set[str]]:
    attributes = copy.deepcopy(nh3.ALLOWED_ATTRIBUTES)
    # toc extension anchors
    for tag in _HEADINGS:
        attributes.setdefault(tag, set()).add("id")
    return attributes


_ATTRIBUTES = _ugc_attributes()


def sanitize_html(html: str) -> str:
    """Strip markup unsafe for user-generated content."""
    return nh3.clean(html, attributes=_ATTRIBUTES, link_rel=LINK_REL)


def render_markdown(raw: str) -> str:
    unsafe = markdown.markdown(raw or "", extensions=MARKDOWN_EXTENSIONS)
    return sanitize_html(unsafe)
