from __future__ import annotations

from collections.abc import Iterable

from mdwiki.core.wiki import Wiki


def _segments(uri: str) -> list[str]:
    return [segment for segment in str(uri).split("/") if segment]


def build_tree(uris: list[str] | Iterable[str]) -> dict[str, dict]:
    # segment-wise order keeps every level sorted as it is inserted
    tree: dict[str, dict] = {}
    for segments in sorted(_segments(uri) for uri in uris):
        current = tree
        for segment in segments:
            current = current.setdefault(segment, {})
    return tree


def tree_summary(wiki: Wiki) -> dict:
    uris = wiki.walk()
    roots = [uri.strip("/").split("/")[0] for uri in uris if "/" in uri.strip("/")]
    return {
        "roots": build_tree(uris),
        "stats": {
            "page_count": len(uris),
            "root_counts": {key: roots.count(key) for key in sorted(set(roots))},
        },
    }
