"""Text helpers for search: index corpus normalisation and result snippets."""

from __future__ import annotations

import re

_WHITESPACE = re.compile(r"\s+")

DEFAULT_SNIPPET_LENGTH = 150
# Characters of leading context kept before the first match.
SNIPPET_LEAD = 50
ELLIPSIS = "..."


def build_search_vector(*texts: str | None) -> str:
    """Join non-empty texts with single spaces, collapsing whitespace runs.

    >>> build_search_vector("Acme  site", None, "  redesign\\n")
    'Acme site redesign'
    """
    joined = " ".join(t for t in texts if t)
    return _WHITESPACE.sub(" ", joined).strip()


def generate_snippet(
    content: str, query: str, max_length: int = DEFAULT_SNIPPET_LENGTH
) -> str:
    """Window of content around the first case-insensitive occurrence of query.

    Window boundaries are widened to whole words; "..." marks truncation on
    either side. Without a match the head of content is returned (truncated
    with a trailing "..." when longer than max_length).
    """
    index = content.lower().find(query.lower())
    if index == -1:
        if len(content) > max_length:
            return content[:max_length].strip() + ELLIPSIS
        return content

    start = max(0, index - SNIPPET_LEAD)
    while start > 0 and content[start] != " ":
        start -= 1
    start = start + 1 if start > 0 else 0

    end = min(len(content), start + max_length)
    while end < len(content) and content[end] != " ":
        end += 1

    snippet = content[start:end].strip()
    if start > 0:
        snippet = ELLIPSIS + snippet
    if end < len(content):
        snippet = snippet + ELLIPSIS
    return snippet
