"""Match snippet extraction for search results.

Independent of the fuzzy engine: finds lines that contain the query as a
case-insensitive substring and reports them with surrounding context and
the heading they sit under.
"""

from ...models import MatchSnippet
from ..core.extract import match_heading
from .constants import (
    DEFAULT_SECTION,
    ELLIPSIS,
    MAX_SNIPPETS,
    SNIPPET_CONTEXT_LINES,
    SNIPPET_MAX_CHARS,
)


def extract_match_snippets(
    body: str,
    query: str,
    max_snippets: int = MAX_SNIPPETS,
    max_chars: int = SNIPPET_MAX_CHARS,
) -> list[MatchSnippet]:
    """Extract up to ``max_snippets`` snippets for ``query`` from ``body``.

    Heading lines update the current section and are never snippets
    themselves. Each snippet joins the matching line with one line of
    context on either side, truncated to ``max_chars`` and suffixed with
    an ellipsis.

    Args:
        body: Markdown body to scan
        query: Query string (matched case-insensitively)
        max_snippets: Maximum snippets to return
        max_chars: Snippet length before the ellipsis

    Returns:
        Snippets in document order
    """
    snippets: list[MatchSnippet] = []
    query_lower = query.lower()
    if not query_lower:
        return snippets

    lines = body.split("\n")
    current_section = DEFAULT_SECTION

    for i, line in enumerate(lines):
        heading = match_heading(line)
        if heading is not None:
            current_section = heading
            continue

        if query_lower in line.lower():
            start = max(0, i - SNIPPET_CONTEXT_LINES)
            end = min(len(lines), i + SNIPPET_CONTEXT_LINES + 1)
            text = " ".join(lines[start:end])[:max_chars]
            snippets.append(
                MatchSnippet(section=current_section, snippet=text + ELLIPSIS, line=i + 1)
            )
            if len(snippets) >= max_snippets:
                break

    return snippets
