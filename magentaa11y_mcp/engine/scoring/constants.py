"""Scoring constants for fuzzy search and snippet extraction."""

# ============ FUZZY MATCHING ============

# Fuse-style distance thresholds: 0.0 is a perfect match, 1.0 matches anything.
# Body search is tolerant of approximate wording; name suggestions are looser
# still since they only need to catch typos in identifiers.
SEARCH_THRESHOLD = 0.4
SUGGEST_THRESHOLD = 0.5

# ============ SNIPPETS ============

# Section label used for matches that precede any heading
DEFAULT_SECTION = "Content"

# Snippets per component in one search result
MAX_SNIPPETS = 3

# Snippet length before the ellipsis marker is appended
SNIPPET_MAX_CHARS = 200

ELLIPSIS = "..."

# Lines of context on each side of a matching line
SNIPPET_CONTEXT_LINES = 1
