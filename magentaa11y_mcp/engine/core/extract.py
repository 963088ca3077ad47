"""Fact extraction from component markdown bodies.

Pure functions over a body string: heading outline, WCAG success criteria
references, and native platform API tokens.
"""

import re
from dataclasses import dataclass

from ...models import AndroidTokens, IOSTokens, PlatformTokens

HEADING_PATTERN = re.compile(r"^#{1,3}\s+(.+)$")
WCAG_CRITERION_PATTERN = re.compile(r"\d+\.\d+\.\d+")
CODE_FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")


@dataclass(frozen=True)
class ExtractionRule:
    """A token grammar: every match of ``pattern`` lands in ``platform.field``."""

    platform: str
    field: str
    pattern: re.Pattern[str]


PLATFORM_TOKEN_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule("iOS", "traits", re.compile(r"UIAccessibilityTrait\w+")),
    ExtractionRule("iOS", "properties", re.compile(r"accessibility(?:Label|Hint|Value|Traits|Frame)")),
    ExtractionRule(
        "Android",
        "classes",
        re.compile(r"(?:Material)?(?:Button|Switch|Checkbox|TextView|EditText)\b"),
    ),
    ExtractionRule("Android", "properties", re.compile(r"content(?:Description|Info)|stateDescription")),
)

PLATFORM_TOKEN_MODELS = {"iOS": IOSTokens, "Android": AndroidTokens}


def match_heading(line: str) -> str | None:
    """Return the heading text if ``line`` is a level 1-3 heading."""
    match = HEADING_PATTERN.match(line)
    if match:
        return match.group(1).strip()
    return None


def extract_sections(body: str) -> list[str]:
    """Heading texts (levels 1-3) in document order, duplicates kept."""
    sections = []
    for line in body.split("\n"):
        heading = match_heading(line)
        if heading is not None:
            sections.append(heading)
    return sections


def extract_wcag_criteria(body: str) -> list[str]:
    """Unique WCAG success criterion codes (e.g. ``1.4.3``).

    Sorted as strings, so ``"10.1.1"`` comes before ``"2.1.1"``.
    """
    return sorted(set(WCAG_CRITERION_PATTERN.findall(body)))


def extract_tokens(body: str, pattern: re.Pattern[str]) -> list[str]:
    """Unique matches of ``pattern`` in encounter order."""
    return list(dict.fromkeys(m.group(0) for m in pattern.finditer(body)))


def extract_platform_tokens(body: str) -> PlatformTokens:
    """Collect iOS and Android API tokens using ``PLATFORM_TOKEN_RULES``.

    Empty token lists are left unset, and a sub-platform with no tokens at
    all is left out entirely.
    """
    found: dict[str, dict[str, list[str]]] = {}
    for rule in PLATFORM_TOKEN_RULES:
        tokens = extract_tokens(body, rule.pattern)
        if tokens:
            found.setdefault(rule.platform, {})[rule.field] = tokens

    return PlatformTokens(
        **{platform: PLATFORM_TOKEN_MODELS[platform](**fields) for platform, fields in found.items()}
    )


def strip_code_blocks(body: str) -> str:
    """Remove fenced code blocks (``` or ~~~) from a markdown body.

    An unterminated fence removes everything after it.
    """
    kept = []
    fence = None
    for line in body.split("\n"):
        match = CODE_FENCE_PATTERN.match(line)
        if fence is None:
            if match:
                fence = match.group(1)
                continue
            kept.append(line)
        elif match and match.group(1) == fence:
            fence = None
    return "\n".join(kept)
