"""Tests for heading, WCAG, and platform token extraction."""

import re

from magentaa11y_mcp.engine.core import (
    extract_platform_tokens,
    extract_sections,
    extract_wcag_criteria,
    parse_front_matter,
    strip_code_blocks,
)
from magentaa11y_mcp.engine.handlers import dump

from .conftest import PICKER_MD, SWITCH_MD

SWITCH_BODY = parse_front_matter(SWITCH_MD).body


class TestExtractSections:
    def test_levels_one_to_three_in_order(self):
        body = "# Title\ntext\n## Usage  \n### Details\n#### Too deep\n## Usage"
        assert extract_sections(body) == ["Title", "Usage", "Details", "Usage"]

    def test_requires_whitespace_after_hashes(self):
        assert extract_sections("#NoSpace\n##\n# Real") == ["Real"]

    def test_heading_must_start_the_line(self):
        assert extract_sections("  # indented\ntext # not a heading") == []


class TestExtractWcagCriteria:
    def test_unique_and_string_sorted(self):
        body = "See 2.1.1, 1.4.3 and 10.1.1. Also 2.1.1 again."
        assert extract_wcag_criteria(body) == ["1.4.3", "10.1.1", "2.1.1"]

    def test_idempotent_and_subset_of_pattern_matches(self):
        body = "Version 1.2.3.4 and criteria 4.1.2 plus 1.3.1"
        first = extract_wcag_criteria(body)
        assert first == extract_wcag_criteria(body)
        assert set(first) <= set(re.findall(r"\d+\.\d+\.\d+", body))

    def test_no_codes(self):
        assert extract_wcag_criteria("Version 2.1 only") == []


class TestExtractPlatformTokens:
    def test_native_document_tokens(self):
        tokens = extract_platform_tokens(SWITCH_BODY)
        assert tokens.ios.traits == ["UIAccessibilityTraitButton"]
        assert tokens.ios.properties == ["accessibilityLabel", "accessibilityHint"]
        assert tokens.android.properties == ["contentDescription", "stateDescription"]

    def test_class_names_keep_encounter_order_and_match_inside_words(self):
        tokens = extract_platform_tokens(SWITCH_BODY)
        # "Button" is found inside UIAccessibilityTraitButton; the pattern has no leading boundary
        assert tokens.android.classes == ["Switch", "Button", "MaterialSwitch"]

    def test_platform_omitted_when_nothing_matches(self):
        assert dump(extract_platform_tokens(PICKER_MD)) == {}

    def test_empty_field_omitted(self):
        tokens = extract_platform_tokens("Only accessibilityValue here.")
        assert dump(tokens) == {"iOS": {"properties": ["accessibilityValue"]}}


class TestStripCodeBlocks:
    def test_removes_fenced_blocks(self):
        body = "before\n```html\n<button/>\n```\nafter\n~~~\ncode\n~~~\nend"
        assert strip_code_blocks(body) == "before\nafter\nend"

    def test_mismatched_fence_does_not_close(self):
        body = "a\n```\ncode\n~~~\nstill code\n```\nb"
        assert strip_code_blocks(body) == "a\nb"

    def test_unterminated_fence_drops_rest(self):
        assert strip_code_blocks("a\n```\nnever closed") == "a"
