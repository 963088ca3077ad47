"""Tests for the ContentLoader retrieval facade."""

import shutil

import pytest

from magentaa11y_mcp.engine import ContentLoader
from magentaa11y_mcp.engine.core import (
    ComponentNotFoundError,
    FormatUnavailableError,
    InitializationError,
)
from magentaa11y_mcp.engine.handlers import dump
from magentaa11y_mcp.engine.loader import format_value
from magentaa11y_mcp.models import ContentFormat, NativePlatform, Platform

from .conftest import write_doc


class TestInitialization:
    def test_queries_require_initialization(self, content_root):
        loader = ContentLoader(content_root)
        assert not loader.indexed
        with pytest.raises(InitializationError):
            loader.list_components(Platform.WEB)

    @pytest.mark.asyncio
    async def test_initialize_is_idempotent(self, loader, content_root):
        index = loader.index
        write_doc(content_root, "web/controls/link.md", "# Link")
        await loader.initialize()

        assert loader.index is index
        assert "link" not in [c.name for c in loader.list_components(Platform.WEB)]

    @pytest.mark.asyncio
    async def test_missing_content_root(self, tmp_path):
        loader = ContentLoader(tmp_path / "missing")
        with pytest.raises(InitializationError):
            await loader.initialize()
        assert not loader.indexed

    @pytest.mark.asyncio
    async def test_missing_native_directory(self, content_root):
        shutil.rmtree(content_root / "native")
        loader = ContentLoader(content_root)
        await loader.initialize()

        assert loader.list_components(Platform.NATIVE) == []
        assert loader.get_categories(Platform.NATIVE) == []
        assert len(loader.list_components(Platform.WEB)) == 3


class TestGetComponent:
    @pytest.mark.asyncio
    async def test_every_indexed_component_resolves(self, loader):
        for platform in Platform:
            for metadata in loader.list_components(platform):
                component = await loader.get_component(platform, metadata.name)
                assert component.component == metadata.name

    @pytest.mark.asyncio
    async def test_web_component(self, loader):
        component = await loader.get_component(Platform.WEB, "button")

        assert component.display_name == "Button"
        assert component.category == "controls"
        assert component.label == "Button"
        assert component.sections == ["Button", "Overview", "Usage"]
        assert component.wcag_criteria == ["2.1.1", "4.1.2"]
        assert component.platforms is None
        assert not component.content.startswith("---")

    @pytest.mark.asyncio
    async def test_string_sorted_criteria(self, loader):
        component = await loader.get_component(Platform.WEB, "checkbox")
        assert component.wcag_criteria == ["1.3.1", "10.1.1"]

    @pytest.mark.asyncio
    async def test_native_component_tokens(self, loader):
        component = await loader.get_component(Platform.NATIVE, "switch")
        data = dump(component)

        assert data["platforms"]["iOS"]["traits"] == ["UIAccessibilityTraitButton"]
        assert data["platforms"]["Android"]["properties"] == [
            "contentDescription",
            "stateDescription",
        ]
        assert data["wcagCriteria"] == ["4.1.2"]

    @pytest.mark.asyncio
    async def test_native_component_without_tokens(self, loader):
        component = await loader.get_component(Platform.NATIVE, "picker")
        assert dump(component)["platforms"] == {}

    @pytest.mark.asyncio
    async def test_without_code_examples(self, loader):
        full = await loader.get_component(Platform.WEB, "button")
        stripped = await loader.get_component(Platform.WEB, "button", include_code_examples=False)

        assert "```" in full.content
        assert "```" not in stripped.content
        assert "<button" not in stripped.content
        assert stripped.sections == full.sections

    @pytest.mark.asyncio
    async def test_not_found(self, loader):
        with pytest.raises(ComponentNotFoundError) as exc_info:
            await loader.get_component(Platform.WEB, "buton")
        assert exc_info.value.name == "buton"

    @pytest.mark.asyncio
    async def test_platforms_are_separate(self, loader):
        with pytest.raises(ComponentNotFoundError):
            await loader.get_component(Platform.NATIVE, "button")

    @pytest.mark.asyncio
    async def test_body_is_reread(self, loader, content_root):
        write_doc(content_root, "web/forms/text-input.md", "# Text Input\n\n## Updated\n")
        component = await loader.get_component(Platform.WEB, "text-input")
        assert component.sections == ["Text Input", "Updated"]


class TestFormats:
    @pytest.mark.asyncio
    async def test_available_formats(self, loader):
        formats = await loader.get_available_formats(Platform.WEB, "button")
        assert set(formats) == {ContentFormat.GHERKIN, ContentFormat.CONDENSED}

    @pytest.mark.asyncio
    async def test_no_front_matter_means_no_formats(self, loader):
        assert await loader.get_available_formats(Platform.WEB, "text-input") == []

    @pytest.mark.asyncio
    async def test_format_content(self, loader):
        assert await loader.get_component_content(Platform.WEB, "button", ContentFormat.GHERKIN) == "G"
        assert await loader.get_component_content(Platform.WEB, "button", ContentFormat.CONDENSED) == "C"

    @pytest.mark.asyncio
    async def test_format_unavailable(self, loader):
        with pytest.raises(FormatUnavailableError) as exc_info:
            await loader.get_component_content(Platform.WEB, "button", ContentFormat.DEVELOPER_NOTES)
        assert exc_info.value.available == ["gherkin", "condensed"]

    @pytest.mark.asyncio
    async def test_format_for_missing_component(self, loader):
        with pytest.raises(ComponentNotFoundError):
            await loader.get_component_content(Platform.WEB, "missing", ContentFormat.GHERKIN)
        with pytest.raises(ComponentNotFoundError):
            await loader.get_available_formats(Platform.WEB, "missing")

    @pytest.mark.asyncio
    async def test_block_scalar_format(self, loader):
        notes = await loader.get_component_content(
            Platform.WEB, "checkbox", ContentFormat.DEVELOPER_NOTES
        )
        assert notes == "Use a native input with type checkbox.\n"

    @pytest.mark.asyncio
    async def test_native_notes(self, loader):
        assert await loader.get_native_notes(NativePlatform.IOS, "switch") == "Use UISwitch."
        assert (
            await loader.get_native_notes(NativePlatform.ANDROID, "switch")
            == "Use SwitchCompat or MaterialSwitch."
        )

    @pytest.mark.asyncio
    async def test_native_notes_unavailable(self, loader):
        with pytest.raises(FormatUnavailableError):
            await loader.get_native_notes(NativePlatform.IOS, "picker")


class TestDocumentEncoding:
    @pytest.mark.asyncio
    async def test_byte_order_mark_keeps_front_matter(self, content_root):
        (content_root / "web/controls/link.md").write_bytes(
            b"\xef\xbb\xbf---\ngherkin: G\n---\n# Link\n"
        )
        loader = ContentLoader(content_root)
        await loader.initialize()

        assert await loader.get_available_formats(Platform.WEB, "link") == [ContentFormat.GHERKIN]
        component = await loader.get_component(Platform.WEB, "link")
        assert component.content == "# Link\n"

    @pytest.mark.asyncio
    async def test_undecodable_bytes_are_served(self, content_root):
        (content_root / "web/controls/link.md").write_bytes(
            b"# Link\n\nBroken \xff byte.\n\nKeyboard focus moves to the link.\n"
        )
        loader = ContentLoader(content_root)
        await loader.initialize()

        component = await loader.get_component(Platform.WEB, "link")
        assert "\ufffd" in component.content
        response = await loader.search(Platform.WEB, "keyboard focus moves")
        assert "link" in [r.component for r in response.results]


class TestFormatValues:
    def test_strings_are_unchanged(self):
        assert format_value("G\n") == "G\n"

    def test_scalars_use_str(self):
        assert format_value(3) == "3"
        assert format_value(True) == "True"

    def test_lists_and_mappings_render_as_yaml(self):
        assert format_value(["a", "b"]) == "- a\n- b\n"
        assert format_value({"step": "Tab", "result": "focus"}) == "step: Tab\nresult: focus\n"

    @pytest.mark.asyncio
    async def test_structured_format_content(self, content_root):
        write_doc(content_root, "web/controls/link.md", "---\ngherkin:\n  - a\n  - b\n---\n# Link\n")
        loader = ContentLoader(content_root)
        await loader.initialize()

        assert await loader.get_component_content(Platform.WEB, "link", ContentFormat.GHERKIN) == "- a\n- b\n"
