"""Enumeration types for the MagentaA11y MCP Server."""

from enum import StrEnum


class ToolName(StrEnum):
    """Available MCP tools."""

    # Web platform
    LIST_WEB_COMPONENTS = "list_web_components"
    GET_WEB_COMPONENT = "get_web_component"
    SEARCH_WEB_CRITERIA = "search_web_criteria"
    # Native platform
    LIST_NATIVE_COMPONENTS = "list_native_components"
    GET_NATIVE_COMPONENT = "get_native_component"
    SEARCH_NATIVE_CRITERIA = "search_native_criteria"
    # Content formats
    GET_COMPONENT_GHERKIN = "get_component_gherkin"
    GET_COMPONENT_CONDENSED = "get_component_condensed"
    GET_COMPONENT_DEVELOPER_NOTES = "get_component_developer_notes"
    GET_COMPONENT_NATIVE_NOTES = "get_component_native_notes"
    LIST_COMPONENT_FORMATS = "list_component_formats"
    # Lookup helpers
    SUGGEST_SIMILAR_COMPONENTS = "suggest_similar_components"


class Platform(StrEnum):
    """Top-level content platform (one directory per platform)."""

    WEB = "web"
    NATIVE = "native"


class NativePlatform(StrEnum):
    """Native sub-platform with its own developer notes."""

    IOS = "ios"
    ANDROID = "android"

    @property
    def notes_format(self) -> "ContentFormat":
        if self is NativePlatform.IOS:
            return ContentFormat.IOS_DEVELOPER_NOTES
        return ContentFormat.ANDROID_DEVELOPER_NOTES


class ContentFormat(StrEnum):
    """Named content variant stored in a document's front-matter.

    The value is the exact front-matter key.
    """

    GHERKIN = "gherkin"
    CONDENSED = "condensed"
    DEVELOPER_NOTES = "developerNotes"
    ANDROID_DEVELOPER_NOTES = "androidDeveloperNotes"
    IOS_DEVELOPER_NOTES = "iosDeveloperNotes"


FORMAT_DESCRIPTIONS: dict[ContentFormat, str] = {
    ContentFormat.GHERKIN: "Given/When/Then style acceptance criteria for comprehensive testing",
    ContentFormat.CONDENSED: "Shortened, focused testing instructions",
    ContentFormat.DEVELOPER_NOTES: "Implementation guidance with code examples and WCAG mappings",
    ContentFormat.ANDROID_DEVELOPER_NOTES: "Android-specific implementation details",
    ContentFormat.IOS_DEVELOPER_NOTES: "iOS-specific implementation details",
}

# Capability marker attached to every native component
NATIVE_PLATFORMS = ("iOS", "Android")
