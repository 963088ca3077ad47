"""MCP Tool Definitions for the MagentaA11y server.

This module contains all tool definitions returned by the tools/list method.
Each tool definition includes the schema for its input parameters.

Tool Categories:
    - Web Platform: list_web_components, get_web_component, search_web_criteria
    - Native Platform: list_native_components, get_native_component, search_native_criteria
    - Content Formats: get_component_gherkin, get_component_condensed,
      get_component_developer_notes, get_component_native_notes, list_component_formats
    - Lookup: suggest_similar_components
"""

_PLATFORM_PROPERTY = {
    "type": "string",
    "enum": ["web", "native"],
    "description": "Platform (web or native)",
}


def _format_tool(name: str, description: str) -> dict:
    return {
        "name": name,
        "description": description,
        "inputSchema": {
            "type": "object",
            "properties": {
                "platform": _PLATFORM_PROPERTY,
                "component": {
                    "type": "string",
                    "description": 'Component name (e.g., "button", "checkbox")',
                },
            },
            "required": ["platform", "component"],
        },
    }


TOOL_DEFINITIONS: list[dict] = [
    # ============ Web Platform Tools ============
    {
        "name": "list_web_components",
        "description": "List all available web accessibility components from MagentaA11y. Optionally filter by category (e.g., controls, forms, components).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": 'Optional category filter (e.g., "controls", "forms", "components")',
                },
            },
        },
    },
    {
        "name": "get_web_component",
        "description": "Get detailed accessibility criteria for a specific web component. Returns acceptance criteria, WCAG mappings, code examples, and implementation guidelines.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "component": {
                    "type": "string",
                    "description": 'Component name (e.g., "button", "checkbox", "text-input")',
                },
                "include_code_examples": {
                    "type": "boolean",
                    "description": "Include code examples in response (default: true)",
                    "default": True,
                },
            },
            "required": ["component"],
        },
    },
    {
        "name": "search_web_criteria",
        "description": "Search web accessibility criteria using keywords. Find criteria related to WCAG guidelines, implementation patterns, or specific accessibility requirements.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": 'Search term or phrase (e.g., "focus indicator", "aria-label")',
                },
                "max_results": {
                    "type": "integer",
                    "description": "Maximum number of results to return (default: 10)",
                    "default": 10,
                    "minimum": 0,
                },
            },
            "required": ["query"],
        },
    },
    # ============ Native Platform Tools ============
    {
        "name": "list_native_components",
        "description": "List all available native (iOS/Android) accessibility components from MagentaA11y. Optionally filter by category.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "category": {
                    "type": "string",
                    "description": 'Optional category filter (e.g., "controls", "components")',
                },
            },
        },
    },
    {
        "name": "get_native_component",
        "description": "Get detailed accessibility criteria for a specific native component. Returns iOS and Android implementation details, platform-specific properties, and code examples.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "component": {
                    "type": "string",
                    "description": 'Component name (e.g., "button", "switch", "picker")',
                },
                "include_code_examples": {
                    "type": "boolean",
                    "description": "Include platform-specific code examples (default: true)",
                    "default": True,
                },
            },
            "required": ["component"],
        },
    },
    {
        "name": "search_native_criteria",
        "description": "Search native accessibility criteria using keywords. Find platform-specific implementation details for iOS (VoiceOver) and Android (TalkBack).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {
                    "type": "string",
                    "description": 'Search term or phrase (e.g., "voiceover", "talkback", "accessibility label")',
                },
                "max_results": {
                    "type": "integer",
                    "description": "Maximum number of results to return (default: 10)",
                    "default": 10,
                    "minimum": 0,
                },
            },
            "required": ["query"],
        },
    },
    # ============ Content Format Tools ============
    _format_tool(
        "get_component_gherkin",
        "Get Gherkin-style acceptance criteria for a component. These are detailed Given/When/Then scenarios for testing accessibility.",
    ),
    _format_tool(
        "get_component_condensed",
        "Get condensed acceptance criteria for a component. These are shorter, more focused testing instructions.",
    ),
    _format_tool(
        "get_component_developer_notes",
        "Get developer implementation notes for a component. Includes code examples, WCAG mappings, and technical guidance.",
    ),
    {
        "name": "get_component_native_notes",
        "description": "Get platform-specific developer notes for native components (iOS or Android implementation details).",
        "inputSchema": {
            "type": "object",
            "properties": {
                "platform": {
                    "type": "string",
                    "enum": ["ios", "android"],
                    "description": "Native platform (ios or android)",
                },
                "component": {
                    "type": "string",
                    "description": 'Component name (e.g., "button", "switch")',
                },
            },
            "required": ["platform", "component"],
        },
    },
    _format_tool(
        "list_component_formats",
        "List all available content formats for a specific component (e.g., gherkin, condensed, developer notes).",
    ),
    # ============ Lookup Tools ============
    {
        "name": "suggest_similar_components",
        "description": "Suggest component names similar to a possibly misspelled name.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "platform": _PLATFORM_PROPERTY,
                "component": {"type": "string", "description": "Component name to match"},
                "limit": {"type": "integer", "default": 5, "minimum": 1, "maximum": 50},
            },
            "required": ["platform", "component"],
        },
    },
]
