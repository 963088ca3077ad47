"""MagentaA11y MCP Server.

Serves MagentaA11y accessibility acceptance criteria (web and native
components) to agents over the Model Context Protocol.
"""

__version__ = "1.0.0"
