"""mcpbrowse: configuration and tool selection for a Playwright-backed MCP browser server."""

from importlib.metadata import version

__version__ = version("mcpbrowse")
