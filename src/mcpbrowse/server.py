"""Tool selection and the server definition handed to the protocol layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from mcpbrowse import __version__
from mcpbrowse.constants import SERVER_NAME
from mcpbrowse.errors import ToolError
from mcpbrowse.logging_config import get_logger
from mcpbrowse.tools import build_registry
from mcpbrowse.tools_metadata import PresentationMode, Tool, ToolCapability, ToolResult

if TYPE_CHECKING:
    from mcpbrowse.config import Config
    from mcpbrowse.tools_metadata import BrowserBackend, ToolRegistry

logger = get_logger(__name__)


def presentation_mode(config: Config) -> PresentationMode:
    """Get the presentation mode selected by the vision flag."""
    return PresentationMode.VISUAL if config.vision else PresentationMode.STRUCTURAL


def select_tools(config: Config, registry: ToolRegistry) -> list[Tool]:
    """Select the tools to expose for a resolved configuration.

    Tools come from exactly one presentation mode. Without a capability
    allow-list every tool of that mode is exposed; with one, core tools plus
    tools whose capability is listed. Registry order is preserved.
    """
    tools = registry.tools(presentation_mode(config))
    if config.capabilities is None:
        return list(tools)
    allowed = set(config.capabilities)
    return [tool for tool in tools if tool.capability == ToolCapability.CORE or tool.capability in allowed]


@dataclass(frozen=True)
class ServerDefinition:
    """Everything the protocol layer needs to serve tools."""

    name: str
    version: str
    tools: tuple[Tool, ...]
    config: Config

    def get_tool(self, name: str) -> Tool:
        """Get an exposed tool by name.

        Raises:
            ToolError: If no exposed tool has that name.

        """
        for tool in self.tools:
            if tool.name == name:
                return tool
        msg = f"Tool {name!r} not found"
        raise ToolError(msg)

    async def call_tool(self, name: str, backend: BrowserBackend, arguments: dict[str, Any] | None = None) -> ToolResult:
        """Validate arguments and run an exposed tool against the backend.

        Raises:
            ToolError: If the tool is not exposed or the arguments are invalid.

        """
        tool = self.get_tool(name)
        try:
            params = tool.params.model_validate(arguments or {})
        except ValidationError as exc:
            msg = f"Invalid arguments for {name}: {exc}"
            raise ToolError(msg) from exc
        logger.debug("Calling tool", tool=name)
        return await tool.handle(backend, params)


def create_server(config: Config, registry: ToolRegistry | None = None) -> ServerDefinition:
    """Build the server definition for a resolved configuration."""
    registry = registry or build_registry()
    tools = select_tools(config, registry)
    logger.info(
        "Selected tools",
        mode=presentation_mode(config).value,
        count=len(tools),
        tools=[tool.name for tool in tools],
    )
    return ServerDefinition(name=SERVER_NAME, version=__version__, tools=tuple(tools), config=config)
