"""Browser installation tool, shared by both presentation modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcpbrowse.tools_metadata import NoParams, Tool, ToolCapability, ToolResult

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


async def _install(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    output = await backend.install_browser()
    return ToolResult(text=output or "Browser installed")


INSTALL_TOOLS: list[Tool] = [
    Tool(
        name="browser_install",
        title="Install the browser specified in the config",
        description=(
            "Install the browser specified in the config. "
            "Call this if you get an error about the browser not being installed."
        ),
        capability=ToolCapability.INSTALL,
        params=NoParams,
        handle=_install,
    ),
]
