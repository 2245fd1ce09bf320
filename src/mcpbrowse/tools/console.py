"""Console message tool, shared by both presentation modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcpbrowse.tools_metadata import NoParams, Tool, ToolCapability, ToolResult

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


async def _console_messages(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    messages = backend.console_messages()
    if not messages:
        return ToolResult(text="No console messages")
    return ToolResult(text="\n".join(f"[{message.type.upper()}] {message.text}" for message in messages))


CONSOLE_TOOLS: list[Tool] = [
    Tool(
        name="browser_console_messages",
        title="Get console messages",
        description="Returns all console messages",
        capability=ToolCapability.CONSOLE,
        params=NoParams,
        handle=_console_messages,
        read_only=True,
    ),
]
