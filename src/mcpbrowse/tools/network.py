"""Network request listing, shared by both presentation modes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcpbrowse.tools_metadata import NoParams, Tool, ToolCapability, ToolResult

if TYPE_CHECKING:
    from playwright.async_api import Request

    from mcpbrowse.tools_metadata import BrowserBackend


async def _render_request(request: Request) -> str:
    line = f"[{request.method.upper()}] {request.url}"
    response = await request.response()
    if response is not None:
        line += f" => [{response.status}] {response.status_text}"
    return line


async def _network_requests(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    requests = backend.network_requests()
    if not requests:
        return ToolResult(text="No network requests")
    return ToolResult(text="\n".join([await _render_request(request) for request in requests]))


NETWORK_TOOLS: list[Tool] = [
    Tool(
        name="browser_network_requests",
        title="List network requests",
        description="Returns all network requests since loading the page",
        capability=ToolCapability.NETWORK,
        params=NoParams,
        handle=_network_requests,
        read_only=True,
    ),
]
