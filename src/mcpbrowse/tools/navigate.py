"""Navigation and history tools."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.tools_metadata import NoParams, PresentationMode, Tool, ToolCapability, ToolResult

from .base import page_state

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


class NavigateParams(BaseModel):
    """Parameters for browser_navigate."""

    url: str = Field(description="The URL to navigate to")


def navigate_tools(mode: PresentationMode) -> list[Tool]:
    """Get the navigate, back and forward tools."""

    async def navigate(backend: BrowserBackend, params: NavigateParams) -> ToolResult:
        page = await backend.current_page()
        await page.goto(params.url, wait_until="domcontentloaded")
        return await page_state(backend, mode, f"Navigated to {params.url}")

    async def go_back(backend: BrowserBackend, _params: NoParams) -> ToolResult:
        page = await backend.current_page()
        await page.go_back()
        return await page_state(backend, mode, "Navigated back")

    async def go_forward(backend: BrowserBackend, _params: NoParams) -> ToolResult:
        page = await backend.current_page()
        await page.go_forward()
        return await page_state(backend, mode, "Navigated forward")

    return [
        Tool(
            name="browser_navigate",
            title="Navigate to a URL",
            description="Navigate to a URL",
            capability=ToolCapability.CORE,
            params=NavigateParams,
            handle=navigate,
        ),
        Tool(
            name="browser_navigate_back",
            title="Go back",
            description="Go back to the previous page",
            capability=ToolCapability.HISTORY,
            params=NoParams,
            handle=go_back,
        ),
        Tool(
            name="browser_navigate_forward",
            title="Go forward",
            description="Go forward to the next page",
            capability=ToolCapability.HISTORY,
            params=NoParams,
            handle=go_forward,
        ),
    ]
