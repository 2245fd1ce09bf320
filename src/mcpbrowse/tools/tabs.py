"""Tab management."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.tools_metadata import NoParams, PresentationMode, Tool, ToolCapability, ToolResult

from .base import page_state

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


class NewTabParams(BaseModel):
    """Parameters for browser_tab_new."""

    url: str | None = Field(
        default=None,
        description="The URL to navigate to in the new tab. If omitted, the tab is blank",
    )


class TabIndexParams(BaseModel):
    """Parameters for browser_tab_select."""

    index: int = Field(ge=1, description="The index of the tab, starting at 1")


class CloseTabParams(BaseModel):
    """Parameters for browser_tab_close."""

    index: int | None = Field(
        default=None,
        ge=1,
        description="The index of the tab to close. Closes current tab if omitted",
    )


async def _tab_list(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    current = await backend.current_page()
    lines = ["### Open tabs"]
    for number, page in enumerate(backend.tabs(), start=1):
        marker = " (current)" if page is current else ""
        lines.append(f"- {number}:{marker} [{await page.title()}] ({page.url})")
    return ToolResult(text="\n".join(lines))


def tab_tools(mode: PresentationMode) -> list[Tool]:
    """Get the tab list, new, select and close tools."""

    async def new_tab(backend: BrowserBackend, params: NewTabParams) -> ToolResult:
        page = await backend.new_tab()
        if params.url:
            await page.goto(params.url, wait_until="domcontentloaded")
        return await page_state(backend, mode, "Opened new tab")

    async def select_tab(backend: BrowserBackend, params: TabIndexParams) -> ToolResult:
        await backend.select_tab(params.index - 1)
        return await page_state(backend, mode, f"Selected tab {params.index}")

    async def close_tab(backend: BrowserBackend, params: CloseTabParams) -> ToolResult:
        await backend.close_tab(params.index - 1 if params.index is not None else None)
        if not backend.tabs():
            return ToolResult(text="Closed the last tab")
        return await page_state(backend, mode, "Closed tab")

    return [
        Tool(
            name="browser_tab_list",
            title="List tabs",
            description="List browser tabs",
            capability=ToolCapability.TABS,
            params=NoParams,
            handle=_tab_list,
            read_only=True,
        ),
        Tool(
            name="browser_tab_new",
            title="Open a new tab",
            description="Open a new tab",
            capability=ToolCapability.TABS,
            params=NewTabParams,
            handle=new_tab,
        ),
        Tool(
            name="browser_tab_select",
            title="Select a tab",
            description="Select a tab by index",
            capability=ToolCapability.TABS,
            params=TabIndexParams,
            handle=select_tab,
        ),
        Tool(
            name="browser_tab_close",
            title="Close a tab",
            description="Close a tab",
            capability=ToolCapability.TABS,
            params=CloseTabParams,
            handle=close_tab,
        ),
    ]
