"""Browser lifecycle, viewport and wait tools."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.tools_metadata import NoParams, PresentationMode, Tool, ToolCapability, ToolResult

from .base import page_state

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend

MAX_WAIT_SECONDS = 10


class ResizeParams(BaseModel):
    """Parameters for browser_resize."""

    width: int = Field(description="Width of the browser window")
    height: int = Field(description="Height of the browser window")


class WaitParams(BaseModel):
    """Parameters for browser_wait."""

    time: float = Field(description=f"The time to wait in seconds (capped at {MAX_WAIT_SECONDS})")


async def _close(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    await backend.close()
    return ToolResult(text="Page closed")


async def _wait(_backend: BrowserBackend, params: WaitParams) -> ToolResult:
    seconds = min(MAX_WAIT_SECONDS, max(0.0, params.time))
    await asyncio.sleep(seconds)
    return ToolResult(text=f"Waited for {seconds} seconds")


def common_tools(mode: PresentationMode) -> list[Tool]:
    """Get the close, resize and wait tools."""

    async def resize(backend: BrowserBackend, params: ResizeParams) -> ToolResult:
        page = await backend.current_page()
        await page.set_viewport_size({"width": params.width, "height": params.height})
        return await page_state(backend, mode, f"Resized browser window to {params.width}x{params.height}")

    return [
        Tool(
            name="browser_close",
            title="Close browser",
            description="Close the page",
            capability=ToolCapability.CORE,
            params=NoParams,
            handle=_close,
        ),
        Tool(
            name="browser_resize",
            title="Resize browser window",
            description="Resize the browser window",
            capability=ToolCapability.CORE,
            params=ResizeParams,
            handle=resize,
        ),
        Tool(
            name="browser_wait",
            title="Wait",
            description="Wait for a specified time in seconds",
            capability=ToolCapability.WAIT,
            params=WaitParams,
            handle=_wait,
            read_only=True,
        ),
    ]
