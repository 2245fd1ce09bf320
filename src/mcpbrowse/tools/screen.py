"""Coordinate-based interaction on screenshots (visual mode only)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.tools_metadata import NoParams, Tool, ToolCapability, ToolResult

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend

_ELEMENT_DESCRIPTION = "Human-readable element description used to obtain permission to interact"


class MoveMouseParams(BaseModel):
    """Parameters for browser_screen_move_mouse and browser_screen_click."""

    element: str = Field(description=_ELEMENT_DESCRIPTION)
    x: float = Field(description="X coordinate")
    y: float = Field(description="Y coordinate")


class ScreenDragParams(BaseModel):
    """Parameters for browser_screen_drag."""

    element: str = Field(description=_ELEMENT_DESCRIPTION)
    start_x: float = Field(description="Start X coordinate")
    start_y: float = Field(description="Start Y coordinate")
    end_x: float = Field(description="End X coordinate")
    end_y: float = Field(description="End Y coordinate")


class ScreenTypeParams(BaseModel):
    """Parameters for browser_screen_type."""

    text: str = Field(description="Text to type into the element")
    submit: bool = Field(default=False, description="Whether to submit entered text (press Enter after)")


async def _capture(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    page = await backend.current_page()
    image = await page.screenshot(type="jpeg", quality=50, scale="css")
    return ToolResult(text="Screenshot of the current page", images=[image])


async def _move_mouse(backend: BrowserBackend, params: MoveMouseParams) -> ToolResult:
    page = await backend.current_page()
    await page.mouse.move(params.x, params.y)
    return ToolResult(text=f"Moved mouse to ({params.x}, {params.y})")


async def _click(backend: BrowserBackend, params: MoveMouseParams) -> ToolResult:
    page = await backend.current_page()
    await page.mouse.move(params.x, params.y)
    await page.mouse.down()
    await page.mouse.up()
    return ToolResult(text=f"Clicked {params.element} at ({params.x}, {params.y})")


async def _drag(backend: BrowserBackend, params: ScreenDragParams) -> ToolResult:
    page = await backend.current_page()
    await page.mouse.move(params.start_x, params.start_y)
    await page.mouse.down()
    await page.mouse.move(params.end_x, params.end_y)
    await page.mouse.up()
    return ToolResult(text=f"Dragged {params.element}")


async def _type(backend: BrowserBackend, params: ScreenTypeParams) -> ToolResult:
    page = await backend.current_page()
    await page.keyboard.type(params.text)
    if params.submit:
        await page.keyboard.press("Enter")
    return ToolResult(text=f"Typed {params.text!r}")


SCREEN_TOOLS: list[Tool] = [
    Tool(
        name="browser_screen_capture",
        title="Take a screenshot",
        description="Take a screenshot of the current page",
        capability=ToolCapability.CORE,
        params=NoParams,
        handle=_capture,
        read_only=True,
    ),
    Tool(
        name="browser_screen_move_mouse",
        title="Move mouse",
        description="Move mouse to a given position",
        capability=ToolCapability.CORE,
        params=MoveMouseParams,
        handle=_move_mouse,
        read_only=True,
    ),
    Tool(
        name="browser_screen_click",
        title="Click",
        description="Click left mouse button",
        capability=ToolCapability.CORE,
        params=MoveMouseParams,
        handle=_click,
    ),
    Tool(
        name="browser_screen_drag",
        title="Drag mouse",
        description="Drag left mouse button",
        capability=ToolCapability.CORE,
        params=ScreenDragParams,
        handle=_drag,
    ),
    Tool(
        name="browser_screen_type",
        title="Type text",
        description="Type text",
        capability=ToolCapability.CORE,
        params=ScreenTypeParams,
        handle=_type,
    ),
]
