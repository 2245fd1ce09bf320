"""Accessibility-snapshot based interaction (structural mode only).

Elements are addressed by the ``ref`` values that appear in the page snapshot;
the backend turns a ref back into a Playwright locator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.tools_metadata import NoParams, PresentationMode, Tool, ToolCapability, ToolResult

from .base import page_state

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend

_MODE = PresentationMode.STRUCTURAL


class ElementParams(BaseModel):
    """Identifies one element from the page snapshot."""

    element: str = Field(description="Human-readable element description used to obtain permission to interact")
    ref: str = Field(description="Exact target element reference from the page snapshot")


class DragParams(BaseModel):
    """Parameters for browser_drag."""

    start_element: str = Field(description="Human-readable source element description")
    start_ref: str = Field(description="Exact source element reference from the page snapshot")
    end_element: str = Field(description="Human-readable target element description")
    end_ref: str = Field(description="Exact target element reference from the page snapshot")


class TypeParams(ElementParams):
    """Parameters for browser_type."""

    text: str = Field(description="Text to type into the element")
    submit: bool = Field(default=False, description="Whether to submit entered text (press Enter after)")
    slowly: bool = Field(default=False, description="Whether to type one character at a time")


class SelectOptionParams(ElementParams):
    """Parameters for browser_select_option."""

    values: list[str] = Field(description="Array of values to select in the dropdown")


class ScreenshotParams(BaseModel):
    """Parameters for browser_take_screenshot."""

    raw: bool = Field(default=False, description="Whether to return a lossless PNG instead of JPEG")


async def _snapshot(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    return await page_state(backend, _MODE, "Captured page snapshot")


async def _click(backend: BrowserBackend, params: ElementParams) -> ToolResult:
    await backend.locator(params.ref).click()
    return await page_state(backend, _MODE, f"Clicked {params.element}")


async def _drag(backend: BrowserBackend, params: DragParams) -> ToolResult:
    await backend.locator(params.start_ref).drag_to(backend.locator(params.end_ref))
    return await page_state(backend, _MODE, f"Dragged {params.start_element} to {params.end_element}")


async def _hover(backend: BrowserBackend, params: ElementParams) -> ToolResult:
    await backend.locator(params.ref).hover()
    return await page_state(backend, _MODE, f"Hovered over {params.element}")


async def _type(backend: BrowserBackend, params: TypeParams) -> ToolResult:
    locator = backend.locator(params.ref)
    if params.slowly:
        await locator.press_sequentially(params.text)
    else:
        await locator.fill(params.text)
    if params.submit:
        await locator.press("Enter")
    return await page_state(backend, _MODE, f"Typed {params.text!r} into {params.element}")


async def _select_option(backend: BrowserBackend, params: SelectOptionParams) -> ToolResult:
    await backend.locator(params.ref).select_option(params.values)
    return await page_state(backend, _MODE, f"Selected {', '.join(params.values)} in {params.element}")


async def _take_screenshot(backend: BrowserBackend, params: ScreenshotParams) -> ToolResult:
    page = await backend.current_page()
    if params.raw:
        image = await page.screenshot(type="png")
    else:
        image = await page.screenshot(type="jpeg", quality=50, scale="css")
    return ToolResult(text="Screenshot of the current page", images=[image])


SNAPSHOT_TOOLS: list[Tool] = [
    Tool(
        name="browser_snapshot",
        title="Page snapshot",
        description="Capture accessibility snapshot of the current page, this is better than screenshot",
        capability=ToolCapability.CORE,
        params=NoParams,
        handle=_snapshot,
        read_only=True,
    ),
    Tool(
        name="browser_click",
        title="Click",
        description="Perform click on a web page",
        capability=ToolCapability.CORE,
        params=ElementParams,
        handle=_click,
    ),
    Tool(
        name="browser_drag",
        title="Drag mouse",
        description="Perform drag and drop between two elements",
        capability=ToolCapability.CORE,
        params=DragParams,
        handle=_drag,
    ),
    Tool(
        name="browser_hover",
        title="Hover mouse",
        description="Hover over element on page",
        capability=ToolCapability.CORE,
        params=ElementParams,
        handle=_hover,
        read_only=True,
    ),
    Tool(
        name="browser_type",
        title="Type text",
        description="Type text into editable element",
        capability=ToolCapability.CORE,
        params=TypeParams,
        handle=_type,
    ),
    Tool(
        name="browser_select_option",
        title="Select option",
        description="Select an option in a dropdown",
        capability=ToolCapability.CORE,
        params=SelectOptionParams,
        handle=_select_option,
    ),
    Tool(
        name="browser_take_screenshot",
        title="Take a screenshot",
        description="Take a screenshot of the current page. You can't perform actions based on the screenshot",
        capability=ToolCapability.CORE,
        params=ScreenshotParams,
        handle=_take_screenshot,
        read_only=True,
    ),
]
