"""Keyboard input."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.tools_metadata import PresentationMode, Tool, ToolCapability, ToolResult

from .base import page_state

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


class PressKeyParams(BaseModel):
    """Parameters for browser_press_key."""

    key: str = Field(description="Name of the key to press or a character to generate, such as `ArrowLeft` or `a`")


def keyboard_tools(mode: PresentationMode) -> list[Tool]:
    """Get the key press tool."""

    async def press_key(backend: BrowserBackend, params: PressKeyParams) -> ToolResult:
        page = await backend.current_page()
        await page.keyboard.press(params.key)
        return await page_state(backend, mode, f"Pressed key {params.key}")

    return [
        Tool(
            name="browser_press_key",
            title="Press a key",
            description="Press a key on the keyboard",
            capability=ToolCapability.CORE,
            params=PressKeyParams,
            handle=press_key,
        ),
    ]
