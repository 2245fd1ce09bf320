"""Modal dialog handling."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.errors import ToolError
from mcpbrowse.tools_metadata import PresentationMode, Tool, ToolCapability, ToolResult

from .base import page_state

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


class HandleDialogParams(BaseModel):
    """Parameters for browser_handle_dialog."""

    accept: bool = Field(description="Whether to accept the dialog")
    prompt_text: str | None = Field(default=None, description="The text of the prompt in case of a prompt dialog")


def dialog_tools(mode: PresentationMode) -> list[Tool]:
    """Get the dialog handling tool."""

    async def handle_dialog(backend: BrowserBackend, params: HandleDialogParams) -> ToolResult:
        dialog = backend.pending_dialog()
        if dialog is None:
            msg = "No dialog visible"
            raise ToolError(msg)
        if params.accept:
            await dialog.accept(params.prompt_text)
        else:
            await dialog.dismiss()
        return await page_state(backend, mode, f"{'Accepted' if params.accept else 'Dismissed'} {dialog.type} dialog")

    return [
        Tool(
            name="browser_handle_dialog",
            title="Handle a dialog",
            description="Handle a dialog",
            capability=ToolCapability.DIALOGS,
            params=HandleDialogParams,
            handle=handle_dialog,
        ),
    ]
