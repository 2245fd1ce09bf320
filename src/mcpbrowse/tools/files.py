"""File upload through the file chooser."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

from mcpbrowse.errors import ToolError
from mcpbrowse.tools_metadata import PresentationMode, Tool, ToolCapability, ToolResult

from .base import page_state

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


class UploadParams(BaseModel):
    """Parameters for browser_file_upload."""

    paths: list[str] = Field(
        description="The absolute paths to the files to upload. Can be a single file or multiple files.",
    )


def file_tools(mode: PresentationMode) -> list[Tool]:
    """Get the file upload tool."""

    async def upload(backend: BrowserBackend, params: UploadParams) -> ToolResult:
        chooser = backend.pending_file_chooser()
        if chooser is None:
            msg = "No file chooser visible"
            raise ToolError(msg)
        await chooser.set_files(params.paths)
        return await page_state(backend, mode, f"Uploaded {len(params.paths)} file(s)")

    return [
        Tool(
            name="browser_file_upload",
            title="Upload files",
            description="Upload one or multiple files",
            capability=ToolCapability.FILES,
            params=UploadParams,
            handle=upload,
        ),
    ]
