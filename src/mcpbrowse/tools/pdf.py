"""Save the current page as PDF, shared by both presentation modes."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from mcpbrowse.tools_metadata import NoParams, Tool, ToolCapability, ToolResult

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


async def _save_pdf(backend: BrowserBackend, _params: NoParams) -> ToolResult:
    page = await backend.current_page()
    timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H-%M-%S")
    path = backend.output_file(f"page-{timestamp}.pdf")
    await page.pdf(path=path)
    return ToolResult(text=f"Saved as {path}")


PDF_TOOLS: list[Tool] = [
    Tool(
        name="browser_pdf_save",
        title="Save as PDF",
        description="Save page as PDF",
        capability=ToolCapability.PDF,
        params=NoParams,
        handle=_save_pdf,
        read_only=True,
    ),
]
