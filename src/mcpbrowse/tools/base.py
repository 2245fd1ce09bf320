"""Helpers shared by tool definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcpbrowse.tools_metadata import PresentationMode, ToolResult

if TYPE_CHECKING:
    from mcpbrowse.tools_metadata import BrowserBackend


async def page_state(backend: BrowserBackend, mode: PresentationMode, text: str) -> ToolResult:
    """Finish an action, attaching the page snapshot in structural mode.

    In visual mode the client is expected to request a screenshot itself.
    """
    if mode is PresentationMode.VISUAL:
        return ToolResult(text=text)
    page = await backend.current_page()
    snapshot = await backend.snapshot()
    lines = [
        text,
        "",
        f"- Page URL: {page.url}",
        f"- Page Title: {await page.title()}",
        "- Page Snapshot",
        "```yaml",
        snapshot,
        "```",
    ]
    return ToolResult(text="\n".join(lines))
