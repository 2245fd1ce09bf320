"""Tests for individual tool handlers against a mocked browser backend."""

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from mcpbrowse.errors import ToolError
from mcpbrowse.tools.base import page_state
from mcpbrowse.tools.common import MAX_WAIT_SECONDS, WaitParams, common_tools
from mcpbrowse.tools.console import CONSOLE_TOOLS
from mcpbrowse.tools.dialogs import HandleDialogParams, dialog_tools
from mcpbrowse.tools.navigate import NavigateParams, navigate_tools
from mcpbrowse.tools.pdf import PDF_TOOLS
from mcpbrowse.tools.snapshot import SNAPSHOT_TOOLS, TypeParams
from mcpbrowse.tools.tabs import CloseTabParams, tab_tools
from mcpbrowse.tools_metadata import NoParams, PresentationMode, Tool

SNAPSHOT = '- button "Submit" [ref=e2]'


def _page() -> MagicMock:
    page = MagicMock()
    page.url = "https://example.com/"
    page.title = AsyncMock(return_value="Example Domain")
    page.goto = AsyncMock()
    page.pdf = AsyncMock()
    return page


def _backend(page: MagicMock) -> MagicMock:
    backend = MagicMock()
    backend.current_page = AsyncMock(return_value=page)
    backend.snapshot = AsyncMock(return_value=SNAPSHOT)
    return backend


def _by_name(tools: list[Tool], name: str) -> Tool:
    return next(tool for tool in tools if tool.name == name)


class TestPageState:
    """Tests for page_state()."""

    @pytest.mark.asyncio
    async def test_structural_includes_snapshot(self) -> None:
        """Structural results carry URL, title and snapshot."""
        backend = _backend(_page())
        result = await page_state(backend, PresentationMode.STRUCTURAL, "Done")
        assert result.text.startswith("Done")
        assert "- Page URL: https://example.com/" in result.text
        assert "- Page Title: Example Domain" in result.text
        assert SNAPSHOT in result.text

    @pytest.mark.asyncio
    async def test_visual_is_text_only(self) -> None:
        """Visual results do not take a snapshot."""
        backend = _backend(_page())
        result = await page_state(backend, PresentationMode.VISUAL, "Done")
        assert result.text == "Done"
        backend.snapshot.assert_not_awaited()


class TestHandlers:
    """Tests for tool handlers."""

    @pytest.mark.asyncio
    async def test_navigate(self) -> None:
        """Navigation goes through the current page."""
        page = _page()
        tool = _by_name(navigate_tools(PresentationMode.VISUAL), "browser_navigate")

        result = await tool.handle(_backend(page), NavigateParams(url="https://example.org"))

        page.goto.assert_awaited_once_with("https://example.org", wait_until="domcontentloaded")
        assert result.text == "Navigated to https://example.org"

    @pytest.mark.asyncio
    async def test_wait_is_capped(self) -> None:
        """Long waits are capped."""
        tool = _by_name(common_tools(PresentationMode.STRUCTURAL), "browser_wait")
        with patch("mcpbrowse.tools.common.asyncio.sleep", new_callable=AsyncMock) as sleep:
            result = await tool.handle(MagicMock(), WaitParams(time=600))
        sleep.assert_awaited_once_with(MAX_WAIT_SECONDS)
        assert str(MAX_WAIT_SECONDS) in result.text

    @pytest.mark.asyncio
    async def test_console_messages(self) -> None:
        """Console messages are listed with their level."""
        backend = MagicMock()
        backend.console_messages.return_value = [
            SimpleNamespace(type="log", text="ready"),
            SimpleNamespace(type="error", text="boom"),
        ]
        result = await CONSOLE_TOOLS[0].handle(backend, NoParams())
        assert result.text == "[LOG] ready\n[ERROR] boom"

    @pytest.mark.asyncio
    async def test_dialog_without_dialog_raises(self) -> None:
        """Handling a dialog when none is open is an error."""
        backend = MagicMock()
        backend.pending_dialog.return_value = None
        tool = dialog_tools(PresentationMode.VISUAL)[0]
        with pytest.raises(ToolError, match="No dialog"):
            await tool.handle(backend, HandleDialogParams(accept=True))

    @pytest.mark.asyncio
    async def test_dialog_accept_with_prompt(self) -> None:
        """Accepting passes the prompt text through."""
        dialog = MagicMock(type="prompt")
        dialog.accept = AsyncMock()
        backend = _backend(_page())
        backend.pending_dialog.return_value = dialog
        tool = dialog_tools(PresentationMode.VISUAL)[0]

        result = await tool.handle(backend, HandleDialogParams(accept=True, prompt_text="42"))

        dialog.accept.assert_awaited_once_with("42")
        assert result.text == "Accepted prompt dialog"

    @pytest.mark.asyncio
    async def test_type_and_submit(self) -> None:
        """Typing fills the referenced element and presses Enter on submit."""
        locator = MagicMock()
        locator.fill = AsyncMock()
        locator.press = AsyncMock()
        backend = _backend(_page())
        backend.locator.return_value = locator
        tool = _by_name(SNAPSHOT_TOOLS, "browser_type")

        await tool.handle(backend, TypeParams(element="Search box", ref="e5", text="playwright", submit=True))

        backend.locator.assert_called_once_with("e5")
        locator.fill.assert_awaited_once_with("playwright")
        locator.press.assert_awaited_once_with("Enter")

    @pytest.mark.asyncio
    async def test_pdf_uses_output_file(self, tmp_path: Path) -> None:
        """PDFs are written to the backend's output location."""
        page = _page()
        backend = _backend(page)
        backend.output_file.side_effect = lambda name: tmp_path / name

        result = await PDF_TOOLS[0].handle(backend, NoParams())

        (saved,) = backend.output_file.call_args.args
        assert saved.startswith("page-")
        assert saved.endswith(".pdf")
        page.pdf.assert_awaited_once_with(path=tmp_path / saved)
        assert str(tmp_path / saved) in result.text

    @pytest.mark.asyncio
    async def test_close_last_tab(self) -> None:
        """Closing the last tab does not try to snapshot a missing page."""
        backend = _backend(_page())
        backend.close_tab = AsyncMock()
        backend.tabs.return_value = []
        tool = _by_name(tab_tools(PresentationMode.STRUCTURAL), "browser_tab_close")

        result = await tool.handle(backend, CloseTabParams(index=2))

        backend.close_tab.assert_awaited_once_with(1)
        assert result.text == "Closed the last tab"
        backend.snapshot.assert_not_awaited()
