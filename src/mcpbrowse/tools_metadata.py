"""Tool metadata, presentation modes and the tool registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, Iterable, Sequence
    from pathlib import Path

    from playwright.async_api import ConsoleMessage, Dialog, FileChooser, Locator, Page, Request


class ToolCapability(str, Enum):
    """Capability tags used to gate which tools are exposed."""

    CORE = "core"  # Always exposed
    CONSOLE = "console"
    DIALOGS = "dialogs"
    FILES = "files"
    HISTORY = "history"
    INSTALL = "install"
    NETWORK = "network"
    PDF = "pdf"
    TABS = "tabs"
    WAIT = "wait"


class PresentationMode(str, Enum):
    """How page state is presented to the client."""

    STRUCTURAL = "structural"  # Accessibility snapshots with element refs
    VISUAL = "visual"  # Screenshots with coordinates


class BrowserBackend(Protocol):
    """The browser session that tools operate on.

    Launching and tracking pages is done by the backend; tools only call these methods.
    """

    async def current_page(self) -> Page: ...

    def tabs(self) -> list[Page]: ...

    async def new_tab(self) -> Page: ...

    async def select_tab(self, index: int) -> Page: ...

    async def close_tab(self, index: int | None = None) -> None: ...

    async def close(self) -> None: ...

    async def snapshot(self) -> str: ...

    def locator(self, ref: str) -> Locator: ...

    def console_messages(self) -> list[ConsoleMessage]: ...

    def network_requests(self) -> list[Request]: ...

    def pending_dialog(self) -> Dialog | None: ...

    def pending_file_chooser(self) -> FileChooser | None: ...

    async def install_browser(self) -> str: ...

    def output_file(self, name: str) -> Path: ...


@dataclass
class ToolResult:
    """What a tool hands back to the client."""

    text: str = ""
    images: list[bytes] = field(default_factory=list)
    is_error: bool = False


class NoParams(BaseModel):
    """Parameters for tools that take no input."""


@dataclass(frozen=True)
class Tool:
    """A tool exposed to clients."""

    name: str
    title: str
    description: str
    capability: ToolCapability
    params: type[BaseModel]
    handle: Callable[[BrowserBackend, Any], Awaitable[ToolResult]]
    read_only: bool = False

    def input_schema(self) -> dict[str, Any]:
        """JSON schema of the tool's parameters."""
        return self.params.model_json_schema()


class ToolRegistry:
    """Ordered tool lists, one per presentation mode.

    Built once at startup; the lists are never concatenated across modes.
    """

    def __init__(self, tools_by_mode: dict[PresentationMode, Iterable[Tool]]) -> None:
        self._tools: dict[PresentationMode, tuple[Tool, ...]] = {}
        for mode in PresentationMode:
            tools = tuple(tools_by_mode.get(mode, ()))
            names = [tool.name for tool in tools]
            duplicates = sorted({name for name in names if names.count(name) > 1})
            if duplicates:
                msg = f"Duplicate tool names in {mode.value} mode: {', '.join(duplicates)}"
                raise ValueError(msg)
            self._tools[mode] = tools

    def tools(self, mode: PresentationMode) -> Sequence[Tool]:
        """Get all tools for a presentation mode, in registration order."""
        return self._tools[mode]

    def capabilities(self) -> set[ToolCapability]:
        """Get every capability used by at least one tool."""
        return {tool.capability for tools in self._tools.values() for tool in tools}
