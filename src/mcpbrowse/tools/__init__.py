"""Tool definitions for both presentation modes.

The two composition lists below are the only place where tool groups are
assembled. Groups that do not depend on the presentation mode appear in both.
"""

from __future__ import annotations

from mcpbrowse.tools_metadata import PresentationMode, Tool, ToolRegistry

from .common import common_tools
from .console import CONSOLE_TOOLS
from .dialogs import dialog_tools
from .files import file_tools
from .install import INSTALL_TOOLS
from .keyboard import keyboard_tools
from .navigate import navigate_tools
from .network import NETWORK_TOOLS
from .pdf import PDF_TOOLS
from .screen import SCREEN_TOOLS
from .snapshot import SNAPSHOT_TOOLS
from .tabs import tab_tools

__all__ = ["build_registry", "structural_tools", "visual_tools"]


def structural_tools() -> list[Tool]:
    """Get the tools for accessibility-snapshot mode."""
    mode = PresentationMode.STRUCTURAL
    return [
        *common_tools(mode),
        *CONSOLE_TOOLS,
        *dialog_tools(mode),
        *file_tools(mode),
        *INSTALL_TOOLS,
        *keyboard_tools(mode),
        *navigate_tools(mode),
        *NETWORK_TOOLS,
        *PDF_TOOLS,
        *SNAPSHOT_TOOLS,
        *tab_tools(mode),
    ]


def visual_tools() -> list[Tool]:
    """Get the tools for screenshot (vision) mode."""
    mode = PresentationMode.VISUAL
    return [
        *common_tools(mode),
        *CONSOLE_TOOLS,
        *dialog_tools(mode),
        *file_tools(mode),
        *INSTALL_TOOLS,
        *keyboard_tools(mode),
        *navigate_tools(mode),
        *NETWORK_TOOLS,
        *PDF_TOOLS,
        *SCREEN_TOOLS,
        *tab_tools(mode),
    ]


def build_registry() -> ToolRegistry:
    """Build the registry holding both composition lists."""
    return ToolRegistry(
        {
            PresentationMode.STRUCTURAL: structural_tools(),
            PresentationMode.VISUAL: visual_tools(),
        },
    )
