"""Shared constants for the mcpbrowse package.

This module contains constants that are used across multiple modules
to avoid circular imports. It does not import anything from the internal
codebase.
"""

import os
from pathlib import Path

SERVER_NAME = "Playwright"

# Namespace shared with the Playwright browser cache
CACHE_NAMESPACE = "ms-playwright"
PROFILE_PREFIX = "mcp"

DEFAULT_CHANNEL = "chrome"

# Browser tokens accepted on the command line that select a Chromium channel
CHROMIUM_CHANNELS = frozenset(
    {
        "chrome",
        "chrome-beta",
        "chrome-canary",
        "chrome-dev",
        "chromium",
        "msedge",
        "msedge-beta",
        "msedge-canary",
        "msedge-dev",
    },
)

# Explicit config file location, used when --config is not given
_CONFIG_PATH_ENV = os.getenv("MCPBROWSE_CONFIG_PATH")
CONFIG_PATH: Path | None = Path(_CONFIG_PATH_ENV).expanduser() if _CONFIG_PATH_ENV else None
