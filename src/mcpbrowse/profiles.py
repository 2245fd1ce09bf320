"""Persistent browser profile directories."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from mcpbrowse.constants import CACHE_NAMESPACE, PROFILE_PREFIX
from mcpbrowse.errors import FilesystemError, UnsupportedPlatformError
from mcpbrowse.logging_config import get_logger

logger = get_logger(__name__)


def cache_root(platform: str | None = None) -> Path:
    """Return the per-user cache directory for the host platform.

    Args:
        platform: A ``sys.platform`` value; defaults to the running interpreter's

    Raises:
        UnsupportedPlatformError: If the platform has no known cache convention.

    """
    platform = platform or sys.platform
    if platform == "linux":
        return Path(os.environ.get("XDG_CACHE_HOME") or Path.home() / ".cache")
    if platform == "darwin":
        return Path.home() / "Library" / "Caches"
    if platform == "win32":
        return Path(os.environ.get("LOCALAPPDATA") or Path.home() / "AppData" / "Local")
    raise UnsupportedPlatformError(platform)


def profile_dir_name(browser_name: str, channel: str | None) -> str:
    """Name of the profile directory for a browser identity."""
    return f"{PROFILE_PREFIX}-{channel or browser_name}-profile"


def resolve_profile_dir(browser_name: str, channel: str | None, *, platform: str | None = None) -> Path:
    """Return the persistent profile directory for ``(browser_name, channel)``, creating it if needed.

    Repeated calls with the same identity return the same path. Distinct
    channels, or browsers without a channel, never share a directory.

    Raises:
        UnsupportedPlatformError: If the platform has no known cache convention.
        FilesystemError: If the directory cannot be created.

    """
    result = cache_root(platform) / CACHE_NAMESPACE / profile_dir_name(browser_name, channel)
    try:
        result.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(result, exc) from exc
    logger.debug("Resolved profile directory", browser=browser_name, channel=channel, path=str(result))
    return result
