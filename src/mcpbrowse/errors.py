"""Exceptions raised while resolving configuration and dispatching tools.

Every configuration error is fatal to startup. Nothing here is retried or
recovered internally; callers report the message and exit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """Base class for errors that abort configuration resolution."""


class ConfigLoadError(ConfigError):
    """The configuration file exists but cannot be read, parsed or validated."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to load config file: {path}, {cause}")


class UnsupportedPlatformError(ConfigError):
    """No cache directory convention is known for the host platform."""

    def __init__(self, platform: str) -> None:
        self.platform = platform
        super().__init__(f"Unsupported platform: {platform}")


class PortAllocationError(ConfigError):
    """The OS refused to hand out an ephemeral TCP port."""


class FilesystemError(ConfigError):
    """A directory required by the configuration could not be created."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to create directory {path}: {cause}")


class UnknownCapabilityError(ConfigError, ValueError):
    """A capability name does not match any known tool capability."""


class UnknownDevicePresetError(ConfigError, ValueError):
    """A device preset name is not present in the device descriptor table."""


class ToolError(Exception):
    """A tool call could not be dispatched."""
