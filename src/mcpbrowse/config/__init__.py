"""Runtime configuration: models, loading, merging and resolution."""

from __future__ import annotations

from .loader import load_config_file
from .merge import merge_config
from .models import BrowserConfig, BrowserName, CLIOptions, Config, ServerConfig
from .resolver import (
    browser_identity,
    config_from_cli_options,
    default_config,
    device_preset,
    output_file,
    parse_capabilities,
    resolve_config,
)

__all__ = [
    "BrowserConfig",
    "BrowserName",
    "CLIOptions",
    "Config",
    "ServerConfig",
    "browser_identity",
    "config_from_cli_options",
    "default_config",
    "device_preset",
    "load_config_file",
    "merge_config",
    "output_file",
    "parse_capabilities",
    "resolve_config",
]
