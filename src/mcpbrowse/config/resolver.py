"""Resolving the runtime configuration from defaults, a config file and CLI options."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import Any

from playwright.async_api import async_playwright

from mcpbrowse.constants import CHROMIUM_CHANNELS, DEFAULT_CHANNEL
from mcpbrowse.errors import FilesystemError, UnknownCapabilityError, UnknownDevicePresetError
from mcpbrowse.logging_config import get_logger
from mcpbrowse.ports import allocate_free_port
from mcpbrowse.profiles import resolve_profile_dir
from mcpbrowse.tools_metadata import ToolCapability
from mcpbrowse.utils import sanitize_for_file_path

from .loader import load_config_file
from .merge import merge_config
from .models import BrowserConfig, BrowserName, CLIOptions, Config, ServerConfig

logger = get_logger(__name__)


def default_config() -> Config:
    """Build the compiled-in configuration template.

    Headless is the default on Linux when no display is attached.
    """
    return Config(
        browser=BrowserConfig(
            browser_name="chromium",
            user_data_dir=Path(tempfile.gettempdir()),
            launch_options={
                "channel": DEFAULT_CHANNEL,
                "headless": sys.platform == "linux" and not os.environ.get("DISPLAY"),
            },
            context_options={"viewport": None},
        ),
    )


def browser_identity(token: str | None) -> tuple[BrowserName, str | None]:
    """Map a CLI browser token to ``(browser_name, channel)``.

    Unknown or missing tokens fall back to Chromium on the default channel.
    """
    if token in CHROMIUM_CHANNELS:
        return "chromium", token
    if token == "firefox":
        return "firefox", None
    if token == "webkit":
        return "webkit", None
    return "chromium", DEFAULT_CHANNEL


def parse_capabilities(caps: str | None) -> list[ToolCapability] | None:
    """Parse a comma-separated capability list.

    Raises:
        UnknownCapabilityError: If a name is not a known capability.

    """
    if caps is None:
        return None
    result: list[ToolCapability] = []
    for raw in caps.split(","):
        name = raw.strip()
        if not name:
            continue
        try:
            result.append(ToolCapability(name))
        except ValueError:
            known = ", ".join(c.value for c in ToolCapability)
            msg = f"Unknown capability: {name!r}. Known capabilities: {known}"
            raise UnknownCapabilityError(msg) from None
    return result


async def device_preset(name: str) -> dict[str, Any]:
    """Look up context options for a named device in Playwright's descriptor table.

    Raises:
        UnknownDevicePresetError: If Playwright does not know the device.

    """
    async with async_playwright() as playwright:
        devices = playwright.devices
    if name not in devices:
        msg = f"Unknown device preset: {name!r}"
        raise UnknownDevicePresetError(msg)
    return dict(devices[name])


async def config_from_cli_options(options: CLIOptions) -> Config:
    """Translate raw CLI options into a configuration fragment.

    Only values actually given on the command line end up set in the fragment,
    except ``channel`` which always follows from the browser identity.
    """
    browser_name, channel = browser_identity(options.browser)

    launch_options: dict[str, Any] = {"channel": channel}
    if options.executable_path is not None:
        launch_options["executable_path"] = options.executable_path
    if options.headless is not None:
        launch_options["headless"] = options.headless
    if browser_name == "chromium":
        launch_options["cdp_port"] = allocate_free_port()

    browser: dict[str, Any] = {
        "browser_name": browser_name,
        "channel": channel,
        "launch_options": launch_options,
        "user_data_dir": options.user_data_dir or resolve_profile_dir(browser_name, channel),
    }
    if options.device:
        browser["context_options"] = await device_preset(options.device)
    if options.cdp_endpoint is not None:
        browser["cdp_endpoint"] = options.cdp_endpoint

    fragment: dict[str, Any] = {"browser": BrowserConfig(**browser)}
    if options.vision is not None:
        fragment["vision"] = options.vision
    server = {key: value for key, value in (("port", options.port), ("host", options.host)) if value is not None}
    if server:
        fragment["server"] = ServerConfig(**server)
    capabilities = parse_capabilities(options.caps)
    if capabilities is not None:
        fragment["capabilities"] = capabilities
    if options.output_dir is not None:
        fragment["output_dir"] = options.output_dir
    return Config(**fragment)


async def resolve_config(template: Config, options: CLIOptions) -> Config:
    """Resolve the final configuration.

    Command-line values override the config file, which overrides ``template``.
    Any failure (unreadable file, port allocation, profile directory) is raised
    to the caller; no partially resolved config is ever returned.
    """
    file_config = load_config_file(options.config)
    cli_config = await config_from_cli_options(options)
    config = merge_config(template, merge_config(file_config, cli_config))
    logger.info(
        "Resolved configuration",
        browser=config.browser.browser_name,
        channel=config.browser.channel,
        vision=config.vision,
        capabilities=[c.value for c in config.capabilities] if config.capabilities is not None else None,
    )
    return config


def output_file(config: Config, name: str) -> Path:
    """Return a path for a generated file inside the output directory, creating the directory.

    Raises:
        FilesystemError: If the output directory cannot be created.

    """
    directory = config.output_dir or Path(tempfile.gettempdir())
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FilesystemError(directory, exc) from exc
    return directory / sanitize_for_file_path(name)
