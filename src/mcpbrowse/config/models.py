"""Pydantic models for the resolved runtime configuration."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path  # noqa: TC003
from types import MappingProxyType
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, PlainSerializer

from mcpbrowse.tools_metadata import ToolCapability  # noqa: TC001

BrowserName = Literal["chromium", "firefox", "webkit"]


def _read_only(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


def _plain_dict(value: Mapping[str, Any]) -> dict[str, Any]:
    return dict(value)


# Copied on validation and exposed read-only; dumps back to a plain dict
OptionsMapping = Annotated[Mapping[str, Any], AfterValidator(_read_only), PlainSerializer(_plain_dict)]


class _FrozenModel(BaseModel):
    """Immutable model that rejects unknown keys."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class BrowserConfig(_FrozenModel):
    """Which browser to drive and how to launch or attach to it."""

    browser_name: BrowserName = Field(default="chromium", description="Browser engine")
    channel: str | None = Field(default=None, description="Distribution channel, e.g. chrome or msedge-beta")
    user_data_dir: Path | None = Field(default=None, description="Persistent profile directory")
    launch_options: OptionsMapping = Field(
        default_factory=dict,
        validate_default=True,
        description="Options for launching a local browser (executable_path, headless, channel, ...)",
    )
    context_options: OptionsMapping = Field(
        default_factory=dict,
        validate_default=True,
        description="Options for the browser context (viewport, user_agent, ...)",
    )
    cdp_endpoint: str | None = Field(
        default=None,
        description="Connect to an existing browser over CDP instead of launching one",
    )


class ServerConfig(_FrozenModel):
    """Network endpoint for the protocol server. Unset means stdio transport."""

    port: int | None = Field(default=None, description="Port to listen on")
    host: str | None = Field(default=None, description="Host to bind to")


class Config(_FrozenModel):
    """Complete runtime configuration.

    The same model describes partial fragments (from a file or the command
    line). Fields that were not given stay out of ``model_fields_set`` and are
    ignored when fragments are merged.
    """

    browser: BrowserConfig = Field(default_factory=BrowserConfig, description="Browser configuration")
    server: ServerConfig = Field(default_factory=ServerConfig, description="Server endpoint configuration")
    capabilities: tuple[ToolCapability, ...] | None = Field(
        default=None,
        description="Capabilities to expose; core tools are always exposed. None exposes everything",
    )
    vision: bool = Field(default=False, description="Use screenshot-based tools instead of accessibility snapshots")
    output_dir: Path | None = Field(default=None, description="Directory for generated files (PDFs, screenshots)")


class CLIOptions(BaseModel):
    """Raw command-line options, before translation into a config fragment."""

    browser: str | None = None
    caps: str | None = None
    cdp_endpoint: str | None = None
    executable_path: str | None = None
    headless: bool | None = None
    device: str | None = None
    user_data_dir: Path | None = None
    port: int | None = None
    host: str | None = None
    vision: bool | None = None
    config: Path | None = None
    output_dir: Path | None = None
