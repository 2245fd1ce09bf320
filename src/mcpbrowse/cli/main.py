"""mcpbrowse CLI - resolve configuration and inspect exposed browser tools."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from mcpbrowse import __version__
from mcpbrowse.config import CLIOptions, Config, default_config, resolve_config
from mcpbrowse.constants import CONFIG_PATH
from mcpbrowse.errors import ConfigError
from mcpbrowse.logging_config import setup_logging
from mcpbrowse.server import create_server, presentation_mode

console = Console()

_HELP = """\
Configuration and tool selection for a Playwright-backed browser server.

[bold]Examples:[/bold]
  [cyan]mcpbrowse --browser firefox --headless config[/cyan]   Show the resolved config
  [cyan]mcpbrowse --caps tabs,pdf --vision tools[/cyan]       List exposed tools\
"""

app = typer.Typer(
    help=_HELP,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
    no_args_is_help=True,
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


@app.callback()
def main(  # noqa: PLR0913
    ctx: typer.Context,
    browser: str | None = typer.Option(
        None,
        "--browser",
        help="Browser or chrome channel to use: chrome, firefox, webkit, msedge, ...",
    ),
    caps: str | None = typer.Option(
        None,
        "--caps",
        help="Comma-separated list of capabilities to enable: tabs, pdf, history, wait, files, install, ...",
    ),
    cdp_endpoint: str | None = typer.Option(None, "--cdp-endpoint", help="CDP endpoint to connect to."),
    executable_path: str | None = typer.Option(None, "--executable-path", help="Path to the browser executable."),
    headless: bool | None = typer.Option(
        None,
        "--headless/--headed",
        help="Run the browser in headless or headed mode (default depends on the display).",
    ),
    device: str | None = typer.Option(None, "--device", help='Device to emulate, e.g. "iPhone 15".'),
    user_data_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--user-data-dir",
        help="Path to the user data directory.",
    ),
    port: int | None = typer.Option(None, "--port", help="Port to listen on for SSE transport."),
    host: str | None = typer.Option(None, "--host", help="Host to bind the server to."),
    vision: bool | None = typer.Option(
        None,
        "--vision/--no-vision",
        help="Use screenshots instead of accessibility snapshots.",
    ),
    config: Path | None = typer.Option(  # noqa: B008
        CONFIG_PATH,
        "--config",
        "-c",
        help="Path to a YAML or JSON configuration file.",
    ),
    output_dir: Path | None = typer.Option(  # noqa: B008
        None,
        "--output-dir",
        help="Directory for generated files.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        "-l",
        help="Set the logging level (DEBUG, INFO, WARNING, ERROR)",
        case_sensitive=False,
        envvar="LOG_LEVEL",
    ),
) -> None:
    """Collect options shared by all commands."""
    setup_logging(level=log_level.upper())
    ctx.obj = CLIOptions(
        browser=browser,
        caps=caps,
        cdp_endpoint=cdp_endpoint,
        executable_path=executable_path,
        headless=headless,
        device=device,
        user_data_dir=user_data_dir,
        port=port,
        host=host,
        vision=vision,
        config=config,
        output_dir=output_dir,
    )


def _resolve(options: CLIOptions) -> Config:
    """Resolve the config, turning startup errors into a clean exit."""
    try:
        return asyncio.run(resolve_config(default_config(), options))
    except ConfigError as exc:
        console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from None


@app.command()
def version() -> None:
    """Show the current version of mcpbrowse."""
    console.print(f"mcpbrowse version: [bold]{__version__}[/bold]")


@app.command("config")
def show_config(ctx: typer.Context) -> None:
    """Print the fully resolved configuration as YAML."""
    resolved = _resolve(ctx.obj)
    rendered = yaml.safe_dump(resolved.model_dump(mode="json"), default_flow_style=False, sort_keys=True)
    if console.is_terminal:
        console.print(Syntax(rendered, "yaml", theme="ansi_dark", background_color="default"))
    else:
        # Keep piped output loadable YAML: no highlighting, no wrapping
        console.print(rendered, markup=False, highlight=False, soft_wrap=True, end="")


@app.command("tools")
def list_tools(ctx: typer.Context) -> None:
    """List the tools that would be exposed to clients."""
    resolved = _resolve(ctx.obj)
    server = create_server(resolved)
    table = Table(title=f"{server.name} {server.version} ({presentation_mode(resolved).value} mode)")
    table.add_column("Tool", style="cyan", no_wrap=True)
    table.add_column("Capability", no_wrap=True)
    table.add_column("Description")
    for tool in server.tools:
        table.add_row(tool.name, tool.capability.value, tool.description)
    console.print(table)
