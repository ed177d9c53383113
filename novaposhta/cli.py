"""Nova Poshta CLI.

Usage:
    novaposhta-mcp serve                 Run the MCP server over stdio
    novaposhta-mcp track 2040... 2040... Track documents and print a table
    novaposhta-mcp config show           Display resolved configuration
"""

import asyncio
import os
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from novaposhta import __version__
from novaposhta.client import ClientContext, HttpxTransport, build_client
from novaposhta.client.models.tracking import BatchTrackingResult
from novaposhta.config import CONFIG_PATH_ENV, ConfigError, ServerConfig, configure_logging, load_config
from novaposhta.errors import NovaPoshtaError, format_error
from novaposhta.utils.redaction import mask_api_key

app = typer.Typer(
    name="novaposhta-mcp",
    help="Nova Poshta API client and MCP server",
    no_args_is_help=True,
)
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")

console = Console()
err_console = Console(stderr=True)

_config_path: str | None = None


@app.callback()
def main(
    config: Optional[str] = typer.Option(
        None, "--config", help="Path to novaposhta.yaml config file"
    ),
):
    """Nova Poshta API client and MCP server."""
    global _config_path
    _config_path = config


def _load() -> ServerConfig:
    try:
        return load_config(config_path=_config_path)
    except ConfigError as e:
        err_console.print(f"[red]{format_error(e)}[/red]")
        raise typer.Exit(1)


@app.command()
def version():
    """Show the package version."""
    console.print(f"[bold]novaposhta[/bold] v{__version__}")


@app.command()
def serve():
    """Run the MCP server over stdio."""
    if _config_path:
        os.environ[CONFIG_PATH_ENV] = _config_path
    # Fail before the transport starts if the config is broken
    _load()

    from novaposhta.mcp.server import mcp

    mcp.run(transport="stdio")


def format_tracking_table(result: BatchTrackingResult) -> Table:
    """Build a Rich table of tracked and missing documents."""
    table = Table(title="Tracking", show_lines=True)
    table.add_column("Number", style="cyan", no_wrap=True)
    table.add_column("Status")
    table.add_column("Code", justify="right")
    table.add_column("City")
    table.add_column("Scheduled delivery")

    for record in result.successful:
        table.add_row(
            str(record.get("Number", "")),
            str(record.get("Status", "")),
            str(record.get("StatusCode", "")),
            str(record.get("CityRecipient", "")),
            str(record.get("ScheduledDeliveryDate", "")),
        )
    for number in result.failed:
        table.add_row(number, "[red]not found[/red]", "", "", "")
    return table


@app.command()
def track(
    numbers: list[str] = typer.Argument(help="14-digit tracking numbers"),
):
    """Track documents and print their statuses."""
    cfg = _load()
    configure_logging(cfg.log_level)

    async def _run() -> BatchTrackingResult:
        async with HttpxTransport(timeout=cfg.timeout) as transport:
            client = build_client(
                ClientContext(transport=transport, base_url=cfg.base_url, api_key=cfg.api_key)
            )
            return await client.tracking.track_multiple(numbers)

    try:
        result = asyncio.run(_run())
    except NovaPoshtaError as e:
        err_console.print(f"[red]{format_error(e)}[/red]")
        raise typer.Exit(1)

    console.print(format_tracking_table(result))
    stats = result.statistics
    console.print(
        f"Tracked {stats.total_tracked}: {stats.delivered} delivered, "
        f"{stats.in_transit} in transit, {stats.at_warehouse} at warehouse, "
        f"{stats.unknown} unknown, {stats.failed} not found"
    )
    for message in result.errors:
        err_console.print(f"[red]{message}[/red]")
    if result.failed:
        raise typer.Exit(1)


@config_app.command("show")
def config_show():
    """Display resolved configuration (API key masked)."""
    cfg = _load()
    console.print("[bold]Nova Poshta:[/bold]")
    console.print(f"  base_url: {cfg.base_url}")
    console.print(f"  api_key: {mask_api_key(cfg.api_key) if cfg.api_key else '[yellow]not set[/yellow]'}")
    console.print(f"  log_level: {cfg.log_level}")
    console.print(f"  timeout: {cfg.timeout:g}s")


if __name__ == "__main__":
    app()
