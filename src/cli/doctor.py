"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(url: str, timeout_seconds: float) -> tuple[bool, str]:
    try:
        async with build_async_client() as client:
            response = await asyncio.wait_for(client.get(url), timeout=timeout_seconds or None)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Show the effective client configuration and probe the base URL."""

    settings = AppSettings()
    config = settings.to_client_config()

    table = Table(title="typesync Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", config.base_url)
    if "Authorization" in config.headers:
        table.add_row("Auth token", "OK", "Bearer header configured")
    else:
        table.add_row("Auth token", "OPTIONAL", "No token set")
    table.add_row(
        "Retry policy",
        "OK",
        f"{config.retries} retries, {config.retry_delay_seconds:g}s delay, "
        f"{config.timeout_seconds:g}s timeout",
    )

    ok_http, detail_http = asyncio.run(_check_http(config.base_url, config.timeout_seconds))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()
    base_url = typer.prompt("API base URL", default=settings.base_url, show_default=True).strip()
    token = typer.prompt(
        "Bearer token (empty to skip)", default="", hide_input=True, show_default=False
    ).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "TYPESYNC_BASE_URL": base_url,
            "TYPESYNC_AUTH_TOKEN": token or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
