"""Doctor command for environment diagnostics."""

from __future__ import annotations

from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_client
from cli.ui_components import settings_or_exit
from core.config import AppSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(settings.api_endpoint)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the effective configuration and check that the API endpoint answers."""

    settings = settings_or_exit(_console)

    table = Table(title="Hexbot Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Endpoint", "OK", settings.api_endpoint)
    table.add_row("Timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("User env file", "OK" if get_user_env_file().exists() else "OPTIONAL", str(get_user_env_file()))

    ok_http, detail_http = _check_http(settings)
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)


@app.command()
def setup(
    endpoint: Optional[str] = typer.Option(None, "--endpoint", help="Hexbot API endpoint (no query string)."),
    timeout: Optional[float] = typer.Option(None, "--timeout", help="HTTP timeout in seconds."),
) -> None:
    """Store endpoint/timeout in the user config .env.

    Designed for non-Python users: no manual .env editing.
    """

    if endpoint is None:
        default_endpoint = settings_or_exit(_console).api_endpoint
        endpoint = typer.prompt("API endpoint", default=default_endpoint, show_default=True).strip()
    if not endpoint:
        raise typer.BadParameter("endpoint is required", param_hint="--endpoint")
    if timeout is not None and timeout <= 0:
        raise typer.BadParameter("timeout must be positive", param_hint="--timeout")

    values = {"HEXBOT_API_ENDPOINT": endpoint}
    if timeout is not None:
        values["HEXBOT_HTTP_TIMEOUT_SECONDS"] = f"{timeout:g}"

    env_path = write_user_env_vars(values)
    _console.print(f"[green]Saved:[/green] {env_path}")
