"""CLI de Hexbot (Typer + Rich).

Por qué una CLI delgada:
- Toda la validación vive en el Core; aquí solo se traducen opciones a
  parámetros tipados y errores a mensajes.
- `--json` deja la salida lista para pipelines (sin banner ni tablas).
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from adapters.hexbot_api import HexbotClient
from adapters.json_exporter import export_response_json
from cli import doctor
from cli.ui_components import build_colors_table, print_banner, print_error, settings_or_exit
from core.domain.bounded import Count
from core.domain.seed import SeedEncoder
from core.domain.size_limit import SizeLimit
from core.errors import HexbotError, RangeError, SeedError
from core.logging_config import configure_logging
from core.services.request_builder import HexbotRequest

app = typer.Typer(no_args_is_help=True, help="Client for the Hexbot color API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _build_request(
    count: int | None,
    width: int | None,
    height: int | None,
    seed: list[str] | None,
) -> HexbotRequest:
    request = HexbotRequest()
    if count is not None:
        try:
            request.count = Count.of(count)
        except RangeError as exc:
            raise typer.BadParameter(str(exc), param_hint="--count") from exc

    if (width is None) != (height is None):
        raise typer.BadParameter("--width and --height must be given together.", param_hint="--width/--height")
    if width is not None and height is not None:
        try:
            request.size = SizeLimit.create(width, height)
        except RangeError as exc:
            raise typer.BadParameter(str(exc), param_hint="--width/--height") from exc

    if seed:
        try:
            request.seed = SeedEncoder.from_hex_codes(seed)
        except SeedError as exc:
            raise typer.BadParameter(str(exc), param_hint="--seed") from exc
    return request


_COUNT_OPTION = typer.Option(None, "--count", "-c", help="Number of colors [1-1000].")
_WIDTH_OPTION = typer.Option(None, "--width", help="Coordinate width limit [10-100000].")
_HEIGHT_OPTION = typer.Option(None, "--height", help="Coordinate height limit [10-100000].")
_SEED_OPTION = typer.Option(None, "--seed", "-s", help="Seed color as RRGGBB (repeat up to 10 times).")


@app.command()
def url(
    count: Optional[int] = _COUNT_OPTION,
    width: Optional[int] = _WIDTH_OPTION,
    height: Optional[int] = _HEIGHT_OPTION,
    seed: Optional[List[str]] = _SEED_OPTION,
) -> None:
    """Print the request URL without calling the API."""

    request = _build_request(count, width, height, seed)
    settings = settings_or_exit(_console)
    typer.echo(request.url(settings.api_endpoint))


@app.command()
def fetch(
    count: Optional[int] = _COUNT_OPTION,
    width: Optional[int] = _WIDTH_OPTION,
    height: Optional[int] = _HEIGHT_OPTION,
    seed: Optional[List[str]] = _SEED_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print the decoded response as JSON."),
    export: Optional[Path] = typer.Option(None, "--export", help="Write the decoded response to a JSON file."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log request details."),
) -> None:
    """Fetch colors from the Hexbot API."""

    settings = settings_or_exit(_console)
    configure_logging("DEBUG" if verbose else settings.log_level)
    request = _build_request(count, width, height, seed)

    try:
        with HexbotClient(settings) as client:
            response = client.fetch_request(request)
    except HexbotError as exc:
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc

    if as_json:
        _console.print_json(data=response.to_json())
    else:
        print_banner(_console)
        _console.print(build_colors_table(response))
        _console.print(str(response), markup=False, highlight=False, soft_wrap=True)

    if export is not None:
        path = export_response_json(response=response, output_path=export)
        if not as_json:
            _console.print(f"[green]Exported:[/green] {path}")


def run() -> None:
    app()
