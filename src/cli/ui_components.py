"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

import typer
from rich.align import Align
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.config import AppSettings, load_settings
from core.domain.models import HexbotResponse
from core.errors import ConfigurationError


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida (solo en modo interactivo, no con `--json`)."""

    title = Text("HEXBOT", style="bold cyan")
    subtitle = Text("Colores aleatorios • Coordenadas • Seeds", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_colors_table(response: HexbotResponse) -> Table:
    """Tabla Rich con una fila por color (muestra de color incluida)."""

    table = Table(title=f"Hexbot ({len(response)} colors)")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Color", style="white", no_wrap=True)
    table.add_column("Swatch", no_wrap=True)
    if response.has_coordinates:
        table.add_column("Coordinates", style="magenta")

    for index, entry in enumerate(response):
        row: list[str | Text] = [str(index), entry.hex, Text("      ", style=f"on {entry.hex}")]
        if entry.coordinates is not None:
            row.append(str(entry.coordinates))
        table.add_row(*row)
    return table


def print_error(console: Console, message: str) -> None:
    console.print(f"[red]Error:[/red] {escape(message)}")


def settings_or_exit(console: Console) -> AppSettings:
    """Carga la configuración o termina con código 1 y un mensaje legible."""

    try:
        return load_settings()
    except ConfigurationError as exc:
        print_error(console, str(exc))
        raise typer.Exit(code=1) from exc
