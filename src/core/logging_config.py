"""Configuración de logging para la CLI.

Los módulos de librería solo usan `logging.getLogger(__name__)`; instalar
handlers es cosa del entrypoint.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_HANDLER_NAME = "hexbot-rich"


def configure_logging(level: str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Instala un único `RichHandler` en el root logger (idempotente)."""

    root = logging.getLogger()
    root.setLevel(level.upper())
    for handler in root.handlers:
        if handler.get_name() == _HANDLER_NAME:
            return root

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    return root
