"""Exportación JSON de una respuesta decodificada.

Por qué JSON:
- Interoperabilidad con otras herramientas (paletas, pipelines).
- El formato es el mismo que devuelve el API, con hex en mayúsculas.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import HexbotResponse


def export_response_json(*, response: HexbotResponse, output_path: Path) -> Path:
    """Exporta `HexbotResponse` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(response.to_json(), ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
