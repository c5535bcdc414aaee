"""Exportación JSON del contenido del repositorio.

Por qué JSON:
- El repositorio no persiste nada; un snapshot permite revisar lo que se
  registró durante una sesión.
- Las contraseñas están excluidas en los modelos, así que nunca se exportan.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from core.interfaces.repositorio import RepositorioRolaPet


def build_snapshot(repositorio: RepositorioRolaPet) -> dict[str, Any]:
    """Construye el payload serializable del repositorio."""

    return {
        "generado_en": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "estadisticas": repositorio.estadisticas().model_dump(mode="json"),
        "personas": [p.model_dump(mode="json") for p in repositorio.obtener_personas()],
        "vehiculos": [v.model_dump(mode="json") for v in repositorio.obtener_vehiculos()],
        "items": [i.model_dump(mode="json") for i in repositorio.obtener_items()],
        "publicaciones": [p.model_dump(mode="json") for p in repositorio.obtener_publicaciones()],
    }


def export_snapshot_json(*, repositorio: RepositorioRolaPet, output_path: Path) -> Path:
    """Exporta el repositorio a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = build_snapshot(repositorio)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path


def default_snapshot_name(prefix: str = "rolapet") -> str:
    stamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    return f"{prefix}-{stamp}.json"
