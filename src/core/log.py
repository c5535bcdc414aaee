"""Configuración de logging (stdlib + RichHandler).

Los módulos usan `logging.getLogger(__name__)`; solo la CLI llama a
`setup_logging` una vez, con el nivel de `AppSettings.log_level`.
Los registros van a stderr: stdout queda para la salida de los comandos
(`stats --json` se puede redirigir a un archivo).
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_INITIALIZED = False


def setup_logging(level: str | None = None, *, force: bool = False) -> None:
    """Configura el logger raíz con un `RichHandler` (idempotente)."""

    global _INITIALIZED
    if _INITIALIZED and not force:
        return
    lvl = getattr(logging, (level or "WARNING").upper(), logging.WARNING)
    if not isinstance(lvl, int):
        lvl = logging.WARNING
    logging.basicConfig(
        level=lvl,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
    _INITIALIZED = True
