"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que controlador y adaptadores lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from dotenv import set_key
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_APP_DIR_NAME = "rolapet"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (APPDATA, Application Support o XDG)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / _APP_DIR_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def write_user_env_vars(values: dict[str, str | None]) -> Path:
    """Escribe/actualiza variables en el .env global del usuario.

    Las claves con valor `None` se ignoran; las existentes se conservan.
    """

    env_path = get_user_env_file()
    if not env_path.exists():
        env_path.parent.mkdir(parents=True, exist_ok=True)
        env_path.write_text("# RolaPet user config (.env)\n", encoding="utf-8")

    for key, value in values.items():
        if value is not None:
            set_key(env_path, key, value, quote_mode="never")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el dominio.
    - Un único contrato de configuración para CLI/controlador.
    """

    model_config = SettingsConfigDict(
        env_prefix="ROLAPET_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    seed_path: Path | None = Field(
        default=None,
        description="JSON con datos iniciales que se cargan al iniciar la sesión.",
    )
    export_dir: Path = Field(
        default=Path("exports"),
        description="Directorio donde la sesión interactiva escribe los snapshots JSON.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging raíz (DEBUG, INFO, WARNING, ...).",
    )
    id_length: int = Field(
        default=8,
        ge=4,
        le=32,
        description="Longitud de los identificadores generados para vehículos, ítems y publicaciones.",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner al abrir la sesión interactiva.",
    )
