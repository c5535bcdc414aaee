"""Fixtures compartidas."""

from __future__ import annotations

import itertools
import json
import os
from pathlib import Path

import pytest

from adapters.repositorio_memoria import RepositorioMemoria
from core.services.controlador import ControladorRolaPET


@pytest.fixture(autouse=True)
def _aislar_entorno(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Singleton limpio, sin .env del desarrollador ni variables ROLAPET_*."""

    for key in list(os.environ):
        if key.startswith("ROLAPET_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)
    RepositorioMemoria.reiniciar()
    yield
    RepositorioMemoria.reiniciar()


@pytest.fixture
def repositorio() -> RepositorioMemoria:
    return RepositorioMemoria()


@pytest.fixture
def controlador(repositorio: RepositorioMemoria) -> ControladorRolaPET:
    contador = itertools.count(1)
    return ControladorRolaPET(repositorio, generar_id=lambda: f"id{next(contador)}")


@pytest.fixture
def seed_data() -> dict:
    return {
        "administradores": [
            {"cedula": "1", "nombre": "Admin", "telefono": "3000000", "password": "root", "email": "admin@rolapet.co"}
        ],
        "usuarios": [
            {
                "cedula": "100",
                "nombre": "Ana",
                "telefono": "3001111",
                "password": "ana123",
                "email": "ana@rolapet.co",
                "vehiculos": [
                    {"marca": "Xiaomi", "modelo": "M365", "autonomia_km": 30, "tipo": "scooter"},
                    {"marca": "Super Soco", "modelo": "TC Max", "autonomia_km": 110, "tipo": "moto eléctrica"},
                ],
                "amigos": ["200"],
            },
            {
                "cedula": "200",
                "nombre": "Luis",
                "telefono": "3002222",
                "password": "luis123",
                "email": "luis@rolapet.co",
            },
        ],
        "proveedores": [
            {
                "cedula": "900",
                "nombre": "Taller Voltio",
                "telefono": "6011234",
                "password": "voltio",
                "email": "contacto@voltio.co",
                "items": [
                    {"nombre": "Cambio de llanta", "descripcion": "Llanta 10 pulgadas", "tipo": "servicio"},
                    {"nombre": "Casco", "descripcion": "Casco certificado", "tipo": "producto"},
                ],
                "publicaciones": [
                    {"titulo": "Rodada nocturna", "descripcion": "Viernes 8pm", "tipo": "evento"},
                    {"titulo": "2x1 en revisiones", "descripcion": "Solo en octubre", "tipo": "promocion"},
                ],
            }
        ],
    }


@pytest.fixture
def seed_file(tmp_path: Path, seed_data: dict) -> Path:
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(seed_data, ensure_ascii=False), encoding="utf-8")
    return path
