"""Tests de la exportación JSON del repositorio."""

from __future__ import annotations

import json
from pathlib import Path

from adapters.json_exporter import build_snapshot, default_snapshot_name, export_snapshot_json
from adapters.seed_loader import load_and_apply_seed
from core.services.controlador import ControladorRolaPET


class TestSnapshot:
    def test_repositorio_vacio(self, controlador: ControladorRolaPET):
        snapshot = build_snapshot(controlador.repositorio)
        assert snapshot["personas"] == []
        assert snapshot["estadisticas"]["personas"] == 0
        assert "generado_en" in snapshot

    def test_exporta_sin_passwords(self, controlador: ControladorRolaPET, seed_file: Path, tmp_path: Path):
        load_and_apply_seed(controlador, seed_file)
        output = export_snapshot_json(repositorio=controlador.repositorio, output_path=tmp_path / "out" / "s.json")

        raw = output.read_text(encoding="utf-8")
        assert "ana123" not in raw
        assert "password" not in raw

        data = json.loads(raw)
        assert data["estadisticas"]["vehiculos"] == 2
        personas = {p["cedula"]: p for p in data["personas"]}
        assert personas["100"]["rol"] == "Usuario"
        assert personas["100"]["amigos_cedulas"] == ["200"]
        assert [v["tipo"] for v in personas["100"]["vehiculos"]] == ["Scooter", "Moto Eléctrica"]
        assert {i["tipo"] for i in personas["900"]["items"]} == {"Servicio", "Producto"}
        assert {p["tipo"] for p in data["publicaciones"]} == {"Evento", "Promoción"}

    def test_nombre_por_defecto(self):
        nombre = default_snapshot_name()
        assert nombre.startswith("rolapet-")
        assert nombre.endswith(".json")
