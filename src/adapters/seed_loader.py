"""Carga de datos iniciales desde JSON.

Como el repositorio vive solo en memoria, la CLI puede precargar personas,
vehículos, ítems y publicaciones desde un archivo con este formato:

    {"usuarios": [...], "administradores": [...], "proveedores": [...]}

Los registros se aplican a través del controlador, así que pasan por las
mismas validaciones que el alta interactiva. Un registro rechazado se reporta
como advertencia; solo un archivo ilegible o mal formado es un error.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from core.interfaces.controlador import ControladorProtocol

logger = logging.getLogger(__name__)


class SeedFileError(Exception):
    """El archivo de datos iniciales no existe, no es JSON o no cumple el esquema."""


class SeedVehiculo(BaseModel):
    marca: str
    modelo: str
    autonomia_km: int
    tipo: str = Field(default="scooter")


class SeedItem(BaseModel):
    nombre: str
    descripcion: str
    tipo: str = Field(default="servicio")


class SeedPublicacion(BaseModel):
    titulo: str
    descripcion: str
    tipo: str = Field(default="evento")


class SeedPersona(BaseModel):
    cedula: str
    nombre: str
    telefono: str
    password: str
    email: str


class SeedUsuario(SeedPersona):
    vehiculos: list[SeedVehiculo] = Field(default_factory=list)
    amigos: list[str] = Field(
        default_factory=list,
        description="Cédulas de otros usuarios del mismo archivo.",
    )


class SeedProveedor(SeedPersona):
    items: list[SeedItem] = Field(default_factory=list)
    publicaciones: list[SeedPublicacion] = Field(default_factory=list)


class SeedFile(BaseModel):
    usuarios: list[SeedUsuario] = Field(default_factory=list)
    administradores: list[SeedPersona] = Field(default_factory=list)
    proveedores: list[SeedProveedor] = Field(default_factory=list)


@dataclass
class SeedResult:
    """Resumen de la carga: registros aceptados y advertencias."""

    personas: int = 0
    vehiculos: int = 0
    items: int = 0
    publicaciones: int = 0
    amistades: int = 0
    warnings: list[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)


def load_seed(path: Path) -> SeedFile:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SeedFileError(f"No se pudo leer {path}: {exc}") from exc
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SeedFileError(f"{path} no es JSON válido: {exc}") from exc
    try:
        return SeedFile.model_validate(data)
    except ValidationError as exc:
        raise SeedFileError(f"{path} no cumple el formato esperado: {exc}") from exc


def apply_seed(controlador: ControladorProtocol, seed: SeedFile) -> SeedResult:
    result = SeedResult()

    for admin in seed.administradores:
        if controlador.registrar_administrador(
            admin.cedula, admin.nombre, admin.telefono, admin.password, admin.email
        ):
            result.personas += 1
        else:
            result.warn(f"Administrador rechazado: {admin.cedula}")

    aceptados = []
    for usuario in seed.usuarios:
        if not controlador.registrar_usuario(
            usuario.cedula, usuario.nombre, usuario.telefono, usuario.password, usuario.email
        ):
            result.warn(f"Usuario rechazado: {usuario.cedula}")
            continue
        aceptados.append(usuario)
        result.personas += 1
        for v in usuario.vehiculos:
            vehiculo = controlador.crear_vehiculo(v.marca, v.modelo, v.autonomia_km, v.tipo)
            if vehiculo is not None and controlador.agregar_vehiculo_a_usuario(
                usuario.cedula, vehiculo
            ):
                result.vehiculos += 1
            else:
                result.warn(f"Vehículo rechazado para {usuario.cedula}: {v.marca} {v.modelo}")

    # Las amistades se aplican cuando ya existen todos los usuarios.
    for usuario in aceptados:
        for cedula_amigo in usuario.amigos:
            if controlador.agregar_amigo(usuario.cedula, cedula_amigo):
                result.amistades += 1
            else:
                result.warn(f"Amistad rechazada: {usuario.cedula} -> {cedula_amigo}")

    for proveedor in seed.proveedores:
        if not controlador.registrar_proveedor(
            proveedor.cedula, proveedor.nombre, proveedor.telefono, proveedor.password, proveedor.email
        ):
            result.warn(f"Proveedor rechazado: {proveedor.cedula}")
            continue
        result.personas += 1
        for i in proveedor.items:
            item = controlador.crear_item(i.nombre, i.descripcion, i.tipo)
            if item is not None and controlador.agregar_item_a_proveedor(proveedor.cedula, item):
                result.items += 1
            else:
                result.warn(f"Ítem rechazado para {proveedor.cedula}: {i.nombre}")
        for p in proveedor.publicaciones:
            publicacion = controlador.crear_publicacion(p.titulo, p.descripcion, p.tipo)
            if publicacion is not None and controlador.agregar_publicacion_a_proveedor(
                proveedor.cedula, publicacion
            ):
                result.publicaciones += 1
            else:
                result.warn(f"Publicación rechazada para {proveedor.cedula}: {p.titulo}")

    return result


def load_and_apply_seed(controlador: ControladorProtocol, path: Path) -> SeedResult:
    return apply_seed(controlador, load_seed(path))
