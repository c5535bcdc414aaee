"""Contrato entre la capa de presentación (CLI) y la lógica de negocio.

La CLI solo conoce este Protocol; cualquier fallo (datos vacíos, entidad
inexistente, tipo desconocido) se expresa como `None`, `False` o lista vacía.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from core.domain.models import (
    Administrador,
    EstadisticasRepositorio,
    Item,
    Persona,
    Proveedor,
    Publicacion,
    Usuario,
    Vehiculo,
)


@runtime_checkable
class ControladorProtocol(Protocol):
    # Autenticación
    def autenticar_usuario(self, email: str | None, password: str | None) -> Usuario | None: ...

    def autenticar_administrador(
        self, cedula: str | None, password: str | None
    ) -> Administrador | None: ...

    def autenticar_proveedor(self, cedula: str | None, password: str | None) -> Proveedor | None: ...

    # Registro
    def registrar_usuario(
        self, cedula: str, nombre: str, telefono: str, password: str, email: str
    ) -> bool: ...

    def registrar_administrador(
        self, cedula: str, nombre: str, telefono: str, password: str, email: str
    ) -> bool: ...

    def registrar_proveedor(
        self, cedula: str, nombre: str, telefono: str, password: str, email: str
    ) -> bool: ...

    # Amigos
    def agregar_amigo(self, cedula_usuario_actual: str | None, cedula_amigo: str | None) -> bool: ...

    def eliminar_amigo(self, cedula_usuario_actual: str | None, cedula_amigo: str | None) -> bool: ...

    def obtener_amigos(self, cedula_usuario: str | None) -> list[Usuario]: ...

    # Vehículos
    def consultar_vehiculos_de_usuario(self, cedula_usuario: str | None) -> list[Vehiculo]: ...

    def agregar_vehiculo_a_usuario(self, cedula_usuario: str | None, vehiculo: Vehiculo | None) -> bool: ...

    def eliminar_vehiculo_de_usuario(self, cedula_usuario: str | None, id_vehiculo: str | None) -> bool: ...

    def crear_vehiculo(
        self, marca: str | None, modelo: str | None, autonomia_km: int | None, tipo: str | None
    ) -> Vehiculo | None: ...

    # Ítems
    def crear_item(self, nombre: str | None, descripcion: str | None, tipo: str | None) -> Item | None: ...

    def agregar_item_a_proveedor(self, cedula_proveedor: str | None, item: Item | None) -> bool: ...

    def eliminar_item_de_proveedor(self, cedula_proveedor: str | None, id_item: str | None) -> bool: ...

    def obtener_items_de_proveedor(self, cedula_proveedor: str | None) -> list[Item]: ...

    # Publicaciones
    def crear_publicacion(
        self, titulo: str | None, descripcion: str | None, tipo: str | None
    ) -> Publicacion | None: ...

    def agregar_publicacion_a_proveedor(
        self, cedula_proveedor: str | None, publicacion: Publicacion | None
    ) -> bool: ...

    def eliminar_publicacion_de_proveedor(
        self, cedula_proveedor: str | None, id_publicacion: str | None
    ) -> bool: ...

    def obtener_publicaciones_de_proveedor(self, cedula_proveedor: str | None) -> list[Publicacion]: ...

    # Consultas generales
    def obtener_todas_las_personas(self) -> list[Persona]: ...

    def obtener_todos_los_vehiculos(self) -> list[Vehiculo]: ...

    def obtener_todos_los_items(self) -> list[Item]: ...

    def obtener_todas_las_publicaciones(self) -> list[Publicacion]: ...

    def obtener_estadisticas_sistema(self) -> str: ...

    def estadisticas_sistema(self) -> EstadisticasRepositorio: ...

    # Exportación
    def exportar_snapshot(self, output_path: Path) -> Path: ...
