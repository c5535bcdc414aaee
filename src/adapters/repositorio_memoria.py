"""Repositorio en memoria (singleton de proceso).

Por qué en adapters:
- Es un detalle de infraestructura: el controlador solo conoce el Protocol
  `core.interfaces.RepositorioRolaPet`.

Características:
- Cuatro listas sin índice; toda búsqueda es lineal por clave natural.
- La unicidad se limita a comprobar `in` antes de insertar.
- Los datos viven lo que dura el proceso; no hay persistencia.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from core.domain.models import (
    Administrador,
    EntidadRolaPet,
    EstadisticasRepositorio,
    Item,
    Persona,
    Proveedor,
    Publicacion,
    Usuario,
    Vehiculo,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=EntidadRolaPet)


def _guardar(lista: list[E], entidad: E | None) -> bool:
    if entidad is None or entidad in lista:
        return False
    lista.append(entidad)
    return True


def _buscar_por_clave(lista: list[E], clave: str | None) -> E | None:
    if clave is None:
        return None
    return next((e for e in lista if e.clave == clave), None)


def _eliminar(lista: list[E], entidad: E | None) -> bool:
    if entidad is None:
        return False
    try:
        lista.remove(entidad)
    except ValueError:
        return False
    return True


class RepositorioMemoria:
    """Almacén de personas, vehículos, ítems y publicaciones."""

    _instancia: RepositorioMemoria | None = None

    def __init__(self) -> None:
        self._personas: list[Persona] = []
        self._vehiculos: list[Vehiculo] = []
        self._items: list[Item] = []
        self._publicaciones: list[Publicacion] = []

    @classmethod
    def instancia(cls) -> RepositorioMemoria:
        """Devuelve la instancia compartida del proceso (creación perezosa)."""

        if cls._instancia is None:
            cls._instancia = cls()
            logger.debug("Repositorio en memoria creado")
        return cls._instancia

    @classmethod
    def reiniciar(cls) -> None:
        """Descarta la instancia compartida; la siguiente llamada crea una vacía."""

        cls._instancia = None

    # === Personas ===

    def guardar_persona(self, persona: Persona | None) -> bool:
        return _guardar(self._personas, persona)

    def buscar_persona_por_cedula(self, cedula: str | None) -> Persona | None:
        return _buscar_por_clave(self._personas, cedula)

    def buscar_usuario_por_email(self, email: str | None) -> Usuario | None:
        if email is None:
            return None
        return next(
            (p for p in self._personas if isinstance(p, Usuario) and p.email == email),
            None,
        )

    def obtener_usuarios(self) -> list[Usuario]:
        return [p for p in self._personas if isinstance(p, Usuario)]

    def obtener_administradores(self) -> list[Administrador]:
        return [p for p in self._personas if isinstance(p, Administrador)]

    def obtener_proveedores(self) -> list[Proveedor]:
        return [p for p in self._personas if isinstance(p, Proveedor)]

    def obtener_personas(self) -> list[Persona]:
        return list(self._personas)

    def eliminar_persona(self, persona: Persona | None) -> bool:
        return _eliminar(self._personas, persona)

    # === Vehículos ===

    def guardar_vehiculo(self, vehiculo: Vehiculo | None) -> bool:
        return _guardar(self._vehiculos, vehiculo)

    def buscar_vehiculo_por_id(self, id_vehiculo: str | None) -> Vehiculo | None:
        return _buscar_por_clave(self._vehiculos, id_vehiculo)

    def obtener_vehiculos(self) -> list[Vehiculo]:
        return list(self._vehiculos)

    def eliminar_vehiculo(self, vehiculo: Vehiculo | None) -> bool:
        return _eliminar(self._vehiculos, vehiculo)

    # === Ítems ===

    def guardar_item(self, item: Item | None) -> bool:
        return _guardar(self._items, item)

    def buscar_item_por_id(self, id_item: str | None) -> Item | None:
        return _buscar_por_clave(self._items, id_item)

    def obtener_items(self) -> list[Item]:
        return list(self._items)

    def eliminar_item(self, item: Item | None) -> bool:
        return _eliminar(self._items, item)

    # === Publicaciones ===

    def guardar_publicacion(self, publicacion: Publicacion | None) -> bool:
        return _guardar(self._publicaciones, publicacion)

    def buscar_publicacion_por_id(self, id_publicacion: str | None) -> Publicacion | None:
        return _buscar_por_clave(self._publicaciones, id_publicacion)

    def obtener_publicaciones(self) -> list[Publicacion]:
        return list(self._publicaciones)

    def eliminar_publicacion(self, publicacion: Publicacion | None) -> bool:
        return _eliminar(self._publicaciones, publicacion)

    # === Estadísticas ===

    def estadisticas(self) -> EstadisticasRepositorio:
        return EstadisticasRepositorio(
            personas=len(self._personas),
            usuarios=len(self.obtener_usuarios()),
            administradores=len(self.obtener_administradores()),
            proveedores=len(self.obtener_proveedores()),
            vehiculos=len(self._vehiculos),
            items=len(self._items),
            publicaciones=len(self._publicaciones),
        )

    def obtener_estadisticas(self) -> str:
        return self.estadisticas().formatear()
