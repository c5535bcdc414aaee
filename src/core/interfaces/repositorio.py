"""Contrato del almacén de entidades.

Por qué Protocol:
- El controlador depende de esta abstracción y no del almacén en memoria, así
  que los tests pueden inyectar un repositorio nuevo sin tocar el singleton.
"""

from __future__ import annotations

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
class RepositorioRolaPet(Protocol):
    """Operaciones de guardado, búsqueda lineal y borrado por colección.

    Reglas:
    - `guardar_*` devuelve False ante `None` o una entidad igual ya guardada.
    - `buscar_*` devuelve `None` si no hay coincidencia.
    - `obtener_*` devuelve copias de las listas internas.
    """

    def guardar_persona(self, persona: Persona | None) -> bool: ...

    def buscar_persona_por_cedula(self, cedula: str | None) -> Persona | None: ...

    def buscar_usuario_por_email(self, email: str | None) -> Usuario | None: ...

    def obtener_usuarios(self) -> list[Usuario]: ...

    def obtener_administradores(self) -> list[Administrador]: ...

    def obtener_proveedores(self) -> list[Proveedor]: ...

    def obtener_personas(self) -> list[Persona]: ...

    def eliminar_persona(self, persona: Persona | None) -> bool: ...

    def guardar_vehiculo(self, vehiculo: Vehiculo | None) -> bool: ...

    def buscar_vehiculo_por_id(self, id_vehiculo: str | None) -> Vehiculo | None: ...

    def obtener_vehiculos(self) -> list[Vehiculo]: ...

    def eliminar_vehiculo(self, vehiculo: Vehiculo | None) -> bool: ...

    def guardar_item(self, item: Item | None) -> bool: ...

    def buscar_item_por_id(self, id_item: str | None) -> Item | None: ...

    def obtener_items(self) -> list[Item]: ...

    def eliminar_item(self, item: Item | None) -> bool: ...

    def guardar_publicacion(self, publicacion: Publicacion | None) -> bool: ...

    def buscar_publicacion_por_id(self, id_publicacion: str | None) -> Publicacion | None: ...

    def obtener_publicaciones(self) -> list[Publicacion]: ...

    def eliminar_publicacion(self, publicacion: Publicacion | None) -> bool: ...

    def estadisticas(self) -> EstadisticasRepositorio: ...

    def obtener_estadisticas(self) -> str: ...
