"""Lógica de negocio de RolaPet.

El controlador es una capa delgada entre la CLI y el repositorio:
- valida que los campos de texto no estén vacíos,
- decide qué subtipo concreto construir a partir de un texto de tipo,
- busca linealmente en el repositorio y delega altas/bajas.

Ninguna operación lanza excepciones hacia la CLI: los datos inválidos, las
entidades inexistentes y los tipos desconocidos se traducen en `None`,
`False` o lista vacía.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Callable, TypeVar

from pydantic import ValidationError

from adapters.json_exporter import export_snapshot_json
from adapters.repositorio_memoria import RepositorioMemoria
from core.config import AppSettings
from core.domain.models import (
    Administrador,
    EstadisticasRepositorio,
    Evento,
    Item,
    MotoElectrica,
    Persona,
    Producto,
    Promocion,
    Proveedor,
    Publicacion,
    Scooter,
    Servicio,
    Usuario,
    Vehiculo,
)
from core.domain.tipos import TipoItem, TipoPublicacion, TipoVehiculo
from core.interfaces.repositorio import RepositorioRolaPet

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Persona)

_VEHICULOS: dict[TipoVehiculo, type[Vehiculo]] = {
    TipoVehiculo.SCOOTER: Scooter,
    TipoVehiculo.MOTO_ELECTRICA: MotoElectrica,
}

_ITEMS: dict[TipoItem, type[Item]] = {
    TipoItem.SERVICIO: Servicio,
    TipoItem.PRODUCTO: Producto,
}

_PUBLICACIONES: dict[TipoPublicacion, type[Publicacion]] = {
    TipoPublicacion.EVENTO: Evento,
    TipoPublicacion.PROMOCION: Promocion,
}


def texto_valido(*valores: object) -> bool:
    """True si todos los valores son `str` con contenido distinto de espacios."""

    return all(isinstance(v, str) and v.strip() for v in valores)


def generador_id_aleatorio(longitud: int = 8) -> Callable[[], str]:
    """Ids cortos hexadecimales a partir de un UUID4."""

    def generar() -> str:
        return uuid.uuid4().hex[:longitud]

    return generar


class ControladorRolaPET:
    """Implementación de `core.interfaces.ControladorProtocol`."""

    def __init__(
        self,
        repositorio: RepositorioRolaPet | None = None,
        *,
        settings: AppSettings | None = None,
        generar_id: Callable[[], str] | None = None,
    ) -> None:
        if repositorio is None:
            repositorio = RepositorioMemoria.instancia()
        self.repositorio = repositorio
        if generar_id is None:
            settings = settings or AppSettings()
            generar_id = generador_id_aleatorio(settings.id_length)
        self._generar_id = generar_id

    # === Autenticación ===

    def autenticar_usuario(self, email: str | None, password: str | None) -> Usuario | None:
        if not texto_valido(email, password):
            return None
        usuario = self.repositorio.buscar_usuario_por_email(email.strip())
        if usuario is not None and usuario.verificar_password(password):
            return usuario
        logger.debug("Autenticación de usuario rechazada: %s", email)
        return None

    def autenticar_administrador(
        self, cedula: str | None, password: str | None
    ) -> Administrador | None:
        return self._autenticar_por_cedula(Administrador, cedula, password)

    def autenticar_proveedor(self, cedula: str | None, password: str | None) -> Proveedor | None:
        return self._autenticar_por_cedula(Proveedor, cedula, password)

    def _autenticar_por_cedula(
        self, clase: type[P], cedula: str | None, password: str | None
    ) -> P | None:
        if not texto_valido(cedula, password):
            return None
        persona = self.repositorio.buscar_persona_por_cedula(cedula.strip())
        if isinstance(persona, clase) and persona.verificar_password(password):
            return persona
        logger.debug("Autenticación de %s rechazada: %s", clase.__name__, cedula)
        return None

    # === Registro ===

    def registrar_usuario(
        self, cedula: str, nombre: str, telefono: str, password: str, email: str
    ) -> bool:
        if not self._validar_datos_persona(cedula, nombre, telefono, password, email):
            return False
        # El modelo guarda los textos sin espacios externos; la búsqueda usa la misma forma.
        if self.repositorio.buscar_usuario_por_email(email.strip()) is not None:
            logger.debug("Email de usuario ya registrado: %s", email)
            return False
        return self._registrar(Usuario, cedula, nombre, telefono, password, email)

    def registrar_administrador(
        self, cedula: str, nombre: str, telefono: str, password: str, email: str
    ) -> bool:
        if not self._validar_datos_persona(cedula, nombre, telefono, password, email):
            return False
        return self._registrar(Administrador, cedula, nombre, telefono, password, email)

    def registrar_proveedor(
        self, cedula: str, nombre: str, telefono: str, password: str, email: str
    ) -> bool:
        if not self._validar_datos_persona(cedula, nombre, telefono, password, email):
            return False
        return self._registrar(Proveedor, cedula, nombre, telefono, password, email)

    def _validar_datos_persona(
        self, cedula: str, nombre: str, telefono: str, password: str, email: str
    ) -> bool:
        if not texto_valido(cedula, nombre, telefono, password, email) or "@" not in email:
            logger.debug("Datos de persona inválidos (cedula=%r, email=%r)", cedula, email)
            return False
        if self.repositorio.buscar_persona_por_cedula(cedula.strip()) is not None:
            logger.debug("Cédula ya registrada: %s", cedula)
            return False
        return True

    def _registrar(
        self,
        clase: type[Persona],
        cedula: str,
        nombre: str,
        telefono: str,
        password: str,
        email: str,
    ) -> bool:
        try:
            persona = clase(
                cedula=cedula, nombre=nombre, telefono=telefono, password=password, email=email
            )
        except ValidationError as exc:
            logger.debug("%s rechazado: %s", clase.__name__, exc)
            return False
        guardado = self.repositorio.guardar_persona(persona)
        if guardado:
            logger.info("%s registrado: %s", persona.rol, persona.cedula)
        return guardado

    # === Amigos ===

    def _usuario(self, cedula: str | None) -> Usuario | None:
        persona = self.repositorio.buscar_persona_por_cedula(cedula)
        return persona if isinstance(persona, Usuario) else None

    def agregar_amigo(self, cedula_usuario_actual: str | None, cedula_amigo: str | None) -> bool:
        if cedula_usuario_actual is None or cedula_amigo is None:
            return False
        if cedula_usuario_actual == cedula_amigo:
            return False
        actual = self._usuario(cedula_usuario_actual)
        amigo = self._usuario(cedula_amigo)
        if actual is None or amigo is None:
            return False
        return actual.agregar_amigo(amigo)

    def eliminar_amigo(self, cedula_usuario_actual: str | None, cedula_amigo: str | None) -> bool:
        if cedula_usuario_actual is None or cedula_amigo is None:
            return False
        actual = self._usuario(cedula_usuario_actual)
        amigo = self._usuario(cedula_amigo)
        if actual is None or amigo is None:
            return False
        return actual.eliminar_amigo(amigo)

    def obtener_amigos(self, cedula_usuario: str | None) -> list[Usuario]:
        usuario = self._usuario(cedula_usuario)
        return usuario.obtener_amigos() if usuario is not None else []

    # === Vehículos ===

    def consultar_vehiculos_de_usuario(self, cedula_usuario: str | None) -> list[Vehiculo]:
        usuario = self._usuario(cedula_usuario)
        return usuario.obtener_vehiculos() if usuario is not None else []

    def agregar_vehiculo_a_usuario(
        self, cedula_usuario: str | None, vehiculo: Vehiculo | None
    ) -> bool:
        if cedula_usuario is None or vehiculo is None:
            return False
        usuario = self._usuario(cedula_usuario)
        if usuario is None:
            return False
        agregado = usuario.agregar_vehiculo(vehiculo)
        if agregado:
            self.repositorio.guardar_vehiculo(vehiculo)
        return agregado

    def eliminar_vehiculo_de_usuario(
        self, cedula_usuario: str | None, id_vehiculo: str | None
    ) -> bool:
        if cedula_usuario is None or id_vehiculo is None:
            return False
        usuario = self._usuario(cedula_usuario)
        vehiculo = self.repositorio.buscar_vehiculo_por_id(id_vehiculo)
        if usuario is None or vehiculo is None:
            return False
        eliminado = usuario.eliminar_vehiculo(vehiculo)
        if eliminado:
            self.repositorio.eliminar_vehiculo(vehiculo)
        return eliminado

    def crear_vehiculo(
        self,
        marca: str | None,
        modelo: str | None,
        autonomia_km: int | None,
        tipo: str | None,
    ) -> Vehiculo | None:
        if not texto_valido(marca, modelo, tipo):
            return None
        if isinstance(autonomia_km, bool) or not isinstance(autonomia_km, int) or autonomia_km <= 0:
            return None
        tipo_vehiculo = TipoVehiculo.desde_texto(tipo)
        if tipo_vehiculo is None:
            logger.debug("Tipo de vehículo desconocido: %r", tipo)
            return None
        try:
            vehiculo = _VEHICULOS[tipo_vehiculo](
                id=self._generar_id(), marca=marca, modelo=modelo, autonomia_km=autonomia_km
            )
        except ValidationError as exc:
            logger.debug("Vehículo rechazado: %s", exc)
            return None
        self.repositorio.guardar_vehiculo(vehiculo)
        logger.info("Vehículo creado: %s (%s)", vehiculo.id, vehiculo.tipo)
        return vehiculo

    # === Ítems ===

    def _proveedor(self, cedula: str | None) -> Proveedor | None:
        persona = self.repositorio.buscar_persona_por_cedula(cedula)
        return persona if isinstance(persona, Proveedor) else None

    def crear_item(
        self, nombre: str | None, descripcion: str | None, tipo: str | None
    ) -> Item | None:
        if not texto_valido(nombre, descripcion, tipo):
            return None
        tipo_item = TipoItem.desde_texto(tipo)
        if tipo_item is None:
            logger.debug("Tipo de ítem desconocido: %r", tipo)
            return None
        try:
            item = _ITEMS[tipo_item](id=self._generar_id(), nombre=nombre, descripcion=descripcion)
        except ValidationError as exc:
            logger.debug("Ítem rechazado: %s", exc)
            return None
        self.repositorio.guardar_item(item)
        logger.info("Ítem creado: %s (%s)", item.id, item.tipo)
        return item

    def agregar_item_a_proveedor(self, cedula_proveedor: str | None, item: Item | None) -> bool:
        if cedula_proveedor is None or item is None:
            return False
        proveedor = self._proveedor(cedula_proveedor)
        if proveedor is None:
            return False
        return proveedor.agregar_item(item)

    def eliminar_item_de_proveedor(
        self, cedula_proveedor: str | None, id_item: str | None
    ) -> bool:
        if cedula_proveedor is None or id_item is None:
            return False
        proveedor = self._proveedor(cedula_proveedor)
        item = self.repositorio.buscar_item_por_id(id_item)
        if proveedor is None or item is None:
            return False
        eliminado = proveedor.eliminar_item(item)
        if eliminado:
            self.repositorio.eliminar_item(item)
        return eliminado

    def obtener_items_de_proveedor(self, cedula_proveedor: str | None) -> list[Item]:
        proveedor = self._proveedor(cedula_proveedor)
        return proveedor.obtener_items() if proveedor is not None else []

    # === Publicaciones ===

    def crear_publicacion(
        self, titulo: str | None, descripcion: str | None, tipo: str | None
    ) -> Publicacion | None:
        if not texto_valido(titulo, descripcion, tipo):
            return None
        tipo_publicacion = TipoPublicacion.desde_texto(tipo)
        if tipo_publicacion is None:
            logger.debug("Tipo de publicación desconocido: %r", tipo)
            return None
        try:
            publicacion = _PUBLICACIONES[tipo_publicacion](
                id=self._generar_id(), titulo=titulo, descripcion=descripcion
            )
        except ValidationError as exc:
            logger.debug("Publicación rechazada: %s", exc)
            return None
        self.repositorio.guardar_publicacion(publicacion)
        logger.info("Publicación creada: %s (%s)", publicacion.id, publicacion.tipo)
        return publicacion

    def agregar_publicacion_a_proveedor(
        self, cedula_proveedor: str | None, publicacion: Publicacion | None
    ) -> bool:
        if cedula_proveedor is None or publicacion is None:
            return False
        proveedor = self._proveedor(cedula_proveedor)
        if proveedor is None:
            return False
        return proveedor.agregar_publicacion(publicacion)

    def eliminar_publicacion_de_proveedor(
        self, cedula_proveedor: str | None, id_publicacion: str | None
    ) -> bool:
        if cedula_proveedor is None or id_publicacion is None:
            return False
        proveedor = self._proveedor(cedula_proveedor)
        publicacion = self.repositorio.buscar_publicacion_por_id(id_publicacion)
        if proveedor is None or publicacion is None:
            return False
        eliminado = proveedor.eliminar_publicacion(publicacion)
        if eliminado:
            self.repositorio.eliminar_publicacion(publicacion)
        return eliminado

    def obtener_publicaciones_de_proveedor(self, cedula_proveedor: str | None) -> list[Publicacion]:
        proveedor = self._proveedor(cedula_proveedor)
        return proveedor.obtener_publicaciones() if proveedor is not None else []

    # === Consultas generales ===

    def obtener_todas_las_personas(self) -> list[Persona]:
        return self.repositorio.obtener_personas()

    def obtener_todos_los_vehiculos(self) -> list[Vehiculo]:
        return self.repositorio.obtener_vehiculos()

    def obtener_todos_los_items(self) -> list[Item]:
        return self.repositorio.obtener_items()

    def obtener_todas_las_publicaciones(self) -> list[Publicacion]:
        return self.repositorio.obtener_publicaciones()

    def obtener_estadisticas_sistema(self) -> str:
        return self.repositorio.obtener_estadisticas()

    def estadisticas_sistema(self) -> EstadisticasRepositorio:
        return self.repositorio.estadisticas()

    # === Exportación ===

    def exportar_snapshot(self, output_path: Path) -> Path:
        path = export_snapshot_json(repositorio=self.repositorio, output_path=output_path)
        logger.info("Snapshot exportado: %s", path)
        return path
