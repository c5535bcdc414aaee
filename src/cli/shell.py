"""Sesión interactiva de RolaPet (la "ventana" de la aplicación en terminal).

Flujo:
- Menú principal: iniciar sesión, registrarse, estadísticas, salir.
- Tras autenticarse, cada rol tiene su propio tablero de opciones.

La sesión solo habla con el controlador (`ControladorProtocol`); los fallos
(`None`/`False`) se muestran como mensajes en rojo.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import typer
from rich.console import Console

from adapters.json_exporter import default_snapshot_name
from cli.ui_components import (
    build_estadisticas_panel,
    build_items_table,
    build_menu_panel,
    build_personas_table,
    build_publicaciones_table,
    build_usuarios_table,
    build_vehiculos_table,
    print_banner,
)
from core.config import AppSettings
from core.domain.models import Administrador, Proveedor, Usuario
from core.domain.tipos import RolPersona, TipoItem, TipoPublicacion, TipoVehiculo
from core.interfaces.controlador import ControladorProtocol

MENU_PRINCIPAL = [
    ("1", "Iniciar sesión"),
    ("2", "Registrarse"),
    ("3", "Estadísticas"),
    ("0", "Salir"),
]

MENU_USUARIO = [
    ("1", "Mis vehículos"),
    ("2", "Agregar vehículo"),
    ("3", "Eliminar vehículo"),
    ("4", "Todos los vehículos"),
    ("5", "Mis amigos"),
    ("6", "Agregar amigo"),
    ("7", "Eliminar amigo"),
    ("8", "Usuarios registrados"),
    ("9", "Estadísticas"),
    ("e", "Exportar snapshot JSON"),
    ("0", "Cerrar sesión"),
]

MENU_PROVEEDOR = [
    ("1", "Mis ítems"),
    ("2", "Agregar ítem"),
    ("3", "Eliminar ítem"),
    ("4", "Mis publicaciones"),
    ("5", "Agregar publicación"),
    ("6", "Eliminar publicación"),
    ("7", "Estadísticas"),
    ("0", "Cerrar sesión"),
]

MENU_ADMINISTRADOR = [
    ("1", "Personas registradas"),
    ("2", "Vehículos"),
    ("3", "Ítems"),
    ("4", "Publicaciones"),
    ("5", "Estadísticas"),
    ("e", "Exportar snapshot JSON"),
    ("0", "Cerrar sesión"),
]


def _ask(texto: str, **kwargs) -> str:
    return str(typer.prompt(texto, **kwargs)).strip()


def _opciones(valores: list[str]) -> str:
    return "/".join(valores)


class SesionInteractiva:
    def __init__(
        self,
        controlador: ControladorProtocol,
        *,
        console: Console,
        settings: AppSettings,
    ) -> None:
        self.controlador = controlador
        self.console = console
        self.settings = settings

    # ── utilidades de salida ──────────────────────────────────

    def _ok(self, mensaje: str) -> None:
        self.console.print(f"[green]✔[/green] {mensaje}", soft_wrap=True)

    def _error(self, mensaje: str) -> None:
        self.console.print(f"[red]✘ {mensaje}[/red]", soft_wrap=True)

    def _menu(self, titulo: str, opciones: list[tuple[str, str]]) -> str:
        self.console.print(build_menu_panel(titulo, opciones))
        return _ask("Opción").lower()

    def _loop(self, titulo: str, opciones: list[tuple[str, str]], acciones: dict[str, Callable[[], None]]) -> None:
        while True:
            eleccion = self._menu(titulo, opciones)
            if eleccion == "0":
                return
            accion = acciones.get(eleccion)
            if accion is None:
                self._error(f"Opción no válida: {eleccion!r}")
                continue
            accion()

    # ── menú principal ────────────────────────────────────────

    def ejecutar(self) -> None:
        if self.settings.show_banner:
            print_banner(self.console)
        self._loop(
            "Menú principal",
            MENU_PRINCIPAL,
            {
                "1": self.iniciar_sesion,
                "2": self.registrarse,
                "3": self.mostrar_estadisticas,
            },
        )
        self.console.print("[dim]Hasta pronto.[/dim]")

    def _pedir_rol(self) -> RolPersona | None:
        valor = _ask(
            f"Rol ({_opciones([r.value for r in RolPersona])})",
            default=RolPersona.USUARIO.value,
        )
        rol = RolPersona.desde_texto(valor)
        if rol is None:
            self._error(f"Rol desconocido: {valor!r}")
        return rol

    def iniciar_sesion(self) -> None:
        rol = self._pedir_rol()
        if rol is None:
            return
        credencial = _ask(rol.credencial())
        password = typer.prompt("Contraseña", hide_input=True)

        if rol is RolPersona.USUARIO:
            usuario = self.controlador.autenticar_usuario(credencial, password)
            if usuario is None:
                self._error("Credenciales inválidas.")
                return
            self._ok(f"Bienvenido, {usuario.nombre}.")
            self.tablero_usuario(usuario)
        elif rol is RolPersona.ADMINISTRADOR:
            admin = self.controlador.autenticar_administrador(credencial, password)
            if admin is None:
                self._error("Credenciales inválidas.")
                return
            self._ok(f"Bienvenido, {admin.nombre}.")
            self.tablero_administrador(admin)
        else:
            proveedor = self.controlador.autenticar_proveedor(credencial, password)
            if proveedor is None:
                self._error("Credenciales inválidas.")
                return
            self._ok(f"Bienvenido, {proveedor.nombre}.")
            self.tablero_proveedor(proveedor)

    def registrarse(self) -> None:
        rol = self._pedir_rol()
        if rol is None:
            return
        cedula = _ask("Cédula")
        nombre = _ask("Nombre")
        telefono = _ask("Teléfono")
        email = _ask("Email")
        password = typer.prompt("Contraseña", hide_input=True)

        registrar = {
            RolPersona.USUARIO: self.controlador.registrar_usuario,
            RolPersona.ADMINISTRADOR: self.controlador.registrar_administrador,
            RolPersona.PROVEEDOR: self.controlador.registrar_proveedor,
        }[rol]
        if registrar(cedula, nombre, telefono, password, email):
            self._ok(f"{rol.etiqueta()} registrado: {cedula}")
        else:
            self._error("No se pudo registrar: datos vacíos, email sin '@' o cédula/email ya registrados.")

    def mostrar_estadisticas(self) -> None:
        self.console.print(build_estadisticas_panel(self.controlador.estadisticas_sistema()))

    def exportar_snapshot(self) -> None:
        destino = Path(
            _ask(
                "Archivo de salida",
                default=str(self.settings.export_dir / default_snapshot_name()),
            )
        )
        try:
            path = self.controlador.exportar_snapshot(destino)
        except OSError as exc:
            self._error(f"No se pudo exportar: {exc}")
            return
        self._ok(f"Snapshot exportado: {path}")

    # ── tablero de usuario ────────────────────────────────────

    def tablero_usuario(self, usuario: Usuario) -> None:
        cedula = usuario.cedula
        c = self.controlador

        def mis_vehiculos() -> None:
            self.console.print(build_vehiculos_table(c.consultar_vehiculos_de_usuario(cedula), title="Mis vehículos"))

        def agregar_vehiculo() -> None:
            tipo = _ask(f"Tipo ({_opciones([t.value for t in TipoVehiculo])})", default=TipoVehiculo.SCOOTER.value)
            marca = _ask("Marca")
            modelo = _ask("Modelo")
            autonomia = typer.prompt("Autonomía (km)", type=int)
            vehiculo = c.crear_vehiculo(marca, modelo, autonomia, tipo)
            if vehiculo is None:
                self._error("Vehículo inválido: campos vacíos, autonomía <= 0 o tipo desconocido.")
                return
            if c.agregar_vehiculo_a_usuario(cedula, vehiculo):
                self._ok(f"{vehiculo.tipo} agregado con id {vehiculo.id}")
            else:
                self._error("El vehículo ya estaba registrado.")

        def eliminar_vehiculo() -> None:
            id_vehiculo = _ask("ID del vehículo")
            if c.eliminar_vehiculo_de_usuario(cedula, id_vehiculo):
                self._ok(f"Vehículo {id_vehiculo} eliminado")
            else:
                self._error(f"No tienes un vehículo con id {id_vehiculo!r}.")

        def todos_los_vehiculos() -> None:
            self.console.print(build_vehiculos_table(c.obtener_todos_los_vehiculos()))

        def mis_amigos() -> None:
            self.console.print(build_usuarios_table(c.obtener_amigos(cedula), title="Mis amigos"))

        def agregar_amigo() -> None:
            cedula_amigo = _ask("Cédula del amigo")
            if c.agregar_amigo(cedula, cedula_amigo):
                self._ok(f"Amigo agregado: {cedula_amigo}")
            else:
                self._error("No se pudo agregar: no existe, eres tú mismo o ya es tu amigo.")

        def eliminar_amigo() -> None:
            cedula_amigo = _ask("Cédula del amigo")
            if c.eliminar_amigo(cedula, cedula_amigo):
                self._ok(f"Amigo eliminado: {cedula_amigo}")
            else:
                self._error(f"{cedula_amigo!r} no está en tu lista de amigos.")

        def usuarios_registrados() -> None:
            usuarios = [p for p in c.obtener_todas_las_personas() if isinstance(p, Usuario)]
            self.console.print(build_usuarios_table(usuarios))

        self._loop(
            f"Usuario: {usuario.nombre}",
            MENU_USUARIO,
            {
                "1": mis_vehiculos,
                "2": agregar_vehiculo,
                "3": eliminar_vehiculo,
                "4": todos_los_vehiculos,
                "5": mis_amigos,
                "6": agregar_amigo,
                "7": eliminar_amigo,
                "8": usuarios_registrados,
                "9": self.mostrar_estadisticas,
                "e": self.exportar_snapshot,
            },
        )

    # ── tablero de proveedor ──────────────────────────────────

    def tablero_proveedor(self, proveedor: Proveedor) -> None:
        cedula = proveedor.cedula
        c = self.controlador

        def mis_items() -> None:
            self.console.print(build_items_table(c.obtener_items_de_proveedor(cedula), title="Mis ítems"))

        def agregar_item() -> None:
            tipo = _ask(f"Tipo ({_opciones([t.value for t in TipoItem])})", default=TipoItem.SERVICIO.value)
            nombre = _ask("Nombre")
            descripcion = _ask("Descripción")
            item = c.crear_item(nombre, descripcion, tipo)
            if item is None:
                self._error("Ítem inválido: campos vacíos o tipo desconocido.")
                return
            if c.agregar_item_a_proveedor(cedula, item):
                self._ok(f"{item.tipo} agregado con id {item.id}")
            else:
                self._error("El ítem ya estaba en tu catálogo.")

        def eliminar_item() -> None:
            id_item = _ask("ID del ítem")
            if c.eliminar_item_de_proveedor(cedula, id_item):
                self._ok(f"Ítem {id_item} eliminado")
            else:
                self._error(f"No tienes un ítem con id {id_item!r}.")

        def mis_publicaciones() -> None:
            self.console.print(
                build_publicaciones_table(c.obtener_publicaciones_de_proveedor(cedula), title="Mis publicaciones")
            )

        def agregar_publicacion() -> None:
            tipo = _ask(
                f"Tipo ({_opciones([t.value for t in TipoPublicacion])})",
                default=TipoPublicacion.EVENTO.value,
            )
            titulo = _ask("Título")
            descripcion = _ask("Descripción")
            publicacion = c.crear_publicacion(titulo, descripcion, tipo)
            if publicacion is None:
                self._error("Publicación inválida: campos vacíos o tipo desconocido.")
                return
            if c.agregar_publicacion_a_proveedor(cedula, publicacion):
                self._ok(f"{publicacion.tipo} publicada con id {publicacion.id}")
            else:
                self._error("La publicación ya existía.")

        def eliminar_publicacion() -> None:
            id_publicacion = _ask("ID de la publicación")
            if c.eliminar_publicacion_de_proveedor(cedula, id_publicacion):
                self._ok(f"Publicación {id_publicacion} eliminada")
            else:
                self._error(f"No tienes una publicación con id {id_publicacion!r}.")

        self._loop(
            f"Proveedor: {proveedor.nombre}",
            MENU_PROVEEDOR,
            {
                "1": mis_items,
                "2": agregar_item,
                "3": eliminar_item,
                "4": mis_publicaciones,
                "5": agregar_publicacion,
                "6": eliminar_publicacion,
                "7": self.mostrar_estadisticas,
            },
        )

    # ── tablero de administrador ──────────────────────────────

    def tablero_administrador(self, admin: Administrador) -> None:
        c = self.controlador
        self._loop(
            f"Administrador: {admin.nombre}",
            MENU_ADMINISTRADOR,
            {
                "1": lambda: self.console.print(build_personas_table(c.obtener_todas_las_personas())),
                "2": lambda: self.console.print(build_vehiculos_table(c.obtener_todos_los_vehiculos())),
                "3": lambda: self.console.print(build_items_table(c.obtener_todos_los_items())),
                "4": lambda: self.console.print(build_publicaciones_table(c.obtener_todas_las_publicaciones())),
                "5": self.mostrar_estadisticas,
                "e": self.exportar_snapshot,
            },
        )
