"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la lógica del menú con detalles visuales.
- Permite reutilizar tablas/paneles en la sesión interactiva y en `stats`.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import (
    EstadisticasRepositorio,
    Item,
    Persona,
    Publicacion,
    Usuario,
    Vehiculo,
)


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("RolaPet", style="bold green")
    subtitle = Text("Vehículos eléctricos • Proveedores • Comunidad", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="green", padding=(1, 4)))


def build_menu_panel(titulo: str, opciones: Iterable[tuple[str, str]]) -> Panel:
    body = Text()
    for clave, texto in opciones:
        body.append(f"{clave}", style="bold cyan")
        body.append(f"  {texto}\n")
    return Panel(body, title=Text(titulo, style="bold"), border_style="cyan")


def build_personas_table(personas: Iterable[Persona], *, title: str = "Personas") -> Table:
    table = Table(title=title)
    table.add_column("Cédula", style="cyan", no_wrap=True)
    table.add_column("Nombre", style="white")
    table.add_column("Teléfono", style="white")
    table.add_column("Email", style="magenta")
    table.add_column("Rol", style="green")
    for p in personas:
        table.add_row(p.cedula, p.nombre, p.telefono, p.email, p.rol)
    return table


def build_usuarios_table(usuarios: Iterable[Usuario], *, title: str = "Usuarios") -> Table:
    table = Table(title=title)
    table.add_column("Cédula", style="cyan", no_wrap=True)
    table.add_column("Nombre", style="white")
    table.add_column("Email", style="magenta")
    table.add_column("Vehículos", justify="right")
    table.add_column("Amigos", justify="right")
    for u in usuarios:
        table.add_row(u.cedula, u.nombre, u.email, str(len(u.vehiculos)), str(len(u.amigos)))
    return table


def build_vehiculos_table(vehiculos: Iterable[Vehiculo], *, title: str = "Vehículos") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Tipo", style="green")
    table.add_column("Marca", style="white")
    table.add_column("Modelo", style="white")
    table.add_column("Autonomía (km)", justify="right")
    for v in vehiculos:
        table.add_row(v.id, v.tipo, v.marca, v.modelo, str(v.autonomia_km))
    return table


def build_items_table(items: Iterable[Item], *, title: str = "Ítems") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Tipo", style="green")
    table.add_column("Nombre", style="white")
    table.add_column("Descripción", style="dim")
    for i in items:
        table.add_row(i.id, i.tipo, i.nombre, i.descripcion)
    return table


def build_publicaciones_table(
    publicaciones: Iterable[Publicacion], *, title: str = "Publicaciones"
) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Tipo", style="green")
    table.add_column("Título", style="white")
    table.add_column("Fecha", style="magenta")
    table.add_column("Descripción", style="dim")
    for p in publicaciones:
        table.add_row(p.id, p.tipo, p.titulo, p.fecha_creacion.isoformat(), p.descripcion)
    return table


def build_estadisticas_panel(estadisticas: EstadisticasRepositorio) -> Panel:
    """Panel con los conteos del repositorio."""

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column(justify="right")
    for nombre, valor in estadisticas.filas():
        table.add_row(nombre, str(valor))
    return Panel(table, title=Text("Estadísticas del Repositorio", style="bold yellow"), border_style="yellow")
