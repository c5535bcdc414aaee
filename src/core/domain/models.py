"""Modelos del dominio RolaPet (Pydantic v2).

Por qué Pydantic en el dominio:
- Validación estricta en constructores y setters (`validate_assignment`), de
  modo que un setter seguido de un getter devuelve siempre un valor válido.
- Serialización estable para exportar el contenido del repositorio.

Notas de diseño:
- La identidad es la clave natural (`cedula` para personas, `id` para el resto)
  y la clase concreta: dos entidades de distinta clase nunca son iguales.
- Las clases base (`Persona`, `Vehiculo`, `Item`, `Publicacion`) son abstractas:
  su campo discriminador (`rol`/`tipo`) no tiene default y solo los subtipos
  concretos lo fijan.
- Las colecciones son listas sin índice; la unicidad se comprueba con `in`
  antes de insertar.
"""

from __future__ import annotations

from datetime import date
from typing import Annotated, Any, ClassVar, Literal

from pydantic import BaseModel, Field, StringConstraints, computed_field, field_validator
from pydantic.config import ConfigDict


class EntidadRolaPet(BaseModel):
    """Base común: validación en asignación, igualdad por clave natural."""

    model_config = ConfigDict(
        validate_assignment=True,
        str_strip_whitespace=True,
    )

    CLAVE: ClassVar[str] = "id"
    DISCRIMINADOR: ClassVar[str] = "tipo"

    def __init__(self, **data: Any) -> None:
        campo = type(self).model_fields[self.DISCRIMINADOR]
        if campo.is_required():
            raise TypeError(
                f"{type(self).__name__} es abstracta; instancie uno de sus subtipos."
            )
        super().__init__(**data)

    @property
    def clave(self) -> str:
        return getattr(self, self.CLAVE)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if other is None or type(self) is not type(other):
            return False
        return self.clave == other.clave  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash(self.clave)


def _agregar_unico(lista: list, elemento: Any) -> bool:
    if elemento is None or elemento in lista:
        return False
    lista.append(elemento)
    return True


def _quitar(lista: list, elemento: Any) -> bool:
    try:
        lista.remove(elemento)
    except ValueError:
        return False
    return True


# ---------------------------------------------------------------------------
# Vehículos
# ---------------------------------------------------------------------------


class Vehiculo(EntidadRolaPet):
    """Vehículo eléctrico registrado por un usuario."""

    id: str = Field(..., min_length=1, description="Identificador único del vehículo.")
    marca: str = Field(..., min_length=1)
    modelo: str = Field(..., min_length=1)
    autonomia_km: int = Field(
        ...,
        gt=0,
        description="Kilómetros que puede recorrer con una carga completa.",
    )
    tipo: str


class Scooter(Vehiculo):
    tipo: Literal["Scooter"] = Field(default="Scooter", frozen=True)


class MotoElectrica(Vehiculo):
    tipo: Literal["Moto Eléctrica"] = Field(default="Moto Eléctrica", frozen=True)


# ---------------------------------------------------------------------------
# Ítems (catálogo de proveedores)
# ---------------------------------------------------------------------------


class Item(EntidadRolaPet):
    """Servicio o producto ofrecido por un proveedor."""

    id: str = Field(..., min_length=1)
    nombre: str = Field(..., min_length=1, description="Nombre comercial.")
    descripcion: str = Field(..., min_length=1)
    tipo: str


class Servicio(Item):
    tipo: Literal["Servicio"] = Field(default="Servicio", frozen=True)


class Producto(Item):
    tipo: Literal["Producto"] = Field(default="Producto", frozen=True)


# ---------------------------------------------------------------------------
# Publicaciones
# ---------------------------------------------------------------------------


class Publicacion(EntidadRolaPet):
    """Publicación de un proveedor (evento o promoción)."""

    id: str = Field(..., min_length=1)
    titulo: str = Field(..., min_length=1)
    descripcion: str = Field(..., min_length=1)
    fecha_creacion: date = Field(
        default_factory=date.today,
        description="Fecha en que se creó la publicación.",
    )
    tipo: str


class Evento(Publicacion):
    tipo: Literal["Evento"] = Field(default="Evento", frozen=True)


class Promocion(Publicacion):
    tipo: Literal["Promoción"] = Field(default="Promoción", frozen=True)


# ---------------------------------------------------------------------------
# Personas
# ---------------------------------------------------------------------------


class Persona(EntidadRolaPet):
    """Persona registrada en RolaPet; la cédula es su clave natural."""

    CLAVE: ClassVar[str] = "cedula"
    DISCRIMINADOR: ClassVar[str] = "rol"

    cedula: str = Field(..., min_length=1, description="Documento de identidad.")
    nombre: str = Field(..., min_length=1)
    telefono: str = Field(..., min_length=1)
    password: Annotated[str, StringConstraints(strip_whitespace=False)] = Field(
        ..., min_length=1, repr=False, exclude=True
    )
    email: str = Field(..., min_length=1)
    rol: str

    @field_validator("email")
    @classmethod
    def _email_con_arroba(cls, value: str) -> str:
        if "@" not in value:
            raise ValueError("el email debe contener '@'")
        return value

    def verificar_password(self, password: str | None) -> bool:
        return password is not None and self.password == password


class Administrador(Persona):
    rol: Literal["Administrador"] = Field(default="Administrador", frozen=True)


class Usuario(Persona):
    """Usuario final: registra vehículos y mantiene una lista de amigos.

    La amistad es unidireccional: agregar a B como amigo de A no modifica B.
    """

    rol: Literal["Usuario"] = Field(default="Usuario", frozen=True)
    vehiculos: list[Vehiculo] = Field(default_factory=list)
    amigos: list[Usuario] = Field(default_factory=list, repr=False, exclude=True)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def amigos_cedulas(self) -> list[str]:
        return [amigo.cedula for amigo in self.amigos]

    def obtener_vehiculos(self) -> list[Vehiculo]:
        return list(self.vehiculos)

    def agregar_vehiculo(self, vehiculo: Vehiculo | None) -> bool:
        return _agregar_unico(self.vehiculos, vehiculo)

    def eliminar_vehiculo(self, vehiculo: Vehiculo | None) -> bool:
        return _quitar(self.vehiculos, vehiculo)

    def obtener_amigos(self) -> list[Usuario]:
        return list(self.amigos)

    def agregar_amigo(self, amigo: Usuario | None) -> bool:
        if amigo is None or amigo == self:
            return False
        return _agregar_unico(self.amigos, amigo)

    def eliminar_amigo(self, amigo: Usuario | None) -> bool:
        return _quitar(self.amigos, amigo)

    def es_amigo(self, usuario: Usuario | None) -> bool:
        return usuario in self.amigos


class Proveedor(Persona):
    """Proveedor: ofrece ítems y publica eventos/promociones."""

    rol: Literal["Proveedor"] = Field(default="Proveedor", frozen=True)
    items: list[Item] = Field(default_factory=list)
    publicaciones: list[Publicacion] = Field(default_factory=list)

    def obtener_items(self) -> list[Item]:
        return list(self.items)

    def agregar_item(self, item: Item | None) -> bool:
        return _agregar_unico(self.items, item)

    def eliminar_item(self, item: Item | None) -> bool:
        return _quitar(self.items, item)

    def obtener_publicaciones(self) -> list[Publicacion]:
        return list(self.publicaciones)

    def agregar_publicacion(self, publicacion: Publicacion | None) -> bool:
        return _agregar_unico(self.publicaciones, publicacion)

    def eliminar_publicacion(self, publicacion: Publicacion | None) -> bool:
        return _quitar(self.publicaciones, publicacion)


# ---------------------------------------------------------------------------
# Estadísticas
# ---------------------------------------------------------------------------


class EstadisticasRepositorio(BaseModel):
    """Conteos del repositorio en un instante dado."""

    personas: int = Field(default=0, ge=0)
    usuarios: int = Field(default=0, ge=0)
    administradores: int = Field(default=0, ge=0)
    proveedores: int = Field(default=0, ge=0)
    vehiculos: int = Field(default=0, ge=0)
    items: int = Field(default=0, ge=0)
    publicaciones: int = Field(default=0, ge=0)

    def filas(self) -> list[tuple[str, int]]:
        return [
            ("Personas", self.personas),
            ("Usuarios", self.usuarios),
            ("Administradores", self.administradores),
            ("Proveedores", self.proveedores),
            ("Vehículos", self.vehiculos),
            ("Items", self.items),
            ("Publicaciones", self.publicaciones),
        ]

    def formatear(self) -> str:
        lineas = ["Estadísticas del Repositorio:"]
        lineas.extend(f"{nombre}: {valor}" for nombre, valor in self.filas())
        return "\n".join(lineas)
