"""Tipos enumerados del dominio RolaPet.

Este módulo centraliza las opciones de tipo (roles, vehículos, ítems y
publicaciones) que el controlador usa para decidir qué subtipo concreto
construir. Vive en el dominio para que la CLI y los servicios compartan una
única fuente de verdad sin importar adaptadores.
"""

from __future__ import annotations

import unicodedata
from enum import Enum


def normalizar_texto(valor: str) -> str:
    """Minúsculas, sin tildes y con espacios colapsados ("Moto  Eléctrica" -> "moto electrica")."""

    descompuesto = unicodedata.normalize("NFKD", valor)
    sin_tildes = "".join(ch for ch in descompuesto if not unicodedata.combining(ch))
    return " ".join(sin_tildes.lower().replace("_", " ").replace("-", " ").split())


class _TipoTexto(str, Enum):
    """Base para enums que se resuelven desde texto libre del usuario."""

    @classmethod
    def _alias(cls) -> dict[str, str]:
        return {}

    @classmethod
    def desde_texto(cls, valor: str | None):
        """Resuelve el enum desde texto libre; `None` si no se reconoce."""

        if not isinstance(valor, str):
            return None
        clave = normalizar_texto(valor)
        if not clave:
            return None
        clave = cls._alias().get(clave, clave)
        for miembro in cls:
            if miembro.value == clave:
                return miembro
        return None

    def etiqueta(self) -> str:
        return self.value.capitalize()


class RolPersona(_TipoTexto):
    USUARIO = "usuario"
    ADMINISTRADOR = "administrador"
    PROVEEDOR = "proveedor"

    @classmethod
    def _alias(cls) -> dict[str, str]:
        return {"admin": "administrador"}

    def credencial(self) -> str:
        """Dato con el que se autentica cada rol."""

        return "Email" if self is RolPersona.USUARIO else "Cédula"


class TipoVehiculo(_TipoTexto):
    SCOOTER = "scooter"
    MOTO_ELECTRICA = "moto electrica"

    @classmethod
    def _alias(cls) -> dict[str, str]:
        return {"moto": "moto electrica", "motoelectrica": "moto electrica"}

    def etiqueta(self) -> str:
        return "Scooter" if self is TipoVehiculo.SCOOTER else "Moto Eléctrica"


class TipoItem(_TipoTexto):
    SERVICIO = "servicio"
    PRODUCTO = "producto"


class TipoPublicacion(_TipoTexto):
    EVENTO = "evento"
    PROMOCION = "promocion"

    def etiqueta(self) -> str:
        return "Evento" if self is TipoPublicacion.EVENTO else "Promoción"
