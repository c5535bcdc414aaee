"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores y servicios.
- Permite invertir dependencias: la CLI y el controlador dependen de abstracciones.
"""

from core.interfaces.controlador import ControladorProtocol
from core.interfaces.repositorio import RepositorioRolaPet

__all__ = ["ControladorProtocol", "RepositorioRolaPet"]
