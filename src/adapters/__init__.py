"""Adaptadores de infraestructura: almacén en memoria, carga y exportación JSON."""
