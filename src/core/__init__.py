"""Núcleo de RolaPet: dominio, contratos, servicios y configuración."""
