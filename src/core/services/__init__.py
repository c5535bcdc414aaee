"""Servicios de aplicación (lógica de negocio sobre los contratos del Core)."""
