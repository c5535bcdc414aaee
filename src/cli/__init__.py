"""Capa de presentación: CLI Typer + componentes Rich."""
