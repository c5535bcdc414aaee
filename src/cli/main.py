"""CLI de RolaPet (Typer).

Comandos:
- `shell`: sesión interactiva (login, registro y tableros por rol).
- `stats`: estadísticas del repositorio tras cargar datos iniciales.
- `export`: snapshot JSON del repositorio tras cargar datos iniciales.
- `doctor`: diagnóstico de configuración.

El repositorio vive en memoria: cada ejecución empieza vacía salvo que se
indique un archivo de datos iniciales (`--seed` o `ROLAPET_SEED_PATH`).
"""

from __future__ import annotations

import json
from pathlib import Path

import typer
from rich.console import Console

from adapters.repositorio_memoria import RepositorioMemoria
from adapters.seed_loader import SeedFileError, SeedResult, load_and_apply_seed
from cli import doctor
from cli.shell import SesionInteractiva
from cli.ui_components import build_estadisticas_panel
from core.config import AppSettings
from core.log import setup_logging
from core.services.controlador import ControladorRolaPET

app = typer.Typer(
    no_args_is_help=True,
    help="RolaPet: usuarios, vehículos eléctricos, proveedores y publicaciones.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _seed_option():
    return typer.Option(
        None,
        "--seed",
        exists=True,
        dir_okay=False,
        readable=True,
        help="JSON con datos iniciales (por defecto ROLAPET_SEED_PATH).",
    )


def _bootstrap(
    settings: AppSettings, seed: Path | None, *, fresh: bool = False
) -> tuple[ControladorRolaPET, SeedResult | None]:
    if fresh:
        RepositorioMemoria.reiniciar()
    controlador = ControladorRolaPET(RepositorioMemoria.instancia(), settings=settings)

    seed_path = seed or settings.seed_path
    if seed_path is None:
        return controlador, None
    try:
        result = load_and_apply_seed(controlador, seed_path)
    except SeedFileError as exc:
        _console.print(f"[red]✘ {exc}[/red]", soft_wrap=True)
        raise typer.Exit(code=1) from exc
    return controlador, result


def _print_seed_summary(result: SeedResult | None) -> None:
    if result is None:
        return
    _console.print(
        f"[dim]Datos iniciales: {result.personas} personas, {result.vehiculos} vehículos, "
        f"{result.items} ítems, {result.publicaciones} publicaciones, {result.amistades} amistades.[/dim]"
    )
    for warning in result.warnings:
        _console.print(f"[yellow]⚠ {warning}[/yellow]", soft_wrap=True)


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        help="Nivel de logging (por defecto ROLAPET_LOG_LEVEL o WARNING).",
    ),
) -> None:
    settings = AppSettings()
    setup_logging(log_level or settings.log_level)


@app.command()
def shell(
    seed: Path | None = _seed_option(),
    fresh: bool = typer.Option(
        False,
        "--fresh",
        help="Descarta cualquier dato previo del repositorio antes de empezar.",
    ),
) -> None:
    """Abre la sesión interactiva."""

    settings = AppSettings()
    controlador, result = _bootstrap(settings, seed, fresh=fresh)
    _print_seed_summary(result)
    SesionInteractiva(controlador, console=_console, settings=settings).ejecutar()


@app.command()
def stats(
    seed: Path | None = _seed_option(),
    json_output: bool = typer.Option(False, "--json", help="Imprime las estadísticas como JSON."),
) -> None:
    """Muestra las estadísticas del repositorio."""

    settings = AppSettings()
    controlador, result = _bootstrap(settings, seed)
    estadisticas = controlador.estadisticas_sistema()
    if json_output:
        typer.echo(json.dumps(estadisticas.model_dump(mode="json"), ensure_ascii=False, sort_keys=True))
        return
    _print_seed_summary(result)
    _console.print(build_estadisticas_panel(estadisticas))


@app.command()
def export(
    output: Path = typer.Argument(..., dir_okay=False, help="Archivo JSON de salida."),
    seed: Path | None = _seed_option(),
) -> None:
    """Exporta un snapshot JSON del repositorio."""

    settings = AppSettings()
    controlador, result = _bootstrap(settings, seed)
    _print_seed_summary(result)
    path = controlador.exportar_snapshot(output)
    _console.print(f"[green]Snapshot exportado:[/green] {path}")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
