"""Doctor command for environment diagnostics."""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from adapters.repositorio_memoria import RepositorioMemoria
from adapters.seed_loader import SeedFileError, apply_seed, load_seed
from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.services.controlador import ControladorRolaPET

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_seed(path: Path | None) -> tuple[str, str]:
    """Validate the seed file against a throwaway repository."""

    if path is None:
        return "OPTIONAL", "No seed configured -> sessions start empty"
    try:
        seed = load_seed(path)
    except SeedFileError as exc:
        return "FAIL", str(exc)
    result = apply_seed(ControladorRolaPET(RepositorioMemoria()), seed)
    if result.warnings:
        return "WARN", f"{len(result.warnings)} rejected records (first: {result.warnings[0]})"
    return "OK", f"{result.personas} personas, {result.vehiculos} vehículos, {result.items} ítems"


def _check_export_dir(path: Path) -> tuple[bool, str]:
    """Attempt to write a small file to detect permission issues."""

    try:
        path.mkdir(parents=True, exist_ok=True)
        probe = path / ".doctor_probe"
        probe.write_text("ok\n", encoding="utf-8")
        probe.unlink()
        return True, str(path)
    except OSError as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()

    table = Table(title="RolaPet Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("ID length", "OK", str(settings.id_length))

    status, detail = _check_seed(settings.seed_path)
    table.add_row("Seed file", status, detail)

    ok_export, detail_export = _check_export_dir(settings.export_dir)
    table.add_row("Export dir", "OK" if ok_export else "FAIL", detail_export)

    _console.print(table)

    if status == "FAIL":
        _console.print(
            "\n[yellow]Note:[/yellow] fix or unset ROLAPET_SEED_PATH; `rolapet shell` refuses to start with an invalid seed."
        )


@app.command(name="setup")
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = AppSettings()

    seed_path = typer.prompt(
        "Seed JSON path (empty for none)",
        default=str(settings.seed_path or ""),
        show_default=True,
    ).strip()
    export_dir = typer.prompt("Export directory", default=str(settings.export_dir), show_default=True).strip()
    log_level = typer.prompt("Log level", default=settings.log_level, show_default=True).strip().upper()

    if seed_path and not Path(seed_path).is_file():
        raise typer.BadParameter(f"seed file not found: {seed_path}")
    if not export_dir:
        raise typer.BadParameter("export directory is required")

    env_path = write_user_env_vars(
        {
            "ROLAPET_SEED_PATH": seed_path or None,
            "ROLAPET_EXPORT_DIR": export_dir,
            "ROLAPET_LOG_LEVEL": log_level or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
