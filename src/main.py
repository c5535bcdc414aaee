"""Entrada de desarrollo: `python src/main.py ...` o `python -m main` desde `src/`.

Instalado el paquete, el script `rolapet` apunta a `cli.main:run`.
"""

from __future__ import annotations

import sys

# Las tildes y los símbolos ✔/✘ de la sesión fallan en consolas cp1252.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run

if __name__ == "__main__":
    run()
