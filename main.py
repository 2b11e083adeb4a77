"""Ejecuta `appseed` desde un checkout, sin `pip install -e .`.

Uso:
- `python -m main my-app` crea `./my-app/package.json` tras las validaciones
- `python -m main --info` muestra el entorno para reportar bugs

Antepone `src/` al `sys.path` porque el paquete sigue el layout tipo "src".
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from appseed.cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
