"""Contratos de fuentes de versión.

Cada estrategia responde "cuál es la última versión publicada" o `None`
cuando no puede saberlo. El gate recorre las fuentes en orden y se queda con
la primera respuesta.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class VersionSource(Protocol):
    """Contrato mínimo para una fuente de versión.

    Reglas de diseño:
    - `fetch_latest` es asíncrono porque hace I/O (HTTP o subproceso).
    - Nunca lanza por fallos transitorios: devuelve `None`.
    """

    description: str
    shows_progress: bool

    async def fetch_latest(self) -> str | None:
        """Devuelve la versión publicada (ya recortada) o `None`."""

        ...
