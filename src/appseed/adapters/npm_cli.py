"""Fuente de versión: `npm view <name> version`.

Fallback local cuando el registro no responde por HTTP: el gestor de paquetes
consulta el mismo registro por su cuenta (proxies, auth y mirrors del usuario
incluidos).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Sequence

from appseed.core.config import AppSettings
from appseed.core.interfaces.version_source import VersionSource

logger = logging.getLogger(__name__)


class NpmViewSource(VersionSource):
    """Ejecuta el comando de consulta y devuelve su stdout recortado."""

    description = "Querying npm"
    shows_progress = False

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        command: Sequence[str] | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._command = tuple(command) if command else (
            self._settings.npm_command,
            "view",
            self._settings.package_name,
            "version",
        )

    @property
    def command(self) -> tuple[str, ...]:
        return self._command

    async def fetch_latest(self) -> str | None:
        try:
            process = await asyncio.create_subprocess_exec(
                *self._command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            logger.debug("could not start %s: %s", self._command[0], exc)
            return None

        try:
            stdout, stderr = await asyncio.wait_for(
                process.communicate(),
                timeout=self._settings.http_timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.debug("%s timed out, killing it", " ".join(self._command))
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()
            return None

        if process.returncode != 0:
            logger.debug(
                "%s exited with %s: %s",
                " ".join(self._command),
                process.returncode,
                stderr.decode("utf-8", errors="replace").strip(),
            )
            return None

        version = stdout.decode("utf-8", errors="replace").strip()
        return version or None
