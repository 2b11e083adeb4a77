"""Fuente de versión: endpoint dist-tags del registro.

Consulta `GET {registry}/-/package/{name}/dist-tags` y devuelve el tag
`latest`. Cualquier fallo (red, timeout, status != 200, JSON inválido) se
traduce en `None` para que el gate pase a la siguiente fuente.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from appseed.adapters.http_client import build_async_client
from appseed.core.config import AppSettings
from appseed.core.interfaces.version_source import VersionSource

logger = logging.getLogger(__name__)


def dist_tags_url(registry_url: str, package_name: str) -> str:
    # Los nombres con scope (@scope/name) van codificados en una sola ruta.
    encoded = quote(package_name, safe="@")
    return f"{registry_url.rstrip('/')}/-/package/{encoded}/dist-tags"


class RegistryDistTagsSource(VersionSource):
    """Lee el tag `latest` publicado en el registro."""

    description = "Fetching dist-tags"
    shows_progress = True

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    @property
    def url(self) -> str:
        return dist_tags_url(self._settings.registry_url, self._settings.package_name)

    async def fetch_latest(self) -> str | None:
        url = self.url
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.debug("dist-tags request to %s failed: %s", url, exc)
            return None

        if response.status_code != 200:
            logger.debug("dist-tags request to %s returned HTTP %s", url, response.status_code)
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            logger.debug("dist-tags body from %s is not JSON: %s", url, exc)
            return None

        latest = payload.get("latest") if isinstance(payload, dict) else None
        if not isinstance(latest, str) or not latest.strip():
            logger.debug("dist-tags body from %s has no usable 'latest' tag", url)
            return None
        return latest.strip()
