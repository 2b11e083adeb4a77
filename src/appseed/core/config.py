"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que adaptadores (registro HTTP, npm) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio por usuario donde vive el `.env` global de appseed.

    Permite fijar `APPSEED_REGISTRY_URL` (mirror privado) o
    `APPSEED_NPM_COMMAND` una sola vez para todos los proyectos.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "appseed"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "appseed"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "appseed"
    return Path.home() / ".config" / "appseed"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Todas las claves aceptan override con el prefijo `APPSEED_`
    (p.ej. `APPSEED_REGISTRY_URL`).
    """

    model_config = SettingsConfigDict(
        env_prefix="APPSEED_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    registry_url: str = Field(
        default="https://registry.npmjs.org",
        min_length=8,
        description="Base URL del registro que publica los dist-tags de la herramienta.",
    )
    package_name: str = Field(
        default="appseed",
        min_length=1,
        description="Nombre publicado de la herramienta en el registro.",
    )
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout de la consulta de versión (HTTP y fallback npm), en segundos.",
    )
    user_agent: str = Field(
        default="appseed/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para la consulta al registro.",
    )
    npm_command: str = Field(
        default="npm",
        min_length=1,
        description="Ejecutable usado para el fallback `npm view <name> version`.",
    )
    release_notes_url: str = Field(
        default="https://create-react-app.dev/docs/getting-started/",
        min_length=8,
        description="URL con las instrucciones de la última versión (aviso de versión antigua).",
    )

    min_runtime_version: str = Field(
        default="3.10",
        min_length=1,
        description="Versión mínima de Python soportada sin recurrir a tooling legacy.",
    )
    default_scripts_version: str = Field(
        default="react-scripts",
        min_length=1,
        description="Identificador de la plantilla de scripts por defecto.",
    )
    legacy_scripts_version: str = Field(
        default="react-scripts@0.9.x",
        min_length=1,
        description="Plantilla de scripts para runtimes antiguos.",
    )
