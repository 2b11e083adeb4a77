"""Modelos del dominio (Pydantic v2).

Nota:
- Estos modelos describen *qué* produce cada verificación previa, no *cómo*
  se obtiene (HTTP, subprocesos, disco).
- `ScaffoldOutcome` es el resultado etiquetado que sube hasta la CLI; solo la
  CLI traduce un resultado a código de salida.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class ProjectRequest(BaseModel):
    """Petición de scaffolding: se crea una vez por invocación y no cambia."""

    model_config = ConfigDict(frozen=True)

    requested_name: str = Field(
        ...,
        description="Nombre/ruta tal como lo escribió el usuario.",
    )
    working_directory: Path = Field(
        ...,
        description="Directorio de trabajo en el momento de la invocación.",
    )

    @classmethod
    def from_input(cls, name: str, cwd: Path | None = None) -> "ProjectRequest":
        return cls(requested_name=name, working_directory=cwd or Path.cwd())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def resolved_path(self) -> Path:
        """Ruta absoluta normalizada (sin seguir symlinks)."""

        joined = os.path.join(str(self.working_directory), self.requested_name)
        return Path(os.path.abspath(joined))

    @computed_field  # type: ignore[prop-decorator]
    @property
    def app_name(self) -> str:
        return self.resolved_path.name


class ValidationVerdict(BaseModel):
    """Veredicto del validador de nombres."""

    is_valid: bool = Field(..., description="True si el nombre puede usarse.")
    errors: list[str] = Field(
        default_factory=list,
        description="Errores en el orden en que se detectaron.",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Avisos léxicos (también bloquean paquetes nuevos).",
    )
    reserved_collision: bool = Field(
        default=False,
        description="El nombre coincide con una dependencia propia de la herramienta.",
    )


class ConflictEntry(BaseModel):
    name: str = Field(..., min_length=1)
    is_directory: bool = False


class ConflictReport(BaseModel):
    """Resultado de inspeccionar el directorio destino.

    Refleja el listado en el momento de la comprobación; no hay bloqueo, así
    que deja de ser fiable en cuanto alguien más toca el directorio.
    """

    root: Path
    conflicts: list[ConflictEntry] = Field(
        default_factory=list,
        description="Entradas que no están en ninguna allow-list.",
    )
    stale_logs: list[str] = Field(
        default_factory=list,
        description="Logs de instalaciones fallidas previas (se borran si no hay conflictos).",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


class VersionStatus(str, Enum):
    CURRENT = "current"
    STALE = "stale"
    UNKNOWN = "unknown"


class VersionCheckResult(BaseModel):
    status: VersionStatus
    latest_version: str | None = Field(
        default=None,
        description="Versión candidata publicada (None si no se pudo determinar).",
    )


class GateDecision(BaseModel):
    """Decisión del gate de versión: Unknown se trata como Current."""

    proceed: bool
    advisory_message: str | None = None
    result: VersionCheckResult


class ManifestRecord(BaseModel):
    """Contenido inicial de `package.json`; el orden de campos es el de salida."""

    name: str = Field(..., min_length=1)
    version: str = "0.1.0"
    private: bool = True


class OutcomeKind(str, Enum):
    CREATED = "created"
    STALE_ABORT = "stale_abort"
    INVALID_NAME = "invalid_name"
    DIRECTORY_CONFLICT = "directory_conflict"
    NOT_A_DIRECTORY = "not_a_directory"

    @property
    def exit_code(self) -> int:
        """Código de salida del proceso para este resultado."""

        if self in (OutcomeKind.CREATED, OutcomeKind.STALE_ABORT):
            return 0
        return 1


class ScaffoldOutcome(BaseModel):
    """Resultado etiquetado de una invocación completa."""

    kind: OutcomeKind
    request: ProjectRequest
    verdict: ValidationVerdict | None = None
    report: ConflictReport | None = None
    decision: GateDecision | None = None
    manifest_path: Path | None = None
    project_root: Path | None = Field(
        default=None,
        description="Raíz del proyecto creado; los pasos posteriores la reciben explícitamente.",
    )
    scripts_version: str | None = None
    legacy_runtime: bool = False
    removed_logs: list[Path] = Field(default_factory=list)

    @property
    def exit_code(self) -> int:
        return self.kind.exit_code
