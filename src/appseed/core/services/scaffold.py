"""Scaffold orchestration.

Runs the pre-flight checks in order (name, directory, self-version) and only
then touches the filesystem. Every path out of `run` is a `ScaffoldOutcome`;
the CLI owns printing and exit codes, which keeps this module free of
`sys.exit` and of global working-directory changes.

Known gap: the directory listing used for conflict detection and the later
write are not locked against each other. If something else modifies the
target in between, the change goes unnoticed.
"""

from __future__ import annotations

import logging
import sys

from packaging.version import Version

from appseed import __version__
from appseed.adapters.manifest_writer import write_manifest
from appseed.core.config import AppSettings
from appseed.core.domain.models import (
    ConflictReport,
    ManifestRecord,
    OutcomeKind,
    ProjectRequest,
    ScaffoldOutcome,
)
from appseed.core.services.directory_safety import DirectorySafetyChecker
from appseed.core.services.name_validator import NameValidator
from appseed.core.services.version_gate import VersionGate

logger = logging.getLogger(__name__)


def is_legacy_runtime(runtime: tuple[int, ...], minimum: str) -> bool:
    current = Version(".".join(str(part) for part in runtime))
    return current < Version(minimum)


class ScaffoldInitializer:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        validator: NameValidator | None = None,
        checker: DirectorySafetyChecker | None = None,
        gate: VersionGate | None = None,
        current_version: str = __version__,
        runtime_version: tuple[int, ...] | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._validator = validator or NameValidator()
        self._checker = checker or DirectorySafetyChecker()
        self._gate = gate or VersionGate(self._settings)
        self._current_version = current_version
        self._runtime_version = runtime_version or tuple(sys.version_info[:3])

    async def run(self, request: ProjectRequest) -> ScaffoldOutcome:
        verdict = self._validator.validate(request.app_name)
        if not verdict.is_valid:
            return ScaffoldOutcome(kind=OutcomeKind.INVALID_NAME, request=request, verdict=verdict)

        root = request.resolved_path
        if root.exists() and not root.is_dir():
            return ScaffoldOutcome(kind=OutcomeKind.NOT_A_DIRECTORY, request=request, verdict=verdict)

        if root.exists():
            report = self._checker.check_safe(root, cleanup=False)
        else:
            # A directory that does not exist yet is empty.
            report = ConflictReport(root=root)
        if report.has_conflicts:
            return ScaffoldOutcome(
                kind=OutcomeKind.DIRECTORY_CONFLICT,
                request=request,
                verdict=verdict,
                report=report,
            )

        decision = await self._gate.should_proceed(self._current_version)
        if not decision.proceed:
            return ScaffoldOutcome(
                kind=OutcomeKind.STALE_ABORT,
                request=request,
                verdict=verdict,
                report=report,
                decision=decision,
            )

        legacy = is_legacy_runtime(self._runtime_version, self._settings.min_runtime_version)
        scripts_version = (
            self._settings.legacy_scripts_version if legacy else self._settings.default_scripts_version
        )
        if legacy:
            logger.debug(
                "runtime %s is below %s, selecting %s",
                self._runtime_version,
                self._settings.min_runtime_version,
                scripts_version,
            )

        root.mkdir(parents=True, exist_ok=True)
        removed = self._checker.remove_stale_logs(report)
        manifest_path = write_manifest(record=ManifestRecord(name=request.app_name), root=root)
        logger.debug("wrote %s", manifest_path)

        return ScaffoldOutcome(
            kind=OutcomeKind.CREATED,
            request=request,
            verdict=verdict,
            report=report,
            decision=decision,
            manifest_path=manifest_path,
            project_root=root,
            scripts_version=scripts_version,
            legacy_runtime=legacy,
            removed_logs=removed,
        )
