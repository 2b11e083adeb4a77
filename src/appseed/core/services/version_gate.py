"""Self-version gating.

The gate asks an ordered chain of version sources for the latest published
release of the tool and stops at the first answer. A newer release blocks
scaffolding with an advisory; not being able to find out never blocks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

import semver

from appseed.adapters.npm_cli import NpmViewSource
from appseed.adapters.registry_client import RegistryDistTagsSource
from appseed.core.config import AppSettings
from appseed.core.domain.models import GateDecision, VersionCheckResult, VersionStatus
from appseed.core.interfaces.version_source import VersionSource

logger = logging.getLogger(__name__)


@dataclass
class ProgressHooks:
    """Optional callbacks for UI layers (spinners)."""

    start: Callable[[str], None] | None = None
    finish: Callable[[str, bool], None] | None = None


def default_sources(settings: AppSettings) -> list[VersionSource]:
    return [RegistryDistTagsSource(settings), NpmViewSource(settings)]


def compare_versions(current: str, candidate: str | None) -> VersionCheckResult:
    """Classify `current` against `candidate` using semantic-version ordering.

    Prereleases sort before their release and build metadata is ignored, so
    `1.0.0-1` and `1.0.0+build.5` never count as newer than `1.0.0`.
    """

    if candidate is None:
        return VersionCheckResult(status=VersionStatus.UNKNOWN)
    try:
        newer = semver.Version.parse(candidate) > semver.Version.parse(current)
    except (ValueError, TypeError):
        logger.debug("cannot compare versions %r and %r", current, candidate)
        return VersionCheckResult(status=VersionStatus.UNKNOWN, latest_version=candidate)
    status = VersionStatus.STALE if newer else VersionStatus.CURRENT
    return VersionCheckResult(status=status, latest_version=candidate)


def build_advisory(*, package_name: str, current: str, latest: str, release_notes_url: str) -> str:
    return (
        f"You are running `{package_name}` {current}, which is behind the latest release ({latest}).\n\n"
        f"We recommend always using the latest version of {package_name} if possible.\n\n"
        f"The latest instructions for creating a new app can be found here:\n{release_notes_url}"
    )


class VersionGate:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        sources: Sequence[VersionSource] | None = None,
        hooks: ProgressHooks | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._sources = list(sources) if sources is not None else default_sources(self._settings)
        self._hooks = hooks or ProgressHooks()

    async def latest_version(self) -> str | None:
        for source in self._sources:
            if source.shows_progress and self._hooks.start:
                self._hooks.start(source.description)

            answer: str | None = None
            try:
                answer = await source.fetch_latest()
            finally:
                # Resolve the spinner even when a source raises.
                if source.shows_progress and self._hooks.finish:
                    self._hooks.finish(source.description, answer is not None)
            if answer is not None:
                logger.debug("%s answered %s", type(source).__name__, answer)
                return answer
            logger.debug("%s had no answer, trying next source", type(source).__name__)
        return None

    async def check(self, current_version: str) -> VersionCheckResult:
        return compare_versions(current_version, await self.latest_version())

    async def should_proceed(self, current_version: str) -> GateDecision:
        result = await self.check(current_version)
        if result.status is VersionStatus.STALE and result.latest_version is not None:
            return GateDecision(
                proceed=False,
                advisory_message=build_advisory(
                    package_name=self._settings.package_name,
                    current=current_version,
                    latest=result.latest_version,
                    release_notes_url=self._settings.release_notes_url,
                ),
                result=result,
            )
        return GateDecision(proceed=True, result=result)
