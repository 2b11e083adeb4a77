"""Target-directory safety checks.

A directory is safe to scaffold into when every entry is either a known
benign file (VCS/IDE metadata, docs, license) or a leftover installer log.
Leftover logs are never conflicts; they get removed once the directory is
known to be safe.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from appseed.core.domain.models import ConflictEntry, ConflictReport

logger = logging.getLogger(__name__)

VALID_FILES: frozenset[str] = frozenset(
    {
        ".DS_Store",
        ".git",
        ".gitattributes",
        ".gitignore",
        ".gitlab-ci.yml",
        ".hg",
        ".hgcheck",
        ".hgignore",
        ".idea",
        ".npmignore",
        ".travis.yml",
        "docs",
        "LICENSE",
        "README.md",
        "mkdocs.yml",
        "Thumbs.db",
    }
)

EDITOR_PROJECT_SUFFIXES: tuple[str, ...] = (".iml",)

ERROR_LOG_PREFIXES: tuple[str, ...] = (
    "npm-debug.log",
    "yarn-error.log",
    "yarn-debug.log",
)


def is_error_log(name: str) -> bool:
    return name.startswith(ERROR_LOG_PREFIXES)


def _is_allowed(name: str) -> bool:
    return name in VALID_FILES or name.endswith(EDITOR_PROJECT_SUFFIXES)


def _is_directory(path: Path) -> bool:
    try:
        return path.is_dir() and not path.is_symlink()
    except OSError:
        return False


class DirectorySafetyChecker:
    """Inspects the immediate entries of a directory against the allow-lists."""

    def check_safe(self, root: Path, *, cleanup: bool = True) -> ConflictReport:
        """Classify every entry of `root`.

        `root` must exist and be listable. With `cleanup=True` the stale logs
        are deleted right away when there are no conflicts; callers that need
        to defer every mutation pass `cleanup=False` and call
        `remove_stale_logs` later.
        """

        conflicts: list[ConflictEntry] = []
        stale_logs: list[str] = []

        for name in sorted(os.listdir(root)):
            if is_error_log(name):
                stale_logs.append(name)
                continue
            if _is_allowed(name):
                continue
            conflicts.append(ConflictEntry(name=name, is_directory=_is_directory(root / name)))

        report = ConflictReport(root=root, conflicts=conflicts, stale_logs=stale_logs)
        logger.debug(
            "checked %s: %d conflict(s), %d stale log(s)",
            root,
            len(conflicts),
            len(stale_logs),
        )

        if cleanup and not report.has_conflicts:
            self.remove_stale_logs(report)
        return report

    def remove_stale_logs(self, report: ConflictReport) -> list[Path]:
        """Delete the stale logs recorded in `report`, one at a time.

        A failure on one file is logged and does not stop the others.
        """

        if report.has_conflicts:
            return []

        removed: list[Path] = []
        for name in report.stale_logs:
            path = report.root / name
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as exc:
                logger.warning("could not remove stale log %s: %s", path, exc)
                continue
            removed.append(path)
        return removed
