"""Environment info for bug reports (`--info`)."""

from __future__ import annotations

import json
import platform
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Any

from rich.console import Console

from appseed import __version__
from appseed.core.config import AppSettings

BINARIES: dict[str, str] = {"Node": "node", "npm": "npm", "Yarn": "yarn"}
NPM_PACKAGES: tuple[str, ...] = ("react", "react-dom", "react-scripts")
BROWSERS: dict[str, tuple[str, ...]] = {
    "Chrome": ("google-chrome", "google-chrome-stable", "chrome"),
    "Chromium": ("chromium", "chromium-browser"),
    "Edge": ("microsoft-edge", "msedge"),
    "Firefox": ("firefox",),
}

_NOT_FOUND = "Not Found"


def _run_version_command(args: list[str], timeout: float) -> str | None:
    try:
        completed = subprocess.run(args, capture_output=True, text=True, timeout=timeout, check=False)
    except (OSError, subprocess.TimeoutExpired):
        return None
    if completed.returncode != 0:
        return None
    return completed.stdout.strip() or None


def _binary_info(name: str) -> dict[str, str]:
    path = shutil.which(name)
    if path is None:
        return {"version": _NOT_FOUND}
    output = _run_version_command([path, "--version"], timeout=10)
    version = output.lstrip("v") if output else _NOT_FOUND
    return {"version": version, "path": path}


def _browser_version(executables: tuple[str, ...]) -> str:
    for executable in executables:
        path = shutil.which(executable)
        if path is None:
            continue
        output = _run_version_command([path, "--version"], timeout=10)
        if output:
            # "Mozilla Firefox 128.0" / "Google Chrome 126.0.6478.126"
            return output.split()[-1]
    return _NOT_FOUND


def _global_package_version(package: str, timeout: float) -> str:
    """Version of `package` installed globally with npm (`npm ls -g`)."""

    npm = shutil.which("npm")
    if npm is None:
        return _NOT_FOUND
    output = _run_version_command([npm, "ls", "-g", "--depth=0", "--json", package], timeout=timeout)
    if output is None:
        return _NOT_FOUND
    try:
        data = json.loads(output)
    except ValueError:
        return _NOT_FOUND
    deps = data.get("dependencies") if isinstance(data, dict) else None
    entry = deps.get(package) if isinstance(deps, dict) else None
    version = entry.get("version") if isinstance(entry, dict) else None
    return version if isinstance(version, str) else _NOT_FOUND


def _local_package_version(project_dir: Path, package: str) -> str:
    manifest = project_dir / "node_modules" / package / "package.json"
    try:
        data = json.loads(manifest.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return _NOT_FOUND
    version = data.get("version") if isinstance(data, dict) else None
    return version if isinstance(version, str) else _NOT_FOUND


def collect_environment_info(project_dir: Path | None = None) -> dict[str, Any]:
    """Gather the system, binary and package versions relevant to bug reports."""

    project_dir = project_dir or Path.cwd()
    settings = AppSettings()
    return {
        "System": {
            "OS": f"{platform.system()} {platform.release()}",
            "CPU": f"({platform.machine()}) {platform.processor() or 'unknown'}",
        },
        "Binaries": {
            "Python": {"version": platform.python_version(), "path": sys.executable or _NOT_FOUND},
            **{label: _binary_info(name) for label, name in BINARIES.items()},
        },
        "Browsers": {label: _browser_version(executables) for label, executables in BROWSERS.items()},
        "npmPackages": {pkg: _local_package_version(project_dir, pkg) for pkg in NPM_PACKAGES},
        "npmGlobalPackages": {
            settings.package_name: _global_package_version(settings.package_name, settings.http_timeout_seconds),
        },
        "registry": {"url": settings.registry_url, "package": settings.package_name},
    }


def print_environment_info(console: Console, project_dir: Path | None = None) -> None:
    console.print("\n[bold]Environment Info:[/bold]")
    console.print(f"\n  current version of appseed: {__version__}", highlight=False)
    console.print(f"  running from {Path(__file__).resolve().parent.parent}", highlight=False)
    console.print_json(data=collect_environment_info(project_dir))
