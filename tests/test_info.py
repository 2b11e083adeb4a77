import json
import subprocess

import pytest

from appseed.cli import info
from appseed.core.config import AppSettings


@pytest.mark.unit
class TestCollectEnvironmentInfo:

    def test_reports_local_package_versions(self, tmp_path):
        pkg = tmp_path / "node_modules" / "react"
        pkg.mkdir(parents=True)
        (pkg / "package.json").write_text(json.dumps({"name": "react", "version": "18.2.0"}))

        data = info.collect_environment_info(tmp_path)

        assert data["npmPackages"]["react"] == "18.2.0"
        assert data["npmPackages"]["react-dom"] == "Not Found"

    def test_missing_binaries_are_not_found(self, tmp_path, monkeypatch):
        monkeypatch.setattr(info.shutil, "which", lambda name: None)

        data = info.collect_environment_info(tmp_path)

        assert data["Binaries"]["Node"] == {"version": "Not Found"}
        assert data["Binaries"]["npm"] == {"version": "Not Found"}
        assert data["Binaries"]["Yarn"] == {"version": "Not Found"}
        assert set(data["System"]) == {"OS", "CPU"}


def _fake_run(outputs):
    def run(args, **kwargs):
        key = "ls" if "ls" in args else args[0]
        returncode, stdout = outputs.get(key, (1, ""))
        return subprocess.CompletedProcess(args, returncode, stdout=stdout, stderr="")

    return run


@pytest.mark.unit
class TestGlobalPackagesAndBrowsers:

    def test_reports_global_install_of_the_tool(self, tmp_path, monkeypatch):
        package = AppSettings().package_name
        listing = json.dumps({"dependencies": {package: {"version": "0.3.0"}}})
        monkeypatch.setattr(info.shutil, "which", lambda name: "/usr/bin/npm" if name == "npm" else None)
        monkeypatch.setattr(info.subprocess, "run", _fake_run({"ls": (0, listing), "/usr/bin/npm": (0, "10.2.4\n")}))

        data = info.collect_environment_info(tmp_path)

        assert data["npmGlobalPackages"] == {package: "0.3.0"}
        assert data["Binaries"]["npm"] == {"version": "10.2.4", "path": "/usr/bin/npm"}

    def test_global_package_missing(self, tmp_path, monkeypatch):
        monkeypatch.setattr(info.shutil, "which", lambda name: "/usr/bin/npm" if name == "npm" else None)
        monkeypatch.setattr(info.subprocess, "run", _fake_run({"ls": (1, "{}")}))

        data = info.collect_environment_info(tmp_path)

        assert list(data["npmGlobalPackages"].values()) == ["Not Found"]

    def test_npm_timeout_is_not_found(self, tmp_path, monkeypatch):
        def slow(args, **kwargs):
            raise subprocess.TimeoutExpired(args, kwargs.get("timeout"))

        monkeypatch.setattr(info.shutil, "which", lambda name: "/usr/bin/npm" if name == "npm" else None)
        monkeypatch.setattr(info.subprocess, "run", slow)

        data = info.collect_environment_info(tmp_path)

        assert list(data["npmGlobalPackages"].values()) == ["Not Found"]

    def test_browser_versions(self, tmp_path, monkeypatch):
        monkeypatch.setattr(info.shutil, "which", lambda name: "/usr/bin/firefox" if name == "firefox" else None)
        monkeypatch.setattr(info.subprocess, "run", _fake_run({"/usr/bin/firefox": (0, "Mozilla Firefox 128.0\n")}))

        data = info.collect_environment_info(tmp_path)

        assert data["Browsers"]["Firefox"] == "128.0"
        assert data["Browsers"]["Chrome"] == "Not Found"
