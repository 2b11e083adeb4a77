from pathlib import Path

import pytest

from appseed.core.services.directory_safety import DirectorySafetyChecker, is_error_log


@pytest.mark.unit
class TestCheckSafe:

    def test_empty_directory_has_no_conflicts(self, tmp_path):
        report = DirectorySafetyChecker().check_safe(tmp_path)
        assert not report.has_conflicts
        assert report.conflicts == []
        assert report.stale_logs == []

    def test_allow_listed_entries_and_stale_log(self, tmp_path):
        (tmp_path / ".git").mkdir()
        (tmp_path / "README.md").write_text("# hi\n")
        (tmp_path / "npm-debug.log.12345").write_text("boom\n")

        report = DirectorySafetyChecker().check_safe(tmp_path)

        assert not report.has_conflicts
        assert report.stale_logs == ["npm-debug.log.12345"]
        assert not (tmp_path / "npm-debug.log.12345").exists()
        assert (tmp_path / "README.md").exists()
        assert (tmp_path / ".git").is_dir()

    def test_editor_project_files_are_allowed(self, tmp_path):
        (tmp_path / "my-app.iml").write_text("")
        (tmp_path / ".idea").mkdir()
        assert not DirectorySafetyChecker().check_safe(tmp_path).has_conflicts

    def test_single_disallowed_file(self, tmp_path):
        (tmp_path / "notes.txt").write_text("todo\n")
        (tmp_path / "yarn-error.log").write_text("boom\n")

        report = DirectorySafetyChecker().check_safe(tmp_path)

        assert report.has_conflicts
        assert [(c.name, c.is_directory) for c in report.conflicts] == [("notes.txt", False)]
        assert (tmp_path / "notes.txt").exists()
        assert (tmp_path / "yarn-error.log").exists()

    def test_directories_are_flagged_as_directories(self, tmp_path):
        (tmp_path / "src").mkdir()
        (tmp_path / "package.json").write_text("{}")

        report = DirectorySafetyChecker().check_safe(tmp_path)

        assert [(c.name, c.is_directory) for c in report.conflicts] == [
            ("package.json", False),
            ("src", True),
        ]

    def test_cleanup_can_be_deferred(self, tmp_path):
        (tmp_path / "yarn-debug.log.1").write_text("")

        checker = DirectorySafetyChecker()
        report = checker.check_safe(tmp_path, cleanup=False)

        assert (tmp_path / "yarn-debug.log.1").exists()
        assert checker.remove_stale_logs(report) == [tmp_path / "yarn-debug.log.1"]
        assert not (tmp_path / "yarn-debug.log.1").exists()


@pytest.mark.unit
class TestRemoveStaleLogs:

    def test_one_failure_does_not_stop_the_others(self, tmp_path, monkeypatch):
        for name in ("npm-debug.log.1", "npm-debug.log.2", "yarn-error.log"):
            (tmp_path / name).write_text("")

        original_unlink = Path.unlink

        def flaky_unlink(self, *args, **kwargs):
            if self.name == "npm-debug.log.1":
                raise PermissionError("locked")
            return original_unlink(self, *args, **kwargs)

        monkeypatch.setattr(Path, "unlink", flaky_unlink)

        report = DirectorySafetyChecker().check_safe(tmp_path)

        assert not report.has_conflicts
        assert (tmp_path / "npm-debug.log.1").exists()
        assert not (tmp_path / "npm-debug.log.2").exists()
        assert not (tmp_path / "yarn-error.log").exists()

    def test_nothing_is_removed_when_there_are_conflicts(self, tmp_path):
        (tmp_path / "notes.txt").write_text("")
        (tmp_path / "npm-debug.log").write_text("")

        checker = DirectorySafetyChecker()
        report = checker.check_safe(tmp_path, cleanup=False)

        assert checker.remove_stale_logs(report) == []
        assert (tmp_path / "npm-debug.log").exists()


@pytest.mark.unit
@pytest.mark.parametrize(
    "name, expected",
    [
        ("npm-debug.log", True),
        ("npm-debug.log.42", True),
        ("yarn-error.log", True),
        ("yarn-debug.log.7", True),
        ("debug.log", False),
        ("my-npm-debug.log", False),
    ],
)
def test_is_error_log(name, expected):
    assert is_error_log(name) is expected
