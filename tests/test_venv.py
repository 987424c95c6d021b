from pathlib import Path

from conftest import POSIX_ONLY, make_executable

from python_launcher import DEFAULT_VENV_DIR
from python_launcher.venv import (
    activated_venv,
    relative_venv_path,
    venv_executable,
    venv_executable_path,
    venv_path_search,
)


class TestRelativeVenvPath:
    def test_posix_layout(self):
        assert relative_venv_path(windows=False) == Path("bin", "python")
        assert relative_venv_path(add_default=True, windows=False) == Path(".venv", "bin", "python")

    def test_windows_layout(self):
        assert relative_venv_path(windows=True) == Path("Scripts", "python.exe")

    def test_default_dir(self):
        assert DEFAULT_VENV_DIR == ".venv"


class TestActivatedVenv:
    @POSIX_ONLY
    def test_venv_executable_path(self):
        assert venv_executable_path("/path/to/venv") == Path("/path/to/venv/bin/python")

    def test_from_environment(self):
        """The path is derived from VIRTUAL_ENV without checking it exists."""
        path = activated_venv({"VIRTUAL_ENV": "/does/not/exist"})
        assert path == Path("/does/not/exist") / relative_venv_path()

    def test_unset_or_empty(self):
        assert activated_venv({}) is None
        assert activated_venv({"VIRTUAL_ENV": ""}) is None


class TestVenvPathSearch:
    def test_found_in_cwd(self, tmp_path):
        python = make_executable(tmp_path / relative_venv_path(add_default=True))
        assert venv_path_search(lambda: str(tmp_path)) == python

    def test_found_in_ancestor(self, tmp_path):
        python = make_executable(tmp_path / relative_venv_path(add_default=True))
        nested = tmp_path / "a" / "b" / "c"
        nested.mkdir(parents=True)
        assert venv_path_search(lambda: str(nested)) == python

    def test_nearest_wins(self, tmp_path):
        make_executable(tmp_path / relative_venv_path(add_default=True))
        nested = tmp_path / "project"
        python = make_executable(nested / relative_venv_path(add_default=True))
        assert venv_path_search(lambda: str(nested)) == python

    def test_directory_is_not_an_executable(self, tmp_path):
        (tmp_path / relative_venv_path(add_default=True)).mkdir(parents=True)
        assert venv_path_search(lambda: str(tmp_path)) is None

    def test_not_found(self, empty_cwd):
        assert venv_path_search(empty_cwd) is None

    def test_invalid_cwd_is_not_fatal(self):
        def broken_cwd():
            raise FileNotFoundError("cwd was deleted")

        assert venv_path_search(broken_cwd) is None


class TestVenvExecutable:
    def test_activated_wins_over_search(self, tmp_path):
        make_executable(tmp_path / relative_venv_path(add_default=True))
        path = venv_executable({"VIRTUAL_ENV": "/active"}, lambda: str(tmp_path))
        assert path == Path("/active") / relative_venv_path()

    def test_falls_back_to_search(self, tmp_path):
        python = make_executable(tmp_path / relative_venv_path(add_default=True))
        assert venv_executable({}, lambda: str(tmp_path)) == python

    def test_nothing(self, empty_cwd):
        assert venv_executable({}, empty_cwd) is None
