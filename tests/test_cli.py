import os
from pathlib import Path

import pytest
from conftest import POSIX_ONLY, make_executable

from python_launcher import cli
from python_launcher.exceptions import EX_DATAERR, EX_UNAVAILABLE, EX_USAGE


class ExecCalled(BaseException):
    pass


@pytest.fixture
def launcher_env(tmp_path, monkeypatch):
    """An isolated PATH, working directory and environment for the launcher."""
    bin_dir = tmp_path / "bin"
    make_executable(bin_dir / "python3.6")
    make_executable(bin_dir / "python3.8")
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv("PATH", str(bin_dir))
    for name in ("VIRTUAL_ENV", "PY_PYTHON", "PY_PYTHON3", "PYLAUNCH_DEBUG"):
        monkeypatch.delenv(name, raising=False)

    calls = []

    def fake_execv(path, argv):
        calls.append((Path(path), list(argv)))
        raise ExecCalled()

    monkeypatch.setattr(os, "execv", fake_execv)
    return bin_dir, calls


@POSIX_ONLY
class TestMain:
    def test_execute(self, launcher_env):
        bin_dir, calls = launcher_env
        with pytest.raises(ExecCalled):
            cli.main(["py", "-c", "print('hi')"])
        python = bin_dir / "python3.8"
        assert calls == [(python, [str(python), "-c", "print('hi')"])]

    def test_execute_with_version(self, launcher_env):
        bin_dir, calls = launcher_env
        with pytest.raises(ExecCalled):
            cli.main(["py", "-3.6", "--", "x"])
        python = bin_dir / "python3.6"
        assert calls == [(python, [str(python), "--", "x"])]

    def test_list(self, launcher_env, capsys):
        bin_dir, calls = launcher_env
        cli.main(["py", "--list"])
        out = capsys.readouterr().out
        assert out.index("3.8") < out.index("3.6")
        assert str(bin_dir / "python3.6") in out
        assert calls == []

    def test_help(self, launcher_env, capsys):
        bin_dir, calls = launcher_env
        with pytest.raises(ExecCalled):
            cli.main(["py", "--help"])
        python = bin_dir / "python3.8"
        assert str(python) in capsys.readouterr().out
        assert calls == [(python, [str(python), "-h"])]

    @pytest.mark.parametrize("argv, code", [
        (["py", "--list", "-h"], EX_USAGE),
        (["py", "-4"], EX_UNAVAILABLE),
    ])
    def test_errors(self, launcher_env, capsys, argv, code):
        with pytest.raises(SystemExit) as excinfo:
            cli.main(argv)
        assert excinfo.value.code == code
        assert capsys.readouterr().err.startswith("Error: ")

    def test_malformed_override(self, launcher_env, monkeypatch, capsys):
        monkeypatch.setenv("PY_PYTHON", "3.8.1")
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["py"])
        assert excinfo.value.code == EX_DATAERR
        assert "3.8.1" in capsys.readouterr().err

    def test_exec_failure(self, launcher_env, monkeypatch, capsys):
        def failing_execv(path, argv):
            raise PermissionError(13, "Permission denied")

        monkeypatch.setattr(os, "execv", failing_execv)
        with pytest.raises(SystemExit) as excinfo:
            cli.main(["py"])
        assert excinfo.value.code == 71
        assert "Permission denied" in capsys.readouterr().err

    def test_debug_logging(self, launcher_env, monkeypatch, capsys):
        monkeypatch.setenv("PYLAUNCH_DEBUG", "1")
        cli.main(["py", "--list"])
        assert "Scanning" in capsys.readouterr().err
