import os
from pathlib import Path

import pytest
from loguru import logger

from python_launcher import ExactVersion

POSIX_ONLY = pytest.mark.skipif(os.name != "posix", reason="POSIX-only")


class FakeFinder:
    """In-memory interpreter finder that records the requests it receives."""

    def __init__(self, executables=None):
        self.executables = {
            ExactVersion(*version): Path(path)
            for version, path in (executables or {}).items()
        }
        self.requests = []

    def enumerate(self):
        return dict(self.executables)

    def search(self, requested_version):
        self.requests.append(requested_version)
        matches = [v for v in self.executables if requested_version.matches(v)]
        if not matches:
            return None
        return self.executables[max(matches)]


@pytest.fixture
def finder():
    return FakeFinder({
        (2, 7): "/usr/bin/python2.7",
        (3, 6): "/usr/bin/python3.6",
        (3, 7): "/usr/local/bin/python3.7",
    })


@pytest.fixture
def empty_cwd(tmp_path):
    """A working directory with no `.venv` in it or (presumably) its parents."""
    work = tmp_path / "work"
    work.mkdir()
    return lambda: str(work)


def make_executable(path: Path, content: str = "#!/bin/sh\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    path.chmod(0o755)
    return path


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by a test (they may point at captured streams)."""
    yield
    logger.remove()
