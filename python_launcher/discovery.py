"""Discovery of interpreters installed on ``PATH``.

Interpreters are recognized by their ``pythonMAJOR.MINOR`` file name. When the
same version appears in more than one ``PATH`` directory, the earliest one wins,
matching what the shell would run.
"""

import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Protocol

from loguru import logger

from .version import ExactVersion, RequestedVersion


class InterpreterFinder(Protocol):
    """Source of installed interpreters consumed by the resolution code."""

    def search(self, requested_version: RequestedVersion) -> Optional[Path]:
        ...

    def enumerate(self) -> Dict[ExactVersion, Path]:
        ...


def split_search_path(search_path: Optional[str] = None) -> List[Path]:
    """Directories of a ``PATH``-style string, skipping empty entries."""
    if search_path is None:
        search_path = os.environ.get("PATH", "")
    return [Path(entry) for entry in search_path.split(os.pathsep) if entry]


def _interpreters_in(directory: Path) -> Dict[ExactVersion, Path]:
    found = {}
    try:
        entries = sorted(directory.iterdir())
    except OSError:
        logger.debug("Skipping unreadable directory {}", directory)
        return found

    for entry in entries:
        version = ExactVersion.from_path(entry)
        if version is None or version in found:
            continue
        if os.path.isfile(entry) and os.access(entry, os.X_OK):
            found[version] = entry
    return found


class PathFinder:
    """Interpreter finder backed by the directories on ``PATH``.

    Args:
        directories: Directories to scan, in priority order. Defaults to the
            entries of the ``PATH`` environment variable.
    """

    def __init__(self, directories: Optional[Iterable[Path]] = None):
        if directories is None:
            directories = split_search_path()
        self.directories = [Path(directory) for directory in directories]

    def enumerate(self) -> Dict[ExactVersion, Path]:
        """Every interpreter found, keyed by version."""
        executables: Dict[ExactVersion, Path] = {}
        for directory in self.directories:
            logger.debug("Scanning {} for interpreters", directory)
            for version, path in _interpreters_in(directory).items():
                executables.setdefault(version, path)
        return executables

    def search(self, requested_version: RequestedVersion) -> Optional[Path]:
        """Best interpreter for the request.

        The newest matching version is chosen, so `MajorOnly` picks the
        highest minor release of that major version.
        """
        logger.info("Searching PATH for {}", requested_version)
        candidates = [
            (version, path)
            for version, path in self.enumerate().items()
            if requested_version.matches(version)
        ]
        if not candidates:
            return None
        version, path = max(candidates, key=lambda candidate: candidate[0])
        logger.debug("Selected {} at {}", version, path)
        return path
