"""Locating the interpreter of an active or nearby virtual environment."""

import os
from pathlib import Path
from typing import Callable, Mapping, Optional

from loguru import logger

DEFAULT_VENV_DIR = ".venv"
VIRTUAL_ENV_VAR = "VIRTUAL_ENV"


def relative_venv_path(add_default: bool = False, windows: Optional[bool] = None) -> Path:
    """Path of the interpreter relative to a venv root (or to its parent directory).

    Args:
        add_default: Prefix the path with `DEFAULT_VENV_DIR`
        windows: Use the Windows layout; defaults to the host's
    """
    if windows is None:
        windows = os.name == "nt"
    path = Path(DEFAULT_VENV_DIR) if add_default else Path()
    if windows:
        return path / "Scripts" / "python.exe"
    return path / "bin" / "python"


def venv_executable_path(venv_root: str) -> Path:
    """Interpreter path inside the venv rooted at ``venv_root``."""
    return Path(venv_root) / relative_venv_path()


def activated_venv(environ: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Interpreter of the venv named by ``VIRTUAL_ENV``.

    The path is not checked for existence.
    """
    if environ is None:
        environ = os.environ
    logger.info("Checking for {} environment variable", VIRTUAL_ENV_VAR)
    venv_root = environ.get(VIRTUAL_ENV_VAR)
    if not venv_root:
        return None
    logger.debug("{} set to {!r}", VIRTUAL_ENV_VAR, venv_root)
    return venv_executable_path(venv_root)


def venv_path_search(getcwd: Callable[[], str] = os.getcwd) -> Optional[Path]:
    """Search the working directory and its ancestors for a ``.venv`` interpreter.

    An inaccessible working directory means no result rather than an error.
    """
    try:
        cwd = Path(getcwd())
    except OSError:
        logger.warning("current working directory is invalid")
        return None

    logger.info("Searching for a venv in {} and parent directories", cwd)
    for directory in (cwd, *cwd.parents):
        venv_path = directory / relative_venv_path(add_default=True)
        logger.info("Checking {}", venv_path)
        if os.path.isfile(venv_path):
            return venv_path
    return None


def venv_executable(
    environ: Optional[Mapping[str, str]] = None,
    getcwd: Callable[[], str] = os.getcwd,
) -> Optional[Path]:
    """The activated venv's interpreter, else the nearest ``.venv`` one."""
    return activated_venv(environ) or venv_path_search(getcwd)
