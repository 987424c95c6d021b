"""python_launcher: pick and run the right Python interpreter.

This package provides the ``py`` command for Unix: it chooses an installed
interpreter from a version flag, an active virtual environment, a script's
shebang line or the ``PY_PYTHON`` environment variables, then executes it.

Example:
    >>> from python_launcher import find_executable
    >>> find_executable("3")
    PosixPath('/usr/bin/python3.12')

Main Components:
    - resolve_action: Decide between help, listing and execution for an argv
    - find_executable: Resolve a version label to an interpreter path
    - list_interpreters: Discover the interpreters installed on PATH
"""

__version__ = "1.0.0"

from .action import Execute, Help, List, help_message, list_executables
from .api import find_executable, list_interpreters, resolve_action
from .discovery import InterpreterFinder, PathFinder
from .exceptions import (
    BadVersionFormatError,
    ExecutionError,
    IllegalArgumentError,
    LauncherError,
    NoExecutableFoundError,
)
from .resolution import ExecutableResolver
from .shebang import parse_python_shebang
from .venv import DEFAULT_VENV_DIR, venv_executable
from .version import (
    ANY,
    AnyVersion,
    Exact,
    ExactVersion,
    MajorOnly,
    RequestedVersion,
    version_from_flag,
)

__all__ = [
    "resolve_action",
    "find_executable",
    "list_interpreters",
    "Help",
    "List",
    "Execute",
    "help_message",
    "list_executables",
    "InterpreterFinder",
    "PathFinder",
    "ExecutableResolver",
    "parse_python_shebang",
    "DEFAULT_VENV_DIR",
    "venv_executable",
    "ANY",
    "AnyVersion",
    "MajorOnly",
    "Exact",
    "ExactVersion",
    "RequestedVersion",
    "version_from_flag",
    "LauncherError",
    "IllegalArgumentError",
    "NoExecutableFoundError",
    "BadVersionFormatError",
    "ExecutionError",
]
