"""Deciding what the launcher should do with its command-line arguments.

The first argument after the launcher path selects the action:

- ``-h``/``--help``: `Help`, using the newest installed interpreter.
- ``--list``: `List` every installed interpreter.
- ``-MAJOR`` or ``-MAJOR.MINOR``: `Execute` an interpreter of that version.
- anything else (or nothing): `Execute` the interpreter chosen by the
  virtual environment, shebang, override and search rules.

Help and list flags must stand alone.
"""

import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Mapping, Optional, Sequence, Tuple, Union

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __version__
from .discovery import InterpreterFinder, PathFinder
from .exceptions import IllegalArgumentError, NoExecutableFoundError
from .resolution import ExecutableResolver
from .version import ANY, ExactVersion, version_from_flag

HELP_FLAGS = ("-h", "--help")
LIST_FLAG = "--list"

HELP_TEMPLATE = """\
Python Launcher for Unix {version}

usage:
{launcher} [launcher-args] [python-args]

Launcher arguments:
-h/--help: This output; must be specified on its own.
--list: List all known interpreters (except activated virtual environment);
        must be specified on its own.
-[X]: Launch the latest Python `X` version (e.g. `-3` for the latest
      Python 3); PY_PYTHON[X] environment variable is used if set
      (e.g. PY_PYTHON3=3.6).
-[X.Y]: Launch the specified Python version (e.g. `-3.6` for Python 3.6).

Other launcher arguments are passed on to the interpreter; an activated
virtual environment (VIRTUAL_ENV), a `.venv` directory in the current or a
parent directory, the shebang line of the script being run and PY_PYTHON are
all taken into account when no version is given.

Set PYLAUNCH_DEBUG to log how the interpreter was chosen.

The following help text is from {executable}:
"""


@dataclass(frozen=True)
class Help:
    """Launcher help text plus the interpreter whose own ``-h`` output follows."""

    message: str
    executable: Path


@dataclass(frozen=True)
class List:
    """Human-readable listing of every installed interpreter."""

    output: str


@dataclass(frozen=True)
class Execute:
    """Interpreter to run and the arguments to pass it verbatim."""

    launcher_path: Path
    executable: Path
    args: Tuple[str, ...] = ()


Action = Union[Help, List, Execute]


def help_message(launcher_path: Path, executable_path: Path) -> str:
    return HELP_TEMPLATE.format(
        version=__version__,
        launcher=launcher_path,
        executable=executable_path,
    )


def list_executables(executables: Mapping[ExactVersion, Path]) -> str:
    """Format interpreters as a two-column table, newest version first.

    There is no header or border so the output is easy to parse.

    Raises:
        NoExecutableFoundError: If ``executables`` is empty
    """
    if not executables:
        raise NoExecutableFoundError(ANY)

    # U+2502 "Box Drawings Light Vertical" between the columns.
    table = Table(
        box=box.MINIMAL,
        show_header=False,
        show_edge=False,
        pad_edge=False,
    )
    table.add_column(no_wrap=True)
    table.add_column(no_wrap=True)
    for version, path in sorted(executables.items(), reverse=True):
        table.add_row(Text(str(version)), Text(str(path)))

    console = Console(
        file=io.StringIO(),
        width=1_000_000,
        color_system=None,
        highlight=False,
        emoji=False,
    )
    console.print(table)
    # Cells are padded to the column width; keep rows free of trailing blanks.
    rows = [row.rstrip() for row in console.file.getvalue().splitlines()]
    return "\n".join(rows) + "\n"


def from_main(
    argv: Sequence[str],
    finder: Optional[InterpreterFinder] = None,
    environ: Optional[Mapping[str, str]] = None,
    getcwd: Callable[[], str] = os.getcwd,
) -> Action:
    """Determine the action for a full argument vector.

    Args:
        argv: Arguments including the launcher's own path as ``argv[0]``
        finder: Source of installed interpreters; scans ``PATH`` by default
        environ: Environment for ``VIRTUAL_ENV`` and ``PY_PYTHON*`` lookups
        getcwd: Start of the ``.venv`` search

    Returns:
        `Help`, `List` or `Execute`

    Raises:
        IllegalArgumentError: If a help or list flag is followed by more arguments
        NoExecutableFoundError: If no suitable interpreter is installed
        BadVersionFormatError: If a ``PY_PYTHON*`` override is malformed
    """
    if finder is None:
        finder = PathFinder()
    launcher_path = Path(argv[0])
    flag = argv[1] if len(argv) > 1 else None

    if flag in HELP_FLAGS or flag == LIST_FLAG:
        if len(argv) > 2:
            raise IllegalArgumentError(launcher_path, flag)
        if flag == LIST_FLAG:
            return List(list_executables(finder.enumerate()))
        executable = finder.search(ANY)
        if executable is None:
            raise NoExecutableFoundError(ANY)
        return Help(help_message(launcher_path, executable), executable)

    resolver = ExecutableResolver(finder, environ, getcwd)
    requested_version = version_from_flag(flag) if flag is not None else None
    if requested_version is not None:
        args = tuple(argv[2:])
        return Execute(launcher_path, resolver.resolve(requested_version, args), args)

    args = tuple(argv[1:])
    return Execute(launcher_path, resolver.resolve(ANY, args), args)
