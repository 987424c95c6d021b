import os
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union

from .action import Action, from_main
from .discovery import InterpreterFinder, PathFinder
from .resolution import ExecutableResolver
from .version import ANY, RequestedVersion


def resolve_action(
    argv: Sequence[str],
    *,
    finder: Optional[InterpreterFinder] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Action:
    """Determine what the launcher does for a command line.

    Args:
        argv: Full argument vector, launcher path first
        finder: Interpreter source (default: scan ``PATH``)
        environ: Environment (default: ``os.environ``)

    Returns:
        `Help`, `List` or `Execute`

    Raises:
        IllegalArgumentError: If ``-h``, ``--help`` or ``--list`` has company
        NoExecutableFoundError: If no suitable interpreter is installed
        BadVersionFormatError: If a ``PY_PYTHON*`` override is malformed
    """
    return from_main(argv, finder=finder, environ=environ, getcwd=os.getcwd)


def find_executable(
    version: Union[str, RequestedVersion, None] = None,
    args: Sequence[str] = (),
    *,
    finder: Optional[InterpreterFinder] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Path:
    """Resolve a version label to the interpreter the launcher would run.

    Args:
        version: Label like ``"3"`` or ``"3.12"``, a `RequestedVersion`, or
            None for no constraint
        args: Interpreter arguments; the first may name a script whose
            shebang narrows an unconstrained request

    Returns:
        Path to the interpreter

    Raises:
        BadVersionFormatError: If ``version`` is not MAJOR or MAJOR.MINOR
        NoExecutableFoundError: If nothing matches
    """
    if version is None:
        requested_version = ANY
    elif isinstance(version, RequestedVersion):
        requested_version = version
    else:
        requested_version = RequestedVersion.parse(version)

    resolver = ExecutableResolver(finder or PathFinder(), environ)
    return resolver.resolve(requested_version, list(args))


def list_interpreters(finder: Optional[InterpreterFinder] = None) -> List[Dict[str, str]]:
    """Discover installed interpreters.

    Returns:
        List of dicts with 'label' and 'path' keys, newest version first
    """
    executables = (finder or PathFinder()).enumerate()
    return [
        {"label": str(version), "path": str(path)}
        for version, path in sorted(executables.items(), reverse=True)
    ]
