"""Choosing the interpreter to execute for a version request.

Resolution runs an ordered list of steps. Each step receives the current
request and the interpreter's arguments and returns a possibly refined request
together with an executable path; the first step to produce a path wins.

1. An active or nearby virtual environment (only for an unconstrained request).
2. The shebang line of the script named by the first argument (only for an
   unconstrained request); refines the request.
3. The ``PY_PYTHON``/``PY_PYTHON{major}`` override; refines the request.
4. A search of the installed interpreters.
"""

import os
from pathlib import Path
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from .discovery import InterpreterFinder
from .exceptions import NoExecutableFoundError
from .shebang import parse_python_shebang
from .venv import venv_executable
from .version import ANY, RequestedVersion

StepResult = Tuple[RequestedVersion, Optional[Path]]
Step = Callable[[RequestedVersion, Sequence[str]], StepResult]


class ExecutableResolver:
    """Resolve version requests to interpreter paths.

    Args:
        finder: Source of installed interpreters
        environ: Environment to read ``VIRTUAL_ENV`` and overrides from
        getcwd: Returns the directory where the ``.venv`` search starts
    """

    def __init__(
        self,
        finder: InterpreterFinder,
        environ: Optional[Mapping[str, str]] = None,
        getcwd: Callable[[], str] = os.getcwd,
    ):
        self.finder = finder
        self.environ = os.environ if environ is None else environ
        self.getcwd = getcwd

    @property
    def steps(self) -> List[Step]:
        return [
            self.from_virtual_environment,
            self.from_shebang,
            self.from_environment_override,
            self.from_search,
        ]

    def resolve(self, requested_version: RequestedVersion, args: Sequence[str]) -> Path:
        """Path of the interpreter to run with ``args``.

        Raises:
            NoExecutableFoundError: If no step produced a path; carries the
                request as refined by the steps
            BadVersionFormatError: If an environment override is malformed
        """
        for step in self.steps:
            requested_version, executable = step(requested_version, args)
            if executable is not None:
                return executable
        raise NoExecutableFoundError(requested_version)

    def from_virtual_environment(
        self, requested_version: RequestedVersion, args: Sequence[str]
    ) -> StepResult:
        if requested_version != ANY:
            return requested_version, None
        return requested_version, venv_executable(self.environ, self.getcwd)

    def from_shebang(self, requested_version: RequestedVersion, args: Sequence[str]) -> StepResult:
        if requested_version != ANY or not args:
            return requested_version, None

        # Only the first argument is considered: finding the script anywhere
        # else would mean reimplementing Python's own argument parsing, and a
        # later argument may belong to the script rather than the interpreter.
        possible_file = args[0]
        logger.info("Checking {!r} for a shebang", possible_file)
        try:
            with open(possible_file, "rb") as script:
                shebang_version = parse_python_shebang(script)
        except (OSError, ValueError):
            logger.debug("Can't open {!r}", possible_file)
            return requested_version, None

        if shebang_version is None:
            return requested_version, None
        return shebang_version, None

    def from_environment_override(
        self, requested_version: RequestedVersion, args: Sequence[str]
    ) -> StepResult:
        env_var = requested_version.env_var()
        if env_var is None:
            return requested_version, None

        logger.info("Checking the {} environment variable", env_var)
        value = self.environ.get(env_var)
        if not value:
            logger.info("{} not set", env_var)
            return requested_version, None

        logger.debug("{} = {!r}", env_var, value)
        return RequestedVersion.parse(value), None

    def from_search(self, requested_version: RequestedVersion, args: Sequence[str]) -> StepResult:
        return requested_version, self.finder.search(requested_version)
