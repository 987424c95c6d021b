import os
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import typer
from loguru import logger

from .action import Execute, Help, List as ListAction, from_main
from .exceptions import ExecutionError, LauncherError
from .log import configure_logging


def main(argv: Optional[Sequence[str]] = None):
    """Entry point for the ``py`` command.

    Arguments are read straight from ``sys.argv`` rather than through an
    option parser: everything after the launcher's own flag belongs to the
    interpreter and must reach it unchanged (``--`` included).
    """
    configure_logging()
    argv = list(sys.argv if argv is None else argv)

    try:
        action = from_main(argv)

        if isinstance(action, ListAction):
            typer.echo(action.output, nl=False)
        elif isinstance(action, Help):
            typer.echo(action.message)
            _exec(action.executable, ["-h"])
        elif isinstance(action, Execute):
            _exec(action.executable, list(action.args))

    except LauncherError as e:
        typer.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except Exception as e:
        logger.opt(exception=e).debug("Unhandled exception")
        typer.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


def _exec(executable: Path, args: List[str]):
    """Replace the current process with ``executable``."""
    logger.info("Executing {} with {}", executable, args)
    # Output written so far must not be lost when the process image changes.
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        os.execv(executable, [os.fspath(executable), *args])
    except OSError as e:
        raise ExecutionError(f"Could not execute {executable}: {e.strerror}") from e


if __name__ == "__main__":
    main()
