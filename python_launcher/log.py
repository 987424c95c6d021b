"""Diagnostic logging for the launcher.

Logging is silent apart from warnings unless ``PYLAUNCH_DEBUG`` is set, since
the launcher's stderr is normally the interpreter's stderr.
"""

import os
import sys
from typing import Mapping, Optional, TextIO

from loguru import logger

DEBUG_ENV_VAR = "PYLAUNCH_DEBUG"

LOG_FORMAT = "{time:HH:mm:ss.SSS} {level: <7} {name}: {message}"


def log_level(environ: Optional[Mapping[str, str]] = None) -> str:
    if environ is None:
        environ = os.environ
    return "DEBUG" if environ.get(DEBUG_ENV_VAR) else "WARNING"


def configure_logging(
    environ: Optional[Mapping[str, str]] = None,
    sink: Optional[TextIO] = None,
) -> int:
    """Replace loguru's default handler with one sized by ``PYLAUNCH_DEBUG``.

    Returns:
        The id of the added handler
    """
    logger.remove()
    return logger.add(
        sink or sys.stderr,
        level=log_level(environ),
        format=LOG_FORMAT,
        colorize=False,
    )
