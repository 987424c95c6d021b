"""Recognition of Python shebang lines.

See https://en.wikipedia.org/wiki/Shebang_(Unix).
"""

from typing import BinaryIO, Optional

from loguru import logger

from .exceptions import BadVersionFormatError
from .version import ANY, RequestedVersion

SHEBANG_MARKER = b"#!"

# Checked in order; the first prefix of the line wins.
ACCEPTED_PATHS = (
    "python",
    "/usr/bin/python",
    "/usr/local/bin/python",
    "/usr/bin/env python",
)


def parse_python_shebang(reader: BinaryIO) -> Optional[RequestedVersion]:
    """Extract the requested Python version from a script's shebang line.

    Args:
        reader: Binary stream positioned at the start of the file

    Returns:
        The requested version (`ANY` for an unversioned ``python``), or None
        if the stream does not start with a Python shebang. Unreadable,
        undecodable or unparsable input is never an error here.
    """
    logger.info("Looking for a Python-related shebang")
    try:
        marker = reader.read(len(SHEBANG_MARKER))
    except OSError:
        logger.debug("Can't read the start of the file")
        return None
    if marker != SHEBANG_MARKER:
        logger.debug("No '#!' at the start of the first line of the file")
        return None

    try:
        first_line = reader.readline().decode("utf-8")
    except (OSError, UnicodeDecodeError):
        logger.debug("Can't read first line of the file")
        return None

    # Whitespace between `#!` and the path is allowed.
    line = first_line.strip()

    for accepted_path in ACCEPTED_PATHS:
        if not line.startswith(accepted_path):
            continue

        logger.debug("Found shebang: {}", accepted_path)
        version = line[len(accepted_path):]
        logger.debug("Found version: {!r}", version)
        if not version:
            return ANY
        try:
            return RequestedVersion.parse(version)
        except BadVersionFormatError:
            return None

    return None
