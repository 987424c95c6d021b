"""Version requests and the concrete versions they are matched against.

A request comes from one of three places: a ``-MAJOR[.MINOR]`` launcher flag,
the shebang line of the script being run, or a ``PY_PYTHON*`` environment
variable. All three share :meth:`RequestedVersion.parse`.
"""

import functools
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .exceptions import BadVersionFormatError

_COMPONENT = re.compile(r"[0-9]+")
_EXECUTABLE_NAME = re.compile(r"python(?P<major>[0-9]+)\.(?P<minor>[0-9]+)")


def _parse_component(text: str, original: str) -> int:
    # int() alone would accept "+3", " 3" and "3_0".
    if not _COMPONENT.fullmatch(text):
        raise BadVersionFormatError(original)
    return int(text)


@dataclass(frozen=True)
class RequestedVersion(ABC):
    """Base of the three request variants: `AnyVersion`, `MajorOnly` and `Exact`."""

    @staticmethod
    def parse(text: str) -> "RequestedVersion":
        """Parse ``MAJOR`` or ``MAJOR.MINOR``.

        Args:
            text: Version text without any leading flag marker

        Returns:
            `MajorOnly` or `Exact`

        Raises:
            BadVersionFormatError: If the text is empty, non-numeric or has
                more than two components (a micro version is an error, not
                something to truncate)
        """
        parts = text.split(".")
        if len(parts) == 1:
            return MajorOnly(_parse_component(parts[0], text))
        if len(parts) == 2:
            return Exact(
                _parse_component(parts[0], text),
                _parse_component(parts[1], text),
            )
        raise BadVersionFormatError(text)

    def env_var(self) -> Optional[str]:
        """Name of the environment variable that may override this request."""
        return None

    @abstractmethod
    def matches(self, version: "ExactVersion") -> bool:
        """Whether an installed interpreter of ``version`` satisfies the request."""


@dataclass(frozen=True)
class AnyVersion(RequestedVersion):
    """No version constraint."""

    def env_var(self) -> Optional[str]:
        return "PY_PYTHON"

    def matches(self, version: "ExactVersion") -> bool:
        return True

    def __str__(self) -> str:
        return "Python"


@dataclass(frozen=True)
class MajorOnly(RequestedVersion):
    major: int

    def env_var(self) -> Optional[str]:
        return f"PY_PYTHON{self.major}"

    def matches(self, version: "ExactVersion") -> bool:
        return version.major == self.major

    def __str__(self) -> str:
        return f"Python {self.major}"


@dataclass(frozen=True)
class Exact(RequestedVersion):
    major: int
    minor: int

    def matches(self, version: "ExactVersion") -> bool:
        return (version.major, version.minor) == (self.major, self.minor)

    def __str__(self) -> str:
        return f"Python {self.major}.{self.minor}"


ANY = AnyVersion()


@functools.total_ordering
@dataclass(frozen=True)
class ExactVersion:
    """The version of one installed interpreter."""

    major: int
    minor: int

    def __lt__(self, other):
        if not isinstance(other, ExactVersion):
            return NotImplemented
        return (self.major, self.minor) < (other.major, other.minor)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"

    @classmethod
    def from_path(cls, path) -> Optional["ExactVersion"]:
        """Version encoded in an executable name like ``python3.7``, if any."""
        match = _EXECUTABLE_NAME.fullmatch(Path(path).name)
        if match is None:
            return None
        return cls(int(match.group("major")), int(match.group("minor")))


def version_from_flag(arg: str) -> Optional[RequestedVersion]:
    """Interpret a launcher argument such as ``-3`` or ``-3.6``.

    Returns None when the argument is not a version flag (no leading ``-`` or
    a malformed version), so it can be passed on to the interpreter instead.
    """
    if not arg.startswith("-"):
        return None
    try:
        return RequestedVersion.parse(arg[1:])
    except BadVersionFormatError:
        return None
