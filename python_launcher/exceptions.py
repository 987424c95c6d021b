from pathlib import Path

# BSD sysexits(3) codes.
EX_USAGE = 64
EX_DATAERR = 65
EX_UNAVAILABLE = 69
EX_OSERR = 71


class LauncherError(Exception):
    """Base exception for all launcher errors."""

    exit_code = 1


class IllegalArgumentError(LauncherError):
    """Raised when a launcher flag that must stand alone is given extra arguments."""

    exit_code = EX_USAGE

    def __init__(self, launcher_path, flag: str):
        self.launcher_path = Path(launcher_path)
        self.flag = flag
        super().__init__(
            f"The {flag} flag must be specified on its own; "
            f"see `{self.launcher_path} --help` for details"
        )

    def __eq__(self, other):
        if not isinstance(other, IllegalArgumentError):
            return NotImplemented
        return (self.launcher_path, self.flag) == (other.launcher_path, other.flag)

    __hash__ = LauncherError.__hash__


class NoExecutableFoundError(LauncherError):
    """Raised when no installed interpreter satisfies the requested version."""

    exit_code = EX_UNAVAILABLE

    def __init__(self, requested_version):
        self.requested_version = requested_version
        super().__init__(f"No executable found for {requested_version}")

    def __eq__(self, other):
        if not isinstance(other, NoExecutableFoundError):
            return NotImplemented
        return self.requested_version == other.requested_version

    __hash__ = LauncherError.__hash__


class BadVersionFormatError(LauncherError, ValueError):
    """Raised when a version string is not of the form MAJOR or MAJOR.MINOR."""

    exit_code = EX_DATAERR

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"{text!r} is not a valid Python version (expected MAJOR or MAJOR.MINOR)")


class ExecutionError(LauncherError):
    """Raised when the chosen interpreter cannot be executed."""

    exit_code = EX_OSERR
