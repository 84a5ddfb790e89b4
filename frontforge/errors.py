"""Exception types shared across frontforge commands."""

from __future__ import annotations


class UserError(Exception):
    """Invalid input from the operator.

    Reported by the CLI as a plain message, without a stack trace.
    """


class InstallError(Exception):
    """Raised when the package installer exits with a non-zero code."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)


class BuildError(Exception):
    """Raised when the bundler process fails."""

    def __init__(self, message: str, command: str = "", stderr: str = "") -> None:
        self.command = command
        self.stderr = stderr
        super().__init__(message)
