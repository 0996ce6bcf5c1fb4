"""
Error taxonomy for the pre-commit hook.

Every failure is one of two kinds, mapped to a process exit code only by the
command-line entry point.
"""

from enum import IntEnum


class ErrorKind(IntEnum):
    """Failure classes, valued with their shell exit codes."""

    GENERAL_ERROR = 1
    COMMAND_CANNOT_EXECUTE = 126


class HookError(Exception):
    """Base class for hook failures."""

    kind = ErrorKind.GENERAL_ERROR

    def __init__(self, message: str, stderr: str | None = None):
        """
        Initialize error.

        Args:
            message: Human-readable description of the failure
            stderr: Diagnostic output captured from the failed command, if any
        """
        super().__init__(message)
        self.message = message
        self.stderr = stderr

    @property
    def exit_code(self) -> int:
        return int(self.kind)


class CommandExecutionError(HookError):
    """External command could not be run or exited non-zero."""

    kind = ErrorKind.COMMAND_CANNOT_EXECUTE


class UnknownCommandError(HookError):
    """External command wrote only to stderr without reporting a failure."""

    kind = ErrorKind.GENERAL_ERROR


class LintEngineError(HookError):
    """ESLint itself failed (bad configuration, crash, unreadable output)."""

    kind = ErrorKind.COMMAND_CANNOT_EXECUTE


class LintFailure(HookError):
    """ESLint ran and reported findings."""

    kind = ErrorKind.GENERAL_ERROR
