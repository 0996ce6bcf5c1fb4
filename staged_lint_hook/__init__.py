"""
Staged Lint Hook

A git pre-commit hook that runs ESLint on the JavaScript and TypeScript
files staged for commit.
"""

from staged_lint_hook.errors import ErrorKind, HookError
from staged_lint_hook.hook import PreCommitHook, run

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "HookError",
    "PreCommitHook",
    "run",
]
