"""
Change-set resolver.

Asks git for the paths staged for the next commit.
"""

import logging

from staged_lint_hook.errors import CommandExecutionError, UnknownCommandError
from staged_lint_hook.executor import CommandExecutor

logger = logging.getLogger(__name__)

# Pager disabled, it would redirect output away from stdout
GIT_STAGED_FILES_COMMAND = ["git", "--no-pager", "diff", "--cached", "--name-only"]


class ChangeSetResolver:
    """Resolve the staged change set of the working tree."""

    def __init__(self, executor: CommandExecutor, command: list[str] | None = None):
        """
        Initialize resolver.

        Args:
            executor: Executor bound to the project directory
            command: Override for the git command (tests)
        """
        self.executor = executor
        self.command = command or GIT_STAGED_FILES_COMMAND

    async def resolve(self) -> str | None:
        """
        List the staged files.

        Returns:
            Raw newline-separated path listing, or None when nothing is staged

        Raises:
            CommandExecutionError: git could not run or exited non-zero
            UnknownCommandError: git wrote only to stderr
        """
        cmd = " ".join(self.command)
        exit_code, stdout, stderr = await self.executor.execute(self.command)

        if exit_code != 0:
            message = f"failed to execute cmd: {cmd}, exit code: {exit_code}"
            if stderr:
                message += f" with stderr: {stderr.strip()}"
            logger.error(message)
            raise CommandExecutionError(message, stderr or None)

        if stdout:
            return stdout

        if stderr:
            message = f"unknown error when executing cmd: {cmd} with stderr: {stderr.strip()}"
            logger.error(message)
            raise UnknownCommandError(message, stderr)

        logger.debug("No staged files")
        return None
