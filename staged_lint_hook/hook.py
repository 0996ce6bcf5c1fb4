"""
Pre-commit hook orchestration.

Resolves the staged change set, filters it, lints it and maps every outcome
to success or a classified HookError.
"""

import logging
from pathlib import Path

from staged_lint_hook.changeset import ChangeSetResolver
from staged_lint_hook.errors import HookError, LintFailure
from staged_lint_hook.executor import CommandExecutor
from staged_lint_hook.linter import EslintRunner
from staged_lint_hook.loader import HookConfig, HookConfigLoader
from staged_lint_hook.matcher import PathFilter

logger = logging.getLogger(__name__)


class PreCommitHook:
    """Lint the files staged for the next commit."""

    def __init__(self, project_dir: Path | None = None, config: HookConfig | None = None):
        """
        Initialize hook.

        Args:
            project_dir: Repository working tree, defaults to the current directory
            config: Hook settings, loaded from the project directory when omitted

        Raises:
            HookError: The loaded configuration is invalid (general error)
        """
        self.project_dir = project_dir or Path.cwd()
        if config is None:
            try:
                config = HookConfigLoader(self.project_dir).load()
            except ValueError as e:
                logger.error(f"Invalid configuration: {e}")
                raise HookError(f"invalid configuration: {e}") from e
        self.config = config

        self.executor = CommandExecutor(self.project_dir)
        self.resolver = ChangeSetResolver(self.executor)
        self.path_filter = PathFilter(self.config.ignored_files)
        self.linter = EslintRunner(self.executor, self.config.eslint_command)

    async def run(self) -> int:
        """
        Run the hook once.

        Returns:
            0 when the commit may proceed

        Raises:
            HookError: The commit must be blocked; exit_code carries 1 or 126
        """
        listing = await self.resolver.resolve()

        # Nothing staged
        if listing is None:
            return 0

        if listing:
            files = self.path_filter.filter(listing)
            if not files:
                logger.debug("No staged files to lint")
                return 0

            logger.info(f"Linting {len(files)} staged file(s)")
            result = await self.linter.lint(files)
            if result.is_clean:
                return 0

            logger.error("LINTING ERRORS")
            raise LintFailure(
                f"ESLint found {result.error_count} error(s) and "
                f"{result.warning_count} warning(s)"
            )

        # Resolver returns either None or non-empty text
        logger.error(f"Unexpected change set listing: {listing!r}")
        raise HookError("unexpected change set state")


async def run() -> int:
    """
    Run the pre-commit hook in the current directory.

    Returns:
        0 on success

    Raises:
        HookError: With exit_code 1 (general error) or 126 (command cannot execute)
    """
    return await PreCommitHook().run()
