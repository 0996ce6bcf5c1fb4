"""
ESLint runner.

Lints a list of files with the project's own ESLint configuration and
reports the findings.
"""

import json
import logging

from staged_lint_hook.errors import LintEngineError
from staged_lint_hook.executor import CommandExecutor
from staged_lint_hook.formatter import format_stylish
from staged_lint_hook.results import LintResult

logger = logging.getLogger(__name__)

DEFAULT_ESLINT_COMMAND = ["npx", "eslint"]

# ESLint exits 0 when clean, 1 when it found problems, 2 on configuration or internal errors
ESLINT_OK_EXIT_CODES = {0, 1}


class EslintRunner:
    """Run ESLint over staged files."""

    def __init__(self, executor: CommandExecutor, command: list[str] | None = None):
        """
        Initialize runner.

        Args:
            executor: Executor bound to the project directory
            command: ESLint program and leading arguments
        """
        self.executor = executor
        self.command = command or DEFAULT_ESLINT_COMMAND

    def build_command(self, files: list[str]) -> list[str]:
        return [*self.command, "--format", "json", *files]

    async def lint(self, files: list[str]) -> LintResult:
        """
        Lint exactly the given files.

        The stylish report is logged whatever the outcome.

        Args:
            files: Non-empty list of paths relative to the project directory

        Returns:
            LintResult with counts and the rendered report

        Raises:
            LintEngineError: ESLint could not run or produced unusable output
        """
        args = self.build_command(files)
        cmd = " ".join(self.command)
        logger.debug(f"Linting {len(files)} file(s): {files}")

        exit_code, stdout, stderr = await self.executor.execute(args)

        if exit_code not in ESLINT_OK_EXIT_CODES:
            message = f"Failed to run ESLint ({cmd}), exit code: {exit_code}"
            if stderr:
                message += f" with stderr: {stderr.strip()}"
            logger.error(message)
            raise LintEngineError(message, stderr or None)

        try:
            result = LintResult.from_eslint_json(json.loads(stdout))
        except (ValueError, TypeError) as e:
            message = f"Failed to parse ESLint output ({cmd}): {e}"
            logger.error(message)
            raise LintEngineError(message, stderr or None) from e

        result.report = format_stylish(result)
        # Findings are shown even when only warnings are logged
        logger.log(logging.INFO if result.is_clean else logging.WARNING, result.report)
        return result
