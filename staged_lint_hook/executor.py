"""
Command executor for running external tools.

Runs git and ESLint as subprocesses with captured output.
"""

import asyncio
import logging
import shutil
from pathlib import Path

logger = logging.getLogger(__name__)

# Exit code reported when the command cannot be spawned at all
SPAWN_FAILURE_EXIT_CODE = 127


class CommandExecutor:
    """Execute external commands in the project directory."""

    def __init__(self, project_dir: Path):
        """
        Initialize executor.

        Args:
            project_dir: Working directory for every command
        """
        self.project_dir = project_dir

    async def execute(self, args: list[str]) -> tuple[int, str, str]:
        """
        Execute a command and wait for it to finish.

        Args:
            args: Program and arguments, no shell interpretation

        Returns:
            Tuple of (exit_code, stdout, stderr)
        """
        logger.debug(f"Running command: {' '.join(args)} (cwd={self.project_dir})")

        # CreateProcess does not search PATHEXT, so npx.cmd must be resolved here
        program = shutil.which(args[0]) or args[0]

        try:
            proc = await asyncio.create_subprocess_exec(
                program,
                *args[1:],
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=str(self.project_dir),
            )
        except OSError as e:
            # Missing binary, permission denied, bad cwd
            return (SPAWN_FAILURE_EXIT_CODE, "", f"Command execution failed: {e}")

        stdout, stderr = await proc.communicate()

        return (
            proc.returncode or 0,
            stdout.decode("utf-8", errors="replace"),
            stderr.decode("utf-8", errors="replace"),
        )
