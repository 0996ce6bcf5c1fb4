"""
Command-line entry point.

Install as .git/hooks/pre-commit with:

    #!/bin/sh
    exec python -m staged_lint_hook
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from staged_lint_hook.errors import ErrorKind, HookError
from staged_lint_hook.hook import PreCommitHook
from staged_lint_hook.loader import HookConfigLoader

logger = logging.getLogger("staged_lint_hook")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="staged-lint",
        description="Run ESLint on the JavaScript/TypeScript files staged for commit.",
    )
    parser.add_argument(
        "--project-dir",
        type=Path,
        default=None,
        help="Repository working tree (default: current directory)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: <project-dir>/.staged-lint.json)",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only show failures")
    return parser


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stdout)


def main(argv: list[str] | None = None) -> int:
    """
    Run the hook and return the process exit code.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]

    Returns:
        0 on success, 1 on a general error, 126 when a command cannot execute
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.quiet)

    project_dir = (args.project_dir or Path.cwd()).resolve()
    try:
        config = HookConfigLoader(project_dir, args.config).load()
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return int(ErrorKind.GENERAL_ERROR)

    hook = PreCommitHook(project_dir, config)
    try:
        return asyncio.run(hook.run())
    except HookError as e:
        logger.debug(f"Hook failed ({e.kind.name}): {e.message}")
        return e.exit_code


if __name__ == "__main__":
    sys.exit(main())
