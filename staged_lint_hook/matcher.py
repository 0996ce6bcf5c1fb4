"""
Path filter for staged files.

Splits git's listing and keeps the JavaScript/TypeScript sources.
"""

import re
import sys

# The hook script itself, never linted
RESERVED_PATH = "scripts/pre-commit.js"

SOURCE_PATTERN = re.compile(r"\.(t|j)sx?$")


def line_terminator(platform: str | None = None) -> str:
    """Return the line terminator used by git output on the given platform."""
    platform = platform or sys.platform
    return "\r\n" if platform == "win32" else "\n"


class PathFilter:
    """Select lintable paths from a change set."""

    def __init__(self, ignored_files: list[str] | None = None, platform: str | None = None):
        """
        Initialize filter.

        Args:
            ignored_files: Extra paths to skip; RESERVED_PATH is always skipped
            platform: sys.platform value override (tests)
        """
        self.ignored_files = set(ignored_files or [])
        self.ignored_files.add(RESERVED_PATH)
        self.newline = line_terminator(platform)

    def split(self, listing: str) -> list[str]:
        """Split a raw listing into paths, dropping empty entries."""
        return [entry for entry in listing.split(self.newline) if entry]

    def matches(self, path: str) -> bool:
        return bool(SOURCE_PATTERN.search(path)) and path not in self.ignored_files

    def filter(self, listing: str) -> list[str]:
        """
        Get the lintable paths of a raw listing.

        Args:
            listing: Newline-separated paths as printed by git

        Returns:
            Matching paths in listing order
        """
        return [path for path in self.split(listing) if self.matches(path)]
