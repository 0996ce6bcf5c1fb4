"""
Configuration loader for the pre-commit hook.

Reads the optional .staged-lint.json file from the project directory.
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from staged_lint_hook.linter import DEFAULT_ESLINT_COMMAND
from staged_lint_hook.matcher import RESERVED_PATH

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".staged-lint.json"


@dataclass
class HookConfig:
    """Resolved hook settings."""

    eslint_command: list[str] = field(default_factory=lambda: list(DEFAULT_ESLINT_COMMAND))
    ignored_files: list[str] = field(default_factory=lambda: [RESERVED_PATH])


class HookConfigLoader:
    """Load hook configuration for a project."""

    def __init__(self, project_dir: Path, config_path: Path | None = None):
        """
        Initialize loader.

        Args:
            project_dir: Project root directory
            config_path: Explicit config file, defaults to <project_dir>/.staged-lint.json
        """
        self.project_dir = project_dir
        self.config_path = config_path or project_dir / CONFIG_FILENAME

    def load(self) -> HookConfig:
        """
        Load configuration, falling back to defaults.

        Returns:
            HookConfig with the reserved path always ignored

        Raises:
            ValueError: A known key holds a value of the wrong type
        """
        if not self.config_path.exists():
            logger.debug(f"No config file at {self.config_path}, using defaults")
            return HookConfig()

        data = self._load_json(self.config_path)
        config = HookConfig()

        if "eslint_command" in data:
            config.eslint_command = self._string_list(data, "eslint_command")
            if not config.eslint_command:
                raise ValueError("eslint_command must not be empty")

        if "ignored_files" in data:
            for path in self._string_list(data, "ignored_files"):
                if path not in config.ignored_files:
                    config.ignored_files.append(path)

        logger.debug(f"Loaded config from {self.config_path}: {config}")
        return config

    def _load_json(self, path: Path) -> dict[str, Any]:
        """Load the JSON configuration file."""
        try:
            with open(path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.warning(f"Ignoring {path}: expected a JSON object")
            return {}
        return data

    def _string_list(self, data: dict[str, Any], key: str) -> list[str]:
        value = data[key]
        if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
            raise ValueError(f"{key} must be a list of strings")
        return list(value)
