"""Shared fixtures."""

import json
from unittest.mock import AsyncMock

import pytest


@pytest.fixture
def mock_executor():
    """Executor whose execute() is an AsyncMock returning (exit_code, stdout, stderr)."""
    executor = AsyncMock()
    executor.execute.return_value = (0, "", "")
    return executor


@pytest.fixture
def eslint_output():
    """Build ESLint JSON output for the given per-file counts."""

    def _build(*files: dict) -> str:
        results = []
        for file_data in files:
            results.append(
                {
                    "filePath": file_data.get("filePath", "/repo/src/a.ts"),
                    "messages": file_data.get("messages", []),
                    "errorCount": file_data.get("errorCount", 0),
                    "fatalErrorCount": 0,
                    "warningCount": file_data.get("warningCount", 0),
                    "fixableErrorCount": file_data.get("fixableErrorCount", 0),
                    "fixableWarningCount": file_data.get("fixableWarningCount", 0),
                    "usedDeprecatedRules": [],
                }
            )
        return json.dumps(results)

    return _build
