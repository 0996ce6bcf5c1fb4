"""
Stylish report formatter.

Renders lint results in ESLint's "stylish" layout, without colors.
"""

import re

from staged_lint_hook.results import LintMessage, LintResult

COLUMN_SEPARATOR = "  "


def _pluralize(word: str, count: int) -> str:
    return word if count == 1 else f"{word}s"


def _message_row(message: LintMessage) -> list[str]:
    # ESLint drops a single trailing period from messages
    text = re.sub(r"([^ ])\.$", r"\1", message.message)
    return [
        f"{message.line}:{message.column}",
        "error" if message.is_error else "warning",
        text,
        message.rule_id or "",
    ]


def _table(rows: list[list[str]]) -> list[str]:
    widths = [max(len(row[i]) for row in rows) for i in range(len(rows[0]))]
    lines = []
    for row in rows:
        cells = [cell.ljust(width) for cell, width in zip(row, widths)]
        lines.append((COLUMN_SEPARATOR + COLUMN_SEPARATOR.join(cells)).rstrip())
    return lines


def format_stylish(result: LintResult) -> str:
    """
    Format lint results for humans.

    Args:
        result: Aggregated lint result

    Returns:
        Report text, or an empty string when there are no findings
    """
    error_count = result.error_count
    warning_count = result.warning_count
    total = error_count + warning_count
    if total == 0:
        return ""

    output = "\n"
    for file_result in result.files:
        if not file_result.messages:
            continue
        output += f"{file_result.file_path}\n"
        output += "\n".join(_table([_message_row(m) for m in file_result.messages]))
        output += "\n\n"

    output += (
        f"✖ {total} {_pluralize('problem', total)} "
        f"({error_count} {_pluralize('error', error_count)}, "
        f"{warning_count} {_pluralize('warning', warning_count)})\n"
    )

    fixable_errors = result.fixable_error_count
    fixable_warnings = result.fixable_warning_count
    if fixable_errors > 0 or fixable_warnings > 0:
        output += (
            f"  {fixable_errors} {_pluralize('error', fixable_errors)} and "
            f"{fixable_warnings} {_pluralize('warning', fixable_warnings)} "
            "potentially fixable with the `--fix` option.\n"
        )

    return output
