"""Tests for command executor."""

import sys

import pytest

from staged_lint_hook.executor import SPAWN_FAILURE_EXIT_CODE, CommandExecutor


@pytest.mark.asyncio
async def test_execute_successful_command(tmp_path):
    """Test successful command execution."""
    executor = CommandExecutor(tmp_path)

    exit_code, stdout, stderr = await executor.execute(
        [sys.executable, "-c", "print('hello world')"]
    )

    assert exit_code == 0
    assert "hello world" in stdout
    assert stderr == ""


@pytest.mark.asyncio
async def test_execute_nonzero_exit_code(tmp_path):
    """Test command with non-zero exit code."""
    executor = CommandExecutor(tmp_path)

    exit_code, _, _ = await executor.execute([sys.executable, "-c", "import sys; sys.exit(2)"])

    assert exit_code == 2


@pytest.mark.asyncio
async def test_execute_stderr_output(tmp_path):
    """Test command that writes to stderr."""
    executor = CommandExecutor(tmp_path)

    exit_code, stdout, stderr = await executor.execute(
        [sys.executable, "-c", "import sys; sys.stderr.write('error message')"]
    )

    assert exit_code == 0
    assert stdout == ""
    assert "error message" in stderr


@pytest.mark.asyncio
async def test_execute_runs_in_project_dir(tmp_path):
    """Test command runs with the project directory as cwd."""
    executor = CommandExecutor(tmp_path)

    _, stdout, _ = await executor.execute([sys.executable, "-c", "import os; print(os.getcwd())"])

    assert stdout.strip() == str(tmp_path.resolve())


@pytest.mark.asyncio
async def test_execute_arguments_not_shell_expanded(tmp_path):
    """Test arguments are passed verbatim, without a shell."""
    executor = CommandExecutor(tmp_path)

    _, stdout, _ = await executor.execute(
        [sys.executable, "-c", "import sys; print(sys.argv[1])", "$HOME *.ts"]
    )

    assert stdout.strip() == "$HOME *.ts"


@pytest.mark.asyncio
async def test_execute_missing_binary(tmp_path):
    """Test a command that cannot be spawned."""
    executor = CommandExecutor(tmp_path)

    exit_code, stdout, stderr = await executor.execute(["definitely-not-a-real-binary-xyz"])

    assert exit_code == SPAWN_FAILURE_EXIT_CODE
    assert stdout == ""
    assert "Command execution failed" in stderr


@pytest.mark.asyncio
async def test_execute_invalid_utf8_output(tmp_path):
    """Test undecodable output is replaced rather than raising."""
    executor = CommandExecutor(tmp_path)

    exit_code, stdout, _ = await executor.execute(
        [sys.executable, "-c", "import sys; sys.stdout.buffer.write(b'ok\\xff')"]
    )

    assert exit_code == 0
    assert stdout.startswith("ok")
    assert "�" in stdout


@pytest.mark.asyncio
async def test_execute_resolves_program_on_path(tmp_path, monkeypatch):
    """Test the program is looked up on PATH before spawning (npx.cmd on Windows)."""
    lookups = []

    def fake_which(name):
        lookups.append(name)
        return sys.executable

    monkeypatch.setattr("staged_lint_hook.executor.shutil.which", fake_which)
    executor = CommandExecutor(tmp_path)

    exit_code, stdout, _ = await executor.execute(["npx", "-c", "print('resolved')"])

    assert lookups == ["npx"]
    assert exit_code == 0
    assert "resolved" in stdout


@pytest.mark.asyncio
async def test_execute_unresolved_program_spawned_as_given(tmp_path, monkeypatch):
    """Test a program not found on PATH is still attempted verbatim."""
    monkeypatch.setattr("staged_lint_hook.executor.shutil.which", lambda name: None)
    executor = CommandExecutor(tmp_path)

    exit_code, _, stderr = await executor.execute(["definitely-not-a-real-binary-xyz"])

    assert exit_code == SPAWN_FAILURE_EXIT_CODE
    assert "definitely-not-a-real-binary-xyz" in stderr
