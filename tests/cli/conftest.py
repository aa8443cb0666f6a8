# topmark:header:start
#
#   project      : CargoFmt
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running CargoFmt in a controlled working directory.

Manifest discovery starts at the working directory, so `run_cli_in()` changes
the process working directory to the given project directory before invoking
the Click CLI.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from cargofmt.cli.main import cli
from cargofmt.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(cwd: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory the command runs from, typically a project root
            created under ``tmp_path``.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--check"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        res = run_cli_in(project, ["--check"])
        assert res.exit_code == ExitCode.WOULD_CHANGE
        ```
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(previous)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does **not** depend on manifest discovery
    (e.g., ``--help`` / ``--version``) or when every path passed is absolute.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["--version"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_WOULD_CHANGE(result: Result) -> None:
    """Assert that the command exited with WOULD_CHANGE (code 2).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    # Click usage errors also exit with 2; those carry an exception.
    assert result.exit_code == ExitCode.WOULD_CHANGE, result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.FAILURE, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli` or `run_cli_in`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
