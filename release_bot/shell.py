"""Shell, git and CI output utilities.

Provides simple wrappers around subprocess calls for running git and the
package manager, plus output helpers that speak the GitHub Actions workflow
command syntax so warnings and failures show up as annotations.
"""

from __future__ import annotations

import subprocess
import sys


def git(*args: str, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "status", "-uno").
        check: If True (default), raise on non-zero exit.

    Returns:
        Stripped stdout from the git command.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=check)
    return result.stdout.strip()


def run(*args: str, check: bool = True) -> subprocess.CompletedProcess[bytes]:
    """Run an arbitrary command.

    Unlike git(), this doesn't capture output - it streams directly to
    the job log so the package manager output stays visible.

    Args:
        *args: Command and arguments (e.g., "yarn", "version", "--patch").
        check: If True (default), raise on non-zero exit.

    Returns:
        CompletedProcess with returncode for checking success.
    """
    return subprocess.run(args, check=check)


def step(msg: str) -> None:
    """Print a visually distinct step header.

    Used to separate the phases of the release pipeline in the job log.
    """
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def _escape_data(msg: str) -> str:
    """Keep a workflow command message on a single line."""
    return msg.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def info(msg: str) -> None:
    print(msg)


def debug(msg: str) -> None:
    """Only shown by the runner when step debug logging is enabled."""
    print(f"::debug::{_escape_data(msg)}")


def warning(msg: str) -> None:
    print(f"::warning::{_escape_data(msg)}")


def error(msg: str) -> None:
    print(f"::error::{_escape_data(msg)}", file=sys.stderr)


def set_failed(msg: str) -> None:
    """Report a fatal error and flag the job as failed.

    The exit status itself is set by the caller (see cli.run_command).
    """
    error(msg)

