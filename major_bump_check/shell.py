"""Shell and git utilities.

Provides simple wrappers around subprocess calls for git operations, plus
output formatting helpers.
"""

from __future__ import annotations

import subprocess
import sys


def git(*args: str, check: bool = True) -> str:
    """Run a git command and return stdout.

    Args:
        *args: Arguments to pass to git (e.g., "show", "HEAD:file.json").
        check: If True (default), raise on non-zero exit.

    Returns:
        Stdout from the git command, with trailing whitespace stripped.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True, check=check)
    return result.stdout.rstrip()


def git_succeeds(*args: str) -> bool:
    """Run a git command for its exit status only.

    Used for probes such as `git cat-file -e` where a non-zero exit is an
    answer, not an error.
    """
    result = subprocess.run(["git", *args], capture_output=True, text=True)
    return result.returncode == 0


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}")


def fatal(msg: str) -> None:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should fail the run.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
