"""
Utility functions for repo-prompt.
"""

from __future__ import annotations

import shlex
from typing import Sequence


def format_command(command: str, args: Sequence[str]) -> str:
    """Render a command line for display, quoting arguments as a POSIX shell would.

    Args:
        command: Executable name.
        args: Arguments passed to it.

    Returns:
        A single printable string such as `npx repomix --include '*.ts'`.
    """
    return shlex.join([command, *args])


def format_bytes(size: int) -> str:
    """Format a byte count for humans (e.g. `1.5 KB`)."""
    value = float(size)
    for unit in ("B", "KB", "MB"):
        if value < 1024:
            return f"{int(value)} {unit}" if unit == "B" else f"{value:.1f} {unit}"
        value /= 1024
    return f"{value:.1f} GB"
