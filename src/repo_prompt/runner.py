"""
Child process execution.

The pipeline only talks to external tools through a `ProcessRunner`, so tests can
swap in a fake and never touch the network or spawn real processes.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import Protocol, Sequence

from rich.console import Console

from .errors import ProcessLaunchError, ProcessTimeout
from .utils import format_command

console = Console()


class ProcessRunner(Protocol):
    """Runs a command to completion and reports its exit status."""

    def run(self, command: str, args: Sequence[str], cwd: Path | None = None) -> int:
        ...


class SubprocessRunner:
    """Run commands with `subprocess`, sharing this process's stdin/stdout/stderr.

    Output is not captured, so progress from git and repomix shows up in the
    terminal as it happens.
    """

    def __init__(self, timeout: float | None = None, verbose: bool = False) -> None:
        """Initialize the runner.

        Args:
            timeout: Seconds to wait for each child before killing it. `None` waits forever.
            verbose: Echo each command before running it.
        """
        self.timeout = timeout
        self.verbose = verbose

    def run(self, command: str, args: Sequence[str], cwd: Path | None = None) -> int:
        """Run `command` with `args` and wait for it to exit.

        Args:
            command: Executable name or path. Looked up on PATH so that wrappers like
                `npx.cmd` resolve on Windows.
            args: Arguments passed after the executable.
            cwd: Working directory for the child, or `None` for the current one.

        Returns:
            The child's exit status.

        Raises:
            ProcessLaunchError: If the executable cannot be started.
            ProcessTimeout: If the child outlives `timeout`.
        """
        if self.verbose:
            console.print(
                f"$ {format_command(command, args)}", style="dim", markup=False, soft_wrap=True
            )

        executable = shutil.which(command) or command
        try:
            completed = subprocess.run(
                [executable, *args],
                cwd=str(cwd) if cwd is not None else None,
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise ProcessTimeout(command, e.timeout) from e
        except OSError as e:
            raise ProcessLaunchError(command, e) from e

        return completed.returncode
