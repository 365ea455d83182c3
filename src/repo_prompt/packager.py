"""
Packaging tool invocation.

repomix does the actual flattening; this module only builds its argument list and
runs it inside the cloned workspace.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from rich.console import Console

from .config import Config, InvocationOptions
from .errors import PackagingFailed, PackagingProcessError, ProcessLaunchError
from .runner import ProcessRunner

console = Console()


def build_packager_args(options: InvocationOptions) -> list[str]:
    """Build the arguments forwarded to the packaging tool.

    Include patterns come first, then ignore patterns, then passthrough arguments,
    each group in the order the user gave them.

    Args:
        options: Parsed invocation options.

    Returns:
        Argument list, e.g. `["--include", "*.ts", "--ignore", "dist/**", "--style", "xml"]`.
    """
    args: list[str] = []
    for pattern in options.include:
        args.extend(["--include", pattern])
    for pattern in options.ignore:
        args.extend(["--ignore", pattern])
    args.extend(options.passthrough_args)
    return args


def run_packager(
    workspace: Path,
    args: Sequence[str],
    runner: ProcessRunner,
    config: Config | None = None,
) -> None:
    """Run the packaging tool inside `workspace`.

    Whether the tool actually wrote its output file is checked later, when the
    artifact is copied.

    Args:
        workspace: Cloned repository directory, used as the working directory.
        args: Arguments from `build_packager_args`.
        runner: Process runner used to invoke the tool.
        config: Tool settings; defaults are used when omitted.

    Raises:
        PackagingFailed: If the tool exits with a non-zero status.
        PackagingProcessError: If the tool cannot be started.
    """
    config = config or Config()
    command, *leading = config.packager_command

    console.print("[cyan]Packing repository...[/cyan]")

    try:
        code = runner.run(command, [*leading, *args], cwd=workspace)
    except ProcessLaunchError as e:
        raise PackagingProcessError(e.cause) from e

    if code != 0:
        raise PackagingFailed(code)
