"""
CLI entry point for repo-prompt.

Clones a GitHub repository, packs it with repomix and writes the result to a file.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from . import __version__
from .config import DEFAULT_OUTPUT, Config, InvocationOptions
from .errors import RepoPromptError
from .pipeline import run_pipeline
from .runner import SubprocessRunner
from .utils import format_bytes

# Initialize CLI app
app = typer.Typer(
    name="repo-prompt",
    help="CLI tool to generate prompts from GitHub repositories.",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"repo-prompt version {__version__}")
        raise typer.Exit()


# Options that take every following value up to the next option (`--include a b`)
MULTI_VALUE_OPTIONS = {"--include", "--ignore"}

# Options whose value may be left out (`--output` alone means the default file)
OPTIONAL_VALUE_OPTIONS = {"--output": DEFAULT_OUTPUT, "-o": DEFAULT_OUTPUT}


def _is_option(token: str) -> bool:
    return token.startswith("-") and token != "-"


def expand_option_values(args: list[str]) -> list[str]:
    """Rewrite command-line arguments into the one-value-per-flag form click expects.

    - `--include a b` becomes `--include a --include b` (same for `--ignore`).
    - A bare `--output`/`-o` gets the default file name.

    Everything after `--` is left untouched.

    Args:
        args: Raw arguments, without the program name.

    Returns:
        The rewritten argument list, order preserved.
    """
    result: list[str] = []
    i = 0
    while i < len(args):
        token = args[i]
        i += 1

        if token == "--":
            result.append(token)
            result.extend(args[i:])
            break

        if token in MULTI_VALUE_OPTIONS:
            values = []
            while i < len(args) and not _is_option(args[i]):
                values.append(args[i])
                i += 1
            if not values:
                result.append(token)
            for value in values:
                result.extend([token, value])
        elif token in OPTIONAL_VALUE_OPTIONS and (i >= len(args) or _is_option(args[i])):
            result.extend([token, OPTIONAL_VALUE_OPTIONS[token]])
        else:
            result.append(token)

    return result


class RepoPromptCommand(TyperCommand):
    """Command that accepts several values after `--include`/`--ignore`."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        return super().parse_args(ctx, expand_option_values(list(args)))


@app.command(
    cls=RepoPromptCommand,
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def generate(
    ctx: typer.Context,
    repo: str = typer.Option(
        ...,
        "--repo", "-r",
        help="GitHub repository URL (https://github.com/owner/name[/tree/<ref>]) or SSH remote.",
    ),
    output: Path = typer.Option(
        Path(DEFAULT_OUTPUT),
        "--output", "-o",
        help="Output file name (default: repo-prompt.txt, also used when no value is given).",
    ),
    include: Optional[List[str]] = typer.Option(
        None,
        "--include",
        help="Globs of files to include. Takes several values or can be repeated.",
    ),
    ignore: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        help="Globs of files to ignore. Takes several values or can be repeated.",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        min=0.001,
        help="Seconds to wait for git and repomix before giving up (default: no limit).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Print the commands being run and full tracebacks on error.",
    ),
    version: bool = typer.Option(
        False,
        "--version", "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """
    Generate a prompt file from a GitHub repository.

    Any option not listed here is passed straight through to repomix.

    Examples:

        # Whole repository into repo-prompt.txt
        repo-prompt --repo https://github.com/owner/repo

        # A specific branch, only TypeScript and Markdown
        repo-prompt --repo https://github.com/owner/repo/tree/develop --include "*.ts" "*.md"

        # Custom output and a repomix option
        repo-prompt --repo git@github.com:owner/repo.git -o context.txt --style markdown
    """
    options = InvocationOptions(
        repo=repo,
        output=output,
        include=tuple(include or ()),
        ignore=tuple(ignore or ()),
        passthrough_args=tuple(ctx.args),
    )

    try:
        config = Config(timeout=timeout)
        runner = SubprocessRunner(timeout=config.timeout, verbose=verbose)
        destination = run_pipeline(options, config=config, runner=runner)
    except RepoPromptError as e:
        err_console.print(f"Error: {e}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"Error: {e}", style="red", markup=False, soft_wrap=True)
        if verbose:
            import traceback
            err_console.print(traceback.format_exc(), markup=False, soft_wrap=True)
        raise typer.Exit(1)

    size = destination.stat().st_size if destination.exists() else 0
    console.print(
        f"Successfully generated prompt in {destination} ({format_bytes(size)})",
        style="bold green",
        markup=False,
        soft_wrap=True,
    )


def main() -> None:
    """Entry point for the CLI."""
    try:
        app()
    except Exception as e:
        err_console.print(f"Fatal error: {e}", style="red", markup=False, soft_wrap=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
