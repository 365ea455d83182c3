"""
Repository fetcher module.

Normalizes GitHub references into SSH clone URLs, clones them with git and manages
the temporary workspace the clone lives in.
"""

from __future__ import annotations

import re
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_WORKSPACE_PREFIX, Config
from .errors import CloneFailed, CloneProcessError, InvalidRepoUrl, ProcessLaunchError
from .runner import ProcessRunner

console = Console()

SSH_PREFIX = "git@"

# owner / repo [ /tree|blob/<ref> ] [ /<path> ]
# The ref stops at the next slash, so `tree/feature/x` yields `feature`.
_GITHUB_HTTPS_RE = re.compile(
    r"https://github\.com/([^/]+)/([^/]+?)(?:/(?:tree|blob)/([^/]+))?(?:/(.+))?"
)


@dataclass(frozen=True)
class RepoReference:
    """A clone-ready repository address.

    Attributes:
        url: URL handed to git (SSH form, or an SSH remote passed through untouched).
        branch: Branch or tag taken from a `/tree/<ref>` or `/blob/<ref>` segment.
    """

    url: str
    branch: str | None = None


def parse_repo_url(raw: str) -> RepoReference:
    """Turn a user-supplied repository reference into a `RepoReference`.

    Supports:
    - `git@host:owner/repo.git` (returned unchanged)
    - `https://github.com/owner/repo`
    - `https://github.com/owner/repo.git`
    - `https://github.com/owner/repo/tree/<ref>[/<path>]`
    - `https://github.com/owner/repo/blob/<ref>[/<path>]`

    Only the first path segment after `tree/` or `blob/` is taken as the ref; any
    trailing path is dropped.

    Args:
        raw: Repository reference as given on the command line.

    Returns:
        The normalized reference, using `git@github.com:<owner>/<repo>.git` for HTTPS input.

    Raises:
        InvalidRepoUrl: If `raw` matches neither form.
    """
    if raw.startswith(SSH_PREFIX):
        return RepoReference(url=raw)

    match = _GITHUB_HTTPS_RE.fullmatch(raw)
    if not match:
        raise InvalidRepoUrl(raw)

    owner, repo, branch = match.group(1), match.group(2), match.group(3)
    repo = repo.removesuffix(".git")

    return RepoReference(url=f"git@github.com:{owner}/{repo}.git", branch=branch)


def build_clone_args(ref: RepoReference, target_dir: Path) -> list[str]:
    """Build the argument list for `git clone`."""
    args = ["clone"]
    if ref.branch:
        args.extend(["-b", ref.branch])
    args.extend([ref.url, str(target_dir)])
    return args


def clone_repository(
    ref: RepoReference,
    target_dir: Path,
    runner: ProcessRunner,
    config: Config | None = None,
) -> None:
    """Clone `ref` into `target_dir`, which must already exist and be empty.

    git inherits this process's terminal, so clone progress is shown live.

    Args:
        ref: Repository to clone.
        target_dir: Existing empty directory to clone into.
        runner: Process runner used to invoke git.
        config: Tool settings; defaults are used when omitted.

    Raises:
        CloneFailed: If git exits with a non-zero status.
        CloneProcessError: If git cannot be started.
    """
    config = config or Config()
    label = ref.url if ref.branch is None else f"{ref.url} ({ref.branch})"
    console.print(f"[cyan]Cloning {escape(label)}...[/cyan]")

    try:
        code = runner.run(config.git_executable, build_clone_args(ref, target_dir))
    except ProcessLaunchError as e:
        raise CloneProcessError(e.cause) from e

    if code != 0:
        raise CloneFailed(code)

    console.print(f"[green]✓ Cloned to {escape(str(target_dir))}[/green]")


def cleanup_workspace(path: Path) -> None:
    """Delete a workspace directory.

    Missing directories are ignored and removal errors only produce a warning.

    Args:
        path: Workspace directory to remove.
    """
    try:
        if path.exists():
            shutil.rmtree(path)
    except OSError as e:
        console.print(
            f"[yellow]Warning: Failed to clean up temp directory "
            f"{escape(str(path))}: {escape(str(e))}[/yellow]"
        )


class Workspace:
    """
    Context manager for the temporary clone directory.

    The directory is removed on exit whether or not the body raised.
    """

    def __init__(self, prefix: str = DEFAULT_WORKSPACE_PREFIX) -> None:
        self.prefix = prefix
        self.path: Path | None = None

    def __enter__(self) -> Path:
        """Create a uniquely named directory and return its path."""
        self.path = Path(tempfile.mkdtemp(prefix=self.prefix))
        return self.path

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_val: BaseException | None, exc_tb: Any
    ) -> None:
        """Remove the directory."""
        if self.path is not None:
            cleanup_workspace(self.path)
