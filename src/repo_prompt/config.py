"""
Configuration models and defaults for repo-prompt.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Default destination for the generated prompt
DEFAULT_OUTPUT = "repo-prompt.txt"

# File repomix writes into its working directory
DEFAULT_ARTIFACT_NAME = "repomix-output.txt"

DEFAULT_GIT_EXECUTABLE = "git"

# repomix is resolved and run through npx, no global install required
DEFAULT_PACKAGER_COMMAND: tuple[str, ...] = ("npx", "repomix")

DEFAULT_WORKSPACE_PREFIX = "repo-prompt-"


@dataclass
class Config:
    """Tool-level settings for `repo-prompt`.

    Attributes:
        git_executable: Version-control client used for cloning.
        packager_command: Command (executable plus leading args) that runs the packaging tool.
        artifact_name: File name the packaging tool writes inside the workspace.
        workspace_prefix: Prefix for the temporary workspace directory name.
        timeout: Optional per-process timeout in seconds. `None` waits indefinitely.
    """

    git_executable: str = DEFAULT_GIT_EXECUTABLE
    packager_command: tuple[str, ...] = DEFAULT_PACKAGER_COMMAND
    artifact_name: str = DEFAULT_ARTIFACT_NAME
    workspace_prefix: str = DEFAULT_WORKSPACE_PREFIX
    timeout: float | None = None

    def __post_init__(self) -> None:
        """Validate settings after initialization.

        Raises:
            ValueError: If a command or file name is empty, or `timeout` is not positive.
        """
        if not self.git_executable:
            raise ValueError("git executable must not be empty")

        self.packager_command = tuple(self.packager_command)
        if not self.packager_command or not self.packager_command[0]:
            raise ValueError("packager command must not be empty")

        if not self.artifact_name:
            raise ValueError("artifact name must not be empty")

        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")


@dataclass(frozen=True)
class InvocationOptions:
    """Options for a single run, built once from the command line.

    Attributes:
        repo: Raw repository reference as typed by the user.
        output: Destination path for the generated prompt.
        include: Glob patterns forwarded to the packaging tool as `--include`.
        ignore: Glob patterns forwarded to the packaging tool as `--ignore`.
        passthrough_args: Unrecognized arguments forwarded verbatim, in order.
    """

    repo: str
    output: Path = field(default_factory=lambda: Path(DEFAULT_OUTPUT))
    include: tuple[str, ...] = ()
    ignore: tuple[str, ...] = ()
    passthrough_args: tuple[str, ...] = ()
