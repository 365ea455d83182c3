"""
Error types raised by the repo-prompt pipeline.

Every stage raises a subclass of `RepoPromptError`; the CLI reports them all the
same way and exits with status 1.
"""

from __future__ import annotations


class RepoPromptError(Exception):
    """Base class for handled pipeline errors."""

    pass


class InvalidRepoUrl(RepoPromptError):
    """The `--repo` value is neither an SSH remote nor a GitHub HTTPS URL."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__("Invalid GitHub repository URL")


class ProcessLaunchError(RepoPromptError):
    """A child process could not be started."""

    def __init__(self, command: str, cause: OSError) -> None:
        self.command = command
        self.cause = cause
        super().__init__(f"Failed to start {command}: {cause}")


class ProcessTimeout(RepoPromptError):
    """A child process ran longer than the configured timeout."""

    def __init__(self, command: str, timeout: float) -> None:
        self.command = command
        self.timeout = timeout
        super().__init__(f"{command} timed out after {timeout:g}s")


class CloneFailed(RepoPromptError):
    """git exited with a non-zero status."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"git clone failed with code {code}")


class CloneProcessError(RepoPromptError):
    """git could not be run at all."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"git clone could not be started: {cause}")


class PackagingFailed(RepoPromptError):
    """The packaging tool exited with a non-zero status."""

    def __init__(self, code: int) -> None:
        self.code = code
        super().__init__(f"repomix failed with code {code}")


class PackagingProcessError(RepoPromptError):
    """The packaging tool could not be run at all."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"repomix could not be started: {cause}")


class OutputCopyFailed(RepoPromptError):
    """The packaged artifact could not be copied to its destination."""

    pass
