"""Copy the packed artifact out of the workspace."""

from __future__ import annotations

import shutil
from pathlib import Path

from .config import DEFAULT_ARTIFACT_NAME
from .errors import OutputCopyFailed


def copy_artifact(
    workspace: Path,
    destination: Path,
    artifact_name: str = DEFAULT_ARTIFACT_NAME,
) -> Path:
    """Copy `workspace/artifact_name` to `destination`, replacing any existing file.

    Args:
        workspace: Directory the packaging tool ran in.
        destination: Where the prompt should end up. Relative paths resolve against
            the current working directory.
        artifact_name: File name the packaging tool writes.

    Returns:
        The destination path.

    Raises:
        OutputCopyFailed: If the artifact is missing or the copy fails.
    """
    source = workspace / artifact_name
    try:
        shutil.copyfile(source, destination)
    except OSError as e:
        raise OutputCopyFailed(f"Failed to copy output file: {e}") from e
    return destination
