"""Shared fixtures for repo-prompt tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

import pytest

from repo_prompt.config import DEFAULT_ARTIFACT_NAME
from repo_prompt.errors import ProcessLaunchError


@dataclass
class Call:
    command: str
    args: list[str]
    cwd: Path | None


@dataclass
class FakeRunner:
    """Stands in for git and npx without spawning anything.

    Exit codes are looked up by command name. When the packaging command succeeds
    it writes `artifact_text` into its working directory, like repomix would.
    """

    exit_codes: dict[str, int] = field(default_factory=dict)
    missing: set[str] = field(default_factory=set)
    artifact_text: str | None = "packed repository\n"
    calls: list[Call] = field(default_factory=list)

    def run(self, command: str, args: Sequence[str], cwd: Path | None = None) -> int:
        self.calls.append(Call(command, list(args), cwd))
        if command in self.missing:
            raise ProcessLaunchError(command, FileNotFoundError(2, "No such file or directory"))

        code = self.exit_codes.get(command, 0)
        if code == 0 and cwd is not None and self.artifact_text is not None:
            (cwd / DEFAULT_ARTIFACT_NAME).write_text(self.artifact_text)
        return code

    def calls_to(self, command: str) -> list[Call]:
        return [c for c in self.calls if c.command == command]


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()
