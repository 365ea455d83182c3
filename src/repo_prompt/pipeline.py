"""
End-to-end run: clone, pack, copy, clean up.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from .config import Config, InvocationOptions
from .fetcher import Workspace, clone_repository, parse_repo_url
from .output import copy_artifact
from .packager import build_packager_args, run_packager
from .runner import ProcessRunner, SubprocessRunner


class PipelineStage(str, Enum):
    """How far a pipeline run has progressed."""

    INIT = "init"
    CLONED = "cloned"
    PACKAGED = "packaged"
    FINALIZED = "finalized"
    CLEANED_UP = "cleaned_up"
    FAILED = "failed"


class Pipeline:
    """
    A single repo-prompt run.

    Stages advance strictly forward. Any error moves the run to `FAILED` and is
    re-raised for the caller to report; the workspace is removed either way.
    """

    def __init__(
        self,
        options: InvocationOptions,
        config: Config | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        """Initialize the pipeline.

        Args:
            options: Parsed invocation options.
            config: Tool settings; defaults are used when omitted.
            runner: Process runner for git and the packaging tool. Defaults to a
                `SubprocessRunner` honoring `config.timeout`.
        """
        self.options = options
        self.config = config or Config()
        self.runner = runner or SubprocessRunner(timeout=self.config.timeout)
        self.stage = PipelineStage.INIT
        self.workspace: Path | None = None

    def run(self) -> Path:
        """Execute every stage and return the path of the written prompt.

        Raises:
            RepoPromptError: If any stage fails.
        """
        with Workspace(prefix=self.config.workspace_prefix) as workspace:
            self.workspace = workspace
            try:
                ref = parse_repo_url(self.options.repo)

                clone_repository(ref, workspace, self.runner, self.config)
                self.stage = PipelineStage.CLONED

                run_packager(
                    workspace, build_packager_args(self.options), self.runner, self.config
                )
                self.stage = PipelineStage.PACKAGED

                destination = copy_artifact(
                    workspace, self.options.output, self.config.artifact_name
                )
                self.stage = PipelineStage.FINALIZED
            except Exception:
                self.stage = PipelineStage.FAILED
                raise

        self.stage = PipelineStage.CLEANED_UP
        return destination


def run_pipeline(
    options: InvocationOptions,
    config: Config | None = None,
    runner: ProcessRunner | None = None,
) -> Path:
    """Convenience wrapper around `Pipeline(...).run()`."""
    return Pipeline(options, config=config, runner=runner).run()
