"""Tests for the subprocess runner."""

import sys

import pytest

from repo_prompt.errors import ProcessLaunchError, ProcessTimeout
from repo_prompt.runner import SubprocessRunner


class TestSubprocessRunner:
    """Tests for SubprocessRunner using the current interpreter as the child."""

    def test_returns_zero_on_success(self):
        runner = SubprocessRunner()

        assert runner.run(sys.executable, ["-c", "pass"]) == 0

    def test_returns_exit_code(self):
        """Test that non-zero statuses are reported, not raised."""
        runner = SubprocessRunner()

        assert runner.run(sys.executable, ["-c", "import sys; sys.exit(3)"]) == 3

    def test_runs_in_cwd(self, tmp_path):
        runner = SubprocessRunner()

        code = runner.run(
            sys.executable,
            ["-c", "open('marker.txt', 'w').write('here')"],
            cwd=tmp_path,
        )

        assert code == 0
        assert (tmp_path / "marker.txt").read_text() == "here"

    def test_missing_executable_raises(self):
        """Test that an unknown command raises ProcessLaunchError."""
        runner = SubprocessRunner()

        with pytest.raises(ProcessLaunchError) as exc_info:
            runner.run("repo-prompt-no-such-command", ["--help"])

        assert exc_info.value.command == "repo-prompt-no-such-command"
        assert isinstance(exc_info.value.cause, OSError)

    def test_timeout_raises(self):
        """Test that a child outliving the timeout raises ProcessTimeout."""
        runner = SubprocessRunner(timeout=0.5)

        with pytest.raises(ProcessTimeout) as exc_info:
            runner.run(sys.executable, ["-c", "import time; time.sleep(30)"])

        assert exc_info.value.timeout == 0.5

    def test_verbose_echoes_command(self, capsys):
        runner = SubprocessRunner(verbose=True)

        runner.run(sys.executable, ["-c", "pass"])

        assert "-c pass" in capsys.readouterr().out
