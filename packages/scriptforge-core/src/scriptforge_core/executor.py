"""Subprocess-backed ProcessExecutor."""

from __future__ import annotations

import subprocess
from pathlib import Path

import structlog

from scriptforge_core.ports import CommandResult

logger = structlog.get_logger(__name__)


class SubprocessExecutor:
    """Run shell commands inside a project directory.

    stderr is merged into stdout so callers see output in the order the
    process wrote it. Output is decoded as UTF-8 with undecodable bytes
    replaced. The call blocks until the process exits; there is no timeout.

    Attributes:
        cwd: Directory commands run in.

    Example:
        >>> executor = SubprocessExecutor(Path("my-script"))
        >>> result = executor.run("node --version")
        >>> result.success
        True
    """

    def __init__(self, cwd: str | Path) -> None:
        self.cwd = Path(cwd)
        self._log = logger.bind(component="subprocess_executor", cwd=str(self.cwd))

    def run(self, command: str) -> CommandResult:
        """Run a command and capture its combined output.

        Args:
            command: Shell command line.

        Returns:
            CommandResult with output and success flag. A command that
            cannot be started is reported as a failed result.
        """
        self._log.debug("command_started", command=command)

        try:
            completed = subprocess.run(  # nosec B602 - commands come from runner config
                command,
                shell=True,
                cwd=self.cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except OSError as e:
            self._log.warning("command_not_started", command=command, error=str(e))
            return CommandResult(output=str(e), success=False)

        result = CommandResult(output=completed.stdout or "", success=completed.returncode == 0)
        self._log.debug(
            "command_completed",
            command=command,
            returncode=completed.returncode,
        )
        return result
