"""Interfaces a task runner depends on.

Task runners never spawn processes or touch the disk directly. They go
through a ProcessExecutor and a FileStore so that both can be replaced,
e.g. by MemoryFileStore and a scripted executor in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a shell command.

    Attributes:
        output: Combined stdout and stderr.
        success: Whether the command exited with status 0.
    """

    output: str
    success: bool


class ProcessExecutor(Protocol):
    """Runs shell commands and captures their combined output."""

    def run(self, command: str) -> CommandResult: ...


class FileStore(Protocol):
    """File access relative to a project working directory."""

    def read_text(self, path: str) -> str: ...

    def read_bytes(self, path: str) -> bytes: ...

    def write(self, path: str, content: str | bytes) -> None: ...

    def exists(self, path: str) -> bool: ...

    def mkdir(self, path: str) -> None: ...

    def delete(self, path: str) -> None: ...
