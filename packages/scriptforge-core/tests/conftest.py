"""Shared pytest fixtures for scriptforge-core tests.

Provides a scripted ProcessExecutor, an in-memory file store and a
package.json factory so task runners can be exercised without spawning
processes or touching the disk.
"""

from __future__ import annotations

import json
import sys
from typing import TYPE_CHECKING, Any

import pytest
import structlog

from scriptforge_core.filestore import MemoryFileStore
from scriptforge_core.ports import CommandResult
from scriptforge_core.runners import TypeScriptTaskRunner

if TYPE_CHECKING:
    from collections.abc import Callable


class ScriptedExecutor:
    """ProcessExecutor returning canned results per command.

    Every command run is recorded in ``calls``. Running a command with no
    scripted result fails the test, unless a ``default`` result is set.
    """

    def __init__(self) -> None:
        self.results: dict[str, CommandResult] = {}
        self.calls: list[str] = []
        self.default: CommandResult | None = None

    def on(self, command: str, output: str = "", success: bool = True) -> ScriptedExecutor:
        self.results[command] = CommandResult(output=output, success=success)
        return self

    def run(self, command: str) -> CommandResult:
        self.calls.append(command)
        if command in self.results:
            return self.results[command]
        if self.default is not None:
            return self.default
        raise AssertionError(f"Unexpected command: {command}")


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def executor() -> ScriptedExecutor:
    """Return an executor with no scripted commands."""
    return ScriptedExecutor()


@pytest.fixture
def file_store() -> MemoryFileStore:
    """Return an empty in-memory file store."""
    return MemoryFileStore()


@pytest.fixture
def package_json() -> dict[str, Any]:
    """Return a package.json declaring build and gen-metadata scripts."""
    return {
        "name": "my-script",
        "version": "1.0.0",
        "scripts": {
            "build": "javy build/index.js -o build/index.wasm",
            "gen-metadata": "echo '{}' > build/metadata.json",
        },
    }


@pytest.fixture
def write_package_json(file_store: MemoryFileStore) -> Callable[[dict[str, Any]], None]:
    """Factory fixture writing package.json into the file store."""

    def _write(content: dict[str, Any]) -> None:
        file_store.write("package.json", json.dumps(content))

    return _write


@pytest.fixture
def runner(executor: ScriptedExecutor, file_store: MemoryFileStore) -> TypeScriptTaskRunner:
    """Return a TypeScript runner wired to the scripted executor and memory store."""
    return TypeScriptTaskRunner("/projects/my-script", executor=executor, file_store=file_store)
