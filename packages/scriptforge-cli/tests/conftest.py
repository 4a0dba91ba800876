"""Shared test fixtures for scriptforge-cli tests.

Provides CliRunner fixtures, a script project directory and a mocked
task runner factory.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Generator
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import structlog
from click.testing import CliRunner

from scriptforge_core import TypeScriptTaskRunner


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Send structlog output to stdout for test capture."""
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a TypeScript script project with a package.json.

    Returns:
        Path to the project directory.
    """
    project = tmp_path / "my-script"
    project.mkdir()
    (project / "package.json").write_text(
        json.dumps(
            {
                "name": "my-script",
                "scripts": {
                    "build": "javy build/index.js -o build/index.wasm",
                    "gen-metadata": "node gen-metadata.js",
                },
            }
        )
    )
    return project


@pytest.fixture
def mock_runner() -> Generator[MagicMock, None, None]:
    """Patch the CLI's runner factory with a mock TypeScript runner.

    Yields:
        The mock runner handed to every command.
    """
    runner = MagicMock(spec=TypeScriptTaskRunner)
    runner.language = "typescript"
    with patch("scriptforge_cli.runner.get_task_runner", return_value=runner):
        yield runner
