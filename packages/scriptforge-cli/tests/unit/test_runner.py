"""Unit tests for CLI task runner construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from scriptforge_cli.errors import EXIT_SYSTEM_ERROR, EXIT_USER_ERROR, CLIError
from scriptforge_cli.runner import create_runner, load_config
from scriptforge_core import TaskRunnerConfig, TypeScriptTaskRunner


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults_without_file(self, project_dir: Path) -> None:
        """No config file means default configuration."""
        assert load_config(project_dir, None) == TaskRunnerConfig()

    def test_project_config_file(self, project_dir: Path) -> None:
        """scriptforge.yaml in the project is picked up."""
        (project_dir / "scriptforge.yaml").write_text("wasm_path: dist/index.wasm\n")

        assert load_config(project_dir, None).wasm_path == "dist/index.wasm"

    def test_explicit_config_file(self, project_dir: Path, tmp_path: Path) -> None:
        """--config wins over the project file."""
        (project_dir / "scriptforge.yaml").write_text("wasm_path: dist/index.wasm\n")
        explicit = tmp_path / "ci.yaml"
        explicit.write_text("wasm_path: out/ci.wasm\n")

        assert load_config(project_dir, str(explicit)).wasm_path == "out/ci.wasm"

    def test_explicit_config_missing(self, project_dir: Path, tmp_path: Path) -> None:
        """A missing --config file is an error."""
        with pytest.raises(CLIError) as exc_info:
            load_config(project_dir, str(tmp_path / "missing.yaml"))

        assert exc_info.value.exit_code == EXIT_SYSTEM_ERROR

    def test_invalid_config(self, project_dir: Path) -> None:
        """Invalid configuration is a user error."""
        (project_dir / "scriptforge.yaml").write_text("unknown_key: 1\n")

        with pytest.raises(CLIError) as exc_info:
            load_config(project_dir, None)

        assert exc_info.value.exit_code == EXIT_USER_ERROR
        assert "Invalid configuration" in exc_info.value.message


class TestCreateRunner:
    """Tests for create_runner."""

    def test_creates_runner_for_project(self, project_dir: Path) -> None:
        """The runner works in the given project directory."""
        runner = create_runner(str(project_dir), "TypeScript", None)

        assert isinstance(runner, TypeScriptTaskRunner)
        assert runner.project_root == project_dir
