"""Language task runners and their registry."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from scriptforge_core.errors import LanguageNotSupportedError
from scriptforge_core.runners.base import TaskRunner
from scriptforge_core.runners.typescript import TypeScriptTaskRunner

if TYPE_CHECKING:
    from scriptforge_core.config import TaskRunnerConfig
    from scriptforge_core.ports import FileStore, ProcessExecutor

_RUNNERS: dict[str, type[TaskRunner]] = {
    TypeScriptTaskRunner.language: TypeScriptTaskRunner,
}

SUPPORTED_LANGUAGES: list[str] = sorted(_RUNNERS)


def get_task_runner(
    language: str,
    project_root: str | Path,
    *,
    executor: ProcessExecutor | None = None,
    file_store: FileStore | None = None,
    config: TaskRunnerConfig | None = None,
) -> TaskRunner:
    """Create the task runner for a language.

    Args:
        language: Language name, case-insensitive (e.g. "TypeScript").
        project_root: Project working directory.
        executor: Optional command executor.
        file_store: Optional file store.
        config: Optional runner configuration.

    Returns:
        Task runner instance.

    Raises:
        LanguageNotSupportedError: If no runner is registered for the language.

    Example:
        >>> runner = get_task_runner("TypeScript", "my-script")
        >>> runner.language
        'typescript'
    """
    runner_class = _RUNNERS.get(language.strip().lower())
    if runner_class is None:
        raise LanguageNotSupportedError(language, SUPPORTED_LANGUAGES)

    return runner_class(project_root, executor=executor, file_store=file_store, config=config)


__all__ = [
    "SUPPORTED_LANGUAGES",
    "TaskRunner",
    "TypeScriptTaskRunner",
    "get_task_runner",
]
