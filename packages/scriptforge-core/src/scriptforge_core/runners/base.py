"""Base class for language task runners.

A task runner builds a script project, installs its dependencies and
reads the metadata its build produces. Subclasses supply the
language-specific build and install steps; reading metadata and checking
the dependency cache are shared.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import structlog

from scriptforge_core.config import TaskRunnerConfig
from scriptforge_core.errors import (
    ManifestNotFoundError,
    MetadataNotFoundError,
    SystemCallFailureError,
)
from scriptforge_core.executor import SubprocessExecutor
from scriptforge_core.filestore import LocalFileStore
from scriptforge_core.models import BuildManifest, ScriptMetadata

if TYPE_CHECKING:
    from scriptforge_core.ports import CommandResult, FileStore, ProcessExecutor

logger = structlog.get_logger(__name__)


class TaskRunner(ABC):
    """Base class for task runners.

    Every operation runs to completion before returning. Failures raise
    immediately and are never retried.

    Attributes:
        language: Language key the runner is registered under.
        project_root: Project working directory.
        executor: Runs shell commands inside ``project_root``.
        file_store: Reads and writes files relative to ``project_root``.
        config: Paths, commands and runtime requirement.

    Example:
        >>> class MyRunner(TaskRunner):
        ...     language = "mine"
        ...     def build(self) -> bytes: ...
        ...     def install_dependencies(self) -> None: ...
        ...     def library_version(self, library_name: str) -> str: ...
    """

    language: ClassVar[str]

    def __init__(
        self,
        project_root: str | Path,
        *,
        executor: ProcessExecutor | None = None,
        file_store: FileStore | None = None,
        config: TaskRunnerConfig | None = None,
    ) -> None:
        """Initialize the runner.

        Args:
            project_root: Project working directory.
            executor: Command executor (default: SubprocessExecutor in project_root).
            file_store: File access (default: LocalFileStore over project_root).
            config: Runner configuration (default: TaskRunnerConfig()).
        """
        self.project_root = Path(project_root)
        self.executor = executor if executor is not None else SubprocessExecutor(self.project_root)
        self.file_store = file_store if file_store is not None else LocalFileStore(self.project_root)
        self.config = config if config is not None else TaskRunnerConfig()
        self._log = logger.bind(component="task_runner", language=self.language)

    @abstractmethod
    def build(self) -> bytes:
        """Build the project and return the compiled binary."""

    @abstractmethod
    def install_dependencies(self) -> None:
        """Install the project's dependencies."""

    @abstractmethod
    def library_version(self, library_name: str) -> str:
        """Return the installed version of a library."""

    def dependencies_installed(self) -> bool:
        """Check whether the dependency cache directory exists.

        The directory's contents are not inspected.
        """
        return self.file_store.exists(self.config.dependencies_dir)

    def metadata(self) -> ScriptMetadata:
        """Load the metadata descriptor written by the build.

        Returns:
            Parsed ScriptMetadata.

        Raises:
            MetadataNotFoundError: If the metadata file does not exist.
            MetadataValidationError: If the metadata file is malformed.
        """
        path = self.config.metadata_path
        if not self.file_store.exists(path):
            self._log.warning("metadata_not_found", path=path)
            raise MetadataNotFoundError(path)

        return ScriptMetadata.from_json(self.file_store.read_bytes(path), path=path)

    def _load_manifest(self) -> BuildManifest:
        path = self.config.manifest_path
        if not self.file_store.exists(path):
            raise ManifestNotFoundError(path)
        return BuildManifest.from_json(self.file_store.read_bytes(path), path=path)

    def _execute(self, command: str) -> CommandResult:
        self._log.info("command_started", command=command)
        result = self.executor.run(command)
        if not result.success:
            self._log.warning("command_failed", command=command)
        return result

    def _call(self, command: str) -> str:
        """Run a command, raising SystemCallFailureError if it fails.

        Returns:
            The command's combined output.
        """
        result = self._execute(command)
        if not result.success:
            raise SystemCallFailureError(result.output, command=command)
        return result.output
