"""scriptforge-core: Build orchestration for extension script projects.

This package provides:
- TaskRunner: build, dependency install and metadata loading per language
- TaskRunnerConfig: paths, commands and runtime requirement
- ProcessExecutor / FileStore ports with subprocess and filesystem adapters
- The scriptforge error taxonomy
"""

from __future__ import annotations

__version__ = "0.1.0"

from scriptforge_core.config import RuntimeRequirement, TaskRunnerConfig
from scriptforge_core.errors import (
    BuildScriptNotFoundError,
    ConfigurationError,
    DependencyInstallError,
    DomainError,
    InfrastructureError,
    InvalidBuildScriptError,
    InvalidManifestError,
    LanguageNotSupportedError,
    LibraryNotFoundError,
    ManifestNotFoundError,
    MetadataNotFoundError,
    MetadataValidationError,
    ScriptForgeError,
    SystemCallFailureError,
    WebAssemblyBinaryNotFoundError,
)
from scriptforge_core.executor import SubprocessExecutor
from scriptforge_core.filestore import LocalFileStore, MemoryFileStore
from scriptforge_core.models import (
    BuildManifest,
    MetadataFlags,
    RuntimeVersion,
    SchemaVersion,
    ScriptMetadata,
)
from scriptforge_core.ports import CommandResult, FileStore, ProcessExecutor
from scriptforge_core.runners import (
    SUPPORTED_LANGUAGES,
    TaskRunner,
    TypeScriptTaskRunner,
    get_task_runner,
)

__all__ = [
    "__version__",
    # Runners
    "SUPPORTED_LANGUAGES",
    "TaskRunner",
    "TypeScriptTaskRunner",
    "get_task_runner",
    # Configuration
    "RuntimeRequirement",
    "TaskRunnerConfig",
    # Ports and adapters
    "CommandResult",
    "FileStore",
    "LocalFileStore",
    "MemoryFileStore",
    "ProcessExecutor",
    "SubprocessExecutor",
    # Models
    "BuildManifest",
    "MetadataFlags",
    "RuntimeVersion",
    "SchemaVersion",
    "ScriptMetadata",
    # Errors
    "BuildScriptNotFoundError",
    "ConfigurationError",
    "DependencyInstallError",
    "DomainError",
    "InfrastructureError",
    "InvalidBuildScriptError",
    "InvalidManifestError",
    "LanguageNotSupportedError",
    "LibraryNotFoundError",
    "ManifestNotFoundError",
    "MetadataNotFoundError",
    "MetadataValidationError",
    "ScriptForgeError",
    "SystemCallFailureError",
    "WebAssemblyBinaryNotFoundError",
]
