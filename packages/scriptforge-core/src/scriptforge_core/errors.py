"""Custom exception hierarchy for scriptforge-core.

This module defines the exception classes raised by task runners:
- ScriptForgeError: Base exception for all scriptforge errors
- InfrastructureError: Process, manifest and file-level failures
- DomainError: Missing or invalid build products (metadata)

User-facing messages are safe to display. Technical details passed as
``internal_details`` are logged through structlog and never shown.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class ScriptForgeError(Exception):
    """Base exception for scriptforge.

    Args:
        user_message: Safe message to display to the user.
        internal_details: Optional technical details for logging only.

    Example:
        >>> raise ScriptForgeError(
        ...     "Build failed",
        ...     internal_details="exit status 1 from 'npm run build'",
        ... )
    """

    def __init__(
        self,
        user_message: str,
        *,
        internal_details: str | None = None,
    ) -> None:
        """Initialize ScriptForgeError.

        Args:
            user_message: Safe message to display to the user.
            internal_details: Technical details for internal logging only.
        """
        super().__init__(user_message)
        self.user_message = user_message

        if internal_details:
            logger.error(
                "scriptforge_error",
                error_type=self.__class__.__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


class InfrastructureError(ScriptForgeError):
    """Raised when a process, manifest or project file is at fault."""


class DomainError(ScriptForgeError):
    """Raised when a build product is missing or invalid."""


class ManifestNotFoundError(InfrastructureError):
    """Raised when the project manifest (package.json) does not exist.

    Attributes:
        path: Project-relative path of the manifest.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Project manifest not found: {path}")
        self.path = path


class InvalidManifestError(InfrastructureError):
    """Raised when the project manifest is not a well-formed JSON object.

    Attributes:
        path: Project-relative path of the manifest.
    """

    def __init__(self, path: str, *, internal_details: str | None = None) -> None:
        super().__init__(
            f"Project manifest is not valid JSON: {path}",
            internal_details=internal_details,
        )
        self.path = path


class BuildScriptNotFoundError(InfrastructureError):
    """Raised when the manifest declares no ``build`` script."""

    def __init__(self, script_name: str = "build") -> None:
        super().__init__(f"Build script not found: add a '{script_name}' script to package.json")
        self.script_name = script_name


class InvalidBuildScriptError(InfrastructureError):
    """Raised when the ``build`` script is declared but blank."""

    def __init__(self, script_name: str = "build") -> None:
        super().__init__(f"Invalid build script: '{script_name}' in package.json is empty")
        self.script_name = script_name


class SystemCallFailureError(InfrastructureError):
    """Raised when a subprocess run during a build reports failure.

    The message is the captured combined output, verbatim. It may be the
    empty string when the process printed nothing.

    Attributes:
        output: Captured combined stdout/stderr.
        command: The command that failed.

    Example:
        >>> err = SystemCallFailureError("", command="npm run build")
        >>> str(err)
        ''
    """

    def __init__(self, output: str, *, command: str) -> None:
        """Initialize SystemCallFailureError.

        Args:
            output: Captured combined stdout/stderr of the process.
            command: Command line that was executed.
        """
        super().__init__(output)
        self.output = output
        self.command = command


class WebAssemblyBinaryNotFoundError(InfrastructureError):
    """Raised when the build completed without producing the wasm binary.

    Attributes:
        path: Project-relative path where the binary was expected.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"WebAssembly binary not found: {path}")
        self.path = path


class DependencyInstallError(InfrastructureError):
    """Raised when dependencies cannot be installed.

    Covers a failing runtime version query, a runtime below the required
    minimum, and a failing install command.
    """


class LibraryNotFoundError(InfrastructureError):
    """Raised when a library is absent from the installed dependency tree.

    Attributes:
        library_name: Name of the requested library.
    """

    def __init__(self, library_name: str) -> None:
        super().__init__(f"Library '{library_name}' is not installed")
        self.library_name = library_name


class LanguageNotSupportedError(InfrastructureError):
    """Raised when no task runner is registered for a language.

    Attributes:
        language: The requested language.
        supported: Languages with a registered runner.
    """

    def __init__(self, language: str, supported: list[str]) -> None:
        supported_str = ", ".join(supported) if supported else "none"
        super().__init__(f"Language '{language}' is not supported. Supported: {supported_str}")
        self.language = language
        self.supported = supported


class ConfigurationError(ScriptForgeError):
    """Raised when a scriptforge configuration file is invalid.

    Attributes:
        file_path: Path to the configuration file (if known).
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        full_message = f"{user_message} (in {file_path})" if file_path else user_message
        super().__init__(full_message, internal_details=internal_details)
        self.file_path = file_path


class MetadataNotFoundError(DomainError):
    """Raised when the build produced no metadata descriptor.

    Attributes:
        path: Project-relative path where metadata was expected.
    """

    def __init__(self, path: str) -> None:
        super().__init__(f"Metadata file not found: {path}. Did the build run 'gen-metadata'?")
        self.path = path


class MetadataValidationError(DomainError):
    """Raised when the metadata descriptor is malformed.

    Use this exception when:
    - metadata.json is not valid JSON
    - schemaVersions is missing or empty
    - a schema version lacks major/minor
    """
