"""Unit tests for the scriptforge error hierarchy."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from scriptforge_core.errors import (
    BuildScriptNotFoundError,
    ConfigurationError,
    DependencyInstallError,
    DomainError,
    InfrastructureError,
    InvalidBuildScriptError,
    LanguageNotSupportedError,
    MetadataNotFoundError,
    MetadataValidationError,
    ScriptForgeError,
    SystemCallFailureError,
    WebAssemblyBinaryNotFoundError,
)


class TestHierarchy:
    """Errors are classified as infrastructure or domain failures."""

    @pytest.mark.parametrize(
        "error",
        [
            BuildScriptNotFoundError(),
            InvalidBuildScriptError(),
            SystemCallFailureError("out", command="npm run build"),
            WebAssemblyBinaryNotFoundError("build/index.wasm"),
            DependencyInstallError("failed"),
            LanguageNotSupportedError("rust", ["typescript"]),
        ],
    )
    def test_infrastructure_errors(self, error: ScriptForgeError) -> None:
        """Process and project file failures are infrastructure errors."""
        assert isinstance(error, InfrastructureError)
        assert not isinstance(error, DomainError)

    @pytest.mark.parametrize(
        "error",
        [MetadataNotFoundError("build/metadata.json"), MetadataValidationError("bad")],
    )
    def test_domain_errors(self, error: ScriptForgeError) -> None:
        """Missing or malformed metadata is a domain error."""
        assert isinstance(error, DomainError)
        assert not isinstance(error, InfrastructureError)


class TestSystemCallFailureError:
    """Tests for SystemCallFailureError."""

    def test_message_is_output(self) -> None:
        """The message is exactly the captured output."""
        error = SystemCallFailureError("error_output\n", command="npm run build")

        assert str(error) == "error_output\n"
        assert error.user_message == "error_output\n"
        assert error.command == "npm run build"

    def test_empty_output(self) -> None:
        """Empty output is not replaced by a default message."""
        assert str(SystemCallFailureError("", command="npm run build")) == ""

    def test_not_logged(self) -> None:
        """The runner already logs the failed command."""
        with capture_logs() as logs:
            SystemCallFailureError("error_output\n", command="npm run build")

        assert logs == []


class TestInternalDetails:
    """Internal details are logged, never shown."""

    def test_details_logged_not_in_message(self) -> None:
        """internal_details goes to the log only."""
        with capture_logs() as logs:
            error = ScriptForgeError("Build failed", internal_details="secret path /home/ci")

        assert str(error) == "Build failed"
        assert logs[0]["event"] == "scriptforge_error"
        assert logs[0]["internal_details"] == "secret path /home/ci"

    def test_no_details_no_log(self) -> None:
        """Errors without internal details log nothing."""
        with capture_logs() as logs:
            MetadataNotFoundError("build/metadata.json")

        assert logs == []


class TestMessages:
    """User-facing messages carry the missing resource."""

    def test_language_not_supported(self) -> None:
        """Supported languages are listed."""
        error = LanguageNotSupportedError("rust", ["typescript"])

        assert str(error) == "Language 'rust' is not supported. Supported: typescript"

    def test_configuration_error_with_file(self) -> None:
        """The file path is appended when known."""
        error = ConfigurationError("Invalid YAML", file_path="scriptforge.yaml")

        assert str(error) == "Invalid YAML (in scriptforge.yaml)"
        assert error.file_path == "scriptforge.yaml"

    def test_wasm_not_found(self) -> None:
        """The expected binary path is in the message."""
        assert "build/index.wasm" in str(WebAssemblyBinaryNotFoundError("build/index.wasm"))
