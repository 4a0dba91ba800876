"""Task runner configuration model.

Paths, command lines and the runtime version requirement used by task
runners. Defaults match an npm-managed TypeScript script project; any
field can be overridden from a YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from scriptforge_core.errors import ConfigurationError

# Module constants for Pydantic field descriptions
PATH_DESCRIPTION = "Project-relative path"
COMMAND_DESCRIPTION = "Shell command line"


class RuntimeRequirement(BaseModel):
    """Minimum runtime (node) version accepted before installing dependencies.

    Attributes:
        major: Minimum major version
        minor: Minimum minor version within ``major``
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(default=14, ge=0, description="Minimum major version")
    minor: int = Field(default=15, ge=0, description="Minimum minor version")

    def is_satisfied_by(self, major: int, minor: int) -> bool:
        """Check a version against this requirement using numeric ordering."""
        return major > self.major or (major == self.major and minor >= self.minor)

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.0"


class TaskRunnerConfig(BaseModel):
    """Configuration for a task runner.

    Attributes:
        manifest_path: Project manifest declaring the build script
        metadata_path: Metadata descriptor written by gen-metadata
        wasm_path: Compiled binary produced by the build
        dependencies_dir: Dependency cache directory
        build_command: Command running the build script
        gen_metadata_command: Command running the metadata script
        version_command: Command printing the runtime version
        install_command: Command installing dependencies
        list_command: Command printing the dependency tree as JSON
        runtime: Minimum runtime version

    Example:
        >>> config = TaskRunnerConfig(runtime=RuntimeRequirement(major=16, minor=0))
        >>> config.build_command
        'npm run build'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    manifest_path: str = Field(default="package.json", description=PATH_DESCRIPTION)
    metadata_path: str = Field(default="build/metadata.json", description=PATH_DESCRIPTION)
    wasm_path: str = Field(default="build/index.wasm", description=PATH_DESCRIPTION)
    dependencies_dir: str = Field(default="node_modules", description=PATH_DESCRIPTION)
    build_command: str = Field(
        default="npm run build", min_length=1, description=COMMAND_DESCRIPTION
    )
    gen_metadata_command: str = Field(
        default="npm run gen-metadata", min_length=1, description=COMMAND_DESCRIPTION
    )
    version_command: str = Field(
        default="node --version", min_length=1, description=COMMAND_DESCRIPTION
    )
    install_command: str = Field(
        default="npm install --no-audit --no-optional --legacy-peer-deps --loglevel error",
        min_length=1,
        description=COMMAND_DESCRIPTION,
    )
    list_command: str = Field(
        default="npm -s list --json", min_length=1, description=COMMAND_DESCRIPTION
    )
    runtime: RuntimeRequirement = Field(
        default_factory=RuntimeRequirement,
        description="Minimum runtime version",
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> TaskRunnerConfig:
        """Load configuration overrides from a YAML file.

        An empty file yields the defaults.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            Validated TaskRunnerConfig instance.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ConfigurationError: If the YAML is invalid or fails validation.
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            with path.open("r") as f:
                data: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                "Invalid YAML", file_path=str(path), internal_details=str(e)
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a mapping", file_path=str(path))

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigurationError(
                "Invalid configuration", file_path=str(path), internal_details=str(e)
            ) from e
