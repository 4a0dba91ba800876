"""Models for the files and values a task runner reads.

- BuildManifest: the project's package.json
- ScriptMetadata: build/metadata.json written by the gen-metadata script
- RuntimeVersion: output of ``node --version``
"""

from __future__ import annotations

import json
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from scriptforge_core.errors import (
    BuildScriptNotFoundError,
    InvalidBuildScriptError,
    InvalidManifestError,
    MetadataValidationError,
)

_VERSION_PATTERN = re.compile(r"^v?(\d+)(?:\.(\d+))?(?:\.(\d+))?")


def _first_error(error: PydanticValidationError) -> str:
    """Describe the first validation failure as ``field.path: reason``."""
    detail = error.errors()[0]
    location = ".".join(str(part) for part in detail["loc"])
    return f"{location}: {detail['msg']}" if location else detail["msg"]


class BuildManifest(BaseModel):
    """Project manifest (package.json).

    Only the ``scripts`` mapping is modelled; every other key is ignored.

    Attributes:
        scripts: Script name to command line.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    scripts: dict[str, Any] = Field(default_factory=dict, description="Named scripts")

    @classmethod
    def from_json(cls, content: str | bytes, path: str = "package.json") -> BuildManifest:
        """Parse a manifest document.

        Args:
            content: Raw JSON text, or UTF-8 encoded bytes.
            path: Path used in error messages.

        Returns:
            Parsed BuildManifest.

        Raises:
            InvalidManifestError: If the content is not a UTF-8 encoded JSON
                object with a ``scripts`` mapping.
        """
        try:
            text = content.decode("utf-8") if isinstance(content, bytes) else content
            data = json.loads(text)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise InvalidManifestError(path, internal_details=str(e)) from e

        if not isinstance(data, dict):
            raise InvalidManifestError(path, internal_details="top-level value is not an object")

        # "scripts": null reads the same as no scripts at all
        if data.get("scripts") is None:
            data = {**data, "scripts": {}}

        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise InvalidManifestError(path, internal_details=str(e)) from e

    def require_script(self, name: str) -> str:
        """Return a declared script, rejecting absent or blank ones.

        Args:
            name: Script name (e.g. "build").

        Returns:
            The script's command line.

        Raises:
            BuildScriptNotFoundError: If the script is not declared.
            InvalidBuildScriptError: If the script is empty, blank or not a string.
        """
        if name not in self.scripts:
            raise BuildScriptNotFoundError(name)

        script = self.scripts[name]
        if not isinstance(script, str) or not script.strip():
            raise InvalidBuildScriptError(name)

        return script


class SchemaVersion(BaseModel):
    """Version of a host schema a script was built against.

    Versions are kept as strings, the way metadata.json writes them.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    major: str = Field(..., min_length=1, description="Schema major version")
    minor: str = Field(..., min_length=1, description="Schema minor version")


class MetadataFlags(BaseModel):
    """Feature flags declared by the build."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    use_msgpack: bool = Field(default=False, description="Script exchanges msgpack payloads")


class ScriptMetadata(BaseModel):
    """Post-build metadata descriptor (build/metadata.json).

    Attributes:
        schema_versions: Schema name to version (JSON key ``schemaVersions``).
        flags: Optional build flags.

    Example:
        >>> metadata = ScriptMetadata.from_json(
        ...     '{"schemaVersions": {"example": {"major": "1", "minor": "0"}}}'
        ... )
        >>> metadata.schema_versions["example"].major
        '1'
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    schema_versions: dict[str, SchemaVersion] = Field(
        ...,
        alias="schemaVersions",
        min_length=1,
        description="Schema name to version",
    )
    flags: MetadataFlags = Field(default_factory=MetadataFlags, description="Build flags")

    @classmethod
    def from_json(cls, content: str | bytes, path: str = "build/metadata.json") -> ScriptMetadata:
        """Parse a metadata document.

        Args:
            content: Raw JSON text, or UTF-8 encoded bytes.
            path: Path used in error messages.

        Raises:
            MetadataValidationError: If the content is malformed. The message
                names the file and the first failing field.
        """
        try:
            text = content.decode("utf-8") if isinstance(content, bytes) else content
        except UnicodeDecodeError as e:
            raise MetadataValidationError(
                f"Invalid metadata in {path}: not UTF-8 encoded",
                internal_details=str(e),
            ) from e

        try:
            return cls.model_validate_json(text)
        except PydanticValidationError as e:
            raise MetadataValidationError(
                f"Invalid metadata in {path}: {_first_error(e)}",
                internal_details=str(e),
            ) from e

    def to_dict(self) -> dict[str, Any]:
        """Serialize back to the metadata.json shape."""
        return self.model_dump(by_alias=True)


class RuntimeVersion(BaseModel):
    """A semantic runtime version such as ``v14.15.0``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(..., ge=0)
    minor: int = Field(default=0, ge=0)
    patch: int = Field(default=0, ge=0)

    @classmethod
    def parse(cls, text: str) -> RuntimeVersion:
        """Parse ``node --version`` output.

        Each component is converted to an integer, so "v9.0.0" orders
        below "v14.0.0".

        Raises:
            ValueError: If no version number can be read.
        """
        match = _VERSION_PATTERN.match(text.strip())
        if match is None:
            raise ValueError(f"Unrecognised version string: {text!r}")

        major, minor, patch = match.groups()
        return cls(major=int(major), minor=int(minor or 0), patch=int(patch or 0))

    def __str__(self) -> str:
        return f"v{self.major}.{self.minor}.{self.patch}"
