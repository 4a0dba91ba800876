"""TypeScript task runner.

Builds npm-managed TypeScript script projects. The project's
``package.json`` must declare a ``build`` script compiling to
``build/index.wasm`` and a ``gen-metadata`` script writing
``build/metadata.json``; this runner only invokes them through npm.
"""

from __future__ import annotations

import json
from typing import Any

from scriptforge_core.errors import (
    DependencyInstallError,
    LibraryNotFoundError,
    SystemCallFailureError,
    WebAssemblyBinaryNotFoundError,
)
from scriptforge_core.models import RuntimeVersion
from scriptforge_core.runners.base import TaskRunner

BUILD_SCRIPT = "build"


class TypeScriptTaskRunner(TaskRunner):
    """Task runner for TypeScript projects built with npm and node.

    Example:
        >>> runner = TypeScriptTaskRunner("my-script")
        >>> if not runner.dependencies_installed():
        ...     runner.install_dependencies()
        >>> binary = runner.build()
    """

    language = "typescript"

    def build(self) -> bytes:
        """Compile the project and return the wasm binary.

        Runs the build and gen-metadata scripts, then reads the binary
        and deletes it from the build directory.

        Returns:
            Contents of the compiled binary.

        Raises:
            ManifestNotFoundError: If package.json does not exist.
            InvalidManifestError: If package.json is malformed.
            BuildScriptNotFoundError: If no build script is declared.
            InvalidBuildScriptError: If the build script is blank.
            SystemCallFailureError: If either script fails.
            WebAssemblyBinaryNotFoundError: If no binary was produced.
        """
        self._load_manifest().require_script(BUILD_SCRIPT)

        self._log.info("build_started")
        self._call(self.config.build_command)
        self._call(self.config.gen_metadata_command)

        wasm_path = self.config.wasm_path
        if not self.file_store.exists(wasm_path):
            self._log.error("wasm_not_found", path=wasm_path)
            raise WebAssemblyBinaryNotFoundError(wasm_path)

        binary = self.file_store.read_bytes(wasm_path)
        self.file_store.delete(wasm_path)

        self._log.info("build_completed", size_bytes=len(binary))
        return binary

    def install_dependencies(self) -> None:
        """Install dependencies with npm after checking the node version.

        Raises:
            DependencyInstallError: If node cannot report its version, the
                version is below the required minimum, or npm install fails.
        """
        version = self._runtime_version()
        required = self.config.runtime

        if not required.is_satisfied_by(version.major, version.minor):
            self._log.error("runtime_too_old", version=str(version), required=str(required))
            raise DependencyInstallError(
                f"Node version must be >= {required}. Current version: {version}."
            )

        result = self._execute(self.config.install_command)
        if not result.success:
            raise DependencyInstallError(result.output)

        self._log.info("dependencies_installed", runtime=str(version))

    def library_version(self, library_name: str) -> str:
        """Return the installed version of an npm library.

        npm exits non-zero on peer dependency problems while still
        printing the tree, so output is parsed even when the command fails.

        Args:
            library_name: npm package name.

        Returns:
            Installed version string.

        Raises:
            SystemCallFailureError: If npm printed no dependency tree.
            LibraryNotFoundError: If the library is not installed.
        """
        command = self.config.list_command
        result = self._execute(command)

        try:
            tree: Any = json.loads(result.output)
        except json.JSONDecodeError as e:
            raise SystemCallFailureError(result.output, command=command) from e

        dependencies = tree.get("dependencies") if isinstance(tree, dict) else None
        entry = dependencies.get(library_name) if isinstance(dependencies, dict) else None
        version = entry.get("version") if isinstance(entry, dict) else None

        if not isinstance(version, str) or not version:
            raise LibraryNotFoundError(library_name)
        return version

    def _runtime_version(self) -> RuntimeVersion:
        result = self._execute(self.config.version_command)
        if not result.success:
            raise DependencyInstallError(result.output)

        try:
            return RuntimeVersion.parse(result.output)
        except ValueError as e:
            raise DependencyInstallError(
                f"Unable to determine node version from output: {result.output.strip()}"
            ) from e
