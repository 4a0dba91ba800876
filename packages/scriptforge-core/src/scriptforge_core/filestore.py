"""FileStore implementations.

- LocalFileStore: files under a project directory on disk
- MemoryFileStore: files held in a dict, for dry runs and tests
"""

from __future__ import annotations

import shutil
from pathlib import Path, PurePosixPath


class LocalFileStore:
    """FileStore over a directory on disk.

    Relative paths resolve against ``root``; absolute paths are used as-is.

    Attributes:
        root: Project working directory.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / path

    def read_text(self, path: str) -> str:
        return self._resolve(path).read_text(encoding="utf-8")

    def read_bytes(self, path: str) -> bytes:
        return self._resolve(path).read_bytes()

    def write(self, path: str, content: str | bytes) -> None:
        """Write a file, creating parent directories as needed."""
        target = self._resolve(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content, encoding="utf-8")

    def exists(self, path: str) -> bool:
        return self._resolve(path).exists()

    def mkdir(self, path: str) -> None:
        self._resolve(path).mkdir(parents=True, exist_ok=True)

    def delete(self, path: str) -> None:
        """Delete a file or a directory tree.

        Raises:
            FileNotFoundError: If nothing exists at ``path``.
        """
        target = self._resolve(path)
        if target.is_dir():
            shutil.rmtree(target)
        else:
            target.unlink()


class MemoryFileStore:
    """In-memory FileStore.

    Writing a file implicitly creates its parent directories, matching
    LocalFileStore.

    Example:
        >>> store = MemoryFileStore()
        >>> store.write("build/index.wasm", b"\\x00asm")
        >>> store.exists("build")
        True
    """

    def __init__(self, files: dict[str, str | bytes] | None = None) -> None:
        self._files: dict[str, bytes] = {}
        self._dirs: set[str] = set()
        for path, content in (files or {}).items():
            self.write(path, content)

    @staticmethod
    def _key(path: str) -> str:
        return PurePosixPath(path).as_posix()

    def _add_parents(self, key: str) -> None:
        for parent in PurePosixPath(key).parents:
            if str(parent) != ".":
                self._dirs.add(parent.as_posix())

    def read_text(self, path: str) -> str:
        return self.read_bytes(path).decode("utf-8")

    def read_bytes(self, path: str) -> bytes:
        key = self._key(path)
        if key not in self._files:
            raise FileNotFoundError(path)
        return self._files[key]

    def write(self, path: str, content: str | bytes) -> None:
        key = self._key(path)
        self._files[key] = content.encode("utf-8") if isinstance(content, str) else content
        self._add_parents(key)

    def exists(self, path: str) -> bool:
        key = self._key(path)
        return key in self._files or key in self._dirs

    def mkdir(self, path: str) -> None:
        key = self._key(path)
        self._dirs.add(key)
        self._add_parents(key)

    def delete(self, path: str) -> None:
        """Delete a file or a directory and everything below it.

        Raises:
            FileNotFoundError: If nothing exists at ``path``.
        """
        key = self._key(path)
        if key in self._files:
            del self._files[key]
            return
        if key not in self._dirs:
            raise FileNotFoundError(path)

        prefix = f"{key}/"
        self._dirs = {d for d in self._dirs if d != key and not d.startswith(prefix)}
        self._files = {f: c for f, c in self._files.items() if not f.startswith(prefix)}
