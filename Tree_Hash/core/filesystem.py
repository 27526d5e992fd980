import os
from pathlib import Path
from typing import BinaryIO, List, Optional, Protocol


# ============================================================
# Filesystem collaborator
# ============================================================

class FileSystem(Protocol):
    """
    The four calls the hasher needs from a filesystem.

    `lstat` must not follow a terminal symlink. Paths are plain strings,
    either absolute or relative to whatever root the implementation uses.
    """

    def lstat(self, path: str) -> os.stat_result: ...

    def list_dir(self, path: str) -> List[str]: ...

    def open_bytes(self, path: str) -> BinaryIO: ...

    def readlink(self, path: str) -> bytes: ...

    def join(self, path: str, name: str) -> str: ...


class LocalFileSystem:
    """
    Local disk, with relative paths resolved against `root`.
    """

    def __init__(self, root: Optional[Path] = None):
        self.root = Path(root) if root is not None else Path.cwd()

    def _resolve(self, path: str) -> Path:
        # Absolute paths replace the root when joined.
        return self.root / path

    def lstat(self, path: str) -> os.stat_result:
        return os.lstat(self._resolve(path))

    def list_dir(self, path: str) -> List[str]:
        return os.listdir(self._resolve(path))

    def open_bytes(self, path: str) -> BinaryIO:
        return open(self._resolve(path), "rb")

    def readlink(self, path: str) -> bytes:
        return os.fsencode(os.readlink(self._resolve(path)))

    def join(self, path: str, name: str) -> str:
        return os.path.join(path, name)
