import os
import random
from pathlib import Path

import pytest
from loguru import logger

from Tree_Hash.core.filesystem import LocalFileSystem


@pytest.fixture(autouse=True)
def reset_loguru(monkeypatch):
    """
    Keep CLI tests from leaking loguru sinks (bound to captured stderr)
    or settings from the environment into other tests.
    """
    monkeypatch.delenv("TREE_HASH_LOG_LEVEL", raising=False)
    yield
    logger.remove()
    logger.disable("Tree_Hash")


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    a_file
    a_symlink -> "target string"
    a_dir/other_file
    a_dir/more_files
    a_dir/deeper/samefile
    """
    root = tmp_path / "sample"
    root.mkdir()
    (root / "a_file").write_text("a file\n")
    (root / "a_dir").mkdir()
    (root / "a_dir" / "other_file").write_text("second file\n")
    (root / "a_dir" / "more_files").write_text("more file\n")
    (root / "a_dir" / "deeper").mkdir()
    (root / "a_dir" / "deeper" / "samefile").write_text("more file\n")
    os.symlink("target string", root / "a_symlink")
    return root


class ShuffledFileSystem(LocalFileSystem):
    """Returns directory listings in a different random order on every call."""

    def __init__(self, root=None, seed: int = 0):
        super().__init__(root)
        self._rng = random.Random(seed)

    def list_dir(self, path):
        names = super().list_dir(path)
        self._rng.shuffle(names)
        return names


class RewritingFileSystem(LocalFileSystem):
    """Replaces a file's content between lstat and open."""

    def __init__(self, victim: str, new_content: bytes, root=None):
        super().__init__(root)
        self.victim = victim
        self.new_content = new_content

    def open_bytes(self, path):
        if os.path.basename(path) == self.victim:
            self._resolve(path).write_bytes(self.new_content)
        return super().open_bytes(path)


class VanishingSymlinkFileSystem(LocalFileSystem):
    """readlink fails as if the link was removed after lstat."""

    def readlink(self, path):
        raise FileNotFoundError(2, "No such file or directory", path)


class FakeModeFileSystem(LocalFileSystem):
    """Reports a chosen st_mode for one entry name."""

    def __init__(self, name: str, st_mode: int, root=None):
        super().__init__(root)
        self.name = name
        self.st_mode = st_mode

    def lstat(self, path):
        st = super().lstat(path)
        if os.path.basename(path) == self.name:
            fields = list(st)
            fields[0] = self.st_mode
            return os.stat_result(fields)
        return st
