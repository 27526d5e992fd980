from dataclasses import dataclass
from enum import Enum
import stat


MODE_REGULAR = b"100644"
MODE_EXECUTABLE = b"100755"
MODE_SYMLINK = b"120000"
MODE_DIRECTORY = b"40000"


class FileType(Enum):
    REGULAR = "regular"
    SYMLINK = "symlink"
    DIRECTORY = "directory"


def classify_mode(mode: int) -> FileType | None:
    """
    Map an lstat mode to a FileType.

    Returns None for anything git cannot describe (pipes, sockets, devices).
    """
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    return None


def unsupported_type_name(mode: int) -> str:
    if stat.S_ISFIFO(mode):
        return "pipe"
    if stat.S_ISSOCK(mode):
        return "socket"
    if stat.S_ISCHR(mode) or stat.S_ISBLK(mode):
        return "device"
    return "irregular"


@dataclass(frozen=True)
class HashResult:
    """
    Outcome of hashing one filesystem object.

    The raw lstat mode is kept because the parent directory needs it
    again (executable bit) when it writes its own tree entry.
    """
    digest: bytes
    file_type: FileType
    mode: int

    @property
    def hexdigest(self) -> str:
        return self.digest.hex()

    @property
    def executable(self) -> bool:
        return self.file_type is FileType.REGULAR and bool(self.mode & 0o111)

    @property
    def object_type(self) -> str:
        return "tree" if self.file_type is FileType.DIRECTORY else "blob"

    @property
    def mode_string(self) -> bytes:
        if self.file_type is FileType.REGULAR:
            return MODE_EXECUTABLE if self.executable else MODE_REGULAR
        if self.file_type is FileType.SYMLINK:
            return MODE_SYMLINK
        if self.file_type is FileType.DIRECTORY:
            return MODE_DIRECTORY
        raise AssertionError(f"no mode string for {self.file_type!r}")


@dataclass(frozen=True)
class TreeEntry:
    """
    One child record inside a tree object.
    """
    name: bytes
    result: HashResult

    @property
    def mode_string(self) -> bytes:
        return self.result.mode_string

    @property
    def sort_key(self) -> bytes:
        return tree_entry_sort_key(self.name, self.result.file_type)

    def encode(self) -> bytes:
        # No delimiter after the digest; its fixed width frames the record.
        return self.mode_string + b" " + self.name + b"\0" + self.result.digest


def tree_entry_sort_key(name: bytes, file_type: FileType) -> bytes:
    """
    git compares entry names byte-wise, as if directories had a trailing '/'.
    """
    if file_type is FileType.DIRECTORY:
        return name + b"/"
    return name
