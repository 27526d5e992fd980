import json
from typing import Any, Dict


# ============================================================
# Error taxonomy
# ============================================================

class TreeHashError(Exception):
    """
    Base class for every reportable failure.

    Each subclass carries a stable machine-readable `code` and a
    `details` mapping so the CLI can emit structured output.
    """
    code = "treehash-error"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": {k: _jsonable(v) for k, v in self.details.items()},
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), sort_keys=True)


class UnsupportedFileTypeError(TreeHashError):
    """Path is a pipe, socket, device or other type git has no object for."""
    code = "treehash-error-unsupported-file-type"

    def __init__(self, type_name: str, path: str):
        super().__init__(
            f"git hashes can not describe {type_name} files; found one at {path}",
            type=type_name,
            path=path,
        )


class TreeHashIOError(TreeHashError):
    """Raw IO failed while scanning the filesystem."""
    code = "treehash-error-io"

    def __init__(self, path: str, cause: BaseException):
        super().__init__(
            f"io error at {path}: {cause}",
            path=path,
            cause=cause,
        )


class ConcurrentIOError(TreeHashError):
    """
    Metadata and content disagree, most likely because the tree changed
    while it was being hashed. May also mean the filesystem lies about sizes.
    """
    code = "treehash-error-concurrent-io"

    @classmethod
    def size_mismatch(cls, path: str, claimed_size: int, observed_size: int):
        return cls(
            f"expected file size {claimed_size} but read {observed_size} bytes at path {path!r}",
            path=path,
            claimed_size=claimed_size,
            observed_size=observed_size,
        )

    @classmethod
    def lost_symlink(cls, path: str, cause: BaseException):
        return cls(
            f"found symlink at path {path!r} but readlink failed: {cause}",
            path=path,
            cause=cause,
        )


class SettingsError(TreeHashError):
    """Settings file unreadable or holding invalid values."""
    code = "treehash-error-config"

    def __init__(self, path: str, cause: Any):
        super().__init__(
            f"invalid settings in {path}: {cause}",
            path=path,
            cause=cause,
        )


def format_error(e: BaseException) -> str:
    name = e.__class__.__name__
    msg = str(e).strip()
    return f"{name}: {msg}" if msg else name


def _jsonable(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="surrogateescape")
    if isinstance(value, BaseException):
        return format_error(value)
    return str(value)
