import itertools
import os
from typing import Iterable, List, Tuple

from Tree_Hash.core.errors import (
    ConcurrentIOError,
    TreeHashIOError,
    UnsupportedFileTypeError,
)
from Tree_Hash.core.filesystem import FileSystem
from Tree_Hash.core.logger import log
from Tree_Hash.core.models import (
    FileType,
    HashResult,
    TreeEntry,
    classify_mode,
    unsupported_type_name,
)
from Tree_Hash.core.stream_hasher import (
    DEFAULT_CHUNK_SIZE,
    hash_object_bytes,
    hash_stream,
    iter_file_chunks,
    object_preamble,
)


# ============================================================
# Public API
# ============================================================

def hash_object(
    fs: FileSystem,
    path: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> HashResult:
    """
    Hash whatever lives at `path` the way git (sha256 object format) would.

    - Regular files and symlinks become blobs
    - Directories become trees, children hashed first
    - Anything else raises UnsupportedFileTypeError

    The first failure anywhere in the walk aborts the whole operation.
    """
    result, _ = hash_with_entries(fs, path, chunk_size=chunk_size)
    return result


def hash_with_entries(
    fs: FileSystem,
    path: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Tuple[HashResult, List[TreeEntry]]:
    """
    Like hash_object, but also returns the tree entries when `path`
    is a directory (empty list otherwise).
    """
    try:
        st = fs.lstat(path)
    except OSError as exc:
        raise TreeHashIOError(path, exc) from exc

    file_type = classify_mode(st.st_mode)
    entries: List[TreeEntry] = []

    if file_type is FileType.REGULAR:
        digest = _hash_regular_file(fs, path, st.st_size, chunk_size)
    elif file_type is FileType.SYMLINK:
        digest = _hash_symlink(fs, path, st.st_size)
    elif file_type is FileType.DIRECTORY:
        entries = list_tree(fs, path, chunk_size=chunk_size)
        digest = hash_object_bytes("tree", b"".join(e.encode() for e in entries))
    else:
        raise UnsupportedFileTypeError(unsupported_type_name(st.st_mode), path)

    result = HashResult(digest=digest, file_type=file_type, mode=st.st_mode)
    log("DEBUG", "hash", f"{result.object_type} {result.hexdigest} {path}")
    return result, entries


def list_tree(
    fs: FileSystem,
    path: str,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> List[TreeEntry]:
    """
    Hash every direct child of a directory and return the entries in
    git tree order.
    """
    try:
        names = fs.list_dir(path)
    except OSError as exc:
        raise TreeHashIOError(path, exc) from exc

    entries: List[TreeEntry] = []
    # Walk in byte order so the same tree always fails at the same path.
    for name in sorted(names, key=os.fsencode):
        child, _ = hash_with_entries(fs, fs.join(path, name), chunk_size=chunk_size)
        entries.append(TreeEntry(name=os.fsencode(name), result=child))

    entries.sort(key=lambda e: e.sort_key)
    return entries


def format_ls_tree(entries: Iterable[TreeEntry]) -> str:
    """
    Render entries like `git ls-tree`: "<mode> <type> <hash>\\t<name>".
    """
    lines = []
    for entry in entries:
        mode = entry.mode_string.decode("ascii").zfill(6)
        name = quote_path(entry.name)
        lines.append(f"{mode} {entry.result.object_type} {entry.result.hexdigest}\t{name}")
    return "\n".join(lines)


_C_ESCAPES = {
    0x07: "\\a",
    0x08: "\\b",
    0x09: "\\t",
    0x0A: "\\n",
    0x0B: "\\v",
    0x0C: "\\f",
    0x0D: "\\r",
    0x22: '\\"',
    0x5C: "\\\\",
}


def quote_path(name: bytes) -> str:
    """
    Quote a raw entry name like git's quote_path (core.quotePath on).

    Plain printable ASCII passes through; anything else is double-quoted
    with C escapes, octal for bytes that have none.
    """
    if all(0x20 <= b < 0x7F and b not in _C_ESCAPES for b in name):
        return name.decode("ascii")

    parts = []
    for b in name:
        if b in _C_ESCAPES:
            parts.append(_C_ESCAPES[b])
        elif 0x20 <= b < 0x7F:
            parts.append(chr(b))
        else:
            parts.append(f"\\{b:03o}")
    return '"' + "".join(parts) + '"'


# ============================================================
# Blob hashing
# ============================================================

def _hash_regular_file(fs: FileSystem, path: str, claimed_size: int, chunk_size: int) -> bytes:
    preamble = object_preamble("blob", claimed_size)

    try:
        handle = fs.open_bytes(path)
    except OSError as exc:
        raise TreeHashIOError(path, exc) from exc

    with handle:
        digest, consumed = hash_stream(
            itertools.chain((preamble,), iter_file_chunks(handle, chunk_size)),
            path=path,
        )

    _check_size(path, claimed_size, consumed - len(preamble))
    return digest


def _hash_symlink(fs: FileSystem, path: str, claimed_size: int) -> bytes:
    # Links are opaque blobs of their target; only the parent's mode differs.
    preamble = object_preamble("blob", claimed_size)

    try:
        target = fs.readlink(path)
    except OSError as exc:
        raise ConcurrentIOError.lost_symlink(path, exc) from exc

    digest, consumed = hash_stream((preamble, target), path=path)
    _check_size(path, claimed_size, consumed - len(preamble))
    return digest


def _check_size(path: str, claimed_size: int, observed_size: int) -> None:
    if observed_size != claimed_size:
        log(
            "WARNING",
            "hash",
            f"size changed while hashing {path}: {claimed_size} -> {observed_size}",
        )
        raise ConcurrentIOError.size_mismatch(path, claimed_size, observed_size)
