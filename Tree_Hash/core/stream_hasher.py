import hashlib
from typing import BinaryIO, Callable, Iterable, Iterator, Optional, Tuple

from Tree_Hash.core.errors import TreeHashIOError


DEFAULT_CHUNK_SIZE = 64 * 1024


def object_preamble(kind: str, size: int) -> bytes:
    """
    git object header: b"<kind> <decimal size>\\0".
    """
    return f"{kind} {size}".encode("ascii") + b"\0"


def iter_file_chunks(handle: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    while True:
        chunk = handle.read(chunk_size)
        if not chunk:
            return
        yield chunk


def hash_stream(
    chunks: Iterable[bytes],
    *,
    path: Optional[str] = None,
    digest_factory: Callable = hashlib.sha256,
) -> Tuple[bytes, int]:
    """
    Digest the concatenation of `chunks`.

    Returns the raw digest and the number of bytes consumed. OS errors
    raised while pulling chunks (live file reads) surface as
    TreeHashIOError for `path`.
    """
    h = digest_factory()
    consumed = 0
    try:
        for chunk in chunks:
            h.update(chunk)
            consumed += len(chunk)
    except OSError as exc:
        raise TreeHashIOError(path or "<stream>", exc) from exc
    return h.digest(), consumed


def hash_object_bytes(kind: str, body: bytes, digest_factory: Callable = hashlib.sha256) -> bytes:
    # In-memory input; nothing here can fail with a reportable error.
    h = digest_factory()
    h.update(object_preamble(kind, len(body)))
    h.update(body)
    return h.digest()
