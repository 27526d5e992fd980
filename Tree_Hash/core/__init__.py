# Auto-generated __init__.py

from . import errors
from .errors import ConcurrentIOError
from .errors import SettingsError
from .errors import TreeHashError
from .errors import TreeHashIOError
from .errors import UnsupportedFileTypeError
from .errors import format_error
from . import filesystem
from .filesystem import FileSystem
from .filesystem import LocalFileSystem
from . import logger
from .logger import log
from .logger import setup_logging
from . import models
from .models import FileType
from .models import HashResult
from .models import TreeEntry
from .models import tree_entry_sort_key
from . import object_hasher
from .object_hasher import format_ls_tree
from .object_hasher import hash_object
from .object_hasher import hash_with_entries
from .object_hasher import list_tree
from .object_hasher import quote_path
from . import stream_hasher
from .stream_hasher import hash_object_bytes
from .stream_hasher import hash_stream
from .stream_hasher import object_preamble

__all__ = [
    "errors",
    "filesystem",
    "logger",
    "models",
    "object_hasher",
    "stream_hasher",
    "ConcurrentIOError",
    "FileSystem",
    "FileType",
    "HashResult",
    "LocalFileSystem",
    "SettingsError",
    "TreeEntry",
    "TreeHashError",
    "TreeHashIOError",
    "UnsupportedFileTypeError",
    "format_error",
    "format_ls_tree",
    "hash_object",
    "hash_object_bytes",
    "hash_stream",
    "hash_with_entries",
    "list_tree",
    "log",
    "object_preamble",
    "quote_path",
    "setup_logging",
    "tree_entry_sort_key",
]
