import argparse
import os
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from Tree_Hash.cli.settings import LOG_LEVEL_ENV, load_settings
from Tree_Hash.core.errors import SettingsError, TreeHashError, format_error
from Tree_Hash.core.filesystem import FileSystem, LocalFileSystem
from Tree_Hash.core.logger import log, setup_logging
from Tree_Hash.core.models import FileType
from Tree_Hash.core.object_hasher import format_ls_tree, hash_with_entries


EXIT_OK = 0
EXIT_ERROR = 9


# ----------------------------
# Runner
# ----------------------------

def run(
    path: str = ".",
    *,
    fs: Optional[FileSystem] = None,
    settings: Optional[Dict[str, Any]] = None,
    ls_tree: bool = False,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Hash `path` and print the result. Returns the process exit status.

    Nothing here calls sys.exit; the caller decides what to do with the code.
    """
    out = out or sys.stdout
    err = err or sys.stderr
    fs = fs or LocalFileSystem()
    target = os.path.normpath(path)

    try:
        settings = settings or load_settings()
        chunk_size = settings["hashing"]["chunk_size"]
        result, entries = hash_with_entries(fs, target, chunk_size=chunk_size)
    except TreeHashError as exc:
        log("ERROR", "cli", format_error(exc))
        print(exc.to_json(), file=err)
        return EXIT_ERROR

    log("INFO", "cli", f"{result.object_type} {result.hexdigest} {target}")

    if ls_tree and result.file_type is FileType.DIRECTORY:
        listing = format_ls_tree(entries)
        if listing:
            print(listing, file=out)
    else:
        print(result.hexdigest, file=out)

    return EXIT_OK


# ----------------------------
# Argument parsing
# ----------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree-hash",
        description=(
            "Print the git (sha256 object format) hash of a file, symlink "
            "or directory tree. .gitignore is not honoured."
        ),
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="path to hash (default: current directory)",
    )
    parser.add_argument(
        "--ls-tree",
        action="store_true",
        help="list a directory's entries like `git ls-tree` instead of its hash",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="directory holding settings.json (default: ~/.config/tree_hash)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="loguru level for stderr diagnostics (default from settings: WARNING)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args.config_dir)
    except TreeHashError as exc:
        print(exc.to_json(), file=sys.stderr)
        return EXIT_ERROR

    if args.log_level:
        settings["logging"]["level"] = args.log_level

    try:
        setup_logging(settings["logging"]["level"])
    except ValueError as exc:
        source = "--log-level" if args.log_level else f"logging.level / {LOG_LEVEL_ENV}"
        error = SettingsError(source, exc)
        print(error.to_json(), file=sys.stderr)
        return EXIT_ERROR

    return run(args.path, settings=settings, ls_tree=args.ls_tree)
