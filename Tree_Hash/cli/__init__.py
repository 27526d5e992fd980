# Auto-generated __init__.py

from . import settings
from .settings import DEFAULT_SETTINGS
from .settings import load_settings
from . import treehash
from .treehash import build_parser
from .treehash import main
from .treehash import run

__all__ = [
    "settings",
    "treehash",
    "DEFAULT_SETTINGS",
    "build_parser",
    "load_settings",
    "main",
    "run",
]
