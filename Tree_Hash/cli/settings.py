import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from Tree_Hash.core.errors import SettingsError


# ----------------------------
# Settings
# ----------------------------

CONFIG_DIR = Path.home() / ".config" / "tree_hash"
SETTINGS_FILE = "settings.json"
LOG_LEVEL_ENV = "TREE_HASH_LOG_LEVEL"

DEFAULT_SETTINGS = {
    "hashing": {
        "chunk_size": 64 * 1024,
    },
    "logging": {
        "level": "WARNING",
    },
}


def load_settings(config_dir: Optional[Path] = None) -> Dict[str, Any]:
    """
    Defaults, overlaid with <config_dir>/settings.json, overlaid with
    the environment. Sections merge one level deep.
    """
    root = Path(config_dir) if config_dir is not None else CONFIG_DIR
    settings_path = root / SETTINGS_FILE

    merged = json.loads(json.dumps(DEFAULT_SETTINGS))

    if settings_path.exists():
        try:
            with open(settings_path, "r", encoding="utf-8") as f:
                user_settings = json.load(f)
        except (OSError, ValueError) as exc:
            raise SettingsError(str(settings_path), exc) from exc

        if not isinstance(user_settings, dict):
            raise SettingsError(str(settings_path), "top level must be an object")

        for k, v in user_settings.items():
            if k in merged and not isinstance(v, dict):
                raise SettingsError(str(settings_path), f"section {k!r} must be an object, got {v!r}")
            if k in merged:
                merged[k].update(v)
            else:
                merged[k] = v

    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        merged["logging"]["level"] = env_level

    level = merged["logging"].get("level")
    if not isinstance(level, str) or not level:
        raise SettingsError(str(settings_path), f"logging.level must be a level name, got {level!r}")

    chunk_size = merged["hashing"].get("chunk_size")
    if not isinstance(chunk_size, int) or isinstance(chunk_size, bool) or chunk_size <= 0:
        raise SettingsError(str(settings_path), f"hashing.chunk_size must be a positive integer, got {chunk_size!r}")

    return merged
