"""Environment and persisted-config lookups.

Terminal width and block size come from the environment first, then from the
JSON config file, then from built-in defaults. Malformed values at any level
fall through to the next source.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from platformdirs import user_config_dir

from .options import DEFAULT_BLOCK_SIZE

APP_NAME = "gridls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_COLUMNS = 80


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _positive_int(value: object) -> int | None:
    """Parse ``value`` as a positive integer, ``None`` otherwise.

    Booleans are rejected even though they are ``int`` instances.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if not isinstance(value, str):
        return None
    try:
        parsed = int(value.strip())
    except ValueError:
        return None
    return parsed if parsed > 0 else None


def _resolve(env_name: str, config_key: str, default: int, environ: Mapping[str, str] | None) -> int:
    env = os.environ if environ is None else environ
    from_env = _positive_int(env.get(env_name))
    if from_env is not None:
        return from_env
    from_config = _positive_int(load_config().get(config_key))
    if from_config is not None:
        return from_config
    return default


def terminal_columns(environ: Mapping[str, str] | None = None) -> int:
    """Return the target output width (``COLUMNS``, config ``columns``, 80)."""
    return _resolve("COLUMNS", "columns", DEFAULT_COLUMNS, environ)


def block_size(environ: Mapping[str, str] | None = None) -> int:
    """Return the block unit in bytes (``BLOCKSIZE``, config ``block_size``, 512)."""
    return _resolve("BLOCKSIZE", "block_size", DEFAULT_BLOCK_SIZE, environ)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_COLUMNS",
    "load_config",
    "terminal_columns",
    "block_size",
]
