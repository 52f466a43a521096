"""Locations of the configuration file and the run log.

Policy (portable by default):
- Config: ``<repo_root>/config/config.toml``; ``MP3CHECK_CONFIG_DIR`` replaces
  the ``config`` directory.
- Logs: ``<repo_root>/logs/mp3check.log``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

CONFIG_DIR_ENV: Final[str] = "MP3CHECK_CONFIG_DIR"
CONFIG_FILE_NAME: Final[str] = "config.toml"
LOG_FILE_NAME: Final[str] = "mp3check.log"


def _detect_repo_root(start: Path | None = None) -> Path:
    """Find the checkout holding this package.

    Walks up from ``start`` (this file by default) until a directory with
    ``pyproject.toml`` or ``.git`` is found; falls back to the working directory.
    """
    here = (start or Path(__file__).resolve()).parent
    for candidate in (here, *here.parents):
        if (candidate / "pyproject.toml").exists() or (candidate / ".git").exists():
            return candidate
    return Path.cwd()


def _env_directory(env_var: str) -> Path | None:
    raw = os.environ.get(env_var, "").strip()
    if not raw:
        return None
    return Path(raw).expanduser().resolve()


def default_config_dir() -> Path:
    """Directory holding ``config.toml``."""
    override = _env_directory(CONFIG_DIR_ENV)
    if override is not None:
        return override
    return (_detect_repo_root() / "config").resolve()


def default_config_path() -> Path:
    """Path of the TOML configuration file."""
    return default_config_dir() / CONFIG_FILE_NAME


def default_log_file() -> Path:
    """Path of the rotating run log."""
    return (_detect_repo_root() / "logs" / LOG_FILE_NAME).resolve()


__all__ = [
    "CONFIG_DIR_ENV",
    "default_config_dir",
    "default_config_path",
    "default_log_file",
]
