"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

from pathlib import Path


def list_subdirectories(directory: Path) -> list[Path]:
    """Return the immediate subdirectories of ``directory``, sorted by name."""

    return sorted(entry for entry in directory.iterdir() if entry.is_dir())


def list_files(directory: Path) -> list[Path]:
    """Return the regular files directly inside ``directory``, sorted by name."""

    return sorted(entry for entry in directory.iterdir() if entry.is_file())


def is_existing_directory(path: Path) -> bool:
    """Return whether ``path`` exists and is a directory."""

    return path.exists() and path.is_dir()


__all__ = ["is_existing_directory", "list_files", "list_subdirectories"]
