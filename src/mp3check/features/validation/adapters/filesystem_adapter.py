"""src/mp3check/features/validation/adapters/filesystem_adapter.py
What: Adapter implementing FilesystemPort on top of platform helpers.
Why: Keep filesystem I/O in adapters while use cases target abstractions."""

from __future__ import annotations

import sys
from pathlib import Path

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from mp3check.features.validation.usecases.ports import FilesystemPort
from mp3check.platform.filesystem import list_files, list_subdirectories


class LocalFilesystemAdapter(FilesystemPort):
    """Adapter delegating directory listing to the shared platform module."""

    @override
    def list_subdirectories(self, directory: Path) -> list[Path]:
        return list_subdirectories(directory)

    @override
    def list_files(self, directory: Path) -> list[Path]:
        return list_files(directory)

    @override
    def exists(self, path: Path) -> bool:
        return path.exists()


__all__ = ["LocalFilesystemAdapter"]
