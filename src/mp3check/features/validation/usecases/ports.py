"""
Summary: Ports defining the audit use case dependencies.
Why: Decouple the walker from mutagen and the disk so tests can use fakes.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from mp3check.shared.track_metadata import TrackMetadata


class TagStoreError(RuntimeError):
    """Raised when tags of an existing file cannot be read or written."""

    def __init__(self, file_path: Path, reason: str) -> None:
        super().__init__(f"Tag access failed for {file_path}: {reason}")
        self.file_path: Path = file_path
        self.reason: str = reason


@runtime_checkable
class TagStorePort(Protocol):
    """Port for reading and writing the tags of one audio file."""

    def load(self, file_path: Path) -> TrackMetadata:
        """Read the tags of ``file_path``.

        Raises:
            FileNotFoundError: If the file does not exist.
            TagStoreError: If the tags cannot be read.
        """
        ...

    def save(self, file_path: Path, metadata: TrackMetadata) -> None:
        """Write every field of ``metadata`` back to ``file_path`` at once.

        Raises:
            TagStoreError: If the tags cannot be written.
        """
        ...


@runtime_checkable
class FilesystemPort(Protocol):
    """Port abstracting directory enumeration."""

    def list_subdirectories(self, directory: Path) -> list[Path]:
        """Return a snapshot of the subdirectories of ``directory``."""
        ...

    def list_files(self, directory: Path) -> list[Path]:
        """Return a snapshot of the files directly inside ``directory``."""
        ...

    def exists(self, path: Path) -> bool:
        """Return whether ``path`` exists."""
        ...


__all__ = ["FilesystemPort", "TagStoreError", "TagStorePort"]
