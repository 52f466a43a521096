"""
Summary: Derive artist and album names from the folder layout.
Why: Tags are checked against the folder they live in, so the folder names are the reference.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath, PurePosixPath, PureWindowsPath

from mp3check.config.settings import ARTIST_NAME_SEPARATOR, NAME_CHARS
from mp3check.platform.logging import logger

from .names import NameValidator

# root/artist/<file> is the shallowest layout that names an artist.
MIN_ARTIST_SEGMENTS = 3


def _to_pure_path(raw_path: str | PurePath) -> PurePath:
    """Return a platform-aware ``PurePath`` for the given raw value."""

    if isinstance(raw_path, PurePath):
        return raw_path
    if "\\" in raw_path:
        return PureWindowsPath(raw_path)
    return PurePosixPath(raw_path)


def path_segments(path: str | PurePath) -> list[str]:
    """Split ``path`` into its segments, the drive or root counting as one.

    ``"C:\\Music\\Doe_John"`` yields ``["C:", "Music", "Doe_John"]``; an empty
    path yields no segments.
    """
    pure_path = _to_pure_path(path)
    if str(pure_path) in {"", "."}:
        return []

    anchor = pure_path.anchor
    segments: list[str] = []
    for part in pure_path.parts:
        if part == anchor:
            segments.append(anchor.rstrip("\\/") or anchor)
        else:
            segments.append(part)
    return segments


def derive_album_name(path: str | PurePath) -> str:
    """Return the album name of an album folder: its last path segment."""

    segments = path_segments(path)
    return segments[-1] if segments else ""


def derive_artist_name(path: str | PurePath, is_album_folder: bool) -> str:
    """Return the display artist name for an artist or album folder.

    The artist segment is the folder itself for artist folders and its parent
    for album folders. ``Last_First`` names are turned into ``First Last``;
    names without an underscore are returned unchanged.

    Args:
        path: Folder path.
        is_album_folder: Whether ``path`` points at an album folder.

    Returns:
        str: The artist name, or an empty string when the path cannot name an artist.
    """
    segments = path_segments(path)
    if len(segments) < MIN_ARTIST_SEGMENTS:
        logger.error(
            "The folder %s has fewer than %d path segments and cannot name an artist",
            path,
            MIN_ARTIST_SEGMENTS,
        )
        return ""

    candidate = segments[-2] if is_album_folder else segments[-1]
    if ARTIST_NAME_SEPARATOR not in candidate:
        return candidate

    parts = candidate.split(ARTIST_NAME_SEPARATOR)
    if len(parts) != 2:
        logger.error(
            "The artist folder name %r in %s is not of the form Last%sFirst",
            candidate,
            path,
            ARTIST_NAME_SEPARATOR,
        )
        return ""

    last, first = parts
    return f"{first} {last}"


@dataclass(frozen=True, slots=True)
class FolderPath:
    """A visited folder, located relative to the music root."""

    root: Path
    path: Path

    @property
    def segments(self) -> tuple[str, ...]:
        """Root-relative path segments."""
        return self.path.relative_to(self.root).parts

    @property
    def depth(self) -> int:
        """Number of folders between the root and this folder."""
        return len(self.segments)


@dataclass(frozen=True, slots=True)
class FolderContext:
    """Names every track in a terminal folder is checked against."""

    artist_name: str
    album_name: str | None = None

    @property
    def is_album(self) -> bool:
        """Whether the folder is an album folder."""
        return self.album_name is not None

    @classmethod
    def from_folder(cls, path: str | PurePath, is_album_folder: bool) -> "FolderContext | None":
        """Derive and validate the context of an artist or album folder.

        Returns:
            FolderContext | None: The context, or ``None`` when the artist or album
            name cannot be derived or is invalid. Failures are logged.
        """
        artist_name = derive_artist_name(path, is_album_folder)
        if not NameValidator.is_valid(artist_name, NAME_CHARS, label="artist name"):
            return None

        if not is_album_folder:
            return cls(artist_name=artist_name)

        album_name = derive_album_name(path)
        if not NameValidator.is_valid(album_name, NAME_CHARS, label="album name"):
            return None

        return cls(artist_name=artist_name, album_name=album_name)


__all__ = [
    "FolderContext",
    "FolderPath",
    "derive_album_name",
    "derive_artist_name",
    "path_segments",
]
