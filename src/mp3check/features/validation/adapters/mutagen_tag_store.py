"""ID3 tag store.

Where: src/mp3check/features/validation/adapters/mutagen_tag_store.py
What: Read and write the checked tag fields of MP3 files through mutagen's ID3 frames.
Why: Keep mutagen specifics out of the rule engine and the walker.
"""

from __future__ import annotations

import sys
import re
from pathlib import Path
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from mutagen import MutagenError
from mutagen.id3 import (
    COMM,
    ID3,
    TALB,
    TCOM,
    TCON,
    TDRC,
    TIT2,
    TPE1,
    TPE2,
    TPOS,
    TRCK,
    TYER,
    ID3NoHeaderError,
)

from mp3check.features.validation.usecases.ports import TagStoreError, TagStorePort
from mp3check.platform.logging import logger
from mp3check.shared.track_metadata import TrackMetadata

_LEADING_NUMBER: re.Pattern[str] = re.compile(r"^\s*(\d+)")

UTF8 = 3


def parse_leading_number(value: str | None) -> int:
    """Return the number before an optional ``/total`` suffix, ``0`` when absent."""
    if not value:
        return 0
    match = _LEADING_NUMBER.match(value)
    return int(match.group(1)) if match else 0


class MutagenTagStore(TagStorePort):
    """Tag store backed by ``mutagen.id3.ID3``."""

    TEXT_FRAMES: ClassVar[dict[str, type]] = {
        "title": TIT2,
        "album": TALB,
    }
    LIST_FRAMES: ClassVar[dict[str, type]] = {
        "performers": TPE1,
        "album_artists": TPE2,
        "composers": TCOM,
    }
    YEAR_FRAMES: ClassVar[tuple[str, ...]] = ("TDRC", "TYER")

    @override
    def load(self, file_path: Path) -> TrackMetadata:
        metadata = self._read(self._open(file_path))
        logger.debug("Loaded tags of %s: %s", file_path, metadata)
        return metadata

    @override
    def save(self, file_path: Path, metadata: TrackMetadata) -> None:
        # Frames are rewritten only where ``metadata`` differs from what
        # ``load`` reads; every other frame is written back as stored.
        current = self._read(self._open(file_path))
        tags = self._open(file_path, translate=False)
        v2_version = 3 if tags.version < (2, 4, 0) else 4

        for attribute, frame_class in self.TEXT_FRAMES.items():
            value: str | None = getattr(metadata, attribute)
            if value != getattr(current, attribute):
                self._replace(tags, frame_class, [value] if value else [])

        for attribute, frame_class in self.LIST_FRAMES.items():
            values: list[str] = getattr(metadata, attribute)
            if values != getattr(current, attribute):
                self._replace(tags, frame_class, list(values))

        if metadata.genres != current.genres:
            self._replace(tags, TCON, list(metadata.genres))

        if metadata.comment != current.comment:
            tags.delall("COMM")
            if metadata.comment:
                tags.add(COMM(encoding=UTF8, lang="eng", desc="", text=[metadata.comment]))

        if metadata.year != current.year:
            for key in self.YEAR_FRAMES:
                tags.delall(key)
            if metadata.year > 0:
                year_frame = TDRC if v2_version == 4 else TYER
                tags.add(year_frame(encoding=UTF8, text=[str(metadata.year)]))

        if metadata.disc != current.disc:
            self._replace_number(tags, TPOS, metadata.disc)
        if metadata.track != current.track:
            self._replace_number(tags, TRCK, metadata.track)

        if metadata.pictures != current.pictures:
            kept_pictures = set(metadata.pictures)
            pictures = [frame for frame in tags.getall("APIC") if frame.data in kept_pictures]
            tags.delall("APIC")
            for frame in pictures:
                tags.add(frame)

        try:
            tags.save(file_path, v2_version=v2_version)
        except (MutagenError, OSError) as exc:
            logger.error("Failed to write tags of %s: %s", file_path, exc)
            raise TagStoreError(file_path, str(exc)) from exc

    @classmethod
    def _read(cls, tags: ID3) -> TrackMetadata:
        return TrackMetadata(
            title=cls._first_text(tags, "TIT2"),
            performers=cls._all_text(tags, "TPE1"),
            genres=cls._genres(tags),
            comment=cls._comment(tags),
            year=cls._year(tags),
            album_artists=cls._all_text(tags, "TPE2"),
            composers=cls._all_text(tags, "TCOM"),
            disc=parse_leading_number(cls._first_text(tags, "TPOS")),
            album=cls._first_text(tags, "TALB"),
            track=parse_leading_number(cls._first_text(tags, "TRCK")),
            pictures=[frame.data for frame in tags.getall("APIC")],
        )

    @staticmethod
    def _open(file_path: Path, *, translate: bool = True) -> ID3:
        if not file_path.exists():
            raise FileNotFoundError(str(file_path))
        try:
            return ID3(file_path, translate=translate)
        except ID3NoHeaderError:
            return ID3()
        except (MutagenError, OSError) as exc:
            if "No such file" in str(exc):
                raise FileNotFoundError(str(exc)) from exc
            raise TagStoreError(file_path, str(exc)) from exc

    @staticmethod
    def _all_text(tags: ID3, key: str) -> list[str]:
        frame: Any = tags.get(key)
        if frame is None:
            return []
        return [str(text) for text in frame.text]

    @classmethod
    def _first_text(cls, tags: ID3, key: str) -> str | None:
        values = cls._all_text(tags, key)
        return values[0] if values else None

    @staticmethod
    def _genres(tags: ID3) -> list[str]:
        frame: Any = tags.get("TCON")
        if frame is None:
            return []
        return list(frame.genres)

    @staticmethod
    def _comment(tags: ID3) -> str | None:
        for frame in tags.getall("COMM"):
            text = "\n".join(str(part) for part in frame.text)
            if text:
                return text
        return None

    @staticmethod
    def _year(tags: ID3) -> int:
        frame: Any = tags.get("TDRC")
        if frame is not None and frame.text:
            year = getattr(frame.text[0], "year", None)
            if isinstance(year, int):
                return year
        return parse_leading_number(MutagenTagStore._first_text(tags, "TYER"))

    @staticmethod
    def _replace(tags: ID3, frame_class: type, values: list[str]) -> None:
        tags.delall(frame_class.__name__)
        if values:
            tags.add(frame_class(encoding=UTF8, text=values))

    @staticmethod
    def _replace_number(tags: ID3, frame_class: type, value: int) -> None:
        tags.delall(frame_class.__name__)
        if value > 0:
            tags.add(frame_class(encoding=UTF8, text=[str(value)]))


__all__ = ["MutagenTagStore", "parse_leading_number"]
