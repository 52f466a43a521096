"""
Summary: Ordered tag rules for one audio file and its folder context.
Why: Decide in one place which fields are wrong and which are safe to repair.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import final

from mp3check.config.config import AUDIO_EXTENSION_DEFAULT
from mp3check.config.settings import FILE_NAME_SEPARATOR, GENRE_CHARS, NAME_CHARS, TITLE_CHARS
from mp3check.platform.logging import logger
from mp3check.shared.track_metadata import TrackMetadata

from ..domain.names import NameValidator
from ..domain.trimming import needs_trimming
from .report import CheckResult, FieldRepair, ViolationReport


@final
class FileRuleEngine:
    """Evaluate the tag rules of one file in a fixed order.

    Each rule sees the metadata as corrected by the rules before it. Rules
    either report a violation, repair a field, or both; none of them stops the
    evaluation, so every problem of a file is reported in one pass.

    Repairs are limited to lossless, unambiguous corrections: trimming blanks
    and clearing fields that must stay empty. Everything else (wrong
    characters, several values, disagreement with the folder) is reported
    only.
    """

    def __init__(self, audio_extension: str = AUDIO_EXTENSION_DEFAULT) -> None:
        self.audio_extension: str = audio_extension

    def check(
        self,
        metadata: TrackMetadata,
        *,
        file_name: str,
        artist_name: str,
        album_name: str | None = None,
        cover_candidates: Sequence[Path] | None = None,
    ) -> CheckResult:
        """Check ``metadata`` of the file ``file_name``.

        Args:
            metadata: Current tags of the file. Left untouched; the corrected
                copy is returned in the result.
            file_name: Base name of the file, extension included.
            artist_name: Artist name derived from the folder.
            album_name: Album name derived from the folder, ``None`` for
                artist folders.
            cover_candidates: Non-audio files next to the track in an album folder.

        Returns:
            CheckResult: Corrected metadata, violations and applied repairs.
        """
        result = CheckResult(metadata=metadata.copy())

        self._check_title(result)
        self._check_performers(result, artist_name)
        self._check_genres(result)
        self._clear_unwanted_fields(result)
        self._check_file_name(result, file_name)

        if album_name is None or not album_name.strip():
            self._check_artist_track(result)
        else:
            self._check_album_track(result, cover_candidates or ())

        return result

    # Title ---------------------------------------------------------------------

    def _check_title(self, result: CheckResult) -> None:
        tags = result.metadata
        report = result.report

        if tags.title is None or not tags.title.strip():
            report.error("title", "The title is not set")

        if needs_trimming(tags.title):
            assert tags.title is not None
            self._repair(result, "title", tags.title, tags.title.strip(), "Trimming title")
            tags.title = tags.title.strip()

        if tags.title and tags.title.strip():
            problem = NameValidator.problem(tags.title, TITLE_CHARS, label="title")
            if problem is not None:
                report.error("title", problem)

    # Artist --------------------------------------------------------------------

    def _check_performers(self, result: CheckResult, artist_name: str) -> None:
        tags = result.metadata
        report = result.report

        if not tags.performers:
            report.error("artist", "The artist is not set")

        if len(tags.performers) != 1:
            report.error(
                "artist",
                f"Expected exactly one artist, found {len(tags.performers)}: {tags.performers!r}",
            )

        if len(tags.performers) == 1 and needs_trimming(tags.performers[0]):
            trimmed = tags.performers[0].strip()
            self._repair(result, "artist", tags.performers[0], trimmed, "Trimming artist")
            tags.performers[0] = trimmed

        performer = tags.first_performer
        if performer is None:
            return

        problem = NameValidator.problem(performer, NAME_CHARS, label="artist")
        if problem is not None:
            report.error("artist", problem)

        if performer != artist_name:
            report.error(
                "artist",
                f"The artist {performer!r} doesn't equal the artist {artist_name!r} of the folder",
            )

    # Genre ---------------------------------------------------------------------

    def _check_genres(self, result: CheckResult) -> None:
        tags = result.metadata
        report = result.report

        if not tags.genres:
            report.error("genre", "The genre is not set")

        if len(tags.genres) != 1:
            report.error(
                "genre",
                f"Expected exactly one genre, found {len(tags.genres)}: {tags.genres!r}",
            )

        if len(tags.genres) == 1 and needs_trimming(tags.genres[0]):
            trimmed = tags.genres[0].strip()
            self._repair(result, "genre", tags.genres[0], trimmed, "Trimming genre")
            tags.genres[0] = trimmed

        genre = tags.first_genre
        if genre is not None:
            problem = NameValidator.problem(genre, GENRE_CHARS, label="genre")
            if problem is not None:
                report.error("genre", problem)

    # Fields that must stay empty -------------------------------------------

    def _clear_unwanted_fields(self, result: CheckResult) -> None:
        tags = result.metadata

        if tags.comment is not None and tags.comment.strip():
            self._repair(result, "comment", tags.comment, None, "Removing comment")
            tags.comment = None

        if tags.year > 0:
            self._repair(result, "year", tags.year, 0, "Removing year")
            tags.year = 0

        if tags.album_artists:
            self._repair(result, "album_artists", tags.album_artists, [], "Removing album artists")
            tags.album_artists = []

        if tags.composers:
            self._repair(result, "composers", tags.composers, [], "Removing composers")
            tags.composers = []

        if tags.disc > 0:
            self._repair(result, "disc", tags.disc, 0, "Removing disc")
            tags.disc = 0

    # File name -----------------------------------------------------------------

    def _check_file_name(self, result: CheckResult, file_name: str) -> None:
        tags = result.metadata
        performer = tags.first_performer
        if performer is None:
            return

        expected = f"{tags.title or ''}{FILE_NAME_SEPARATOR}{performer}{self.audio_extension}"
        if file_name != expected:
            result.report.error(
                "file_name",
                f"The file name {file_name!r} doesn't match the convention "
                f"'{{Title}}{FILE_NAME_SEPARATOR}{{Artist}}{self.audio_extension}' ({expected!r})",
            )

    # Folder kind ---------------------------------------------------------------

    def _check_artist_track(self, result: CheckResult) -> None:
        tags = result.metadata

        if tags.album is not None and tags.album.strip():
            self._repair(result, "album", tags.album, None, "Removing album")
            tags.album = None

        if tags.pictures:
            self._repair(
                result,
                "pictures",
                f"{len(tags.pictures)} picture(s)",
                "0 picture(s)",
                "Removing pictures",
            )
            tags.pictures = []

    def _check_album_track(self, result: CheckResult, cover_candidates: Sequence[Path]) -> None:
        tags = result.metadata
        report = result.report

        if tags.album is None or not tags.album.strip():
            report.error("album", "The album is not set")

        if needs_trimming(tags.album):
            assert tags.album is not None
            self._repair(result, "album", tags.album, tags.album.strip(), "Trimming album")
            tags.album = tags.album.strip()

        if tags.album and tags.album.strip():
            problem = NameValidator.problem(tags.album, NAME_CHARS, label="album")
            if problem is not None:
                report.error("album", problem)

        if tags.track == 0:
            report.warning("track", "The track number is not set")

        # TODO: attach or verify the cover from cover_candidates once a matching policy exists.
        if cover_candidates:
            logger.debug(
                "Cover candidates not evaluated: %s",
                ", ".join(candidate.name for candidate in cover_candidates),
            )

    @staticmethod
    def _repair(
        result: CheckResult,
        field_name: str,
        old_value: object,
        new_value: object,
        message: str,
    ) -> None:
        result.repairs.append(FieldRepair(field_name, old_value, new_value, message))


__all__ = ["FileRuleEngine"]
