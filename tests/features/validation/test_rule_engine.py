"""Tests for the ordered tag rules of a single file."""

from pathlib import Path

import pytest

from mp3check.features.validation import FileRuleEngine, Severity, TrackMetadata

FILE_NAME = "Song-John Doe.mp3"


def valid_metadata(title: str | None = "Song", artist: str = "John Doe", **overrides: object) -> TrackMetadata:
    """Build metadata that passes every rule of an artist folder."""

    metadata = TrackMetadata(title=title, performers=[artist], genres=["Rock"])
    for key, value in overrides.items():
        setattr(metadata, key, value)
    return metadata


def _fields(result, severity: Severity | None = None) -> list[str]:
    return [
        violation.field
        for violation in result.report
        if severity is None or violation.severity is severity
    ]


class TestCleanFiles:
    def test_conforming_artist_track_has_no_findings(self, engine: FileRuleEngine) -> None:
        result = engine.check(valid_metadata(), file_name=FILE_NAME, artist_name="John Doe")

        assert list(result.report) == []
        assert result.repairs == []
        assert not result.needs_update

    def test_conforming_album_track_has_no_findings(self, engine: FileRuleEngine) -> None:
        metadata = valid_metadata(album="GreatestHits", track=3)

        result = engine.check(
            metadata, file_name=FILE_NAME, artist_name="John Doe", album_name="GreatestHits"
        )

        assert list(result.report) == []
        assert not result.needs_update

    def test_input_metadata_is_not_mutated(self, engine: FileRuleEngine) -> None:
        metadata = valid_metadata(title=" Song ", comment="rip", year=1999)

        result = engine.check(metadata, file_name=FILE_NAME, artist_name="John Doe")

        assert metadata.title == " Song "
        assert metadata.comment == "rip"
        assert result.metadata.title == "Song"
        assert result.metadata is not metadata


class TestTitle:
    @pytest.mark.parametrize("title", [None, "", "   "])
    def test_missing_title_is_an_error(self, engine: FileRuleEngine, title: str | None) -> None:
        result = engine.check(
            valid_metadata(title=title), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert "title" in _fields(result, Severity.ERROR)

    def test_title_is_trimmed_silently(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(title="  Song "), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert result.metadata.title == "Song"
        assert result.needs_update
        assert [repair.field for repair in result.repairs] == ["title"]
        assert "title" not in _fields(result)

    def test_title_with_foreign_characters_is_reported_not_fixed(
        self, engine: FileRuleEngine
    ) -> None:
        result = engine.check(
            valid_metadata(title="Song (Live)"),
            file_name="Song (Live)-John Doe.mp3",
            artist_name="John Doe",
        )

        assert _fields(result) == ["title"]
        assert result.metadata.title == "Song (Live)"
        assert not result.needs_update

    def test_title_punctuation_is_allowed(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(title="Don't Stop!"),
            file_name="Don't Stop!-John Doe.mp3",
            artist_name="John Doe",
        )

        assert list(result.report) == []


class TestArtist:
    def test_missing_artist(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(performers=[]), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert _fields(result) == ["artist", "artist"]
        assert not result.needs_update

    def test_multiple_artists_are_reported_and_first_still_checked(
        self, engine: FileRuleEngine
    ) -> None:
        metadata = valid_metadata(performers=[" Jane Roe", "John Doe "])

        result = engine.check(metadata, file_name=FILE_NAME, artist_name="John Doe")

        messages = [v.message for v in result.report if v.field == "artist"]
        assert any("exactly one artist" in message for message in messages)
        assert any("doesn't equal" in message for message in messages)
        assert result.metadata.performers == [" Jane Roe", "John Doe "]
        assert not result.needs_update

    def test_multiple_artists_first_checked_for_characters(self, engine: FileRuleEngine) -> None:
        metadata = valid_metadata(performers=["AC/DC", "John Doe"])

        result = engine.check(metadata, file_name=FILE_NAME, artist_name="John Doe")

        messages = [v.message for v in result.report if v.field == "artist"]
        assert any("not allowed characters" in message for message in messages)

    def test_single_artist_is_trimmed(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(performers=[" John Doe "]), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert result.metadata.performers == ["John Doe"]
        assert result.needs_update
        assert list(result.report) == []

    def test_artist_must_match_folder(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(artist="Jane Roe"),
            file_name="Song-Jane Roe.mp3",
            artist_name="John Doe",
        )

        assert _fields(result, Severity.ERROR) == ["artist"]
        assert result.metadata.performers == ["Jane Roe"]


class TestGenre:
    def test_missing_genre(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(genres=[]), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert _fields(result) == ["genre", "genre"]

    def test_multiple_genres(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(genres=["Rock", "Pop"]), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert _fields(result) == ["genre"]

    def test_genre_is_trimmed(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(genres=["Rock "]), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert result.metadata.genres == ["Rock"]
        assert result.needs_update
        assert list(result.report) == []

    @pytest.mark.parametrize("genre", ["Hip Hop", "R&B", "Rock2"])
    def test_genre_must_be_alphabetic(self, engine: FileRuleEngine, genre: str) -> None:
        result = engine.check(
            valid_metadata(genres=[genre]), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert _fields(result) == ["genre"]


class TestUnwantedFields:
    def test_unwanted_fields_are_cleared(self, engine: FileRuleEngine) -> None:
        metadata = valid_metadata(
            comment="ripped by someone",
            year=1999,
            album_artists=["Various"],
            composers=["Someone"],
            disc=2,
        )

        result = engine.check(metadata, file_name=FILE_NAME, artist_name="John Doe")

        corrected = result.metadata
        assert corrected.comment is None
        assert corrected.year == 0
        assert corrected.album_artists == []
        assert corrected.composers == []
        assert corrected.disc == 0
        assert [repair.field for repair in result.repairs] == [
            "comment",
            "year",
            "album_artists",
            "composers",
            "disc",
        ]
        assert list(result.report) == []

    def test_repair_keeps_old_value(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(composers=["Someone"]), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert result.repairs[0].old_value == ["Someone"]
        assert result.repairs[0].new_value == []

    def test_whitespace_comment_is_left_alone(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(comment="  "), file_name=FILE_NAME, artist_name="John Doe"
        )

        assert not result.needs_update


class TestFileName:
    def test_mismatching_file_name_is_reported(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(), file_name="01 Song.mp3", artist_name="John Doe"
        )

        assert _fields(result) == ["file_name"]
        assert not result.needs_update

    def test_file_name_is_compared_after_trimming(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(title=" Song", performers=["John Doe "]),
            file_name=FILE_NAME,
            artist_name="John Doe",
        )

        assert "file_name" not in _fields(result)

    def test_file_name_skipped_without_artist(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(performers=[]), file_name="whatever.mp3", artist_name="John Doe"
        )

        assert "file_name" not in _fields(result)

    def test_configured_extension_is_used(self) -> None:
        engine = FileRuleEngine(audio_extension=".ogg")

        result = engine.check(valid_metadata(), file_name="Song-John Doe.ogg", artist_name="John Doe")

        assert list(result.report) == []


class TestArtistFolder:
    def test_album_and_pictures_are_removed(self, engine: FileRuleEngine) -> None:
        metadata = valid_metadata(album="Hits", pictures=[b"\x89PNG"])

        result = engine.check(metadata, file_name=FILE_NAME, artist_name="John Doe")

        assert result.metadata.album is None
        assert result.metadata.pictures == []
        assert [repair.field for repair in result.repairs] == ["album", "pictures"]

    def test_blank_album_name_counts_as_artist_folder(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(album="Hits"), file_name=FILE_NAME, artist_name="John Doe", album_name=" "
        )

        assert result.metadata.album is None


class TestAlbumFolder:
    def test_missing_album_is_reported_not_filled(self, engine: FileRuleEngine) -> None:
        metadata = valid_metadata(album=None, track=1, year=2001)

        result = engine.check(
            metadata, file_name=FILE_NAME, artist_name="John Doe", album_name="GreatestHits"
        )

        assert _fields(result, Severity.ERROR) == ["album"]
        assert result.metadata.album is None
        assert [repair.field for repair in result.repairs] == ["year"]
        assert result.needs_update

    def test_missing_album_alone_needs_no_update(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(album="", track=1),
            file_name=FILE_NAME,
            artist_name="John Doe",
            album_name="GreatestHits",
        )

        assert _fields(result) == ["album"]
        assert not result.needs_update

    def test_album_is_trimmed(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(album=" GreatestHits ", track=1),
            file_name=FILE_NAME,
            artist_name="John Doe",
            album_name="GreatestHits",
        )

        assert result.metadata.album == "GreatestHits"
        assert result.needs_update
        assert list(result.report) == []

    def test_album_with_foreign_characters(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(album="Hits: Vol. 1", track=1),
            file_name=FILE_NAME,
            artist_name="John Doe",
            album_name="Hits",
        )

        assert _fields(result) == ["album"]

    def test_missing_track_is_a_warning(self, engine: FileRuleEngine) -> None:
        result = engine.check(
            valid_metadata(album="GreatestHits"),
            file_name=FILE_NAME,
            artist_name="John Doe",
            album_name="GreatestHits",
        )

        assert _fields(result, Severity.WARNING) == ["track"]
        assert _fields(result, Severity.ERROR) == []

    def test_pictures_are_kept_and_covers_untouched(self, engine: FileRuleEngine) -> None:
        metadata = valid_metadata(album="GreatestHits", track=1, pictures=[b"img"])

        result = engine.check(
            metadata,
            file_name=FILE_NAME,
            artist_name="John Doe",
            album_name="GreatestHits",
            cover_candidates=[Path("cover.jpg")],
        )

        assert result.metadata.pictures == [b"img"]
        assert not result.needs_update


class TestScenarios:
    def test_trimmed_title_and_cleared_fields(self, engine: FileRuleEngine) -> None:
        metadata = TrackMetadata(
            title=" Song ",
            performers=["John Doe"],
            genres=["Rock"],
            comment="some comment",
            year=2004,
        )

        result = engine.check(metadata, file_name=FILE_NAME, artist_name="John Doe")

        assert result.metadata.title == "Song"
        assert result.metadata.comment is None
        assert result.metadata.year == 0
        assert result.needs_update
        assert result.report.errors == []

    def test_every_problem_is_reported(self, engine: FileRuleEngine) -> None:
        metadata = TrackMetadata(
            title="Song?(x)",
            performers=["A", "B"],
            genres=[],
            album="Hits",
        )

        result = engine.check(
            metadata, file_name="x.mp3", artist_name="John Doe", album_name="Hits"
        )

        fields = _fields(result)
        assert {"title", "artist", "genre", "file_name", "track"} <= set(fields)

    def test_second_check_is_idempotent(self, engine: FileRuleEngine) -> None:
        metadata = TrackMetadata(
            title=" Song ",
            performers=[" John Doe"],
            genres=["Rock "],
            comment="c",
            year=1999,
            album_artists=["X"],
            composers=["Y"],
            disc=1,
            album="Hits",
            pictures=[b"img"],
        )

        first = engine.check(metadata, file_name=FILE_NAME, artist_name="John Doe")
        second = engine.check(first.metadata, file_name=FILE_NAME, artist_name="John Doe")

        assert first.needs_update
        assert not second.needs_update
        assert second.metadata == first.metadata
