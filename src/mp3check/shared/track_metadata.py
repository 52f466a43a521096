# Where: mp3check.shared.track_metadata
# What: Canonical TrackMetadata dataclass shared across features.
# Why: Centralize the tag snapshot the rule engine reads and corrects.

from dataclasses import dataclass, field


@dataclass
class TrackMetadata:
    """Tag state of one audio file.

    Numeric fields use ``0`` for "unset"; list fields keep tag order.
    """

    title: str | None = None
    performers: list[str] = field(default_factory=list)
    genres: list[str] = field(default_factory=list)
    comment: str | None = None
    year: int = 0
    album_artists: list[str] = field(default_factory=list)
    composers: list[str] = field(default_factory=list)
    disc: int = 0
    album: str | None = None
    track: int = 0
    pictures: list[bytes] = field(default_factory=list)

    @property
    def first_performer(self) -> str | None:
        """First performer, or ``None`` when no performer is set."""
        return self.performers[0] if self.performers else None

    @property
    def first_genre(self) -> str | None:
        """First genre, or ``None`` when no genre is set."""
        return self.genres[0] if self.genres else None

    def copy(self) -> "TrackMetadata":
        """Return an independent copy, list fields included."""
        return TrackMetadata(
            title=self.title,
            performers=list(self.performers),
            genres=list(self.genres),
            comment=self.comment,
            year=self.year,
            album_artists=list(self.album_artists),
            composers=list(self.composers),
            disc=self.disc,
            album=self.album,
            track=self.track,
            pictures=list(self.pictures),
        )


__all__ = ["TrackMetadata"]
