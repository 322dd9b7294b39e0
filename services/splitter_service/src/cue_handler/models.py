"""Data models for CUE sheet representation."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Track:
    """Represents a single track in a CUE sheet."""

    number: int
    title: str | None = None
    performer: str | None = None
    songwriter: str | None = None
    isrc: str | None = None
    rem_fields: dict[str, str] = field(default_factory=dict)
    # Start offset in milliseconds, the largest INDEX seen for the track
    offset: int = 0

    @property
    def offset_seconds(self) -> float:
        """Start offset in seconds."""
        return self.offset / 1000

    def to_dict(self) -> dict[str, Any]:
        """Convert track to dictionary for serialization.

        Returns:
            Dictionary representation of track
        """
        return {
            "number": self.number,
            "title": self.title,
            "performer": self.performer,
            "songwriter": self.songwriter,
            "isrc": self.isrc,
            "offset": self.offset,
            "rem_fields": dict(self.rem_fields),
        }


@dataclass
class Disc:
    """Represents a FILE entry and everything scoped under it."""

    file: str
    title: str | None = None
    performer: str | None = None
    songwriter: str | None = None
    catalog: str | None = None
    rem_fields: dict[str, str] = field(default_factory=dict)
    tracks: list[Track] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert disc to dictionary for serialization."""
        return {
            "file": self.file,
            "title": self.title,
            "performer": self.performer,
            "songwriter": self.songwriter,
            "catalog": self.catalog,
            "rem_fields": dict(self.rem_fields),
            "tracks": [t.to_dict() for t in self.tracks],
        }


@dataclass
class CueSheet:
    """Represents a complete CUE sheet."""

    # Sheet-level metadata
    title: str | None = None
    performer: str | None = None
    songwriter: str | None = None
    catalog: str | None = None

    # REM fields
    rem_fields: dict[str, str] = field(default_factory=dict)

    discs: list[Disc] = field(default_factory=list)

    def get_all_tracks(self) -> list[Track]:
        """Get all tracks from all discs.

        Returns:
            List of all tracks in order of appearance
        """
        tracks = []
        for disc in self.discs:
            tracks.extend(disc.tracks)
        return tracks

    def get_track_count(self) -> int:
        """Get total number of tracks.

        Returns:
            Total track count
        """
        return sum(len(disc.tracks) for disc in self.discs)

    def to_dict(self) -> dict[str, Any]:
        """Convert CUE sheet to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            "title": self.title,
            "performer": self.performer,
            "songwriter": self.songwriter,
            "catalog": self.catalog,
            "rem_fields": dict(self.rem_fields),
            "discs": [d.to_dict() for d in self.discs],
        }
