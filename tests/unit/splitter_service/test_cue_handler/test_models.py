"""Unit tests for CUE data models."""

from services.splitter_service.src.cue_handler.models import CueSheet, Disc, Track


class TestTrack:
    """Test Track class."""

    def test_defaults(self):
        """Test a track with only a number."""
        track = Track(number=3)

        assert track.title is None
        assert track.rem_fields == {}
        assert track.offset == 0

    def test_offset_seconds(self):
        """Test millisecond offsets convert to seconds."""
        assert Track(number=1, offset=62500).offset_seconds == 62.5

    def test_to_dict(self):
        """Test serialization."""
        track = Track(number=1, title="Intro", isrc="USRC17607839", offset=1500, rem_fields={"COMPOSER": "X"})

        assert track.to_dict() == {
            "number": 1,
            "title": "Intro",
            "performer": None,
            "songwriter": None,
            "isrc": "USRC17607839",
            "offset": 1500,
            "rem_fields": {"COMPOSER": "X"},
        }


class TestCueSheet:
    """Test CueSheet class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.sheet = CueSheet(
            title="Album",
            discs=[
                Disc(file="a.wav", tracks=[Track(number=1), Track(number=2)]),
                Disc(file="b.wav"),
                Disc(file="c.wav", tracks=[Track(number=3)]),
            ],
        )

    def test_get_all_tracks(self):
        """Test tracks are collected in disc order."""
        assert [t.number for t in self.sheet.get_all_tracks()] == [1, 2, 3]

    def test_get_track_count(self):
        """Test the track count spans all discs."""
        assert self.sheet.get_track_count() == 3
        assert CueSheet().get_track_count() == 0

    def test_to_dict(self):
        """Test nested serialization."""
        data = self.sheet.to_dict()

        assert data["title"] == "Album"
        assert [d["file"] for d in data["discs"]] == ["a.wav", "b.wav", "c.wav"]
        assert data["discs"][1]["tracks"] == []
        assert data["discs"][2]["tracks"][0]["number"] == 3

    def test_scopes_own_their_maps(self):
        """Test each instance gets its own REM map."""
        first = Disc(file="a.wav")
        second = Disc(file="b.wav")
        first.rem_fields["DATE"] = "2020"

        assert second.rem_fields == {}
