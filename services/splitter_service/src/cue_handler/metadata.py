"""Flattened tag views over a parsed CUE sheet.

The parser keeps every field in the scope it was declared in. Consumers that
tag split tracks need the inherited view instead: sheet values first, then
disc values, then track values, so a consumer applying tags in order lets the
narrowest scope win.
"""

import re

from .models import CueSheet, Disc, Track
from .values import parse_unsigned

YEAR_MAX = 2**16 - 1

_DATE_SEPARATORS = re.compile(r"[-./\\]")


def _rem_tags(rem_fields: dict[str, str]) -> list[str]:
    return [f"{key}={value}" for key, value in sorted(rem_fields.items())]


def _scope_tags(scope: CueSheet | Disc) -> list[str]:
    tags = _rem_tags(scope.rem_fields)

    if scope.performer is not None:
        tags.append(f"ARTIST={scope.performer}")
        tags.append(f"PERFORMER={scope.performer}")

    if scope.title is not None:
        tags.append(f"ALBUM={scope.title}")

    if scope.songwriter is not None:
        tags.append(f"SONGWRITER={scope.songwriter}")

    return tags


def sheet_tags(cue_sheet: CueSheet) -> list[str]:
    """Tags declared at sheet level, as ``KEY=VALUE`` strings."""
    return _scope_tags(cue_sheet)


def disc_tags(disc: Disc) -> list[str]:
    """Tags declared at disc level, as ``KEY=VALUE`` strings."""
    return _scope_tags(disc)


def track_tags(track: Track) -> list[str]:
    """Tags declared on a track, as ``KEY=VALUE`` strings.

    REM entries with an empty key or a blank value are left out.
    """
    tags = [
        f"{key}={value.strip()}"
        for key, value in sorted(track.rem_fields.items())
        if key and value.strip()
    ]

    if track.title is not None:
        tags.append(f"TITLE={track.title}")

    if track.performer is not None:
        tags.append(f"ARTIST={track.performer}")
        tags.append(f"PERFORMER={track.performer}")

    if track.songwriter is not None:
        tags.append(f"SONGWRITER={track.songwriter}")

    if track.isrc is not None:
        tags.append(f"ISRC={track.isrc}")

    tags.append(f"TRACKNUMBER={track.number}")
    return tags


def track_metadata(cue_sheet: CueSheet, disc: Disc, track: Track) -> list[str]:
    """All tags that apply to a track, widest scope first."""
    return sheet_tags(cue_sheet) + disc_tags(disc) + track_tags(track)


def effective_performer(cue_sheet: CueSheet, disc: Disc) -> str | None:
    """Disc performer, falling back to the sheet performer."""
    return disc.performer if disc.performer is not None else cue_sheet.performer


def effective_album(cue_sheet: CueSheet, disc: Disc) -> str | None:
    """Disc title, falling back to the sheet title."""
    return disc.title if disc.title is not None else cue_sheet.title


def release_year(cue_sheet: CueSheet) -> str | None:
    """Year taken from the sheet-level ``REM DATE`` entries.

    A date such as ``2001-05-03`` or ``03/05/2001`` is split on ``-``, ``.``,
    ``/`` and ``\\`` and its longest piece is taken as the year. Entries whose
    year is not a number in ``0..65535`` are skipped.

    Args:
        cue_sheet: Parsed CUE sheet

    Returns:
        The year text, or None if no entry holds a usable year
    """
    for key, value in sorted(cue_sheet.rem_fields.items()):
        if not value or key.upper() != "DATE":
            continue

        year = ""
        for piece in _DATE_SEPARATORS.split(value):
            # Ties go to the later piece
            if len(piece) >= len(year):
                year = piece

        if year and parse_unsigned(year, maximum=YEAR_MAX) is not None:
            return year

    return None


def ordered_tracks(disc: Disc) -> list[Track]:
    """Tracks of a disc sorted by start offset, keeping declaration order for ties."""
    return sorted(disc.tracks, key=lambda t: t.offset)


def format_offset(milliseconds: int) -> str:
    """Format an offset as seconds, e.g. ``"62"`` or ``"62.003"``."""
    seconds, remainder = divmod(milliseconds, 1000)
    if remainder == 0:
        return str(seconds)
    return f"{seconds}.{remainder:03d}"
