"""CUE sheet handler module for parsing CUE sheets into discs and tracks."""

__version__ = "1.0.0"

# Exception exports
from .exceptions import (
    CueError,
    CueParsingError,
    CueStructureError,
    CueSyntaxError,
    CueValueError,
    EmptyCueSheetError,
)
from .fields import CueField

# Metadata exports
from .metadata import (
    disc_tags,
    effective_album,
    effective_performer,
    format_offset,
    ordered_tracks,
    release_year,
    sheet_tags,
    track_metadata,
    track_tags,
)

# Model exports
from .models import CueSheet, Disc, Track

# Parser exports
from .parser import CueParser, parse
from .scanner import LineScanner, ScannedLine, split_lines
from .values import parse_rem, parse_string, parse_time_code, parse_value

__all__ = [
    # Exceptions
    "CueError",
    # Fields
    "CueField",
    # Parser
    "CueParser",
    "CueParsingError",
    # Models
    "CueSheet",
    "CueStructureError",
    "CueSyntaxError",
    "CueValueError",
    "Disc",
    "EmptyCueSheetError",
    # Scanner
    "LineScanner",
    "ScannedLine",
    "Track",
    # Metadata
    "disc_tags",
    "effective_album",
    "effective_performer",
    "format_offset",
    "ordered_tracks",
    "parse",
    # Values
    "parse_rem",
    "parse_string",
    "parse_time_code",
    "parse_value",
    "release_year",
    "sheet_tags",
    "split_lines",
    "track_metadata",
    "track_tags",
]
