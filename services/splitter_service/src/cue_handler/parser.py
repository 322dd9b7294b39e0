"""CUE sheet parser for reading and interpreting CUE files.

Example usage:
    >>> from cue_handler.parser import CueParser
    >>> parser = CueParser()

    >>> cue_content = '''
    ... TITLE "Live Set"
    ... FILE "audio.flac" WAVE
    ...   TRACK 01 AUDIO
    ...     TITLE "First Track"
    ...     INDEX 01 00:00:000
    ... '''
    >>> cue_sheet = parser.parse(cue_content)

    # Access track information
    >>> for track in cue_sheet.get_all_tracks():
    ...     print(f"{track.number}. {track.title} @ {track.offset} ms")

Fields are scoped: anything before the first ``FILE`` belongs to the sheet,
anything between a ``FILE`` and its first ``TRACK`` belongs to that disc and
anything after a ``TRACK`` belongs to the track. Nothing is inherited between
scopes here; see :mod:`cue_handler.metadata` for that.
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

import structlog

from ..config import ParserConfig
from .exceptions import CueParsingError, CueStructureError, CueSyntaxError, CueValueError, EmptyCueSheetError
from .fields import DISC_FIELDS, SCALAR_FIELDS, SHEET_FIELDS, TRACK_FIELDS, CueField
from .models import CueSheet, Disc, Track
from .scanner import LineScanner, ScannedLine, split_lines
from .values import TRACK_NUMBER_MAX, parse_rem, parse_string, parse_time_code, parse_unsigned, parse_value

T = TypeVar("T")


class CueParser:
    """Parser turning decoded CUE sheet text into a :class:`CueSheet`.

    A parser keeps no state between calls to :meth:`parse`, so one instance
    can be shared between threads.
    """

    def __init__(self, logger: Any | None = None, config: ParserConfig | None = None) -> None:
        """Initialize the CUE parser.

        Args:
            logger: Optional structlog logger for debug output
            config: Parser settings, defaults are used if None
        """
        self.logger = logger or structlog.get_logger(__name__)
        self.config = config or ParserConfig()

    def parse(self, content: str | Sequence[str]) -> CueSheet:
        """Parse CUE sheet content.

        Args:
            content: Decoded CUE sheet text, or its lines without terminators

        Returns:
            Parsed CueSheet object

        Raises:
            CueParsingError: If the content is malformed, with the offending line attached
            EmptyCueSheetError: If the content parses but declares no tracks
        """
        lines = split_lines(content) if isinstance(content, str) else list(content)
        scanner = LineScanner(lines)

        try:
            cue_sheet = self._parse_sheet(scanner)
        except CueParsingError as e:
            self.logger.debug("CUE sheet rejected", line=e.line + 1, error=e.message)
            raise

        track_count = cue_sheet.get_track_count()
        if track_count == 0:
            self.logger.debug("CUE sheet rejected", error="no tracks")
            raise EmptyCueSheetError("cue sheet has no tracks")

        if self.config.log_parse_summary:
            self.logger.info(
                "Successfully parsed CUE sheet",
                lines=len(lines),
                discs=len(cue_sheet.discs),
                tracks=track_count,
            )

        return cue_sheet

    def _error(
        self, scanner: LineScanner, error_cls: type[CueParsingError], line: int, message: str
    ) -> CueParsingError:
        source_line = scanner.source_line(line) if self.config.include_source_line else None
        return error_cls(line, message, source_line)

    def _value(self, scanner: LineScanner, entry: ScannedLine, parse_func: Callable[[str], T]) -> T:
        """Run a value primitive on a field remainder, attributing failures to its line."""
        try:
            return parse_func(entry.remainder)
        except CueValueError as e:
            raise self._error(scanner, CueSyntaxError, entry.line_index, str(e)) from e

    def _apply_field(
        self, scanner: LineScanner, scope: CueSheet | Disc | Track, field: CueField, entry: ScannedLine
    ) -> None:
        """Store a REM entry or overwrite a scalar field on the given scope."""
        if field is CueField.REM:
            key, value = self._value(scanner, entry, parse_rem)
            scope.rem_fields[key] = value
        elif field in SCALAR_FIELDS:
            setattr(scope, field.attribute, self._value(scanner, entry, parse_value))
        else:
            raise ValueError(f"{field.value} is not a stored field")

    def _parse_sheet(self, scanner: LineScanner) -> CueSheet:
        cue_sheet = CueSheet()

        for entry in scanner:
            field = CueField.lookup(entry.field)
            if field is CueField.FILE:
                scanner.seek(entry.line_index)
                break
            if field is CueField.TRACK:
                raise self._error(scanner, CueStructureError, entry.line_index, "`TRACK` declared before any `FILE`")
            if field not in SHEET_FIELDS:
                raise self._error(scanner, CueStructureError, entry.line_index, f"unknown field: {entry.field}")

            self._apply_field(scanner, cue_sheet, field, entry)
        else:
            raise self._error(scanner, CueStructureError, 0, "cue sheet is missing a `FILE` declaration")

        while not scanner.is_exhausted():
            cue_sheet.discs.append(self._parse_disc(scanner))

        return cue_sheet

    def _parse_disc(self, scanner: LineScanner) -> Disc:
        """Parse a disc starting at its ``FILE`` line.

        A disc that reaches the end of input without any track is returned
        as is; :meth:`parse` rejects the sheet only if no disc has tracks.
        """
        file_entry = scanner.advance()
        if file_entry is None:
            raise RuntimeError("disc parsing started past the end of input")

        # The word after the path is the file type, which is not kept
        file_name, _ = self._value(scanner, file_entry, parse_string)
        disc = Disc(file=file_name)

        for entry in scanner:
            field = CueField.lookup(entry.field)
            if field is CueField.FILE:
                scanner.seek(entry.line_index)
                return disc
            if field is CueField.TRACK:
                scanner.seek(entry.line_index)
                break
            if field not in DISC_FIELDS:
                raise self._error(
                    scanner, CueStructureError, entry.line_index, f"unknown field for disc: {entry.field}"
                )

            self._apply_field(scanner, disc, field, entry)
        else:
            return disc

        while (entry := scanner.advance()) is not None:
            if CueField.lookup(entry.field) is CueField.FILE:
                scanner.seek(entry.line_index)
                break
            disc.tracks.append(self._parse_track(scanner, entry))

        return disc

    def _parse_track(self, scanner: LineScanner, track_entry: ScannedLine) -> Track:
        """Parse a track starting at its ``TRACK`` line.

        Stops before the next ``TRACK`` or ``FILE`` line, leaving it for the caller.
        """
        number_text, _ = self._value(scanner, track_entry, parse_string)
        number = parse_unsigned(number_text, maximum=TRACK_NUMBER_MAX)
        if number is None:
            raise self._error(scanner, CueSyntaxError, track_entry.line_index, "invalid track number")

        track = Track(number=number)
        have_index = False

        for entry in scanner:
            field = CueField.lookup(entry.field)
            if field in (CueField.TRACK, CueField.FILE):
                scanner.seek(entry.line_index)
                break
            if field not in TRACK_FIELDS:
                raise self._error(
                    scanner, CueStructureError, entry.line_index, f"unknown field for a track: {entry.field}"
                )

            if field is CueField.INDEX:
                # Pregap and start indices collapse to the latest timestamp
                track.offset = max(track.offset, self._value(scanner, entry, parse_time_code))
                have_index = True
            elif field is not CueField.FLAGS:
                self._apply_field(scanner, track, field, entry)

        if not have_index:
            raise self._error(
                scanner, CueStructureError, track_entry.line_index, "track is missing an `INDEX` declaration"
            )

        return track


def parse(content: str | Sequence[str], config: ParserConfig | None = None) -> CueSheet:
    """Parse CUE sheet content with a fresh :class:`CueParser`.

    Args:
        content: Decoded CUE sheet text, or its lines without terminators
        config: Parser settings, defaults are used if None

    Returns:
        Parsed CueSheet object
    """
    return CueParser(config=config).parse(content)
