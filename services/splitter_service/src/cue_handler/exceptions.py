"""Exception classes for CUE sheet parsing."""


class CueError(Exception):
    """Base exception for all CUE-related errors."""


class CueValueError(CueError):
    """Raised by the value primitives when a field value is malformed.

    Carries no line information; the parser attaches the line of the field
    being processed when it re-raises this as a :class:`CueSyntaxError`.
    """


class CueParsingError(CueError):
    """Raised when a CUE sheet cannot be parsed.

    Attributes:
        line: 0-based index of the line where the fault was detected
        message: Human-readable description of the fault
        source_line: Raw text of the offending line, if known
    """

    def __init__(self, line: int, message: str, source_line: str | None = None) -> None:
        """Initialize the error.

        Args:
            line: 0-based line index
            message: Description of the fault
            source_line: Optional raw text of the line for context
        """
        self.line = line
        self.message = message
        self.source_line = source_line
        super().__init__(self.render())

    def render(self, include_source_line: bool = True) -> str:
        """Render the error as ``line <N+1>: <message>``.

        Args:
            include_source_line: Append the offending line prefixed with ``> ``

        Returns:
            Display string for the error
        """
        text = f"line {self.line + 1}: {self.message}"
        if include_source_line and self.source_line is not None:
            text += f"\n> {self.source_line}"
        return text


class CueSyntaxError(CueParsingError):
    """Raised when a field value is malformed (bad string, number or time code)."""


class CueStructureError(CueParsingError):
    """Raised when a field appears in the wrong scope or a mandatory one is missing."""


class EmptyCueSheetError(CueError):
    """Raised when a CUE sheet parses but contains no tracks at all."""
