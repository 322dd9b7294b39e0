"""Recognized CUE sheet field names and the scopes that accept them."""

from enum import Enum


class CueField(Enum):
    """Field names understood by the parser."""

    REM = "REM"
    TITLE = "TITLE"
    PERFORMER = "PERFORMER"
    SONGWRITER = "SONGWRITER"
    CATALOG = "CATALOG"
    ISRC = "ISRC"
    FILE = "FILE"
    TRACK = "TRACK"
    INDEX = "INDEX"
    FLAGS = "FLAGS"

    @property
    def attribute(self) -> str:
        """Model attribute that stores a scalar field's value."""
        return self.value.lower()

    @classmethod
    def lookup(cls, name: str) -> "CueField | None":
        """Find a field by name, ignoring case.

        Args:
            name: Field name as written in the sheet

        Returns:
            Matching field, or None if the name is not recognized
        """
        return _FIELDS_BY_NAME.get(name.lower())


_FIELDS_BY_NAME = {f.value.lower(): f for f in CueField}

# Fields holding a single overwritable string value
SCALAR_FIELDS = frozenset({CueField.TITLE, CueField.PERFORMER, CueField.SONGWRITER, CueField.CATALOG, CueField.ISRC})

SHEET_FIELDS = frozenset({CueField.REM, CueField.TITLE, CueField.PERFORMER, CueField.SONGWRITER, CueField.CATALOG})
DISC_FIELDS = SHEET_FIELDS
TRACK_FIELDS = frozenset(
    {
        CueField.REM,
        CueField.TITLE,
        CueField.PERFORMER,
        CueField.SONGWRITER,
        CueField.ISRC,
        CueField.INDEX,
        CueField.FLAGS,
    }
)
