"""Value parsing primitives for CUE sheet field remainders.

Strings may be bare words or double-quoted literals. Inside either form a
backslash escapes the next character: ``\\n``, ``\\t`` and ``\\r`` map to
newline, tab and carriage return, anything else is taken literally.

Time codes are colon-separated integers read right to left as
milliseconds, seconds, minutes and hours. The rightmost field is *not* a
1/75 second CD frame count.
"""

import re

from .exceptions import CueValueError
from .scanner import WHITESPACE

ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}

# Multipliers for time code fields, rightmost first
TIME_FIELD_WEIGHTS = (1, 1000, 60 * 1000, 60 * 60 * 1000)

# Track numbers are unsigned 32-bit values
TRACK_NUMBER_MAX = 2**32 - 1

_UNSIGNED_PATTERN = re.compile(r"\+?[0-9]+")


def parse_unsigned(text: str, maximum: int | None = None) -> int | None:
    """Parse a decimal unsigned integer, returning None if malformed or above ``maximum``."""
    if not _UNSIGNED_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if maximum is not None and value > maximum:
        return None
    return value


def parse_string(text: str) -> tuple[str, str]:
    """Parse one bare word or double-quoted string from the start of ``text``.

    Args:
        text: Field remainder, leading whitespace is ignored

    Returns:
        ``(value, rest)`` where ``rest`` is the unconsumed text

    Raises:
        CueValueError: If the text is empty or a quoted string is unterminated
    """
    text = text.lstrip()
    if not text:
        raise CueValueError("missing value")

    if not text.startswith('"'):
        return _parse_bare_word(text)

    buf = []
    i = 1
    while i < len(text):
        char = text[i]
        if char == '"':
            return "".join(buf), text[i + 1 :]
        if char == "\\":
            if i + 1 >= len(text):
                break
            i += 1
            buf.append(ESCAPES.get(text[i], text[i]))
        else:
            buf.append(char)
        i += 1

    raise CueValueError("unterminated double-quoted string")


def _parse_bare_word(text: str) -> tuple[str, str]:
    buf = []
    i = 0
    while i < len(text):
        char = text[i]
        if char in " \t\r\n":
            break
        if char == "\\":
            if i + 1 >= len(text):
                # Trailing backslash stays literal
                buf.append("\\")
                return "".join(buf), ""
            i += 1
            buf.append(ESCAPES.get(text[i], text[i]))
        else:
            buf.append(char)
        i += 1

    return "".join(buf), text[i:]


def parse_value(text: str) -> str:
    """Parse a whole remainder as a single value.

    A remainder wrapped in double quotes is decoded as a quoted literal and
    must account for all of the text. Anything else is returned trimmed but
    otherwise verbatim.

    Raises:
        CueValueError: If the value is missing, unterminated or followed by extra text
    """
    text = text.strip()
    if not text:
        raise CueValueError("missing value")

    if len(text) > 1 and text.startswith('"') and text.endswith('"'):
        value, rest = parse_string(text)
        if rest.strip():
            raise CueValueError("too many values in line")
        return value

    return text


def parse_rem(text: str) -> tuple[str, str]:
    """Parse a ``REM`` remainder into a key and a value.

    The value is empty when nothing follows the key.

    Raises:
        CueValueError: If there is no key or the value is malformed
    """
    text = text.lstrip()
    if not text:
        raise CueValueError("expected 2 values, have none")

    key, rest = parse_string(text)

    rest = rest.lstrip(" \t")
    if not rest:
        return key, ""

    return key, parse_value(rest).strip()


def parse_time_code(text: str) -> int:
    """Parse an ``INDEX`` remainder into milliseconds.

    The first word (the index number) is skipped. The time specifier that
    follows holds up to four colon-separated fields; ``"5:250"`` is 5250 ms
    and ``"1:02:03"`` is 62003 ms.

    Args:
        text: Remainder such as ``01 00:02:03``

    Returns:
        Offset in milliseconds

    Raises:
        CueValueError: If the number or specifier is missing or a field is not an integer
    """
    text = text.lstrip(WHITESPACE)
    if not text:
        raise CueValueError("missing index number")

    end = len(text)
    for i, char in enumerate(text):
        if char in WHITESPACE:
            end = i
            break
    rest = text[end:]

    specifier = rest.lstrip(" \t")
    if not specifier or len(specifier) == len(rest):
        raise CueValueError("missing time specifier after index number")

    word = parse_value(specifier)

    total = 0
    for part, weight in zip(reversed(word.split(":")), TIME_FIELD_WEIGHTS):
        number = parse_unsigned(part)
        if number is None:
            raise CueValueError(f"invalid index time: {word}")
        total += weight * number

    return total
