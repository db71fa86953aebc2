"""Field grammar primitives.

Each consumer takes the full line plus a start offset and returns the parsed
value together with the offset just past what it consumed. Nothing here
slices off the remainder or looks back at earlier fields.
"""

from __future__ import annotations

import re
from collections.abc import Collection

from ..errors import (
    ExpectedCharError,
    FieldTooLongError,
    FieldTooShortError,
    MissingFieldError,
    NotADigitError,
    TooFewDigitsError,
    TooManyDigitsError,
    UnexpectedEndOfInputError,
)

NIL = "-"
MAX_FRACTION_DIGITS = 6

_NANOS_DIGITS = 9
_RFC_ESCAPE_RE = re.compile(r'\\([\\"\]])')


def is_digit(c: str) -> bool:
    """ASCII digits only; str.isdigit() also accepts other scripts."""
    return "0" <= c <= "9"


def is_printable(c: str) -> bool:
    """PRINTUSASCII (%d33-126)."""
    return "!" <= c <= "~"


def is_nil(line: str, pos: int) -> bool:
    """True if a lone '-' sits at pos, followed by whitespace or the end."""
    return line.startswith(NIL, pos) and (pos + 1 == len(line) or line[pos + 1].isspace())


def expect_char(line: str, pos: int, char: str, *, field: str | None = None) -> int:
    """Consume exactly `char`."""
    if pos >= len(line):
        raise UnexpectedEndOfInputError(f"expected {char!r}", field=field, position=pos)
    found = line[pos]
    if found != char:
        raise ExpectedCharError(char, found, field=field, position=pos)
    return pos + 1


def parse_bounded_number(
    line: str,
    pos: int,
    min_digits: int,
    max_digits: int,
    *,
    field: str | None = None,
) -> tuple[int, int]:
    """Consume a run of min_digits..max_digits decimal digits."""
    n = len(line)
    if pos >= n:
        raise UnexpectedEndOfInputError("expected a digit", field=field, position=pos)

    end = pos
    # One digit of lookahead past the limit tells "too many" from "done".
    while end < n and end - pos <= max_digits and is_digit(line[end]):
        end += 1

    count = end - pos
    if count == 0:
        raise NotADigitError(
            f"expected a digit, found {line[pos]!r}", field=field, position=pos
        )
    if count > max_digits:
        raise TooManyDigitsError(
            f"more than {max_digits} digits", field=field, position=pos
        )
    if count < min_digits:
        raise TooFewDigitsError(
            f"expected at least {min_digits} digits, got {count}",
            field=field,
            position=pos,
        )
    return int(line[pos:end]), end


def parse_fraction(
    line: str,
    pos: int,
    max_digits: int = MAX_FRACTION_DIGITS,
    *,
    field: str | None = None,
) -> tuple[int, int]:
    """Consume fractional-second digits and return them as nanoseconds.

    The digits are positional: ".52" is 520 ms, not 52 ns.
    """
    value, end = parse_bounded_number(line, pos, 1, max_digits, field=field)
    return value * 10 ** (_NANOS_DIGITS - (end - pos)), end


def parse_token(
    line: str,
    pos: int,
    max_length: int,
    *,
    field: str,
    min_length: int = 1,
    stop: Collection[str] = (),
    nil: bool = True,
) -> tuple[str | None, int]:
    """Consume a bounded run of printable ASCII, or the nil sentinel.

    "-" alone is the sentinel and yields None; "-foo" is an ordinary token.
    """
    n = len(line)
    if pos >= n:
        raise MissingFieldError(f"{field} is missing", field=field, position=pos)
    if nil and is_nil(line, pos):
        return None, pos + 1

    limit = pos + max_length
    end = pos
    while end < n:
        c = line[end]
        if not is_printable(c) or c in stop:
            break
        if end == limit:
            raise FieldTooLongError(max_length, field=field, position=pos)
        end += 1

    if end - pos < min_length:
        raise FieldTooShortError(
            f"expected at least {min_length} printable characters",
            field=field,
            position=pos,
        )
    return line[pos:end], end


def unescape_value(raw: str) -> str:
    """Drop the backslash in front of '"', '\\' and ']' (RFC 5424 section 6.3.3)."""
    return _RFC_ESCAPE_RE.sub(r"\1", raw)


def escape_value(value: str) -> str:
    """Inverse of unescape_value."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("]", "\\]")


def parse_quoted(
    line: str,
    pos: int,
    *,
    unescape: str = "rfc",
    field: str | None = None,
) -> tuple[str, int]:
    """Consume a double-quoted PARAM-VALUE.

    A backslash always shields the next character from ending the value;
    whether the backslash survives in the result depends on `unescape`.
    """
    start = expect_char(line, pos, '"', field=field)
    n = len(line)
    escaped = False
    i = start
    while i < n:
        c = line[i]
        if c == "\\":
            escaped = True
            i += 2
            continue
        if c == '"':
            raw = line[start:i]
            if escaped and unescape == "rfc":
                raw = unescape_value(raw)
            return raw, i + 1
        i += 1

    raise UnexpectedEndOfInputError("unterminated quoted value", field=field, position=pos)
