"""Timestamp sub-parsers.

Both forms produce ``(epoch_seconds, nanoseconds)``. Wall-clock fields are
validated through ``datetime``; the epoch value itself is integer arithmetic
so offsets near the ends of the calendar cannot overflow.
"""

from __future__ import annotations

from datetime import date, datetime

from ..clock import Clock
from ..errors import (
    InvalidDateError,
    InvalidUtcOffsetError,
    MissingFieldError,
    MonthConversionError,
    UnexpectedEndOfInputError,
)
from .primitives import (
    expect_char,
    is_digit,
    is_nil,
    parse_bounded_number,
    parse_fraction,
)

_FIELD = "timestamp"
_EPOCH_ORDINAL = date(1970, 1, 1).toordinal()
_SECONDS_PER_DAY = 86_400

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_NUMBERS = {name: number for number, name in enumerate(_MONTHS, start=1)}


def to_epoch_seconds(
    year: int,
    month: int,
    day: int,
    hour: int,
    minute: int,
    second: int,
    *,
    offset_minutes: int = 0,
    position: int | None = None,
) -> int:
    """Convert local wall-clock fields at a UTC offset to epoch seconds.

    A positive offset means local time is ahead of UTC, so it is subtracted.
    """
    try:
        local = datetime(year, month, day, hour, minute, second)
    except ValueError as exc:
        raise InvalidDateError(str(exc), field=_FIELD, position=position) from exc

    days = local.toordinal() - _EPOCH_ORDINAL
    seconds = days * _SECONDS_PER_DAY + hour * 3600 + minute * 60 + second
    return seconds - offset_minutes * 60


def _parse_utc_offset(line: str, pos: int) -> tuple[int, int]:
    """Consume 'Z' or '+HH:MM' / '-HH:MM' and return the offset in minutes."""
    if pos >= len(line):
        raise UnexpectedEndOfInputError("expected a UTC offset", field=_FIELD, position=pos)

    c = line[pos]
    if c in "Zz":
        return 0, pos + 1
    if c not in "+-":
        raise InvalidUtcOffsetError(
            f"expected 'Z' or a numeric offset, found {c!r}", field=_FIELD, position=pos
        )

    sign = -1 if c == "-" else 1
    hours, cur = parse_bounded_number(line, pos + 1, 2, 2, field=_FIELD)
    cur = expect_char(line, cur, ":", field=_FIELD)
    minutes, cur = parse_bounded_number(line, cur, 2, 2, field=_FIELD)
    if hours > 23 or minutes > 59:
        raise InvalidUtcOffsetError(
            f"offset {line[pos:cur]!r} is out of range", field=_FIELD, position=pos
        )
    return sign * (hours * 60 + minutes), cur


def _parse_clock_time(line: str, pos: int) -> tuple[tuple[int, int, int], int]:
    """Consume HH:MM:SS."""
    hour, pos = parse_bounded_number(line, pos, 2, 2, field=_FIELD)
    pos = expect_char(line, pos, ":", field=_FIELD)
    minute, pos = parse_bounded_number(line, pos, 2, 2, field=_FIELD)
    pos = expect_char(line, pos, ":", field=_FIELD)
    second, pos = parse_bounded_number(line, pos, 2, 2, field=_FIELD)
    return (hour, minute, second), pos


def parse_rfc5424_timestamp(line: str, pos: int) -> tuple[tuple[int, int] | None, int]:
    """Parse ``YYYY-MM-DDTHH:MM:SS[.f](Z|+HH:MM)`` or the nil sentinel."""
    start = pos
    if pos >= len(line):
        raise MissingFieldError("timestamp is missing", field=_FIELD, position=pos)
    if is_nil(line, pos):
        return None, pos + 1

    year, pos = parse_bounded_number(line, pos, 4, 4, field=_FIELD)
    pos = expect_char(line, pos, "-", field=_FIELD)
    month, pos = parse_bounded_number(line, pos, 2, 2, field=_FIELD)
    pos = expect_char(line, pos, "-", field=_FIELD)
    day, pos = parse_bounded_number(line, pos, 2, 2, field=_FIELD)
    pos = expect_char(line, pos, "T", field=_FIELD)
    (hour, minute, second), pos = _parse_clock_time(line, pos)

    nanos = 0
    if pos < len(line) and line[pos] == ".":
        nanos, pos = parse_fraction(line, pos + 1, field=_FIELD)

    offset, pos = _parse_utc_offset(line, pos)
    seconds = to_epoch_seconds(
        year, month, day, hour, minute, second, offset_minutes=offset, position=start
    )
    return (seconds, nanos), pos


def _has_year(line: str, pos: int) -> bool:
    """True if a standalone four-digit year starts at pos."""
    end = pos + 4
    if end > len(line):
        return False
    if not all(is_digit(c) for c in line[pos:end]):
        return False
    return end == len(line) or line[end] == " "


def parse_rfc3164_timestamp(
    line: str,
    pos: int,
    clock: Clock,
) -> tuple[tuple[int, int], int]:
    """Parse ``Mmm DD HH:MM:SS[ YYYY]``; the year defaults to clock.current_year().

    The day may be one digit, two digits, or a space-padded single digit.
    There is no zone on the wire, so the time is taken as UTC.
    """
    start = pos
    n = len(line)
    if pos >= n:
        raise MissingFieldError("timestamp is missing", field=_FIELD, position=pos)

    name = line[pos : pos + 3]
    if len(name) < 3:
        raise UnexpectedEndOfInputError("truncated month name", field=_FIELD, position=pos)
    month = _MONTH_NUMBERS.get(name)
    if month is None:
        raise MonthConversionError(f"unknown month {name!r}", field=_FIELD, position=pos)
    pos = expect_char(line, pos + 3, " ", field=_FIELD)

    if pos < n and line[pos] == " ":
        day, pos = parse_bounded_number(line, pos + 1, 1, 1, field=_FIELD)
    else:
        day, pos = parse_bounded_number(line, pos, 1, 2, field=_FIELD)
    pos = expect_char(line, pos, " ", field=_FIELD)
    (hour, minute, second), pos = _parse_clock_time(line, pos)

    if line.startswith(" ", pos) and _has_year(line, pos + 1):
        year, pos = parse_bounded_number(line, pos + 1, 4, 4, field=_FIELD)
    else:
        year = clock.current_year()

    seconds = to_epoch_seconds(year, month, day, hour, minute, second, position=start)
    return (seconds, 0), pos
