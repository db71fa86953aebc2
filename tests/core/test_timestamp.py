from __future__ import annotations

import pytest

from syslog_rfc5424 import FixedClock
from syslog_rfc5424.core.errors import (
    ExpectedCharError,
    InvalidDateError,
    InvalidUtcOffsetError,
    MonthConversionError,
    TooFewDigitsError,
    TooManyDigitsError,
    UnexpectedEndOfInputError,
)
from syslog_rfc5424.core.formats.timestamp import (
    parse_rfc3164_timestamp,
    parse_rfc5424_timestamp,
    to_epoch_seconds,
)


def test_nil_timestamp() -> None:
    assert parse_rfc5424_timestamp("- host", 0) == (None, 1)


def test_zulu() -> None:
    value, pos = parse_rfc5424_timestamp("2015-01-01T00:00:00Z rest", 0)
    assert value == (1420070400, 0)
    assert pos == 20


def test_lowercase_zulu() -> None:
    assert parse_rfc5424_timestamp("2015-01-01T00:00:00z", 0)[0] == (1420070400, 0)


def test_zero_offset() -> None:
    assert parse_rfc5424_timestamp("2016-01-15T00:04:01+00:00", 0)[0] == (1452816241, 0)


def test_positive_offset_is_subtracted() -> None:
    # 00:00 at +10:00 is 14:00 the previous day in UTC.
    assert parse_rfc5424_timestamp("2015-01-01T00:00:00+10:00", 0)[0] == (1420034400, 0)


def test_negative_offset_is_added() -> None:
    assert parse_rfc5424_timestamp("2015-01-01T00:00:00-05:30", 0)[0] == (
        1420070400 + 5 * 3600 + 30 * 60,
        0,
    )


def test_fraction_scaled_to_nanos() -> None:
    value, _ = parse_rfc5424_timestamp("1985-04-12T23:20:50.52Z", 0)
    assert value == (482196050, 520_000_000)


def test_microsecond_fraction() -> None:
    value, _ = parse_rfc5424_timestamp("2003-08-24T05:14:15.000003-07:00", 0)
    assert value == (1061727255, 3_000)


def test_fraction_longer_than_six_digits_is_rejected() -> None:
    with pytest.raises(TooManyDigitsError):
        parse_rfc5424_timestamp("1985-04-12T23:20:50.1234567Z", 0)


def test_component_widths_are_exact() -> None:
    with pytest.raises(TooFewDigitsError):
        parse_rfc5424_timestamp("2015-1-01T00:00:00Z", 0)
    with pytest.raises(TooManyDigitsError):
        parse_rfc5424_timestamp("20150-01-01T00:00:00Z", 0)
    with pytest.raises(TooFewDigitsError):
        parse_rfc5424_timestamp("2015-01-01T00:00:00+1:00", 0)
    with pytest.raises(TooManyDigitsError):
        parse_rfc5424_timestamp("2015-01-01T00:00:00+01:000", 0)


def test_missing_separator() -> None:
    with pytest.raises(ExpectedCharError) as excinfo:
        parse_rfc5424_timestamp("2015-01-01 00:00:00Z", 0)
    assert excinfo.value.expected == "T"


def test_missing_offset() -> None:
    with pytest.raises(UnexpectedEndOfInputError):
        parse_rfc5424_timestamp("2015-01-01T00:00:00", 0)
    with pytest.raises(InvalidUtcOffsetError):
        parse_rfc5424_timestamp("2015-01-01T00:00:00 host", 0)


def test_offset_out_of_range() -> None:
    with pytest.raises(InvalidUtcOffsetError):
        parse_rfc5424_timestamp("2015-01-01T00:00:00+24:00", 0)
    with pytest.raises(InvalidUtcOffsetError):
        parse_rfc5424_timestamp("2015-01-01T00:00:00+01:60", 0)


def test_impossible_calendar_date() -> None:
    with pytest.raises(InvalidDateError):
        parse_rfc5424_timestamp("2015-02-30T00:00:00Z", 0)
    with pytest.raises(InvalidDateError):
        parse_rfc5424_timestamp("2015-13-01T00:00:00Z", 0)
    with pytest.raises(InvalidDateError):
        parse_rfc5424_timestamp("2015-01-01T24:00:00Z", 0)


def test_epoch_math_handles_pre_1970() -> None:
    assert to_epoch_seconds(1969, 12, 31, 23, 59, 59) == -1
    assert to_epoch_seconds(1, 1, 1, 0, 0, 0, offset_minutes=60) == -62135600400


def test_rfc3164_without_year_uses_clock() -> None:
    value, pos = parse_rfc3164_timestamp("Oct 11 22:14:15 host", 0, FixedClock(2003))
    assert value == (1065910455, 0)
    assert pos == 15


def test_rfc3164_with_year() -> None:
    value, pos = parse_rfc3164_timestamp("Oct 11 22:14:15 2003 host", 0, FixedClock(1999))
    assert value == (1065910455, 0)
    assert pos == 20


def test_rfc3164_space_padded_day() -> None:
    value, pos = parse_rfc3164_timestamp("Feb  5 17:32:18 host", 0, FixedClock(1970))
    assert value == (35 * 86400 + 17 * 3600 + 32 * 60 + 18, 0)
    assert pos == 15


def test_rfc3164_single_digit_day() -> None:
    value, pos = parse_rfc3164_timestamp("Feb 5 17:32:18", 0, FixedClock(1970))
    assert value == (35 * 86400 + 17 * 3600 + 32 * 60 + 18, 0)
    assert pos == 14


def test_rfc3164_month_is_case_sensitive() -> None:
    with pytest.raises(MonthConversionError):
        parse_rfc3164_timestamp("oct 11 22:14:15 host", 0, FixedClock(2003))
    with pytest.raises(MonthConversionError):
        parse_rfc3164_timestamp("Foo 11 22:14:15 host", 0, FixedClock(2003))


def test_rfc3164_leap_day_needs_leap_year() -> None:
    assert parse_rfc3164_timestamp("Feb 29 00:00:00", 0, FixedClock(2024))[0][0] == 1709164800
    with pytest.raises(InvalidDateError):
        parse_rfc3164_timestamp("Feb 29 00:00:00", 0, FixedClock(2023))
