"""Parse error types.

Every failure raised by the parsers is a ``SyslogParseError`` subclass. The
``kind`` attribute lets callers pick a policy per failure class without
matching on exception types.
"""

from __future__ import annotations

from enum import Enum


class ParseErrorKind(str, Enum):
    """Machine-readable failure classes."""

    MALFORMED_PRIORITY = "malformed_priority"
    INVALID_SEVERITY = "invalid_severity"
    INVALID_FACILITY = "invalid_facility"
    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    EXPECTED_CHAR = "expected_char"
    NOT_A_DIGIT = "not_a_digit"
    TOO_FEW_DIGITS = "too_few_digits"
    TOO_MANY_DIGITS = "too_many_digits"
    FIELD_TOO_SHORT = "field_too_short"
    FIELD_TOO_LONG = "field_too_long"
    INVALID_UTC_OFFSET = "invalid_utc_offset"
    INVALID_DATE = "invalid_date"
    MONTH_CONVERSION = "month_conversion"
    MISSING_FIELD = "missing_field"
    TEXT_DECODE = "text_decode"
    LINE_TOO_LONG = "line_too_long"


class SyslogParseError(ValueError):
    """Base class for all parse failures."""

    kind: ParseErrorKind

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(message)
        self.field = field
        self.position = position

    def __str__(self) -> str:
        text = super().__str__()
        where = []
        if self.field is not None:
            where.append(f"field={self.field}")
        if self.position is not None:
            where.append(f"position={self.position}")
        if where:
            return f"{text} ({', '.join(where)})"
        return text


class InvalidSeverityError(SyslogParseError):
    kind = ParseErrorKind.INVALID_SEVERITY


class InvalidFacilityError(SyslogParseError):
    kind = ParseErrorKind.INVALID_FACILITY


class UnexpectedEndOfInputError(SyslogParseError):
    kind = ParseErrorKind.UNEXPECTED_END_OF_INPUT


class ExpectedCharError(SyslogParseError):
    """A specific character was required but another one was found."""

    kind = ParseErrorKind.EXPECTED_CHAR

    def __init__(
        self,
        expected: str,
        found: str,
        *,
        field: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(
            f"expected {expected!r}, found {found!r}", field=field, position=position
        )
        self.expected = expected
        self.found = found


class MalformedPriorityError(ExpectedCharError):
    """The ``<PRI>`` header is not bracketed correctly."""

    kind = ParseErrorKind.MALFORMED_PRIORITY


class NotADigitError(SyslogParseError):
    kind = ParseErrorKind.NOT_A_DIGIT


class TooFewDigitsError(SyslogParseError):
    kind = ParseErrorKind.TOO_FEW_DIGITS


class TooManyDigitsError(SyslogParseError):
    kind = ParseErrorKind.TOO_MANY_DIGITS


class FieldTooShortError(SyslogParseError):
    kind = ParseErrorKind.FIELD_TOO_SHORT


class FieldTooLongError(SyslogParseError):
    """A bounded token ran past its maximum length."""

    kind = ParseErrorKind.FIELD_TOO_LONG

    def __init__(
        self,
        max_length: int,
        *,
        field: str | None = None,
        position: int | None = None,
    ) -> None:
        super().__init__(
            f"value longer than {max_length} characters", field=field, position=position
        )
        self.max_length = max_length


class InvalidUtcOffsetError(SyslogParseError):
    kind = ParseErrorKind.INVALID_UTC_OFFSET


class InvalidDateError(SyslogParseError):
    kind = ParseErrorKind.INVALID_DATE


class MonthConversionError(SyslogParseError):
    kind = ParseErrorKind.MONTH_CONVERSION


class MissingFieldError(SyslogParseError):
    kind = ParseErrorKind.MISSING_FIELD


class TextDecodeError(SyslogParseError):
    kind = ParseErrorKind.TEXT_DECODE


class LineTooLongError(SyslogParseError):
    kind = ParseErrorKind.LINE_TOO_LONG
