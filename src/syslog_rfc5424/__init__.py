"""Parser for RFC 5424 (and legacy RFC 3164) syslog messages.

    >>> from syslog_rfc5424 import parse_message
    >>> parse_message("<78>1 2016-01-15T00:04:01+00:00 host1 CROND 10391 - - hi").appname
    'CROND'
"""

from __future__ import annotations

from .core.clock import Clock, FixedClock, SystemClock
from .core.codes import (
    Facility,
    Severity,
    decode_priority,
    encode_priority,
    facility_from_code,
    severity_from_code,
)
from .core.config import ParserConfig
from .core.errors import (
    ExpectedCharError,
    FieldTooLongError,
    FieldTooShortError,
    InvalidDateError,
    InvalidFacilityError,
    InvalidSeverityError,
    InvalidUtcOffsetError,
    LineTooLongError,
    MalformedPriorityError,
    MissingFieldError,
    MonthConversionError,
    NotADigitError,
    ParseErrorKind,
    SyslogParseError,
    TextDecodeError,
    TooFewDigitsError,
    TooManyDigitsError,
    UnexpectedEndOfInputError,
)
from .core.formats import (
    Rfc3164Parser,
    Rfc5424Parser,
    SyslogParser,
    parse_message,
    parse_rfc3164_message,
)
from .core.models import ProcessId, ProcessName, ProcId, SyslogMessage, classify_procid
from .core.render import format_rfc5424
from .core.structured_data import SortedStructuredData, StructuredData, StructuredDataMap

__all__ = [
    "Clock",
    "ExpectedCharError",
    "Facility",
    "FieldTooLongError",
    "FieldTooShortError",
    "FixedClock",
    "InvalidDateError",
    "InvalidFacilityError",
    "InvalidSeverityError",
    "InvalidUtcOffsetError",
    "LineTooLongError",
    "MalformedPriorityError",
    "MissingFieldError",
    "MonthConversionError",
    "NotADigitError",
    "ParseErrorKind",
    "ParserConfig",
    "ProcId",
    "ProcessId",
    "ProcessName",
    "Rfc3164Parser",
    "Rfc5424Parser",
    "Severity",
    "SortedStructuredData",
    "StructuredData",
    "StructuredDataMap",
    "SyslogMessage",
    "SyslogParseError",
    "SyslogParser",
    "SystemClock",
    "TextDecodeError",
    "TooFewDigitsError",
    "TooManyDigitsError",
    "UnexpectedEndOfInputError",
    "classify_procid",
    "decode_priority",
    "encode_priority",
    "facility_from_code",
    "format_rfc5424",
    "parse_message",
    "parse_rfc3164_message",
    "severity_from_code",
]
