"""Core data models for parsed syslog messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from typing import TypeAlias

from .codes import Facility, Severity
from .config import UnescapePolicy
from .structured_data import StructuredData, StructuredDataMap

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_PID_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True, order=True)
class ProcessId:
    """Numeric PROCID."""

    pid: int


@dataclass(frozen=True, slots=True, order=True)
class ProcessName:
    """Non-numeric PROCID, kept as the raw token."""

    name: str


# Values of different variants do not order against each other (TypeError).
ProcId: TypeAlias = ProcessId | ProcessName


def classify_procid(token: str) -> ProcId:
    """Turn a PROCID token into its numeric or named variant.

    Only canonical decimals become ProcessId: "0123" stays a name so that
    rendering the record reproduces the original token.
    """
    if token.isascii() and token.isdigit() and (token == "0" or token[0] != "0"):
        value = int(token)
        if value <= _PID_MAX:
            return ProcessId(value)
    return ProcessName(token)


@dataclass(frozen=True, slots=True)
class SyslogMessage:
    """One parsed syslog line."""

    severity: Severity
    facility: Facility
    version: int | None  # None for RFC 3164 input
    timestamp: int | None  # seconds since the epoch, UTC
    timestamp_nanos: int | None
    hostname: str | None
    appname: str | None
    procid: ProcId | None
    msgid: str | None
    # Mappings are unhashable; equality still compares sd.
    sd: StructuredDataMap = field(default_factory=StructuredData, hash=False)
    msg: str = ""

    @classmethod
    def parse(cls, text: str | bytes) -> SyslogMessage:
        """Parse an RFC 5424 line with the default configuration."""
        from .formats.rfc5424 import parse_message

        return parse_message(text)

    @property
    def datetime_utc(self) -> datetime | None:
        """Timestamp as an aware UTC datetime (microsecond precision)."""
        if self.timestamp is None:
            return None
        micros = (self.timestamp_nanos or 0) // 1000
        return _EPOCH + timedelta(seconds=self.timestamp, microseconds=micros)

    def to_wire(self, *, unescape: UnescapePolicy = "rfc") -> str:
        """Render back to the canonical RFC 5424 form.

        Pass the `unescape` policy the message was parsed with.
        """
        from .render import format_rfc5424

        return format_rfc5424(self, unescape=unescape)
