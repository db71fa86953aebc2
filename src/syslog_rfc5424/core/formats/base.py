"""Parser interface and shared header handling."""

from __future__ import annotations

from typing import Protocol

from ..codes import Facility, Severity, decode_priority
from ..config import ParserConfig
from ..errors import (
    LineTooLongError,
    MalformedPriorityError,
    SyslogParseError,
    TextDecodeError,
    UnexpectedEndOfInputError,
)
from ..models import SyslogMessage
from .primitives import parse_bounded_number

HOSTNAME_MAX = 255
APPNAME_MAX = 48
PROCID_MAX = 128
MSGID_MAX = 32

# PRI is 1-3 digits on the wire; anything wider is still read so it can be
# reported as an out-of-range facility rather than a bracket error.
PRI_MAX_DIGITS = 10


class SyslogParser(Protocol):
    """Parser interface: return a SyslogMessage or raise SyslogParseError."""

    def parse(self, line: str | bytes) -> SyslogMessage:
        """Parse one line."""
        ...


def prepare_line(line: str | bytes, config: ParserConfig) -> str:
    """Decode bytes as strict UTF-8 and enforce the configured length bound."""
    if isinstance(line, (bytes, bytearray, memoryview)):
        try:
            line = bytes(line).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise TextDecodeError(str(exc), position=exc.start) from exc

    if config.max_line_length is not None and len(line) > config.max_line_length:
        raise LineTooLongError(
            f"line has {len(line)} characters, limit is {config.max_line_length}"
        )
    return line


def parse_priority(line: str, pos: int) -> tuple[Facility, Severity, int]:
    """Consume ``<PRI>`` and decompose it into facility and severity."""
    if pos >= len(line):
        raise UnexpectedEndOfInputError("expected '<'", field="pri", position=pos)
    if line[pos] != "<":
        raise MalformedPriorityError("<", line[pos], field="pri", position=pos)

    pri, end = parse_bounded_number(line, pos + 1, 1, PRI_MAX_DIGITS, field="pri")
    if end >= len(line):
        raise UnexpectedEndOfInputError("expected '>'", field="pri", position=end)
    if line[end] != ">":
        raise MalformedPriorityError(">", line[end], field="pri", position=end)

    try:
        facility, severity = decode_priority(pri)
    except SyslogParseError as exc:
        exc.position = pos
        raise
    return facility, severity, end + 1
