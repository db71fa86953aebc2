"""Syslog wire-format parsers.

RFC 5424 and RFC 3164 entry points plus the field primitives they share.
"""

from __future__ import annotations

from .base import SyslogParser
from .rfc3164 import Rfc3164Parser, parse_rfc3164_message
from .rfc5424 import Rfc5424Parser, StructuredDataFactory, parse_message

__all__ = [
    "Rfc3164Parser",
    "Rfc5424Parser",
    "StructuredDataFactory",
    "SyslogParser",
    "parse_message",
    "parse_rfc3164_message",
]
