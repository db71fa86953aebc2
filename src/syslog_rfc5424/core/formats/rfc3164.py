"""Legacy BSD syslog (RFC 3164) parser.

Layout: ``<PRI>Mmm DD HH:MM:SS[ YYYY] HOSTNAME TAG[PID]: MSG``. RFC 3164 only
recommends the TAG, so when the content does not start with one the whole
remainder becomes the message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ..clock import Clock, SystemClock
from ..config import DEFAULT_CONFIG, ParserConfig
from ..errors import SyslogParseError
from ..models import ProcId, SyslogMessage, classify_procid
from .base import APPNAME_MAX, HOSTNAME_MAX, PROCID_MAX, parse_priority, prepare_line
from .primitives import expect_char, is_printable, parse_token
from .rfc5424 import StructuredDataFactory
from .timestamp import parse_rfc3164_timestamp

logger = logging.getLogger(__name__)


def _is_tag_char(c: str) -> bool:
    return is_printable(c) and c not in "[:"


def _parse_tag(line: str, pos: int) -> tuple[str | None, ProcId | None, int]:
    """Consume ``TAG[PID]:`` or ``TAG:`` plus one optional space.

    Looks ahead within the tag only; when the shape does not match nothing is
    consumed.
    """
    n = len(line)
    end = pos
    while end < n and end - pos <= APPNAME_MAX and _is_tag_char(line[end]):
        end += 1
    if end == pos or end - pos > APPNAME_MAX or end >= n:
        return None, None, pos

    appname = line[pos:end]
    procid: ProcId | None = None
    cur = end
    if line[cur] == "[":
        close = line.find("]", cur + 1, cur + 2 + PROCID_MAX)
        token = line[cur + 1 : close]
        if close < 0 or not token or not all(is_printable(c) for c in token):
            return None, None, pos
        procid = classify_procid(token)
        cur = close + 1

    if cur >= n or line[cur] != ":":
        return None, None, pos
    cur += 1
    if line.startswith(" ", cur):
        cur += 1
    return appname, procid, cur


def _parse(
    line: str,
    config: ParserConfig,
    clock: Clock,
    sd_factory: StructuredDataFactory | None,
) -> SyslogMessage:
    facility, severity, pos = parse_priority(line, 0)

    (seconds, nanos), pos = parse_rfc3164_timestamp(line, pos, clock)
    pos = expect_char(line, pos, " ", field="timestamp")

    hostname, pos = parse_token(line, pos, HOSTNAME_MAX, field="hostname")
    if pos < len(line):
        pos = expect_char(line, pos, " ", field="hostname")

    appname, procid, pos = _parse_tag(line, pos)
    sd = sd_factory() if sd_factory is not None else config.new_structured_data()

    return SyslogMessage(
        severity=severity,
        facility=facility,
        version=None,
        timestamp=seconds,
        timestamp_nanos=nanos,
        hostname=hostname,
        appname=appname,
        procid=procid,
        msgid=None,
        sd=sd,
        msg=line[pos:],
    )


def parse_rfc3164_message(
    line: str | bytes,
    *,
    clock: Clock | None = None,
    config: ParserConfig | None = None,
    sd_factory: StructuredDataFactory | None = None,
) -> SyslogMessage:
    """Parse one RFC 3164 line.

    `clock` supplies the year when the timestamp carries none; it defaults to
    the system clock.
    """
    config = config or DEFAULT_CONFIG
    clock = clock or SystemClock()
    try:
        text = prepare_line(line, config)
        return _parse(text, config, clock, sd_factory)
    except SyslogParseError as exc:
        logger.debug(
            "Rejected RFC 3164 line (kind=%s field=%s position=%s): %s",
            exc.kind.value,
            exc.field,
            exc.position,
            exc,
        )
        raise


@dataclass(frozen=True, slots=True)
class Rfc3164Parser:
    """Reusable RFC 3164 parser bound to one configuration and clock."""

    config: ParserConfig = DEFAULT_CONFIG
    clock: Clock = field(default_factory=SystemClock)
    sd_factory: StructuredDataFactory | None = None

    def parse(self, line: str | bytes) -> SyslogMessage:
        """Parse one line into a SyslogMessage."""
        return parse_rfc3164_message(
            line, clock=self.clock, config=self.config, sd_factory=self.sd_factory
        )
