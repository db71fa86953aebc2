"""RFC 5424 message parser."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..config import DEFAULT_CONFIG, ParserConfig
from ..errors import NotADigitError, SyslogParseError
from ..models import SyslogMessage, classify_procid
from ..structured_data import StructuredDataMap
from .base import (
    APPNAME_MAX,
    HOSTNAME_MAX,
    MSGID_MAX,
    PROCID_MAX,
    parse_priority,
    prepare_line,
)
from .primitives import expect_char, parse_bounded_number, parse_token
from .structured_data import parse_structured_data
from .timestamp import parse_rfc5424_timestamp

logger = logging.getLogger(__name__)

StructuredDataFactory = Callable[[], StructuredDataMap]


def _parse(
    line: str,
    config: ParserConfig,
    sd_factory: StructuredDataFactory | None,
) -> SyslogMessage:
    facility, severity, pos = parse_priority(line, 0)

    # VERSION = NONZERO-DIGIT 0*2DIGIT
    if line.startswith("0", pos):
        raise NotADigitError(
            "version must start with a non-zero digit", field="version", position=pos
        )
    version, pos = parse_bounded_number(line, pos, 1, 2, field="version")
    pos = expect_char(line, pos, " ", field="version")

    ts, pos = parse_rfc5424_timestamp(line, pos)
    pos = expect_char(line, pos, " ", field="timestamp")

    hostname, pos = parse_token(line, pos, HOSTNAME_MAX, field="hostname")
    pos = expect_char(line, pos, " ", field="hostname")

    appname, pos = parse_token(line, pos, APPNAME_MAX, field="appname")
    pos = expect_char(line, pos, " ", field="appname")

    procid_token, pos = parse_token(line, pos, PROCID_MAX, field="procid")
    pos = expect_char(line, pos, " ", field="procid")

    msgid, pos = parse_token(line, pos, MSGID_MAX, field="msgid")
    pos = expect_char(line, pos, " ", field="msgid")

    sd = sd_factory() if sd_factory is not None else config.new_structured_data()
    pos = parse_structured_data(line, pos, sd, unescape=config.unescape)

    if line.startswith(" ", pos):
        pos += 1

    return SyslogMessage(
        severity=severity,
        facility=facility,
        version=version,
        timestamp=ts[0] if ts is not None else None,
        timestamp_nanos=ts[1] if ts is not None else None,
        hostname=hostname,
        appname=appname,
        procid=classify_procid(procid_token) if procid_token is not None else None,
        msgid=msgid,
        sd=sd,
        msg=line[pos:],
    )


def parse_message(
    line: str | bytes,
    *,
    config: ParserConfig | None = None,
    sd_factory: StructuredDataFactory | None = None,
) -> SyslogMessage:
    """Parse one RFC 5424 line.

    Raises the first SyslogParseError encountered; no partial record is
    ever returned.

    Example::

        >>> msg = parse_message(
        ...     '<78>1 2016-01-15T00:04:01+00:00 host1 CROND 10391 - '
        ...     '[meta sequenceId="29"] some_message'
        ... )
        >>> msg.hostname
        'host1'
    """
    config = config or DEFAULT_CONFIG
    try:
        text = prepare_line(line, config)
        return _parse(text, config, sd_factory)
    except SyslogParseError as exc:
        logger.debug(
            "Rejected RFC 5424 line (kind=%s field=%s position=%s): %s",
            exc.kind.value,
            exc.field,
            exc.position,
            exc,
        )
        raise


@dataclass(frozen=True, slots=True)
class Rfc5424Parser:
    """Reusable RFC 5424 parser bound to one configuration."""

    config: ParserConfig = DEFAULT_CONFIG
    sd_factory: StructuredDataFactory | None = None

    def parse(self, line: str | bytes) -> SyslogMessage:
        """Parse one line into a SyslogMessage."""
        return parse_message(line, config=self.config, sd_factory=self.sd_factory)
