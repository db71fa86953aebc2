"""Render a SyslogMessage back to its canonical RFC 5424 wire form."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from .codes import encode_priority
from .config import UnescapePolicy
from .formats.primitives import NIL, escape_value
from .models import ProcessId, ProcId, SyslogMessage
from .structured_data import StructuredDataMap

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_DEFAULT_VERSION = 1


def _format_field(value: str | None) -> str:
    return NIL if value is None else value


def _format_procid(procid: ProcId | None) -> str:
    if procid is None:
        return NIL
    if isinstance(procid, ProcessId):
        return str(procid.pid)
    return procid.name


def format_timestamp(seconds: int | None, nanos: int | None = None) -> str:
    """Format epoch seconds as ``YYYY-MM-DDTHH:MM:SS[.ffffff]Z``.

    Trailing zeros of the fraction are dropped; precision below one
    microsecond cannot be expressed on the wire and raises ValueError.
    """
    if seconds is None:
        return NIL
    nanos = nanos or 0
    if not 0 <= nanos < 1_000_000_000:
        raise ValueError("timestamp_nanos must be in [0, 1e9)")
    if nanos % 1000:
        raise ValueError("RFC 5424 timestamps carry at most microsecond precision")

    dt = _EPOCH + timedelta(seconds=seconds)
    out = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
        f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    if nanos:
        out += "." + f"{nanos // 1000:06d}".rstrip("0")
    return out + "Z"


def format_structured_data(sd: StructuredDataMap, *, unescape: UnescapePolicy = "rfc") -> str:
    """Format SD elements in sorted order, or '-' when there are none.

    Values parsed under the "preserve" policy are still wire text and are
    written back unchanged; decoded values are escaped.
    """
    if len(sd) == 0:
        return NIL
    parts: list[str] = []
    for sd_id, params in sd.as_sorted_dict().items():
        parts.append("[" + sd_id)
        for name, value in params.items():
            if unescape == "rfc":
                value = escape_value(value)
            parts.append(f' {name}="{value}"')
        parts.append("]")
    return "".join(parts)


def format_rfc5424(message: SyslogMessage, *, unescape: UnescapePolicy = "rfc") -> str:
    """Render a message.

    Parsing the result with the same `unescape` policy the message was parsed
    with yields an equal record.
    """
    version = message.version if message.version is not None else _DEFAULT_VERSION
    head = " ".join(
        (
            f"<{encode_priority(message.facility, message.severity)}>{version}",
            format_timestamp(message.timestamp, message.timestamp_nanos),
            _format_field(message.hostname),
            _format_field(message.appname),
            _format_procid(message.procid),
            _format_field(message.msgid),
            format_structured_data(message.sd, unescape=unescape),
        )
    )
    if message.msg:
        return f"{head} {message.msg}"
    return head
