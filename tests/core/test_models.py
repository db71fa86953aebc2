from __future__ import annotations

from datetime import UTC, datetime

import pytest

from syslog_rfc5424 import (
    Facility,
    ProcessId,
    ProcessName,
    Severity,
    StructuredData,
    SyslogMessage,
    classify_procid,
)


def _message(**overrides: object) -> SyslogMessage:
    fields: dict[str, object] = {
        "severity": Severity.INFO,
        "facility": Facility.USER,
        "version": 1,
        "timestamp": None,
        "timestamp_nanos": None,
        "hostname": None,
        "appname": None,
        "procid": None,
        "msgid": None,
    }
    fields.update(overrides)
    return SyslogMessage(**fields)  # type: ignore[arg-type]


def test_classify_procid() -> None:
    assert classify_procid("1") == ProcessId(1)
    assert classify_procid("0") == ProcessId(0)
    assert classify_procid("007") == ProcessName("007")
    assert classify_procid("99999999999") == ProcessName("99999999999")
    assert classify_procid("١٢") == ProcessName("١٢")
    assert classify_procid("cron") == ProcessName("cron")


def test_procid_ordering_within_variant() -> None:
    assert ProcessId(1) < ProcessId(2)
    assert ProcessName("a") < ProcessName("b")
    assert sorted([ProcessId(9), ProcessId(3)]) == [ProcessId(3), ProcessId(9)]


def test_procid_variants_do_not_order() -> None:
    assert ProcessId(1) != ProcessName("1")
    with pytest.raises(TypeError):
        ProcessId(1) < ProcessName("1")  # type: ignore[operator]


def test_message_defaults() -> None:
    msg = _message()
    assert isinstance(msg.sd, StructuredData)
    assert len(msg.sd) == 0
    assert msg.msg == ""
    assert msg.datetime_utc is None


def test_datetime_utc_truncates_to_microseconds() -> None:
    msg = _message(timestamp=482196050, timestamp_nanos=520_000_999)
    assert msg.datetime_utc == datetime(1985, 4, 12, 23, 20, 50, 520000, tzinfo=UTC)


def test_message_is_immutable() -> None:
    msg = _message()
    with pytest.raises(AttributeError):
        msg.hostname = "other"  # type: ignore[misc]


def test_parse_classmethod_and_to_wire() -> None:
    line = "<14>1 2015-01-01T00:00:00Z host app 42 ID [x k=\"v\"] hello"
    msg = SyslogMessage.parse(line)
    assert msg == _message(
        timestamp=1420070400,
        timestamp_nanos=0,
        hostname="host",
        appname="app",
        procid=ProcessId(42),
        msgid="ID",
        sd=StructuredData({"x": {"k": "v"}}),
        msg="hello",
    )
    assert msg.to_wire() == line


def test_message_is_hashable() -> None:
    line = '<14>1 - host app - - [x k="v"] hello'
    first = SyslogMessage.parse(line)
    second = SyslogMessage.parse(line)
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert first != SyslogMessage.parse('<14>1 - host app - - [x k="w"] hello')
