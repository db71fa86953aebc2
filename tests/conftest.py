from __future__ import annotations

from collections.abc import Callable

import pytest

from syslog_rfc5424 import FixedClock


@pytest.fixture
def build_line() -> Callable[..., str]:
    """Assemble an RFC 5424 line from per-field wire text."""

    def _build(
        *,
        pri: int | str = 1,
        version: int | str = 1,
        timestamp: str = "-",
        hostname: str = "-",
        appname: str = "-",
        procid: str = "-",
        msgid: str = "-",
        sd: str = "-",
        msg: str | None = None,
    ) -> str:
        line = f"<{pri}>{version} {timestamp} {hostname} {appname} {procid} {msgid} {sd}"
        if msg is not None:
            line += f" {msg}"
        return line

    return _build


@pytest.fixture
def clock_2024() -> FixedClock:
    return FixedClock(2024)
