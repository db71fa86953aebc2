"""Clock capability used to fill in the year of RFC 3164 timestamps."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current calendar year."""

    def current_year(self) -> int:
        """Return the current year (UTC)."""
        ...


@dataclass(frozen=True, slots=True)
class SystemClock:
    """Reads the wall clock on every call."""

    def current_year(self) -> int:
        return datetime.now(UTC).year


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Always reports the same year; handy for tests and replaying archives."""

    year: int

    def current_year(self) -> int:
        return self.year
