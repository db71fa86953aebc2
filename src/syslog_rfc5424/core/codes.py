"""Facility and severity code tables (RFC 5424 section 6.2.1)."""

from __future__ import annotations

from enum import Enum

from .errors import InvalidFacilityError, InvalidSeverityError


class Facility(str, Enum):
    """Syslog facilities. Names follow the Linux ``LOG_*`` constants."""

    KERN = "kern"
    USER = "user"
    MAIL = "mail"
    DAEMON = "daemon"
    AUTH = "auth"
    SYSLOG = "syslog"
    LPR = "lpr"
    NEWS = "news"
    UUCP = "uucp"
    CRON = "cron"
    AUTHPRIV = "authpriv"
    FTP = "ftp"
    NTP = "ntp"
    AUDIT = "audit"
    ALERT = "alert"
    CLOCKD = "clockd"
    LOCAL0 = "local0"
    LOCAL1 = "local1"
    LOCAL2 = "local2"
    LOCAL3 = "local3"
    LOCAL4 = "local4"
    LOCAL5 = "local5"
    LOCAL6 = "local6"
    LOCAL7 = "local7"

    @property
    def code(self) -> int:
        """Wire integer for this facility."""
        return _FACILITY_CODES[self]

    def __str__(self) -> str:
        return self.value


class Severity(str, Enum):
    """Syslog severities, most urgent first."""

    EMERG = "emerg"
    ALERT = "alert"
    CRIT = "crit"
    ERR = "err"
    WARNING = "warning"
    NOTICE = "notice"
    INFO = "info"
    DEBUG = "debug"

    @property
    def code(self) -> int:
        """Wire integer for this severity."""
        return _SEVERITY_CODES[self]

    def __str__(self) -> str:
        return self.value


# Index == wire code.
_FACILITIES: tuple[Facility, ...] = (
    Facility.KERN,
    Facility.USER,
    Facility.MAIL,
    Facility.DAEMON,
    Facility.AUTH,
    Facility.SYSLOG,
    Facility.LPR,
    Facility.NEWS,
    Facility.UUCP,
    Facility.CRON,
    Facility.AUTHPRIV,
    Facility.FTP,
    Facility.NTP,
    Facility.AUDIT,
    Facility.ALERT,
    Facility.CLOCKD,
    Facility.LOCAL0,
    Facility.LOCAL1,
    Facility.LOCAL2,
    Facility.LOCAL3,
    Facility.LOCAL4,
    Facility.LOCAL5,
    Facility.LOCAL6,
    Facility.LOCAL7,
)

_SEVERITIES: tuple[Severity, ...] = (
    Severity.EMERG,
    Severity.ALERT,
    Severity.CRIT,
    Severity.ERR,
    Severity.WARNING,
    Severity.NOTICE,
    Severity.INFO,
    Severity.DEBUG,
)

_FACILITY_CODES = {fac: code for code, fac in enumerate(_FACILITIES)}
_SEVERITY_CODES = {sev: code for code, sev in enumerate(_SEVERITIES)}


def _is_code(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def facility_from_code(code: int) -> Facility:
    """Map a wire integer (0..23) to a Facility."""
    if not _is_code(code) or not 0 <= code < len(_FACILITIES):
        raise InvalidFacilityError(f"facility code {code!r} is not in 0..23", field="pri")
    return _FACILITIES[code]


def severity_from_code(code: int) -> Severity:
    """Map a wire integer (0..7) to a Severity."""
    if not _is_code(code) or not 0 <= code < len(_SEVERITIES):
        raise InvalidSeverityError(f"severity code {code!r} is not in 0..7", field="pri")
    return _SEVERITIES[code]


def decode_priority(pri: int) -> tuple[Facility, Severity]:
    """Split a PRI value into (facility, severity)."""
    facility_code, severity_code = divmod(pri, 8)
    severity = severity_from_code(severity_code)
    facility = facility_from_code(facility_code)
    return facility, severity


def encode_priority(facility: Facility, severity: Severity) -> int:
    """Combine facility and severity into a PRI value."""
    return facility.code * 8 + severity.code
