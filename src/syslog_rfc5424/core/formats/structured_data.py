"""STRUCTURED-DATA sub-parser (RFC 5424 section 6.3)."""

from __future__ import annotations

from ..errors import ExpectedCharError, MissingFieldError
from ..structured_data import StructuredDataMap
from .primitives import expect_char, is_nil, parse_quoted, parse_token

SD_NAME_MAX = 32

# SD-NAME is PRINTUSASCII except '=', SP, ']' and '"'.
_SD_NAME_STOP = frozenset('= ]"')


def _parse_element(line: str, pos: int, sd: StructuredDataMap, unescape: str) -> int:
    pos = expect_char(line, pos, "[", field="sd")
    sd_id, pos = parse_token(
        line, pos, SD_NAME_MAX, field="sd_id", stop=_SD_NAME_STOP, nil=False
    )
    sd.insert_sdid(sd_id)

    while pos < len(line) and line[pos] == " ":
        name, pos = parse_token(
            line, pos + 1, SD_NAME_MAX, field="sd_param", stop=_SD_NAME_STOP, nil=False
        )
        pos = expect_char(line, pos, "=", field="sd_param")
        value, pos = parse_quoted(line, pos, unescape=unescape, field="sd_value")
        sd.insert_tuple(sd_id, name, value)

    return expect_char(line, pos, "]", field="sd")


def parse_structured_data(
    line: str,
    pos: int,
    sd: StructuredDataMap,
    *,
    unescape: str = "rfc",
) -> int:
    """Fill `sd` from the elements at pos and return the offset after them.

    Elements follow each other with no separator; the run ends at the first
    character after a ']' that is not '['.
    """
    if pos >= len(line):
        raise MissingFieldError("structured data is missing", field="sd", position=pos)
    if is_nil(line, pos):
        return pos + 1
    if line[pos] != "[":
        raise ExpectedCharError("[", line[pos], field="sd", position=pos)

    while pos < len(line) and line[pos] == "[":
        pos = _parse_element(line, pos, sd, unescape)
    return pos
