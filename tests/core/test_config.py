from __future__ import annotations

import pytest
from pydantic import ValidationError

from syslog_rfc5424 import ParserConfig, SortedStructuredData, StructuredData


def test_defaults() -> None:
    config = ParserConfig()
    assert config.unescape == "rfc"
    assert config.structured_data == "ordered"
    assert config.max_line_length is None
    assert type(config.new_structured_data()) is StructuredData


def test_sorted_backing() -> None:
    sd = ParserConfig(structured_data="sorted").new_structured_data()
    assert isinstance(sd, SortedStructuredData)


def test_each_call_returns_a_fresh_container() -> None:
    config = ParserConfig()
    first = config.new_structured_data()
    first.insert_sdid("x")
    assert len(config.new_structured_data()) == 0


@pytest.mark.parametrize(
    "kwargs",
    [
        {"unescape": "json"},
        {"structured_data": "hashed"},
        {"max_line_length": 0},
        {"unknown_option": True},
    ],
)
def test_invalid_values_are_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        ParserConfig(**kwargs)  # type: ignore[arg-type]


def test_config_is_frozen() -> None:
    config = ParserConfig()
    with pytest.raises(ValidationError):
        config.unescape = "preserve"  # type: ignore[misc]


def test_from_mapping() -> None:
    config = ParserConfig.model_validate({"unescape": "preserve", "max_line_length": 2048})
    assert config.unescape == "preserve"
    assert config.max_line_length == 2048
