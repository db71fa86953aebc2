from __future__ import annotations

import pytest

from syslog_rfc5424.core.structured_data import (
    SortedStructuredData,
    StructuredData,
    StructuredDataMap,
)


def test_insert_and_find() -> None:
    sd = StructuredData()
    sd.insert_tuple("foo", "bar", "baz")
    assert sd.find_tuple("foo", "bar") == "baz"
    assert sd.find_tuple("foo", "baz") is None
    assert sd.find_tuple("missing", "bar") is None
    assert len(sd) == 1


def test_last_write_wins() -> None:
    sd = StructuredData()
    sd.insert_tuple("foo", "bar", "baz")
    sd.insert_tuple("foo", "bar", "bing")
    assert sd.find_tuple("foo", "bar") == "bing"
    assert dict(sd.find_sdid("foo") or {}) == {"bar": "bing"}


def test_mapping_access_is_read_only() -> None:
    sd = StructuredData({"foo": {"bar": "baz", "baz": "bar"}, "faa": {"bar": "baz"}})
    assert sd["foo"]["bar"] == "baz"
    assert sd["faa"]["bar"] == "baz"
    assert list(sd) == ["foo", "faa"]
    with pytest.raises(TypeError):
        sd["foo"]["bar"] = "x"  # type: ignore[index]


def test_empty_element_is_kept() -> None:
    sd = StructuredData()
    sd.insert_sdid("origin")
    assert len(sd) == 1
    assert sd.find_sdid("origin") == {}
    assert not sd.is_empty()
    assert StructuredData().is_empty()


def test_equality_ignores_insertion_order() -> None:
    a = StructuredData()
    a.insert_tuple("x", "k", "1")
    a.insert_tuple("y", "k", "2")
    b = SortedStructuredData()
    b.insert_tuple("y", "k", "2")
    b.insert_tuple("x", "k", "1")
    assert a == b


def test_sorted_backing_iterates_in_order() -> None:
    sd = SortedStructuredData()
    sd.insert_tuple("zeta", "b", "2")
    sd.insert_tuple("zeta", "a", "1")
    sd.insert_tuple("alpha", "k", "v")
    assert list(sd) == ["alpha", "zeta"]
    assert list(sd["zeta"]) == ["a", "b"]


def test_as_sorted_dict() -> None:
    sd = StructuredData()
    sd.insert_tuple("foo", "z", "1")
    sd.insert_tuple("foo", "a", "2")
    sd.insert_tuple("faa", "bar", "baz")
    flat = sd.as_sorted_dict()
    assert flat == {"faa": {"bar": "baz"}, "foo": {"a": "2", "z": "1"}}
    assert list(flat) == ["faa", "foo"]
    assert list(flat["foo"]) == ["a", "z"]


def test_containers_satisfy_protocol() -> None:
    assert isinstance(StructuredData(), StructuredDataMap)
    assert isinstance(SortedStructuredData(), StructuredDataMap)
