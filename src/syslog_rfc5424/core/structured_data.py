"""Structured-data containers.

RFC 5424 allows a PARAM-NAME to repeat inside one element. These containers
keep a single value per (SD-ID, PARAM-NAME) pair: the last one written wins,
so ``[foo bar="baz" bar="bing"]`` only ever exposes ``"bing"``.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Protocol, runtime_checkable


@runtime_checkable
class StructuredDataMap(Protocol):
    """Capability interface the structured-data parser writes through."""

    def insert_sdid(self, sd_id: str) -> None:
        """Register an element, even one without params."""
        ...

    def insert_tuple(self, sd_id: str, param_name: str, param_value: str) -> None:
        """Store one (id, name) -> value mapping, replacing any earlier value."""
        ...

    def find_tuple(self, sd_id: str, param_name: str) -> str | None:
        """Look up a value by id and param name."""
        ...

    def find_sdid(self, sd_id: str) -> Mapping[str, str] | None:
        """Return all params of one element."""
        ...

    def as_sorted_dict(self) -> dict[str, dict[str, str]]:
        """Canonical flattening: plain dicts, keys sorted at both levels."""
        ...

    def __len__(self) -> int: ...


class StructuredData(Mapping[str, Mapping[str, str]]):
    """Insertion-ordered container, read-only through the Mapping interface."""

    __slots__ = ("_elements",)

    def __init__(self, elements: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._elements: dict[str, dict[str, str]] = {}
        if elements:
            for sd_id, params in elements.items():
                self.insert_sdid(sd_id)
                for name, value in params.items():
                    self.insert_tuple(sd_id, name, value)

    def insert_sdid(self, sd_id: str) -> None:
        self._elements.setdefault(sd_id, {})

    def insert_tuple(self, sd_id: str, param_name: str, param_value: str) -> None:
        self._elements.setdefault(sd_id, {})[param_name] = param_value

    def find_tuple(self, sd_id: str, param_name: str) -> str | None:
        params = self._elements.get(sd_id)
        if params is None:
            return None
        return params.get(param_name)

    def find_sdid(self, sd_id: str) -> Mapping[str, str] | None:
        params = self._elements.get(sd_id)
        if params is None:
            return None
        return MappingProxyType(params)

    def is_empty(self) -> bool:
        return not self._elements

    def as_sorted_dict(self) -> dict[str, dict[str, str]]:
        return {
            sd_id: dict(sorted(self._elements[sd_id].items()))
            for sd_id in sorted(self._elements)
        }

    def __getitem__(self, sd_id: str) -> Mapping[str, str]:
        return MappingProxyType(self._elements[sd_id])

    def __iter__(self) -> Iterator[str]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._elements!r})"


class SortedStructuredData(StructuredData):
    """Same contract as StructuredData, but iterates ids and params sorted."""

    __slots__ = ()

    def find_sdid(self, sd_id: str) -> Mapping[str, str] | None:
        params = self._elements.get(sd_id)
        if params is None:
            return None
        return MappingProxyType(dict(sorted(params.items())))

    def __getitem__(self, sd_id: str) -> Mapping[str, str]:
        return MappingProxyType(dict(sorted(self._elements[sd_id].items())))

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._elements))
