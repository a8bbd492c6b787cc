"""Ordered taxonomy templates.

A template is the fixed sequence of transaction types a contract is
expected to follow. Positions are plain list indexes, so iteration is
always in ascending position order.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, overload


class TaxonomyConfigError(ValueError):
    """Raised when a taxonomy template or its semantics are inconsistent."""


@dataclass(frozen=True)
class TaxonomyMapEntry:
    """One declared position in a taxonomy."""

    type: int
    required: bool = True


EntryLike = TaxonomyMapEntry | tuple[int, bool] | Mapping[str, Any]


def to_entry(value: EntryLike) -> TaxonomyMapEntry:
    """Coerce an entry-like value into a :class:`TaxonomyMapEntry`."""
    if isinstance(value, TaxonomyMapEntry):
        return TaxonomyMapEntry(type=int(value.type), required=value.required)
    if isinstance(value, Mapping):
        try:
            return TaxonomyMapEntry(type=int(value["type"]), required=bool(value.get("required", True)))
        except KeyError:
            msg = f"Template entry is missing 'type': {dict(value)!r}"
            raise TaxonomyConfigError(msg) from None
    if isinstance(value, tuple) and len(value) == 2:
        return TaxonomyMapEntry(type=int(value[0]), required=bool(value[1]))
    msg = f"Cannot interpret template entry: {value!r}"
    raise TaxonomyConfigError(msg)


class TaxonomyMap:
    """Immutable ordered sequence of :class:`TaxonomyMapEntry`."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[EntryLike] = ()) -> None:
        self._entries: tuple[TaxonomyMapEntry, ...] = tuple(to_entry(e) for e in entries)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, EntryLike]]) -> TaxonomyMap:
        """Build a template from ``(position, entry)`` pairs.

        Positions must form the contiguous range ``0..n-1``; the pairs
        themselves may arrive in any order.
        """
        indexed: dict[int, TaxonomyMapEntry] = {}
        for key, value in pairs:
            if key in indexed:
                msg = f"Duplicate template position: {key}"
                raise TaxonomyConfigError(msg)
            indexed[key] = to_entry(value)

        expected = set(range(len(indexed)))
        if set(indexed) != expected:
            missing = sorted(expected - set(indexed))
            extra = sorted(set(indexed) - expected)
            msg = (
                f"Template positions must be contiguous from 0; "
                f"missing={missing}, unexpected={extra}"
            )
            raise TaxonomyConfigError(msg)
        return cls(indexed[i] for i in range(len(indexed)))

    def get(self, position: int) -> TaxonomyMapEntry | None:
        """Return the entry at *position*, or None when out of range."""
        if 0 <= position < len(self._entries):
            return self._entries[position]
        return None

    def types(self) -> list[int]:
        """Distinct entry types in first-seen order."""
        return list(dict.fromkeys(e.type for e in self._entries))

    @overload
    def __getitem__(self, index: int) -> TaxonomyMapEntry: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[TaxonomyMapEntry, ...]: ...

    def __getitem__(self, index: int | slice) -> TaxonomyMapEntry | tuple[TaxonomyMapEntry, ...]:
        return self._entries[index]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TaxonomyMapEntry]:
        return iter(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaxonomyMap):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"TaxonomyMap({list(self._entries)!r})"
