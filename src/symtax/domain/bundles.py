"""Bundle counting for repeatable taxonomy positions.

Given the bounds of an annotated position, the template entries forming
one repetition and the remaining contract transactions, the counter
reports how many complete, contiguous repetitions start at the first
transaction.

Counting is anchored and greedy: the first incomplete repetition ends
the count, nothing is searched further down the stream.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from symtax.domain.semantics import SemanticRuleset
from symtax.domain.sequence import TaxonomyMapEntry

STRUCTURAL_BREAK = -1
OUT_OF_BOUNDS = -2


class BundleResultKind(StrEnum):
    """Outcome kinds of a bundle count."""

    COUNT = "count"
    STRUCTURAL_BREAK = "structural_break"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True)
class BundleCount:
    """Tagged result of :meth:`SemanticsMap.evaluate_bundles`.

    ``occurrences`` holds the number of complete repetitions found. It is
    also filled for ``OUT_OF_BOUNDS`` so callers can report it, and is
    ``None`` after a structural break.
    """

    kind: BundleResultKind
    occurrences: int | None = None

    @property
    def ok(self) -> bool:
        return self.kind is BundleResultKind.COUNT

    @property
    def sentinel(self) -> int:
        """Integer form: the count, -1 for a break, -2 when out of bounds."""
        if self.kind is BundleResultKind.STRUCTURAL_BREAK:
            return STRUCTURAL_BREAK
        if self.kind is BundleResultKind.OUT_OF_BOUNDS:
            return OUT_OF_BOUNDS
        return self.occurrences or 0


def item_type(item: Any) -> int | None:
    """Read the ``type`` of a contract item (attribute or mapping key)."""
    if isinstance(item, Mapping):
        value = item.get("type")
    else:
        value = getattr(item, "type", None)
    return None if value is None else int(value)


class SemanticsMap(Mapping[int, SemanticRuleset]):
    """Read-only mapping of template positions to occurrence bounds.

    Example::

        semantics = SemanticsMap({3: optional_entry()})
        semantics.count_bundles(semantics[3], [entry], transactions, follow_up)
    """

    def __init__(
        self,
        values: Mapping[int, SemanticRuleset] | Iterable[tuple[int, SemanticRuleset]] = (),
    ) -> None:
        items = values.items() if isinstance(values, Mapping) else values
        self._rules: dict[int, SemanticRuleset] = {int(k): v for k, v in items}

    def __getitem__(self, key: int) -> SemanticRuleset:
        return self._rules[key]

    def __iter__(self) -> Iterator[int]:
        return iter(sorted(self._rules))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"SemanticsMap({dict(sorted(self._rules.items()))!r})"

    def count_bundles(
        self,
        ruleset: SemanticRuleset,
        entries: Sequence[TaxonomyMapEntry],
        transactions: Sequence[Any],
        followed_by: TaxonomyMapEntry | None = None,
    ) -> int:
        """Count bundle repetitions, using negative sentinels for failures.

        Returns:
            The number of complete repetitions, ``-1`` when the stream
            breaks into neither another repetition nor *followed_by*, or
            ``-2`` when the count is outside the ruleset bounds.
        """
        return self.evaluate_bundles(ruleset, entries, transactions, followed_by).sentinel

    def evaluate_bundles(
        self,
        ruleset: SemanticRuleset,
        entries: Sequence[TaxonomyMapEntry],
        transactions: Sequence[Any],
        followed_by: TaxonomyMapEntry | None = None,
    ) -> BundleCount:
        """Tagged variant of :meth:`count_bundles`.

        A structural break wins over a bounds violation.
        """
        occurrences = self.count_bundle_appearances(entries, transactions, followed_by)
        if occurrences is None:
            return BundleCount(BundleResultKind.STRUCTURAL_BREAK)
        if not self.validate_boundaries(ruleset, occurrences):
            return BundleCount(BundleResultKind.OUT_OF_BOUNDS, occurrences)
        return BundleCount(BundleResultKind.COUNT, occurrences)

    @staticmethod
    def count_bundle_appearances(
        entries: Sequence[TaxonomyMapEntry],
        transactions: Sequence[Any],
        followed_by: TaxonomyMapEntry | None = None,
    ) -> int | None:
        """Count complete repetitions of *entries* at the start of *transactions*.

        Returns None when a transaction matches neither the expected
        bundle entry nor *followed_by*. Running out of transactions only
        ends the count.
        """
        size = len(entries)
        if size == 0:
            return 0

        found = 0
        while True:
            cursor = found * size
            for offset, bundled in enumerate(entries):
                index = cursor + offset
                if index >= len(transactions):
                    return found

                candidate = item_type(transactions[index])
                if candidate != bundled.type:
                    if followed_by is not None and candidate != followed_by.type:
                        return None
                    return found
            found += 1

    @staticmethod
    def validate_boundaries(ruleset: SemanticRuleset, occurrences: int = 0) -> bool:
        """Check *occurrences* against the ruleset's min and max bounds."""
        return ruleset.allows(occurrences)
