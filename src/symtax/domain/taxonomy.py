"""Taxonomy — the sequence validator.

A taxonomy pairs an ordered template of expected transaction types with
optional repetition semantics, and decides whether a contract's
transactions conform to it.

Matching is positional and greedy from left to right:

- an optional position is consumed only if the transaction under the
  cursor has the expected type, otherwise it is treated as absent;
- a required position must match the transaction under the cursor;
- an annotated position hands the remaining transactions to the bundle
  counter and moves the cursor past every complete repetition.

There is no backtracking. The first mismatch rejects the contract.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from symtax.domain.bundles import BundleResultKind, SemanticsMap, item_type
from symtax.domain.outcomes import ValidationOutcome, ValidationReport
from symtax.domain.semantics import SemanticRuleset
from symtax.domain.sequence import EntryLike, TaxonomyConfigError, TaxonomyMap
from symtax.domain.types import type_name

logger = logging.getLogger(__name__)


def transactions_of(contract: Any) -> list[Any]:
    """Return the ordered transactions of *contract*.

    Accepts objects exposing ``transactions`` (or ``inner_transactions``)
    and plain sequences of transactions.
    """
    for attr in ("transactions", "inner_transactions"):
        items = getattr(contract, attr, None)
        if items is not None:
            return list(items)
    if isinstance(contract, Sequence) and not isinstance(contract, (str, bytes)):
        return list(contract)
    msg = f"Not a contract: {type(contract).__name__}"
    raise TypeError(msg)


class Taxonomy:
    """Specification of a transaction sequence.

    Example::

        taxonomy = Taxonomy(
            "UBCDigital.NamedAssetCreation",
            TaxonomyMap([
                TaxonomyMapEntry(TransactionType.NAMESPACE_REGISTRATION, True),
                TaxonomyMapEntry(TransactionType.MOSAIC_DEFINITION, True),
                TaxonomyMapEntry(TransactionType.TRANSFER, False),
            ]),
            SemanticsMap({2: optional_entry()}),
        )
        taxonomy.validate(contract)

    Raises:
        TaxonomyConfigError: If the semantics reference positions the
            template does not have, or bundles overlap.
    """

    def __init__(
        self,
        name: str,
        sequence: TaxonomyMap | Iterable[EntryLike] | None = None,
        semantics: SemanticsMap | Mapping[int, SemanticRuleset] | None = None,
    ) -> None:
        self.name = name
        if sequence is None:
            sequence = TaxonomyMap()
        self._sequence = sequence if isinstance(sequence, TaxonomyMap) else TaxonomyMap(sequence)
        if semantics is None:
            semantics = SemanticsMap()
        self._semantics = semantics if isinstance(semantics, SemanticsMap) else SemanticsMap(semantics)

        self._check_semantics()
        self._registered_types: tuple[int, ...] = tuple(self._sequence.types())
        self._registered_set: frozenset[int] = frozenset(self._registered_types)

    @property
    def sequence(self) -> TaxonomyMap:
        return self._sequence

    @property
    def semantics(self) -> SemanticsMap:
        return self._semantics

    def __repr__(self) -> str:
        return f"Taxonomy({self.name!r}, positions={len(self._sequence)}, semantics={len(self._semantics)})"

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_transaction_types(self) -> list[int]:
        """Distinct types of the template, in first-seen order."""
        return list(self._registered_types)

    def accepts_type(self, type: int | None) -> bool:  # noqa: A002
        """Whether contracts of this taxonomy may contain *type*.

        ``None`` and ``0`` (the reserved code) are never accepted.
        """
        return bool(type) and bool(self._registered_types) and type in self._registered_set

    def describe(self) -> dict[str, Any]:
        """Plain-data description of the template and its semantics."""
        entries: list[dict[str, Any]] = []
        for position, entry in enumerate(self._sequence):
            row: dict[str, Any] = {
                "position": position,
                "type": entry.type,
                "type_name": type_name(entry.type),
                "required": entry.required,
            }
            ruleset = self._semantics.get(position)
            if ruleset is not None:
                row["bounds"] = {
                    "bundle_with": list(ruleset.bundle_with),
                    "min_occurrences": ruleset.min_occurrences,
                    "max_occurrences": ruleset.max_occurrences,
                    "repeatable": ruleset.repeatable,
                }
            entries.append(row)
        return {
            "name": self.name,
            "entries": entries,
            "types": self.get_transaction_types(),
        }

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, contract: Any) -> bool:
        """Whether *contract* conforms to this taxonomy."""
        return self.check(contract).ok

    def check(self, contract: Any) -> ValidationReport:
        """Validate *contract* and report why it was accepted or rejected."""
        transactions = transactions_of(contract)

        if not transactions:
            return self._reject(ValidationOutcome.EMPTY_CONTRACT)
        if not self._registered_types:
            return self._reject(ValidationOutcome.EMPTY_TEMPLATE)

        for index, transaction in enumerate(transactions):
            if not self.accepts_type(item_type(transaction)):
                return self._reject(ValidationOutcome.UNREGISTERED_TYPE, cursor=index)

        return self._walk(transactions)

    def _walk(self, transactions: list[Any]) -> ValidationReport:
        # cursor = position - skip + bundled, where skip counts optional
        # positions treated as absent and bundled counts the transactions
        # consumed by repetitions beyond one per bundle position.
        position = skip = bundled = 0
        total = len(self._sequence)

        while position < total:
            entry = self._sequence[position]
            ruleset = self._semantics.get(position)
            cursor = position - skip + bundled
            current = item_type(transactions[cursor]) if cursor < len(transactions) else None

            if ruleset is not None:
                size = ruleset.bundle_length
                result = self._semantics.evaluate_bundles(
                    ruleset,
                    self._sequence[position : position + size],
                    transactions[cursor:],
                    self._sequence.get(position + size),
                )
                if result.kind is BundleResultKind.STRUCTURAL_BREAK:
                    return self._reject(ValidationOutcome.BUNDLE_BROKEN, position, cursor)
                if result.kind is BundleResultKind.OUT_OF_BOUNDS:
                    return self._reject(
                        ValidationOutcome.BUNDLE_OUT_OF_BOUNDS, position, cursor, result.occurrences
                    )

                occurrences = result.occurrences or 0
                if entry.required and occurrences == 0:
                    return self._reject(ValidationOutcome.MISSING_REQUIRED, position, cursor, 0)

                position += size
                bundled += (occurrences - 1) * size

            elif not entry.required:
                if current != entry.type:
                    skip += 1
                position += 1

            else:
                if current != entry.type:
                    return self._reject(ValidationOutcome.MISSING_REQUIRED, position, cursor)
                position += 1

        return ValidationReport(ValidationOutcome.OK)

    def _reject(
        self,
        outcome: ValidationOutcome,
        position: int | None = None,
        cursor: int | None = None,
        occurrences: int | None = None,
    ) -> ValidationReport:
        logger.debug(
            "Taxonomy %s rejected contract: %s (position=%s, cursor=%s)",
            self.name,
            outcome,
            position,
            cursor,
        )
        return ValidationReport(outcome, position, cursor, occurrences)

    # ------------------------------------------------------------------
    # Construction checks
    # ------------------------------------------------------------------

    def _check_semantics(self) -> None:
        """Ensure every ruleset names a bundle that fits the template."""
        total = len(self._sequence)
        span_end = 0
        for position in self._semantics:
            ruleset = self._semantics[position]
            if not 0 <= position < total:
                msg = f"{self.name}: semantics position {position} is not a template position (0..{total - 1})"
                raise TaxonomyConfigError(msg)

            if position < span_end:
                msg = f"{self.name}: bundle at position {position} overlaps the previous bundle"
                raise TaxonomyConfigError(msg)

            span_end = position + ruleset.bundle_length
            if span_end > total:
                msg = (
                    f"{self.name}: bundle at position {position} spans "
                    f"{ruleset.bundle_length} entries but the template has {total}"
                )
                raise TaxonomyConfigError(msg)

            # Only the length of bundle_with shapes the bundle.
            siblings = [int(e.type) for e in self._sequence[position + 1 : span_end]]
            if [int(t) for t in ruleset.bundle_with] != siblings:
                logger.warning(
                    "%s: bundle at position %d declares %s but the template has %s",
                    self.name,
                    position,
                    [int(t) for t in ruleset.bundle_with],
                    siblings,
                )
