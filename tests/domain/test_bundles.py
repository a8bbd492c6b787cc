"""Tests for SemanticsMap bundle counting."""

import pytest

from symtax.domain.bundles import (
    OUT_OF_BOUNDS,
    STRUCTURAL_BREAK,
    BundleCount,
    BundleResultKind,
    SemanticsMap,
    item_type,
)
from symtax.domain.contract import Transaction
from symtax.domain.semantics import SemanticRuleset, optional_entry, required_entry
from symtax.domain.sequence import TaxonomyMapEntry
from symtax.domain.types import TransactionType as T

TRANSFER_BUNDLE = [TaxonomyMapEntry(T.TRANSFER, True)]


def txs(*types: int) -> list[Transaction]:
    return [Transaction(t) for t in types]


class TestSemanticsMap:
    def test_empty(self) -> None:
        assert len(SemanticsMap([])) == 0

    def test_from_pairs_and_mapping(self) -> None:
        ruleset = optional_entry()
        assert SemanticsMap([(3, ruleset)])[3] is ruleset
        assert SemanticsMap({3: ruleset}).get(3) is ruleset
        assert SemanticsMap({3: ruleset}).get(0) is None

    def test_iterates_sorted(self) -> None:
        semantics = SemanticsMap({5: optional_entry(), 1: optional_entry()})
        assert list(semantics) == [1, 5]


class TestCountBundles:
    def test_break_on_unexpected_follow_up(self) -> None:
        semantics = SemanticsMap([(0, optional_entry())])
        count = semantics.count_bundles(
            semantics[0],
            [TaxonomyMapEntry(T.NAMESPACE_REGISTRATION, True)],
            txs(T.NAMESPACE_REGISTRATION, T.MOSAIC_DEFINITION),
            TaxonomyMapEntry(T.TRANSFER, True),
        )
        assert count == STRUCTURAL_BREAK == -1

    @pytest.mark.parametrize(("minimum", "present"), [(2, 1), (3, 1), (3, 2)])
    def test_too_few(self, minimum: int, present: int) -> None:
        semantics = SemanticsMap([(0, required_entry((), minimum))])
        count = semantics.count_bundles(semantics[0], TRANSFER_BUNDLE, txs(*[T.TRANSFER] * present))
        assert count == OUT_OF_BOUNDS == -2

    @pytest.mark.parametrize(("minimum", "present"), [(1, 2), (2, 3)])
    def test_too_many(self, minimum: int, present: int) -> None:
        semantics = SemanticsMap([(0, required_entry((), minimum))])
        count = semantics.count_bundles(semantics[0], TRANSFER_BUNDLE, txs(*[T.TRANSFER] * present))
        assert count == OUT_OF_BOUNDS

    @pytest.mark.parametrize("repeats", range(0, 11))
    def test_counts_repetitions(self, repeats: int) -> None:
        semantics = SemanticsMap([(0, SemanticRuleset((), 0, repeats))])
        count = semantics.count_bundles(semantics[0], TRANSFER_BUNDLE, txs(*[T.TRANSFER] * repeats))
        assert count == repeats

    def test_zero_given_no_transactions(self) -> None:
        semantics = SemanticsMap([(0, optional_entry((), 1))])
        assert semantics.count_bundles(semantics[0], TRANSFER_BUNDLE, []) == 0

    def test_follow_up_ends_count(self) -> None:
        semantics = SemanticsMap([(0, optional_entry())])
        count = semantics.count_bundles(
            semantics[0],
            TRANSFER_BUNDLE,
            txs(T.TRANSFER, T.TRANSFER, T.ACCOUNT_ADDRESS_RESTRICTION),
            TaxonomyMapEntry(T.ACCOUNT_ADDRESS_RESTRICTION, True),
        )
        assert count == 2

    def test_exhaustion_is_not_a_break(self) -> None:
        semantics = SemanticsMap([(0, optional_entry())])
        count = semantics.count_bundles(
            semantics[0],
            TRANSFER_BUNDLE,
            txs(T.TRANSFER, T.TRANSFER),
            TaxonomyMapEntry(T.ACCOUNT_ADDRESS_RESTRICTION, True),
        )
        assert count == 2

    def test_multi_entry_bundle(self) -> None:
        bundle = [TaxonomyMapEntry(T.TRANSFER, False), TaxonomyMapEntry(T.SECRET_LOCK, False)]
        semantics = SemanticsMap([(0, optional_entry([T.SECRET_LOCK]))])
        stream = txs(T.TRANSFER, T.SECRET_LOCK, T.TRANSFER, T.SECRET_LOCK, T.SECRET_PROOF)
        count = semantics.count_bundles(semantics[0], bundle, stream, TaxonomyMapEntry(T.SECRET_PROOF, True))
        assert count == 2

    def test_partial_bundle_before_follow_up_ends_count(self) -> None:
        bundle = [TaxonomyMapEntry(T.TRANSFER, False), TaxonomyMapEntry(T.SECRET_LOCK, False)]
        semantics = SemanticsMap([(0, optional_entry([T.SECRET_LOCK]))])
        stream = txs(T.TRANSFER, T.SECRET_LOCK, T.TRANSFER, T.SECRET_PROOF)
        count = semantics.count_bundles(semantics[0], bundle, stream, TaxonomyMapEntry(T.SECRET_PROOF, True))
        assert count == 1

    def test_empty_bundle_counts_zero(self) -> None:
        assert SemanticsMap.count_bundle_appearances([], txs(T.TRANSFER)) == 0

    def test_mapping_items(self) -> None:
        semantics = SemanticsMap([(0, optional_entry())])
        stream = [{"type": T.TRANSFER}, {"type": T.TRANSFER}]
        assert semantics.count_bundles(semantics[0], TRANSFER_BUNDLE, stream) == 2


class TestEvaluateBundles:
    def test_count(self) -> None:
        semantics = SemanticsMap([(0, optional_entry())])
        result = semantics.evaluate_bundles(semantics[0], TRANSFER_BUNDLE, txs(T.TRANSFER))
        assert result == BundleCount(BundleResultKind.COUNT, 1)
        assert result.ok
        assert result.sentinel == 1

    def test_out_of_bounds_keeps_occurrences(self) -> None:
        semantics = SemanticsMap([(0, optional_entry((), 1))])
        result = semantics.evaluate_bundles(semantics[0], TRANSFER_BUNDLE, txs(T.TRANSFER, T.TRANSFER))
        assert result.kind is BundleResultKind.OUT_OF_BOUNDS
        assert result.occurrences == 2
        assert result.sentinel == OUT_OF_BOUNDS

    def test_break_wins_over_bounds(self) -> None:
        semantics = SemanticsMap([(0, required_entry((), 5))])
        result = semantics.evaluate_bundles(
            semantics[0],
            TRANSFER_BUNDLE,
            txs(T.TRANSFER, T.MOSAIC_DEFINITION),
            TaxonomyMapEntry(T.ACCOUNT_ADDRESS_RESTRICTION, True),
        )
        assert result.kind is BundleResultKind.STRUCTURAL_BREAK
        assert result.occurrences is None
        assert not result.ok


class TestValidateBoundaries:
    def test_bounds(self) -> None:
        ruleset = required_entry((), 2, 3)
        assert not SemanticsMap.validate_boundaries(ruleset, 1)
        assert SemanticsMap.validate_boundaries(ruleset, 2)
        assert SemanticsMap.validate_boundaries(ruleset, 3)
        assert not SemanticsMap.validate_boundaries(ruleset, 4)

    def test_default_zero_occurrences(self) -> None:
        assert SemanticsMap.validate_boundaries(optional_entry())
        assert not SemanticsMap.validate_boundaries(required_entry())


class TestItemType:
    def test_attribute(self) -> None:
        assert item_type(Transaction(T.TRANSFER)) == T.TRANSFER

    def test_mapping(self) -> None:
        assert item_type({"type": T.TRANSFER}) == T.TRANSFER

    def test_missing(self) -> None:
        assert item_type(object()) is None
        assert item_type({}) is None
