"""Validation outcomes.

``Taxonomy.validate`` collapses every failure into ``False``;
``Taxonomy.check`` keeps the reason, and where it happened.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ValidationOutcome(StrEnum):
    """Why a contract was accepted or rejected."""

    OK = "ok"
    EMPTY_CONTRACT = "empty_contract"
    EMPTY_TEMPLATE = "empty_template"
    UNREGISTERED_TYPE = "unregistered_type"
    MISSING_REQUIRED = "missing_required"
    BUNDLE_BROKEN = "bundle_broken"
    BUNDLE_OUT_OF_BOUNDS = "bundle_out_of_bounds"


OUTCOME_MESSAGES: dict[ValidationOutcome, str] = {
    ValidationOutcome.OK: "Contract conforms to the taxonomy",
    ValidationOutcome.EMPTY_CONTRACT: "Contract contains no transactions",
    ValidationOutcome.EMPTY_TEMPLATE: "Taxonomy declares no transaction types",
    ValidationOutcome.UNREGISTERED_TYPE: "Contract contains a transaction type the taxonomy does not accept",
    ValidationOutcome.MISSING_REQUIRED: "A required transaction is missing or out of place",
    ValidationOutcome.BUNDLE_BROKEN: "A repeated bundle is followed by an unexpected transaction",
    ValidationOutcome.BUNDLE_OUT_OF_BOUNDS: "A repeated bundle appears too few or too many times",
}


@dataclass(frozen=True)
class ValidationReport:
    """Result of :meth:`Taxonomy.check`.

    Attributes:
        outcome: The reason code.
        position: Template position at which validation stopped, if any.
        cursor: Index of the contract transaction under test, if any.
        occurrences: Bundle repetitions counted at *position*, if relevant.
    """

    outcome: ValidationOutcome
    position: int | None = None
    cursor: int | None = None
    occurrences: int | None = None

    @property
    def ok(self) -> bool:
        return self.outcome is ValidationOutcome.OK

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]

    def __bool__(self) -> bool:
        return self.ok
