"""ValidationService — check contracts against registered taxonomies."""

from __future__ import annotations

from pathlib import Path

import structlog

from symtax.domain.contract import Contract
from symtax.infrastructure.contracts import ContractFormatError, load_contract
from symtax.services.base import BaseService
from symtax.services.payloads import ValidateResultData, dump_validated
from symtax.services.result import ServiceResult

log = structlog.get_logger(__name__)


class ValidationService(BaseService):
    """Validate contracts and report the outcome as a ServiceResult.

    A rejected contract is a failed result whose error code is the
    upper-cased outcome (e.g. ``MISSING_REQUIRED``); the full report
    stays available in ``data``.
    """

    def validate(self, taxonomy_name: str, contract: Contract | Path | str) -> ServiceResult:
        op = "validate"
        taxonomy = self._lookup(taxonomy_name)
        if taxonomy is None:
            return self._not_found(op, taxonomy_name)

        if isinstance(contract, (str, Path)):
            try:
                contract = load_contract(Path(contract))
            except ContractFormatError as exc:
                return ServiceResult.failure(
                    op,
                    "INVALID_CONTRACT",
                    str(exc),
                    detail={"taxonomy": taxonomy_name},
                    warnings=self._warnings(),
                )

        report = taxonomy.check(contract)
        data = dump_validated(
            ValidateResultData,
            {
                "taxonomy": taxonomy.name,
                "contract": contract.name,
                "valid": report.ok,
                "outcome": str(report.outcome),
                "message": report.message,
                "position": report.position,
                "cursor": report.cursor,
                "occurrences": report.occurrences,
                "transactions": len(contract.transactions),
            },
        )

        warnings = self._warnings()
        manager = self._registry.plugin_manager
        if manager is not None:
            manager.notify_validated(
                warnings,
                taxonomy=taxonomy.name,
                contract=contract.name,
                outcome=str(report.outcome),
                valid=report.ok,
            )

        log.debug(
            "validate.complete",
            taxonomy=taxonomy.name,
            contract=contract.name,
            outcome=str(report.outcome),
            position=report.position,
            cursor=report.cursor,
        )

        if report.ok:
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)
        return ServiceResult.failure(
            op,
            str(report.outcome).upper(),
            report.message,
            detail={"position": report.position, "cursor": report.cursor},
            data=data,
            warnings=warnings,
        )
