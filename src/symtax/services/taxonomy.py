"""TaxonomyService — inspect registered taxonomies and type codes."""

from __future__ import annotations

from symtax.domain.types import TransactionType, parse_transaction_type, type_name
from symtax.services.base import BaseService
from symtax.services.payloads import (
    ListTaxonomiesData,
    ListTypesData,
    TaxonomyDescription,
    dump_validated,
)
from symtax.services.result import ServiceResult


class TaxonomyService(BaseService):
    """Read-only queries over the taxonomy registry."""

    def list_taxonomies(self) -> ServiceResult:
        items = [
            {
                "id": taxonomy.name,
                "positions": len(taxonomy.sequence),
                "repeatable": len(taxonomy.semantics),
                "types": len(taxonomy.get_transaction_types()),
                "source": self._registry.source_of(taxonomy.name),
            }
            for taxonomy in self._registry
        ]
        data = dump_validated(ListTaxonomiesData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="list_taxonomies", data=data, warnings=self._warnings())

    def describe(self, name: str) -> ServiceResult:
        op = "describe_taxonomy"
        taxonomy = self._lookup(name)
        if taxonomy is None:
            return self._not_found(op, name)
        payload = taxonomy.describe()
        payload["source"] = self._registry.source_of(name)
        data = dump_validated(TaxonomyDescription, payload)
        return ServiceResult(ok=True, op=op, data=data, warnings=self._warnings())

    def accepts(self, name: str, type_value: int | str) -> ServiceResult:
        """Whether taxonomy *name* accepts transactions of *type_value*."""
        op = "accepts_type"
        taxonomy = self._lookup(name)
        if taxonomy is None:
            return self._not_found(op, name)
        try:
            code = parse_transaction_type(type_value)
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_TYPE", str(exc), warnings=self._warnings())

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "taxonomy": taxonomy.name,
                "type": code,
                "type_name": type_name(code),
                "accepted": taxonomy.accepts_type(code),
            },
            warnings=self._warnings(),
        )

    def list_types(self) -> ServiceResult:
        """Known Symbol transaction type codes."""
        items = [
            {"id": member.name, "code": int(member), "hex": f"0x{int(member):04X}"}
            for member in TransactionType
        ]
        data = dump_validated(ListTypesData, {"count": len(items), "items": items})
        return ServiceResult(ok=True, op="list_types", data=data)
