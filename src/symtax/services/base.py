"""BaseService — shared foundation for symtax services.

Every service receives a :class:`TaxonomyRegistry` at construction time
and resolves taxonomies through it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from symtax.services.result import ServiceResult

if TYPE_CHECKING:
    from symtax.domain.taxonomy import Taxonomy
    from symtax.infrastructure.registry import TaxonomyRegistry


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ValidationService(BaseService):
            def validate(self, name: str, contract: Contract) -> ServiceResult:
                taxonomy = self._registry.get(name)
                ...
    """

    def __init__(self, registry: TaxonomyRegistry) -> None:
        self._registry = registry

    def _warnings(self) -> list[str]:
        """Registry warnings carried into every result."""
        return list(self._registry.warnings)

    def _not_found(self, op: str, name: str) -> ServiceResult:
        known = self._registry.names()
        return ServiceResult.failure(
            op,
            "NOT_FOUND",
            f"No taxonomy named {name!r}",
            detail={"taxonomy": name, "known": known},
            warnings=self._warnings(),
        )

    def _lookup(self, name: str) -> Taxonomy | None:
        return self._registry.get(name)
