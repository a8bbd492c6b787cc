"""Typed payload contracts for service results.

These models validate ``ServiceResult.data`` shapes before they leave
the service layer, so renderer and JSON consumers can rely on them.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T", bound=BaseModel)


def dump_validated(model_cls: type[T], data: dict[str, Any]) -> dict[str, Any]:
    """Validate *data* against *model_cls* and return a normalized payload dict."""
    model = model_cls.model_validate(data)
    return model.model_dump(mode="python")


class ValidateResultData(BaseModel):
    """Payload contract for ``ValidationService.validate``."""

    taxonomy: str
    contract: str | None = None
    valid: bool
    outcome: str
    message: str
    position: int | None = None
    cursor: int | None = None
    occurrences: int | None = None
    transactions: int


class Bounds(BaseModel):
    bundle_with: list[int]
    min_occurrences: int
    max_occurrences: int
    repeatable: bool


class TemplateEntryRow(BaseModel):
    """One template position of a described taxonomy."""

    position: int
    type: int
    type_name: str
    required: bool
    bounds: Bounds | None = None


class TaxonomyDescription(BaseModel):
    """Payload contract for ``TaxonomyService.describe``."""

    name: str
    source: str | None = None
    entries: list[TemplateEntryRow]
    types: list[int]


class TaxonomySummary(BaseModel):
    """One row of ``TaxonomyService.list_taxonomies``."""

    model_config = ConfigDict(extra="allow")

    id: str
    positions: int
    repeatable: int
    types: int
    source: str | None = None


class ListTaxonomiesData(BaseModel):
    count: int
    items: list[TaxonomySummary]


class TypeRow(BaseModel):
    id: str
    code: int
    hex: str


class ListTypesData(BaseModel):
    count: int
    items: list[TypeRow]
