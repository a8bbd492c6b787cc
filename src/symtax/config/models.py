"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, symtax.toml only contains
overrides and taxonomy definitions.

Example ``symtax.toml``::

    [[taxonomies]]
    name = "UBCDigital.NamedAssetCreation"
    entries = [
        { type = "NAMESPACE_REGISTRATION", required = true },
        { type = "MOSAIC_DEFINITION", required = true },
        { type = "TRANSFER", required = false },
    ]

    [[taxonomies.semantics]]
    position = 2
    kind = "optional"
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from symtax.domain.bundles import SemanticsMap
from symtax.domain.semantics import SemanticRuleset, optional_entry, required_entry
from symtax.domain.sequence import TaxonomyMap, TaxonomyMapEntry
from symtax.domain.taxonomy import Taxonomy
from symtax.domain.types import parse_transaction_type

# --- Taxonomy definitions ---


class EntryConfig(BaseModel):
    """One ``entries`` item of a taxonomy definition."""

    model_config = {"frozen": True}

    type: int
    required: bool = True

    @field_validator("type", mode="before")
    @classmethod
    def _resolve_type(cls, value: object) -> int:
        if isinstance(value, (int, str)):
            return parse_transaction_type(value)
        msg = f"Transaction type must be an integer or a name, got {type(value).__name__}"
        raise ValueError(msg)


class SemanticsConfig(BaseModel):
    """One ``[[taxonomies.semantics]]`` table.

    ``kind`` picks the defaults: ``optional`` forces ``min_occurrences``
    to 0, ``required`` forces it to at least 1, ``custom`` uses the
    given bounds as-is (after clamping).
    """

    model_config = {"frozen": True}

    position: int = Field(ge=0)
    kind: Literal["optional", "required", "custom"] = "optional"
    bundle_with: list[int] = Field(default_factory=list)
    min_occurrences: int | None = None
    max_occurrences: int = 0

    @field_validator("bundle_with", mode="before")
    @classmethod
    def _resolve_bundle(cls, value: object) -> list[int]:
        if not isinstance(value, list):
            msg = "bundle_with must be a list of transaction types"
            raise ValueError(msg)
        return [parse_transaction_type(v) for v in value]

    def to_ruleset(self) -> SemanticRuleset:
        if self.kind == "optional":
            return optional_entry(self.bundle_with, self.max_occurrences)
        if self.kind == "required":
            minimum = 1 if self.min_occurrences is None else self.min_occurrences
            return required_entry(self.bundle_with, minimum, self.max_occurrences)
        return SemanticRuleset(
            tuple(self.bundle_with),
            self.min_occurrences or 0,
            self.max_occurrences,
        )


class TaxonomyConfig(BaseModel):
    """One ``[[taxonomies]]`` table."""

    model_config = {"frozen": True}

    name: str = Field(min_length=1)
    description: str = ""
    entries: list[EntryConfig] = Field(default_factory=list)
    semantics: list[SemanticsConfig] = Field(default_factory=list)

    def to_taxonomy(self) -> Taxonomy:
        """Build the domain taxonomy.

        Raises:
            TaxonomyConfigError: If the semantics do not fit the entries.
        """
        sequence = TaxonomyMap(TaxonomyMapEntry(e.type, e.required) for e in self.entries)
        semantics = SemanticsMap((s.position, s.to_ruleset()) for s in self.semantics)
        return Taxonomy(self.name, sequence, semantics)


# --- symtax.toml sections ---


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".symtax/plugins"


class SymtaxConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    taxonomies: list[TaxonomyConfig] = Field(default_factory=list)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
