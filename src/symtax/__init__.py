"""symtax — structural validation of Symbol transaction sequences."""

from symtax.domain.bundles import BundleCount, BundleResultKind, SemanticsMap
from symtax.domain.contract import Contract, Transaction
from symtax.domain.outcomes import ValidationOutcome, ValidationReport
from symtax.domain.semantics import SemanticRuleset, optional_entry, required_entry
from symtax.domain.sequence import TaxonomyConfigError, TaxonomyMap, TaxonomyMapEntry
from symtax.domain.taxonomy import Taxonomy
from symtax.domain.types import TransactionType

__version__ = "1.0.0"

__all__ = [
    "BundleCount",
    "BundleResultKind",
    "Contract",
    "SemanticRuleset",
    "SemanticsMap",
    "Taxonomy",
    "TaxonomyConfigError",
    "TaxonomyMap",
    "TaxonomyMapEntry",
    "Transaction",
    "TransactionType",
    "ValidationOutcome",
    "ValidationReport",
    "__version__",
    "optional_entry",
    "required_entry",
]
