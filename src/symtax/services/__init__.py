"""Service layer — operations returning ServiceResult."""

from symtax.services.result import ServiceError, ServiceResult
from symtax.services.taxonomy import TaxonomyService
from symtax.services.validate import ValidationService

__all__ = ["ServiceError", "ServiceResult", "TaxonomyService", "ValidationService"]
