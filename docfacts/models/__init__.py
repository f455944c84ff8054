"""Data models for tenants, extraction results and engine verdicts."""

from .direction import DirectionResolution, DirectionResolutionSource, DocumentDirection
from .extraction import (
    CreditNote,
    FinancialExtractionResult,
    Invoice,
    ProForma,
    PurchaseOrder,
    Quote,
    Receipt,
    Unsupported,
)
from .ogm_result import (
    OgmCorrectedValid,
    OgmCorrection,
    OgmInvalidChecksum,
    OgmInvalidFormat,
    OgmValid,
    OgmValidationResult,
)
from .tenant import Tenant, TenantType

__all__ = [
    "CreditNote",
    "DirectionResolution",
    "DirectionResolutionSource",
    "DocumentDirection",
    "FinancialExtractionResult",
    "Invoice",
    "OgmCorrectedValid",
    "OgmCorrection",
    "OgmInvalidChecksum",
    "OgmInvalidFormat",
    "OgmValid",
    "OgmValidationResult",
    "ProForma",
    "PurchaseOrder",
    "Quote",
    "Receipt",
    "Tenant",
    "TenantType",
]
