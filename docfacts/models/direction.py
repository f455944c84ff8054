"""DirectionResolution data model: verdict on who owes whom for a document."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class DocumentDirection(str, Enum):
    """Inbound: the tenant owes money. Outbound: a counterparty owes the tenant."""

    INBOUND = "Inbound"
    OUTBOUND = "Outbound"
    UNKNOWN = "Unknown"


class DirectionResolutionSource(str, Enum):
    VAT_MATCH = "VatMatch"
    NAME_MATCH = "NameMatch"
    AI_HINT = "AiHint"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class DirectionResolution:
    """Direction verdict for one document.

    Attributes:
        direction: Resolved direction (UNKNOWN when evidence is missing or ambiguous)
        source: Evidence tier that produced the verdict
        confidence: Confidence score (0.0-1.0)
        reasoning: Human-readable explanation, kept for audit trails
        matched_field: Extraction field that decided the verdict, if any
        matched_value: Value of that field (or tenant VAT for VAT matches)
        tenant_vat: Tenant VAT used in the comparison, if any
        counterparty_vat: VAT of the non-tenant party, if known
    """

    direction: DocumentDirection
    source: DirectionResolutionSource
    confidence: float
    reasoning: str
    matched_field: Optional[str] = None
    matched_value: Optional[str] = None
    tenant_vat: Optional[str] = None
    counterparty_vat: Optional[str] = None

    def __post_init__(self):
        """Validate DirectionResolution fields."""
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(
                f"confidence must be between 0.0 and 1.0, got {self.confidence}"
            )

        if not self.reasoning or not self.reasoning.strip():
            raise ValueError("reasoning must be a non-empty string")

    @property
    def is_resolved(self) -> bool:
        return self.direction is not DocumentDirection.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "direction": self.direction.value,
            "source": self.source.value,
            "confidence": round(self.confidence, 4),
            "matched_field": self.matched_field,
            "matched_value": self.matched_value,
            "tenant_vat": self.tenant_vat,
            "counterparty_vat": self.counterparty_vat,
            "reasoning": self.reasoning,
        }
