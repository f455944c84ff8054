"""Direction resolution: decide whether a document is owed by or to the tenant.

Evidence is evaluated as a strict cascade and the first tier with a verdict
wins:

1. VAT match   - tenant VAT equals exactly one party VAT (confidence 1.0)
2. Name match  - tenant names match exactly one party name
3. AI hint     - the extraction model's direction guess
4. Unknown     - nothing conclusive (confidence 0.0)

Ambiguity (both parties carry the tenant VAT) is a terminal UNKNOWN verdict,
not an error. Pro formas, purchase orders, quotes and unsupported documents
have no direction and always resolve to UNKNOWN.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, List, Optional

from ..config.settings import DirectionSettings
from ..models.direction import DirectionResolution, DirectionResolutionSource, DocumentDirection
from ..models.extraction import (
    DIRECTIONLESS_KINDS,
    CreditNote,
    FinancialExtractionResult,
    Invoice,
    Receipt,
)
from ..models.tenant import Tenant
from .name_normalizer import matches_tenant_name, tenant_name_candidates

logger = logging.getLogger(__name__)

VAT_MATCH_CONFIDENCE = 1.0


class UnsupportedExtractionKind(TypeError):
    """Raised when an extraction is not one of the known document kinds."""

    def __init__(self, extraction: object):
        super().__init__(
            f"Unhandled extraction kind {type(extraction).__name__}; "
            f"direction resolution must be updated for new document kinds"
        )


def _present(value: Optional[str]) -> Optional[str]:
    """Return value stripped, or None when absent or blank."""
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _kind_name(extraction: object) -> str:
    return getattr(extraction, "kind", type(extraction).__name__).replace("_", " ")


class DirectionResolver:
    """Stateless direction engine.

    Build one at startup from DirectionSettings and share it; resolve() has no
    side effects and is safe to call concurrently.
    """

    def __init__(self, settings: Optional[DirectionSettings] = None):
        self.settings = settings or DirectionSettings()

    def resolve(
        self,
        extraction: FinancialExtractionResult,
        tenant: Tenant,
        associated_person_names: Iterable[str] = (),
    ) -> DirectionResolution:
        """Resolve direction and counterparty for one document.

        Args:
            extraction: Typed extraction result for the document
            tenant: Tenant the document was uploaded for
            associated_person_names: Display names of people linked to the tenant

        Returns:
            DirectionResolution (never raises for known document kinds)

        Raises:
            UnsupportedExtractionKind: If extraction is not a known document kind
        """
        names = list(associated_person_names or ())

        if isinstance(extraction, (Invoice, CreditNote)):
            resolution = self._resolve_for_parties(extraction, tenant, names)
        elif isinstance(extraction, Receipt):
            resolution = self._resolve_receipt(extraction, tenant, names)
        elif isinstance(extraction, DIRECTIONLESS_KINDS):
            resolution = DirectionResolution(
                direction=DocumentDirection.UNKNOWN,
                source=DirectionResolutionSource.UNKNOWN,
                confidence=0.0,
                reasoning=f"Direction not applicable for extraction type {type(extraction).__name__}",
            )
        else:
            raise UnsupportedExtractionKind(extraction)

        logger.debug(
            f"Direction for {_kind_name(extraction)}: {resolution.direction.value} "
            f"(source={resolution.source.value}, confidence={resolution.confidence:.2f})"
        )
        return resolution

    def resolved_counterparty_vat(
        self,
        extraction: FinancialExtractionResult,
        direction: DocumentDirection,
    ) -> Optional[str]:
        """VAT of the non-tenant party for an already-resolved direction.

        Seller VAT for inbound invoices/credit notes, buyer VAT for outbound
        ones, merchant VAT for inbound receipts. None for UNKNOWN direction,
        outbound receipts and directionless kinds.
        """
        if isinstance(extraction, (Invoice, CreditNote)):
            if direction is DocumentDirection.INBOUND:
                return _present(extraction.seller_vat)
            if direction is DocumentDirection.OUTBOUND:
                return _present(extraction.buyer_vat)
            return None
        if isinstance(extraction, Receipt):
            if direction is DocumentDirection.INBOUND:
                return _present(extraction.merchant_vat)
            return None
        if isinstance(extraction, DIRECTIONLESS_KINDS):
            return None
        raise UnsupportedExtractionKind(extraction)

    def _hint_confidence(self, hint_confidence: Optional[float]) -> float:
        if hint_confidence is None or math.isnan(hint_confidence):
            return self.settings.default_hint_confidence
        return min(1.0, max(0.0, float(hint_confidence)))

    def _resolve_for_parties(
        self,
        extraction: Invoice | CreditNote,
        tenant: Tenant,
        associated_person_names: List[str],
    ) -> DirectionResolution:
        doc_type = _kind_name(extraction)
        tenant_vat = tenant.normalized_vat
        seller_vat = _present(extraction.seller_vat)
        buyer_vat = _present(extraction.buyer_vat)

        # Tier 1: VAT
        seller_vat_match = tenant_vat is not None and seller_vat == tenant_vat
        buyer_vat_match = tenant_vat is not None and buyer_vat == tenant_vat

        if seller_vat_match and buyer_vat_match:
            return DirectionResolution(
                direction=DocumentDirection.UNKNOWN,
                source=DirectionResolutionSource.UNKNOWN,
                confidence=0.0,
                matched_field="sellerVat,buyerVat",
                matched_value=tenant_vat,
                tenant_vat=tenant_vat,
                reasoning=(
                    f"Both seller and buyer VAT match tenant VAT {tenant_vat}; "
                    f"ambiguous {doc_type} direction (self-referential document)"
                ),
            )

        if seller_vat_match != buyer_vat_match:
            direction = DocumentDirection.OUTBOUND if seller_vat_match else DocumentDirection.INBOUND
            matched_field = "sellerVat" if seller_vat_match else "buyerVat"
            return DirectionResolution(
                direction=direction,
                source=DirectionResolutionSource.VAT_MATCH,
                confidence=VAT_MATCH_CONFIDENCE,
                matched_field=matched_field,
                matched_value=tenant_vat,
                tenant_vat=tenant_vat,
                counterparty_vat=buyer_vat if seller_vat_match else seller_vat,
                reasoning=f"Resolved {doc_type} direction from tenant VAT match on {matched_field}",
            )

        # Tier 2: names
        candidates = tenant_name_candidates(tenant, associated_person_names)
        threshold = self.settings.name_similarity_threshold
        seller_name_match = matches_tenant_name(extraction.seller_name, candidates, threshold)
        buyer_name_match = matches_tenant_name(extraction.buyer_name, candidates, threshold)

        if seller_name_match != buyer_name_match:
            direction = DocumentDirection.OUTBOUND if seller_name_match else DocumentDirection.INBOUND
            matched_field = "sellerName" if seller_name_match else "buyerName"
            return DirectionResolution(
                direction=direction,
                source=DirectionResolutionSource.NAME_MATCH,
                confidence=self.settings.name_match_confidence,
                matched_field=matched_field,
                matched_value=extraction.seller_name if seller_name_match else extraction.buyer_name,
                tenant_vat=tenant_vat,
                counterparty_vat=buyer_vat if seller_name_match else seller_vat,
                reasoning=f"Resolved {doc_type} direction from tenant name similarity on {matched_field}",
            )

        # Tier 3: AI hint
        hint = extraction.direction_hint or DocumentDirection.UNKNOWN
        if hint is not DocumentDirection.UNKNOWN:
            return DirectionResolution(
                direction=hint,
                source=DirectionResolutionSource.AI_HINT,
                confidence=self._hint_confidence(extraction.direction_hint_confidence),
                matched_field="directionHint",
                matched_value=hint.value,
                tenant_vat=tenant_vat,
                counterparty_vat=seller_vat if hint is DocumentDirection.INBOUND else buyer_vat,
                reasoning=f"Resolved {doc_type} direction from AI tie-breaker hint",
            )

        # Tier 4: nothing conclusive
        if seller_name_match and buyer_name_match:
            name_note = "both seller and buyer names match the tenant"
        else:
            name_note = "neither seller nor buyer name matches the tenant"
        return DirectionResolution(
            direction=DocumentDirection.UNKNOWN,
            source=DirectionResolutionSource.UNKNOWN,
            confidence=0.0,
            tenant_vat=tenant_vat,
            reasoning=(
                f"No VAT/name/hint evidence to resolve {doc_type} direction: "
                f"{'no party VAT matches the tenant VAT' if tenant_vat else 'tenant has no VAT number'}, "
                f"{name_note}, no AI direction hint"
            ),
        )

    def _resolve_receipt(
        self,
        extraction: Receipt,
        tenant: Tenant,
        associated_person_names: List[str],
    ) -> DirectionResolution:
        tenant_vat = tenant.normalized_vat
        merchant_vat = _present(extraction.merchant_vat)
        merchant_name = extraction.merchant_name

        # Tier 1: VAT
        if tenant_vat is not None and merchant_vat is not None:
            is_own_receipt = merchant_vat == tenant_vat
            return DirectionResolution(
                direction=DocumentDirection.OUTBOUND if is_own_receipt else DocumentDirection.INBOUND,
                source=DirectionResolutionSource.VAT_MATCH,
                confidence=VAT_MATCH_CONFIDENCE,
                matched_field="merchantVat",
                matched_value=merchant_vat,
                tenant_vat=tenant_vat,
                counterparty_vat=None if is_own_receipt else merchant_vat,
                reasoning=(
                    "Resolved receipt direction from merchant VAT comparison: "
                    + ("merchant is the tenant" if is_own_receipt else "merchant VAT differs from tenant VAT")
                ),
            )

        # Tier 2: names. A named merchant that is not the tenant means a purchase.
        candidates = tenant_name_candidates(tenant, associated_person_names)
        if matches_tenant_name(merchant_name, candidates, self.settings.name_similarity_threshold):
            return DirectionResolution(
                direction=DocumentDirection.OUTBOUND,
                source=DirectionResolutionSource.NAME_MATCH,
                confidence=self.settings.name_match_confidence,
                matched_field="merchantName",
                matched_value=merchant_name,
                tenant_vat=tenant_vat,
                reasoning="Resolved receipt direction from merchant name similarity",
            )
        if _present(merchant_name) is not None:
            return DirectionResolution(
                direction=DocumentDirection.INBOUND,
                source=DirectionResolutionSource.NAME_MATCH,
                confidence=self.settings.name_match_confidence,
                matched_field="merchantName",
                matched_value=merchant_name,
                tenant_vat=tenant_vat,
                counterparty_vat=merchant_vat,
                reasoning="Resolved receipt direction: merchant name differs from tenant",
            )

        # Tier 3: AI hint
        hint = extraction.direction_hint or DocumentDirection.UNKNOWN
        if hint is not DocumentDirection.UNKNOWN:
            return DirectionResolution(
                direction=hint,
                source=DirectionResolutionSource.AI_HINT,
                confidence=self._hint_confidence(extraction.direction_hint_confidence),
                matched_field="directionHint",
                matched_value=hint.value,
                tenant_vat=tenant_vat,
                counterparty_vat=merchant_vat if hint is DocumentDirection.INBOUND else None,
                reasoning="Resolved receipt direction from AI tie-breaker hint",
            )

        missing_vat = "tenant VAT" if tenant_vat is None else "merchant VAT"
        return DirectionResolution(
            direction=DocumentDirection.UNKNOWN,
            source=DirectionResolutionSource.UNKNOWN,
            confidence=0.0,
            tenant_vat=tenant_vat,
            reasoning=(
                "No VAT/name/hint evidence to resolve receipt direction: "
                f"no {missing_vat} to compare, no merchant name, no AI direction hint"
            ),
        )
