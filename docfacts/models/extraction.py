"""Extraction result data models, one class per document kind.

The set of kinds is closed: every consumer dispatches over exactly these
classes and treats anything else as a programming error.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .direction import DocumentDirection


@dataclass(frozen=True)
class PartyDocument:
    """Fields shared by documents with a seller and a buyer.

    Attributes:
        seller_name: Issuing party name as extracted
        seller_vat: Normalized seller VAT or None
        buyer_name: Receiving party name as extracted
        buyer_vat: Normalized buyer VAT or None
        direction_hint: Direction guessed by the extraction model
        direction_hint_confidence: Model confidence for the hint (0.0-1.0) or None
    """

    kind: ClassVar[str] = "party_document"

    seller_name: Optional[str] = None
    seller_vat: Optional[str] = None
    buyer_name: Optional[str] = None
    buyer_vat: Optional[str] = None
    direction_hint: DocumentDirection = DocumentDirection.UNKNOWN
    direction_hint_confidence: Optional[float] = None


@dataclass(frozen=True)
class Invoice(PartyDocument):
    kind: ClassVar[str] = "invoice"


@dataclass(frozen=True)
class CreditNote(PartyDocument):
    kind: ClassVar[str] = "credit_note"


@dataclass(frozen=True)
class Receipt:
    """Till receipt: only the merchant is named.

    Attributes:
        merchant_name: Merchant name as extracted or None
        merchant_vat: Normalized merchant VAT or None
        direction_hint: Direction guessed by the extraction model
        direction_hint_confidence: Model confidence for the hint (0.0-1.0) or None
    """

    kind: ClassVar[str] = "receipt"

    merchant_name: Optional[str] = None
    merchant_vat: Optional[str] = None
    direction_hint: DocumentDirection = DocumentDirection.UNKNOWN
    direction_hint_confidence: Optional[float] = None


@dataclass(frozen=True)
class ProForma:
    kind: ClassVar[str] = "pro_forma"


@dataclass(frozen=True)
class PurchaseOrder:
    kind: ClassVar[str] = "purchase_order"


@dataclass(frozen=True)
class Quote:
    kind: ClassVar[str] = "quote"


@dataclass(frozen=True)
class Unsupported:
    """Document the extraction stage could not classify.

    Attributes:
        reason: Why the document was not classified, if known
    """

    kind: ClassVar[str] = "unsupported"

    reason: Optional[str] = None


FinancialExtractionResult = Union[
    Invoice, CreditNote, Receipt, ProForma, PurchaseOrder, Quote, Unsupported
]

# Kinds for which direction is not a meaningful concept
DIRECTIONLESS_KINDS = (ProForma, PurchaseOrder, Quote, Unsupported)

EXTRACTION_KINDS = {
    cls.kind: cls
    for cls in (Invoice, CreditNote, Receipt, ProForma, PurchaseOrder, Quote, Unsupported)
}
