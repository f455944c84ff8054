"""Build typed tenants and extraction results from JSON-like dicts.

Used by the CLI and API at their boundary; the engines only see typed input.
"""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional

from ..models.direction import DocumentDirection
from ..models.extraction import (
    EXTRACTION_KINDS,
    CreditNote,
    FinancialExtractionResult,
    Invoice,
    Receipt,
    Unsupported,
)
from ..models.tenant import Tenant, TenantType
from .vat_normalizer import normalize_vat


class DocumentParseError(ValueError):
    """Raised when a document payload cannot be turned into typed input."""
    pass


def _optional_str(data: Dict[str, Any], key: str) -> Optional[str]:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DocumentParseError(f"{key} must be a string, got {type(value).__name__}")
    return value


def parse_direction(value: Any) -> DocumentDirection:
    """Parse a direction hint; None and empty mean UNKNOWN.

    Accepts enum values ("Inbound") and names ("INBOUND"), case-insensitively.
    """
    if value is None or value == "":
        return DocumentDirection.UNKNOWN
    if isinstance(value, DocumentDirection):
        return value
    text = str(value).strip().lower()
    for direction in DocumentDirection:
        if text in (direction.value.lower(), direction.name.lower()):
            return direction
    raise DocumentParseError(f"Invalid direction hint: {value!r}")


def _hint_confidence(data: Dict[str, Any]) -> Optional[float]:
    value = data.get("direction_hint_confidence")
    if value is None:
        return None
    if isinstance(value, bool):
        raise DocumentParseError("direction_hint_confidence must be a number")
    try:
        confidence = float(value)
    except (TypeError, ValueError) as e:
        raise DocumentParseError(f"direction_hint_confidence must be a number, got {value!r}") from e
    return None if math.isnan(confidence) else confidence


def tenant_from_dict(data: Dict[str, Any]) -> Tenant:
    """Create Tenant from dictionary (e.g., from a JSON request)."""
    if not isinstance(data, dict):
        raise DocumentParseError("tenant must be an object")
    raw_type = str(data.get("type") or TenantType.COMPANY.value).strip().lower()
    tenant_type = next(
        (t for t in TenantType if raw_type in (t.value.lower(), t.name.lower())),
        None,
    )
    if tenant_type is None:
        raise DocumentParseError(f"Invalid tenant type: {data.get('type')!r}")
    return Tenant(
        legal_name=_optional_str(data, "legal_name") or "",
        display_name=_optional_str(data, "display_name") or "",
        vat_number=normalize_vat(_optional_str(data, "vat_number")) or "",
        type=tenant_type,
        language=_optional_str(data, "language") or "en",
    )


def extraction_from_dict(data: Dict[str, Any]) -> FinancialExtractionResult:
    """Create the extraction result matching data["kind"].

    Args:
        data: Dict with "kind" (invoice, credit_note, receipt, pro_forma,
            purchase_order, quote, unsupported) and the kind's fields

    Returns:
        Typed extraction result; raw VAT values are normalized

    Raises:
        DocumentParseError: If kind is missing/unknown or a field has the wrong type
    """
    if not isinstance(data, dict):
        raise DocumentParseError("extraction must be an object")
    kind = data.get("kind")
    cls = EXTRACTION_KINDS.get(kind) if isinstance(kind, str) else None
    if cls is None:
        known = ", ".join(sorted(EXTRACTION_KINDS))
        raise DocumentParseError(f"Unknown extraction kind {kind!r} (expected one of: {known})")

    if cls in (Invoice, CreditNote):
        return cls(
            seller_name=_optional_str(data, "seller_name"),
            seller_vat=normalize_vat(_optional_str(data, "seller_vat")),
            buyer_name=_optional_str(data, "buyer_name"),
            buyer_vat=normalize_vat(_optional_str(data, "buyer_vat")),
            direction_hint=parse_direction(data.get("direction_hint")),
            direction_hint_confidence=_hint_confidence(data),
        )
    if cls is Receipt:
        return Receipt(
            merchant_name=_optional_str(data, "merchant_name"),
            merchant_vat=normalize_vat(_optional_str(data, "merchant_vat")),
            direction_hint=parse_direction(data.get("direction_hint")),
            direction_hint_confidence=_hint_confidence(data),
        )
    if cls is Unsupported:
        return Unsupported(reason=_optional_str(data, "reason"))
    return cls()


def person_names_from_list(value: Any) -> List[str]:
    """Validate the associated person names list (None means empty)."""
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise DocumentParseError("associated_person_names must be a list of strings")
    return list(value)
