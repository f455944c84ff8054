"""Tenant data model: the business whose books a document belongs to."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TenantType(str, Enum):
    FREELANCER = "Freelancer"
    COMPANY = "Company"


@dataclass(frozen=True)
class Tenant:
    """Tenant context for one resolution call.

    Attributes:
        legal_name: Registered legal name
        display_name: Trading or display name
        vat_number: Normalized VAT number (e.g. "BE0123456789"), may be blank
        type: Freelancer or Company
        language: Preferred language code
    """

    legal_name: str
    display_name: str
    vat_number: str = ""
    type: TenantType = TenantType.COMPANY
    language: str = "en"

    @property
    def normalized_vat(self) -> Optional[str]:
        """Tenant VAT if non-blank, else None."""
        vat = (self.vat_number or "").strip()
        return vat or None
