"""API request and response models."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class OgmValidateRequest(BaseModel):
    """Request model for OGM validation endpoint."""

    reference: str = Field(..., description="Structured communication as extracted")


class OgmCorrectionResponse(BaseModel):
    position: int
    from_char: str = Field(..., alias="from")
    to_char: str = Field(..., alias="to")

    model_config = {"populate_by_name": True}


class OgmValidateResponse(BaseModel):
    """Response model for OGM validation endpoint."""

    status: str = Field(..., description="valid, corrected_valid, invalid_format or invalid_checksum")
    is_valid: bool
    message: str = Field(..., description="Diagnostic text for natural-language callers")
    normalized: Optional[str] = None
    original: Optional[str] = None
    corrections: List[OgmCorrectionResponse] = Field(default_factory=list)
    reason: Optional[str] = None
    expected: Optional[str] = None
    actual: Optional[str] = None


class DirectionResolveRequest(BaseModel):
    """Request model for direction resolution endpoint.

    tenant and extraction are parsed at the boundary so that unknown kinds
    and bad field types come back as 422 with a readable message.
    """

    tenant: Dict[str, Any] = Field(..., description="legal_name, display_name, vat_number, type, language")
    extraction: Dict[str, Any] = Field(..., description="Extraction result with a 'kind' key")
    associated_person_names: List[str] = Field(default_factory=list)


class DirectionResolveResponse(BaseModel):
    """Response model for direction resolution endpoint."""

    direction: str
    source: str
    confidence: float
    reasoning: str
    matched_field: Optional[str] = None
    matched_value: Optional[str] = None
    tenant_vat: Optional[str] = None
    counterparty_vat: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error message")
    detail: Optional[str] = Field(None, description="Optional error details")
