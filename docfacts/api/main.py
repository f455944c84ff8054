"""FastAPI application exposing direction resolution and OGM validation."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..ai.ogm_tool import describe_result
from ..config import get_app_name, get_app_version, get_profile_name
from ..config.profile_manager import set_profile
from ..engines import Engines, create_engines
from ..pipeline.parsing import (
    DocumentParseError,
    extraction_from_dict,
    person_names_from_list,
    tenant_from_dict,
)
from .models import (
    DirectionResolveRequest,
    DirectionResolveResponse,
    ErrorResponse,
    OgmValidateRequest,
    OgmValidateResponse,
)

logger = logging.getLogger(__name__)


def create_app(engines: Optional[Engines] = None) -> FastAPI:
    """Create the API app.

    Args:
        engines: Engines to serve; built from DOCFACTS_PROFILE when None

    Returns:
        FastAPI app with engines stored on app.state
    """
    if engines is None:
        engines = create_engines(set_profile(get_profile_name()))

    app = FastAPI(
        title="docfacts API",
        description="Direction resolution and structured payment reference validation",
        version=get_app_version(),
    )
    app.state.engines = engines

    @app.exception_handler(DocumentParseError)
    async def document_parse_error_handler(request: Request, exc: DocumentParseError):
        logger.info(f"Rejected document payload on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content=ErrorResponse(error="Invalid document payload", detail=str(exc)).model_dump(),
        )

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"{get_app_name()} API",
            "version": get_app_version(),
            "profile": app.state.engines.profile_name,
            "docs": "/docs",
        }

    @app.post("/api/ogm/validate", response_model=OgmValidateResponse)
    async def validate_ogm_endpoint(body: OgmValidateRequest):
        """Validate a structured communication.

        Returns:
            OgmValidateResponse with the structured verdict and a diagnostic message
        """
        result = app.state.engines.ogm.validate(body.reference)
        payload = result.to_dict()
        return OgmValidateResponse(
            is_valid=result.is_valid,
            message=describe_result(result),
            **payload,
        )

    @app.post(
        "/api/direction/resolve",
        response_model=DirectionResolveResponse,
        responses={422: {"model": ErrorResponse}},
    )
    async def resolve_direction_endpoint(body: DirectionResolveRequest):
        """Resolve direction and counterparty VAT for one document."""
        tenant = tenant_from_dict(body.tenant)
        extraction = extraction_from_dict(body.extraction)
        names = person_names_from_list(body.associated_person_names)
        resolution = app.state.engines.direction.resolve(extraction, tenant, names)
        return DirectionResolveResponse(**resolution.to_dict())

    return app
