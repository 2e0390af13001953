"""FastAPI router for the styling consultation endpoint."""

from typing import Any, Dict, Optional

import httpx
from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from kpop_stylist import __version__
from kpop_stylist.config import Settings, logger
from kpop_stylist.core import messages
from kpop_stylist.core.openai_api import ReportGenerationError
from kpop_stylist.services.consult_service import run_consultation

from .dependencies import get_http_client, get_settings
from .models import ConsultRequest, ConsultResponse, ErrorResponse

router = APIRouter(prefix="/api", tags=["Consultation"])

PREFLIGHT_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _json_response(status_code: int, content: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=content,
        headers={"Access-Control-Allow-Origin": "*"},
    )


def _error_response(
    status_code: int, error: str, details: Optional[str] = None
) -> JSONResponse:
    payload = ErrorResponse(error=error, details=details)
    return _json_response(status_code, payload.model_dump(exclude_none=True))


@router.options("/consult")
async def consult_preflight() -> Response:
    """Answer CORS preflight checks without touching the provider."""

    return Response(status_code=204, headers=PREFLIGHT_HEADERS)


@router.post(
    "/consult",
    response_model=ConsultResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def consult(
    request: Request,
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> JSONResponse:
    """Generate a style report and styled outfit images for the submitted photo."""

    try:
        payload = await request.json()
        consult_request = ConsultRequest.model_validate(payload)
    except (ValueError, ValidationError):
        logger.warning("Consultation request rejected: missing or invalid fields")
        return _error_response(400, messages.MISSING_FIELDS)

    if not settings.openai_api_key:
        logger.error("OPENAI_API_KEY is not configured")
        return _error_response(500, messages.API_KEY_MISSING)

    try:
        logger.info("Consultation request received")

        result = await run_consultation(
            client,
            settings,
            photo=consult_request.photo,
            height=consult_request.height,
            weight=consult_request.weight,
        )

        body = ConsultResponse(
            report=result.report, outfit_images=result.outfit_images
        )
        return _json_response(200, body.model_dump(by_alias=True))

    except ReportGenerationError as exc:
        return _error_response(500, messages.REPORT_FAILED, details=exc.details)

    except Exception:
        logger.error("Unexpected error in consultation request", exc_info=True)
        return _error_response(500, messages.SERVER_ERROR)


@router.api_route(
    "/consult",
    methods=["GET", "HEAD", "PUT", "PATCH", "DELETE", "TRACE", "CONNECT"],
    include_in_schema=False,
)
async def consult_method_not_allowed() -> JSONResponse:
    return _error_response(405, messages.METHOD_NOT_ALLOWED)


@router.get("/health")
async def health_check() -> dict:
    """Simple health check endpoint."""

    return {
        "status": "healthy",
        "service": "kpop-stylist-api",
        "version": __version__,
    }
