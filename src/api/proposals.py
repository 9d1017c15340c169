"""Proposal API Routes - Generation and PDF export."""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ValidationError

from src.core.config import get_settings, sanitize_filename
from src.core.exceptions import PDFGenerationError
from src.integrations.pdf import pdf_generator
from src.models import ErrorInfo, Proposal, ProposalDraft, ProposalSource
from src.services.proposal_service import proposal_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["proposals"])


class GenerateResponse(BaseModel):
    """Response for proposal generation."""
    success: bool
    data: Proposal
    source: ProposalSource
    error: Optional[ErrorInfo] = None


def _error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": message, **extra}
    )


async def _read_json_object(request: Request) -> Optional[Dict[str, Any]]:
    """Return the request body as a dict, or None if it is not a JSON object."""
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    return body if isinstance(body, dict) else None


# ===========================================
# Proposal Generation
# ===========================================

@router.post(
    "/generate",
    response_model=GenerateResponse,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    summary="Generate Proposal From Idea"
)
async def generate(request: Request):
    """
    Turn a project idea into a structured proposal.

    Always answers 200 with a usable proposal once the input is valid;
    AI failures show up as ``source: "fallback"`` plus an ``error``
    descriptor rather than as a failing status.
    """
    settings = get_settings()

    body = await _read_json_object(request)
    idea = body.get("idea") if body else None

    if not idea or not isinstance(idea, str):
        return _error_response(400, "Valid project idea is required")

    if len(idea) > settings.MAX_IDEA_LENGTH:
        return _error_response(
            400,
            f"Project idea too long. Please keep it under {settings.MAX_IDEA_LENGTH} characters."
        )

    logger.info(f"Generating proposal for idea ({len(idea)} chars)")

    try:
        result = await asyncio.wait_for(
            proposal_service.generate(idea),
            timeout=settings.REQUEST_TIMEOUT_SECONDS
        )
    except asyncio.TimeoutError:
        logger.warning("Proposal generation exceeded request deadline")
        return _error_response(408, "Request timeout. Please try again.")
    except Exception as e:
        logger.error(f"Error in /generate: {e}", exc_info=True)
        return _error_response(
            500,
            "Failed to generate proposal. Please try again.",
            data=proposal_service.fallback_proposal(idea).to_api(),
            source=ProposalSource.FALLBACK.value
        )

    logger.info(f"Proposal ready (source={result.source.value})")
    return GenerateResponse(
        success=True,
        data=result.proposal,
        source=result.source,
        error=result.error
    )


# ===========================================
# PDF Export
# ===========================================

@router.post(
    "/generate-pdf",
    summary="Export Proposal As PDF",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}}
)
async def generate_pdf(request: Request) -> Response:
    """Render a (possibly edited) proposal to a PDF attachment."""
    settings = get_settings()

    body = await _read_json_object(request)
    raw_proposal = body.get("proposal") if body else None

    if not isinstance(raw_proposal, dict) or not raw_proposal.get("title"):
        return _error_response(400, "Valid proposal data is required")

    try:
        proposal = ProposalDraft.model_validate(raw_proposal)
    except ValidationError as e:
        logger.info(f"Rejected PDF request: {e.error_count()} invalid fields")
        return _error_response(400, "Valid proposal data is required")

    try:
        pdf_bytes = await asyncio.wait_for(
            asyncio.to_thread(pdf_generator.generate_proposal_pdf, proposal),
            timeout=settings.REQUEST_TIMEOUT_SECONDS
        )
    except asyncio.TimeoutError:
        logger.warning("PDF generation exceeded request deadline")
        return _error_response(408, "PDF generation timeout. Please try again.")
    except PDFGenerationError as e:
        logger.error(f"Error in /generate-pdf: {e}")
        return _error_response(500, "Failed to generate PDF. Please try again.")

    filename = f"{sanitize_filename(proposal.title)}.pdf"
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )


# ===========================================
# Health
# ===========================================

@router.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "service": "proposal-studio",
        "ai_configured": get_settings().ai_configured
    }
