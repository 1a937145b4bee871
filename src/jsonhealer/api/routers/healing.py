"""Document endpoints: POST /diagnose, POST /repair, POST /validate."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from jsonhealer.api.deps import build_healer, ensure_document_size, get_settings
from jsonhealer.api.schemas import (
    DocumentRequest,
    RepairResponse,
    ValidateRequest,
    ValidateResponse,
)
from jsonhealer.healer.results import Critical, Healed, Healthy
from jsonhealer.models.diagnostic import Diagnostic
from jsonhealer.parser.scanner import TolerantParser
from jsonhealer.settings import Settings

logger = logging.getLogger("jsonhealer.api")

router = APIRouter()


@router.post("/diagnose", response_model=Diagnostic)
async def diagnose(
    body: DocumentRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> Diagnostic:
    """Diagnose the text and attempt a single repair pass."""
    ensure_document_size(settings, body.text)
    healer = build_healer(settings, body.preset)
    logger.info("diagnose called (length=%d, preset=%s)", len(body.text), body.preset)
    return healer.diagnose(body.text)


@router.post("/repair", response_model=RepairResponse)
async def repair(
    body: DocumentRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> RepairResponse:
    """Return the healed text, or the faults when it cannot be repaired."""
    ensure_document_size(settings, body.text)
    healer = build_healer(settings, body.preset)
    logger.info("repair called (length=%d, preset=%s)", len(body.text), body.preset)
    match healer.process(body.text):
        case Healthy(text=text):
            return RepairResponse(status="healthy", text=text)
        case Healed(repaired=repaired, summary=summary):
            return RepairResponse(status="healed", text=repaired, summary=summary)
        case Critical(errors=errors):
            return RepairResponse(status="critical", faults=errors)


@router.post("/validate", response_model=ValidateResponse)
async def validate(
    body: ValidateRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> ValidateResponse:
    """Check validity only; no suggestions or repair."""
    ensure_document_size(settings, body.text)
    faults = TolerantParser(max_depth=settings.max_nesting_depth).scan(body.text)
    return ValidateResponse(valid=not faults, faults=faults)
