"""Dependency injection for FastAPI: settings and healer construction."""

from __future__ import annotations

from fastapi import HTTPException, Request

from jsonhealer.healer.pipeline import JSONHealer
from jsonhealer.limits import DocumentTooLargeError, check_document_size
from jsonhealer.models.options import HealerOptions, UnknownPresetError
from jsonhealer.settings import Settings


def get_settings(request: Request) -> Settings:
    """FastAPI ``Depends`` provider for the application settings."""
    return request.app.state.settings


def build_healer(settings: Settings, preset: str | None) -> JSONHealer:
    """Create a healer for *preset*, raising 400 for unknown preset names."""
    try:
        options = HealerOptions.preset(preset or settings.default_preset)
    except UnknownPresetError as exc:
        raise HTTPException(status_code=400, detail=exc.args[0]) from None
    return JSONHealer(options, max_depth=settings.max_nesting_depth)


def ensure_document_size(settings: Settings, text: str) -> None:
    """Raise 413 when *text* exceeds the configured document size."""
    try:
        check_document_size(text, settings.max_document_size)
    except DocumentTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc)) from None
