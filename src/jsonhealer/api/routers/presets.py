"""Preset listing endpoint: GET /presets."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from jsonhealer.api.deps import get_settings
from jsonhealer.api.schemas import PresetInfo, PresetListResponse
from jsonhealer.models.options import HealerOptions
from jsonhealer.settings import Settings

router = APIRouter()


@router.get("", response_model=PresetListResponse)
async def list_presets(
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> PresetListResponse:
    """List the option presets and their repair toggles."""
    presets = [
        PresetInfo(name=name, options=HealerOptions.preset(name))
        for name in HealerOptions.preset_names()
    ]
    return PresetListResponse(presets=presets, default=settings.default_preset)
