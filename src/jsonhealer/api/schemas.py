"""API request/response Pydantic schemas."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from jsonhealer.models.faults import Fault
from jsonhealer.models.options import HealerOptions


class DocumentRequest(BaseModel):
    """Request body for POST /diagnose and POST /repair."""

    text: str = Field(description="Text intended to be JSON")
    preset: str | None = Field(
        default=None,
        description="Option preset name; the server default is used when omitted",
    )


class ValidateRequest(BaseModel):
    """Request body for POST /validate."""

    text: str = Field(description="Text to check for JSON validity")


class ValidateResponse(BaseModel):
    """Response body for POST /validate."""

    valid: bool
    faults: list[Fault] = []


class RepairResponse(BaseModel):
    """Response body for POST /repair."""

    status: Literal["healthy", "healed", "critical"]
    text: str | None = None
    summary: str | None = None
    faults: list[Fault] = []


class PresetInfo(BaseModel):
    """A named option preset."""

    name: str
    options: HealerOptions


class PresetListResponse(BaseModel):
    presets: list[PresetInfo]
    default: str


class HealthResponse(BaseModel):
    status: str
    version: str
