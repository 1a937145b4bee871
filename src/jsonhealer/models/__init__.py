"""Pydantic domain models for JSON Healer."""

from jsonhealer.models.diagnostic import Diagnostic, HealthStatus, RepairSuggestion
from jsonhealer.models.faults import Fault, FaultKind, ParseFault, Position
from jsonhealer.models.options import HealerOptions, UnknownPresetError

__all__ = [
    "Diagnostic",
    "Fault",
    "FaultKind",
    "HealerOptions",
    "HealthStatus",
    "ParseFault",
    "Position",
    "RepairSuggestion",
    "UnknownPresetError",
]
