"""Diagnosis, suggestion and repair pipeline."""

from jsonhealer.healer.pipeline import JSONHealer
from jsonhealer.healer.repair import RepairEngine, RepairOutcome
from jsonhealer.healer.results import (
    Critical,
    Healed,
    HealingResult,
    Healthy,
    result_from_diagnostic,
)
from jsonhealer.healer.suggestions import SuggestionGenerator, generate_suggestions

__all__ = [
    "Critical",
    "Healed",
    "HealingResult",
    "Healthy",
    "JSONHealer",
    "RepairEngine",
    "RepairOutcome",
    "SuggestionGenerator",
    "generate_suggestions",
    "result_from_diagnostic",
]
