"""Diagnostic output record: health, faults, suggestions and repair result."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jsonhealer.models.faults import Fault, FaultKind, Position

HIGH_CONFIDENCE = 0.8

# More faults than this downgrades a non-fatal document to critical.
_CRITICAL_FAULT_COUNT = 5

_FATAL_KINDS = frozenset({FaultKind.UNEXPECTED_END, FaultKind.UNMATCHED_BRACKETS})


class HealthStatus(StrEnum):
    """Coarse severity bucket, ordered ``healthy < warning < critical < fatal``."""

    HEALTHY = "healthy"
    WARNING = "warning"
    CRITICAL = "critical"
    FATAL = "fatal"

    @property
    def severity(self) -> int:
        return list(HealthStatus).index(self)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HealthStatus):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, HealthStatus):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, HealthStatus):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, HealthStatus):
            return NotImplemented
        return self.severity >= other.severity

    @classmethod
    def classify(cls, faults: Iterable[Fault]) -> HealthStatus:
        """Derive the health bucket from a fault set."""
        faults = list(faults)
        if not faults:
            return cls.HEALTHY
        if any(f.kind in _FATAL_KINDS for f in faults):
            return cls.FATAL
        if len(faults) > _CRITICAL_FAULT_COUNT:
            return cls.CRITICAL
        return cls.WARNING


class RepairSuggestion(BaseModel):
    """A proposed text edit tied to one fault."""

    model_config = ConfigDict(frozen=True)

    kind: FaultKind
    position: Position
    original_text: str
    suggested_fix: str
    explanation: str
    confidence: float = 1.0

    @field_validator("confidence")
    @classmethod
    def _clamp_confidence(cls, value: float) -> float:
        return max(0.0, min(1.0, value))


class Diagnostic(BaseModel):
    """Full output of one diagnose call."""

    model_config = ConfigDict(frozen=True)

    original_text: str
    is_valid: bool
    health_status: HealthStatus
    faults: list[Fault] = Field(default_factory=list)
    suggestions: list[RepairSuggestion] = Field(default_factory=list)
    repaired_text: str | None = None
    repair_summary: str | None = None

    @model_validator(mode="after")
    def _validity_matches_faults(self) -> Diagnostic:
        if self.is_valid == bool(self.faults):
            raise ValueError("is_valid must hold exactly when there are no faults")
        return self

    @classmethod
    def from_faults(cls, text: str, faults: list[Fault]) -> Diagnostic:
        """Build the bare parse result for *text* (no suggestions, no repair)."""
        return cls(
            original_text=text,
            is_valid=not faults,
            health_status=HealthStatus.classify(faults),
            faults=faults,
        )

    @property
    def has_repairable_fixes(self) -> bool:
        return bool(self.suggestions)

    @property
    def fault_count(self) -> int:
        return len(self.faults)

    @property
    def high_confidence_fixes(self) -> list[RepairSuggestion]:
        return [s for s in self.suggestions if s.confidence >= HIGH_CONFIDENCE]

    def faults_of_kind(self, kind: FaultKind) -> list[Fault]:
        return [f for f in self.faults if f.kind == kind]

    def suggestions_for(self, fault: Fault) -> list[RepairSuggestion]:
        return [
            s for s in self.suggestions
            if s.kind == fault.kind and s.position == fault.position
        ]
