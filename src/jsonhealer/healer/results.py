"""Tri-state view over a Diagnostic, convenient for ``match`` statements."""

from __future__ import annotations

from dataclasses import dataclass, field

from jsonhealer.models.diagnostic import Diagnostic
from jsonhealer.models.faults import Fault


@dataclass(frozen=True)
class Healthy:
    """The text was already valid JSON."""

    text: str

    @property
    def is_successful(self) -> bool:
        return True

    @property
    def final_text(self) -> str:
        return self.text

    @property
    def faults(self) -> list[Fault]:
        return []


@dataclass(frozen=True)
class Healed:
    """The text was invalid but one repair pass produced valid JSON."""

    original: str
    repaired: str
    summary: str

    @property
    def is_successful(self) -> bool:
        return True

    @property
    def final_text(self) -> str:
        return self.repaired

    @property
    def faults(self) -> list[Fault]:
        return []


@dataclass(frozen=True)
class Critical:
    """The text is invalid and could not be repaired."""

    text: str
    errors: list[Fault] = field(default_factory=list)

    @property
    def is_successful(self) -> bool:
        return False

    @property
    def final_text(self) -> None:
        return None

    @property
    def faults(self) -> list[Fault]:
        return list(self.errors)


HealingResult = Healthy | Healed | Critical


def result_from_diagnostic(diagnostic: Diagnostic) -> HealingResult:
    if diagnostic.is_valid:
        return Healthy(diagnostic.original_text)
    if diagnostic.repaired_text is not None and diagnostic.repair_summary is not None:
        return Healed(
            original=diagnostic.original_text,
            repaired=diagnostic.repaired_text,
            summary=diagnostic.repair_summary,
        )
    return Critical(diagnostic.original_text, list(diagnostic.faults))
