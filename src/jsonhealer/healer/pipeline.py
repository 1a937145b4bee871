"""Orchestrates the healing pipeline: Parse → Diagnose → Suggest → Repair → Re-parse."""

from __future__ import annotations

import logging

from jsonhealer.healer.repair import RepairEngine
from jsonhealer.healer.results import HealingResult, result_from_diagnostic
from jsonhealer.healer.suggestions import SuggestionGenerator
from jsonhealer.models.diagnostic import Diagnostic
from jsonhealer.models.options import HealerOptions
from jsonhealer.parser.scanner import DEFAULT_MAX_DEPTH, TolerantParser

logger = logging.getLogger("jsonhealer.healer")


class JSONHealer:
    """Runs one diagnose-and-repair cycle per call.

    The healer never loops repair → re-parse → repair; a single corrective
    pass is the whole contract, and its verdict lives in the returned
    ``Diagnostic``.
    """

    def __init__(
        self,
        options: HealerOptions | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._options = options or HealerOptions.default()
        self._parser = TolerantParser(max_depth=max_depth)
        self._generator = SuggestionGenerator(self._options)
        self._engine = RepairEngine(self._parser)

    @property
    def options(self) -> HealerOptions:
        return self._options

    def diagnose(self, text: str) -> Diagnostic:
        """Diagnose *text* and, when it is invalid, attempt one repair."""
        # Phase 1: Parse
        initial = self._parser.parse(text)
        if initial.is_valid:
            return initial

        logger.debug(
            "diagnose: %d fault(s), health=%s", initial.fault_count, initial.health_status
        )

        # Phase 2: Suggest
        suggestions = self._generator.generate(initial.faults, text)

        # Phase 3: Repair + re-verify
        repaired_text: str | None = None
        repair_summary: str | None = None
        if suggestions:
            outcome = self._engine.repair(text, suggestions, self._options.max_repair_attempts)
            repaired_text = outcome.repaired_text
            repair_summary = outcome.summary

        return Diagnostic(
            original_text=text,
            is_valid=False,
            health_status=initial.health_status,
            faults=initial.faults,
            suggestions=suggestions,
            repaired_text=repaired_text,
            repair_summary=repair_summary,
        )

    def heal(self, text: str) -> Diagnostic:
        """Alias of :meth:`diagnose`."""
        return self.diagnose(text)

    def is_valid(self, text: str) -> bool:
        return self._parser.parse(text).is_valid

    def quick_repair(self, text: str) -> str | None:
        """Return the repaired text, or ``None`` when it was valid or unrepairable."""
        return self.diagnose(text).repaired_text

    def process(self, text: str) -> HealingResult:
        """Diagnose *text* and fold the outcome into ``Healthy | Healed | Critical``."""
        return result_from_diagnostic(self.diagnose(text))
