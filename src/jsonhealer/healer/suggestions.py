"""Maps captured faults to candidate text edits with confidence scores."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from jsonhealer.models.diagnostic import RepairSuggestion
from jsonhealer.models.faults import Fault, FaultKind
from jsonhealer.models.options import HealerOptions

logger = logging.getLogger("jsonhealer.healer")


def line_bounds(text: str, offset: int) -> tuple[int, int]:
    """Return ``(start, end)`` of the line holding *offset*, newline excluded."""
    start = text.rfind("\n", 0, offset) + 1
    end = text.find("\n", offset)
    if end == -1:
        end = len(text)
    return start, end


def comment_span(text: str, offset: int) -> tuple[int, int] | None:
    """Locate the comment starting at *offset* on its own line.

    A ``//`` comment runs to the end of the line; a ``/*`` comment must be
    closed on the same line.  Returns ``None`` when no such span exists.
    """
    _, line_end = line_bounds(text, offset)
    if text.startswith("//", offset):
        return offset, line_end
    if text.startswith("/*", offset):
        close = text.find("*/", offset + 2, line_end)
        if close != -1:
            return offset, close + 2
    return None


class SuggestionGenerator:
    """Builds one ``RepairSuggestion`` per eligible fault."""

    def __init__(self, options: HealerOptions | None = None) -> None:
        self._options = options or HealerOptions.default()
        self._builders: dict[
            FaultKind, tuple[bool, Callable[[Fault, str], RepairSuggestion | None]]
        ] = {
            FaultKind.TRAILING_COMMA: (self._options.fix_trailing_commas, self._trailing_comma),
            FaultKind.SINGLE_QUOTES: (self._options.fix_single_quotes, self._single_quotes),
            FaultKind.UNQUOTED_KEY: (self._options.fix_unquoted_keys, self._unquoted_key),
            FaultKind.COMMENT_FOUND: (self._options.strip_comments, self._comment),
            FaultKind.MISSING_QUOTES: (self._options.fix_quotes, self._missing_quotes),
            FaultKind.MISSING_COMMA: (True, self._missing_comma),
        }

    def generate(self, faults: Iterable[Fault], text: str) -> list[RepairSuggestion]:
        """Return suggestions for *faults*, ordered by ascending offset."""
        suggestions: list[RepairSuggestion] = []
        for fault in faults:
            enabled, build = self._builders.get(fault.kind, (False, None))
            if not enabled or build is None:
                continue
            suggestion = build(fault, text)
            if suggestion is None:
                logger.debug("no suggestion for %s at offset %d", fault.kind, fault.position.offset)
                continue
            suggestions.append(suggestion)
        return sorted(suggestions, key=lambda s: s.position.offset)

    # -- per-kind builders ---------------------------------------------------

    @staticmethod
    def _trailing_comma(fault: Fault, text: str) -> RepairSuggestion:
        offset = fault.position.offset
        original = text[offset] if offset < len(text) else ","
        return RepairSuggestion(
            kind=FaultKind.TRAILING_COMMA,
            position=fault.position,
            original_text=original,
            suggested_fix="",
            explanation="Remove the trailing comma",
            confidence=0.95,
        )

    @staticmethod
    def _single_quotes(fault: Fault, text: str) -> RepairSuggestion:
        return RepairSuggestion(
            kind=FaultKind.SINGLE_QUOTES,
            position=fault.position,
            original_text="'",
            suggested_fix='"',
            explanation="Replace single quotes with double quotes",
            confidence=0.9,
        )

    @staticmethod
    def _unquoted_key(fault: Fault, text: str) -> RepairSuggestion | None:
        if fault.context is None:
            return None
        return RepairSuggestion(
            kind=FaultKind.UNQUOTED_KEY,
            position=fault.position,
            original_text=fault.context,
            suggested_fix=f'"{fault.context}"',
            explanation="Wrap the object key in double quotes",
            confidence=0.85,
        )

    @staticmethod
    def _comment(fault: Fault, text: str) -> RepairSuggestion | None:
        span = comment_span(text, fault.position.offset)
        if span is None:
            return None
        start, end = span
        return RepairSuggestion(
            kind=FaultKind.COMMENT_FOUND,
            position=fault.position,
            original_text=text[start:end].strip(),
            suggested_fix="",
            explanation="Remove the comment (JSON does not allow comments)",
            confidence=0.8,
        )

    @staticmethod
    def _missing_quotes(fault: Fault, text: str) -> RepairSuggestion:
        # Position alone does not tell which side of the string lacks the quote.
        return RepairSuggestion(
            kind=FaultKind.MISSING_QUOTES,
            position=fault.position,
            original_text="",
            suggested_fix='"',
            explanation="Add the missing double quote",
            confidence=0.7,
        )

    @staticmethod
    def _missing_comma(fault: Fault, text: str) -> RepairSuggestion:
        return RepairSuggestion(
            kind=FaultKind.MISSING_COMMA,
            position=fault.position,
            original_text="",
            suggested_fix=",",
            explanation="Insert the missing comma separator",
            confidence=0.8,
        )


def generate_suggestions(
    faults: Iterable[Fault], text: str, options: HealerOptions | None = None
) -> list[RepairSuggestion]:
    """Functional shorthand for ``SuggestionGenerator(options).generate``."""
    return SuggestionGenerator(options).generate(faults, text)
