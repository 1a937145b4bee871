"""Applies repair suggestions to the text and re-verifies the result.

Suggestions are applied in descending offset order.  Every edit only
changes text at or after its own offset (the single-quote substitution
also touches earlier characters on its line, but never changes their
count), so offsets of edits still pending stay valid without any
adjustment.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from jsonhealer.healer.suggestions import comment_span, line_bounds
from jsonhealer.models.diagnostic import RepairSuggestion
from jsonhealer.models.faults import FaultKind
from jsonhealer.parser.scanner import TolerantParser

logger = logging.getLogger("jsonhealer.healer")

# A comma may only be inserted after a token that can end a value.
_NO_COMMA_AFTER = frozenset(",:[{")

Edit = Callable[[str, RepairSuggestion], tuple[str, str] | None]


@dataclass
class RepairOutcome:
    """Result of one repair pass."""

    repaired_text: str | None = None
    summary: str | None = None
    applied: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.repaired_text is not None


def _delete_trailing_comma(text: str, suggestion: RepairSuggestion) -> tuple[str, str] | None:
    offset = suggestion.position.offset
    if offset >= len(text) or text[offset] != ",":
        return None
    return (
        text[:offset] + text[offset + 1:],
        f"Line {suggestion.position.line}: removed trailing comma",
    )


def _replace_single_quotes(text: str, suggestion: RepairSuggestion) -> tuple[str, str] | None:
    start, end = line_bounds(text, min(suggestion.position.offset, len(text)))
    line = text[start:end]
    if "'" not in line:
        return None
    return (
        text[:start] + line.replace("'", '"') + text[end:],
        f"Line {suggestion.position.line}: replaced single quotes with double quotes",
    )


def _quote_key(text: str, suggestion: RepairSuggestion) -> tuple[str, str] | None:
    offset = suggestion.position.offset
    key = suggestion.original_text
    if not key or not text.startswith(key, offset):
        return None
    return (
        text[:offset] + f'"{key}"' + text[offset + len(key):],
        f"Line {suggestion.position.line}: quoted key '{key}'",
    )


def _strip_comment(text: str, suggestion: RepairSuggestion) -> tuple[str, str] | None:
    span = comment_span(text, suggestion.position.offset)
    if span is None:
        return None
    start, end = span
    before = text[:start]
    if text.startswith("//", start):
        before = before.rstrip(" \t")
    return (
        before + text[end:],
        f"Line {suggestion.position.line}: removed comment",
    )


def _insert_comma(text: str, suggestion: RepairSuggestion) -> tuple[str, str] | None:
    before = text[:suggestion.position.offset].rstrip()
    if not before or before[-1] in _NO_COMMA_AFTER:
        return None
    cut = len(before)
    return (
        text[:cut] + "," + text[cut:],
        f"Line {suggestion.position.line}: inserted missing comma",
    )


_EDITS: dict[FaultKind, Edit] = {
    FaultKind.TRAILING_COMMA: _delete_trailing_comma,
    FaultKind.SINGLE_QUOTES: _replace_single_quotes,
    FaultKind.UNQUOTED_KEY: _quote_key,
    FaultKind.COMMENT_FOUND: _strip_comment,
    FaultKind.MISSING_COMMA: _insert_comma,
}


class RepairEngine:
    """Splices suggestions into the text, then re-parses it exactly once."""

    def __init__(self, parser: TolerantParser | None = None) -> None:
        self._parser = parser or TolerantParser()

    def repair(
        self,
        text: str,
        suggestions: Iterable[RepairSuggestion],
        max_attempts: int,
    ) -> RepairOutcome:
        working = text
        applied: list[str] = []

        ordered = sorted(suggestions, key=lambda s: s.position.offset, reverse=True)
        for suggestion in ordered[: max(0, max_attempts)]:
            edit = _EDITS.get(suggestion.kind)
            result = edit(working, suggestion) if edit is not None else None
            if result is None:
                logger.debug(
                    "skipped %s suggestion at offset %d",
                    suggestion.kind,
                    suggestion.position.offset,
                )
                continue
            working, note = result
            applied.append(note)
            logger.debug("applied fix: %s", note)

        if not applied:
            return RepairOutcome()

        if self._parser.parse(working).is_valid:
            summary = f"Repaired {len(applied)} issue(s):\n" + "\n".join(applied)
            return RepairOutcome(repaired_text=working, summary=summary, applied=applied)

        return RepairOutcome(
            summary=f"Attempted {len(applied)} fix(es) but errors remain",
            applied=applied,
        )
