"""Structured fault models with source position tracking."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """Points to an exact location in the scanned text."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    column: int = Field(ge=1)
    offset: int = Field(ge=0)


class FaultKind(StrEnum):
    MISSING_QUOTES = "missing_quotes"
    SINGLE_QUOTES = "single_quotes"
    UNQUOTED_KEY = "unquoted_key"
    TRAILING_COMMA = "trailing_comma"
    MISSING_COMMA = "missing_comma"
    UNMATCHED_BRACKETS = "unmatched_brackets"
    INVALID_CHARACTER = "invalid_character"
    COMMENT_FOUND = "comment_found"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_NUMBER = "invalid_number"
    INVALID_LITERAL = "invalid_literal"
    UNEXPECTED_END = "unexpected_end"
    DUPLICATE_KEY = "duplicate_key"
    INVALID_UNICODE = "invalid_unicode"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[FaultKind, str] = {
    FaultKind.MISSING_QUOTES: "String is missing a double quote",
    FaultKind.SINGLE_QUOTES: "Single quotes used, JSON only allows double quotes",
    FaultKind.UNQUOTED_KEY: "Object key is not wrapped in quotes",
    FaultKind.TRAILING_COMMA: "Trailing comma",
    FaultKind.MISSING_COMMA: "Missing comma separator",
    FaultKind.UNMATCHED_BRACKETS: "Unmatched brackets",
    FaultKind.INVALID_CHARACTER: "Invalid character",
    FaultKind.COMMENT_FOUND: "JSON does not allow comments",
    FaultKind.INVALID_ESCAPE: "Invalid escape sequence",
    FaultKind.INVALID_NUMBER: "Invalid number format",
    FaultKind.INVALID_LITERAL: "Invalid literal",
    FaultKind.UNEXPECTED_END: "Unexpected end of input",
    FaultKind.DUPLICATE_KEY: "Duplicate key",
    FaultKind.INVALID_UNICODE: "Invalid unicode escape",
}


class Fault(BaseModel):
    """A single classified grammar violation found while scanning."""

    model_config = ConfigDict(frozen=True)

    kind: FaultKind
    position: Position
    message: str
    context: str | None = None

    def describe(self) -> str:
        """Render a one-line, human-readable account of the fault."""
        context = f" ({self.context})" if self.context is not None else ""
        return (
            f"{self.kind.description}: {self.message} "
            f"at line {self.position.line}, column {self.position.column}{context}"
        )


class ParseFault(Exception):
    """Raised by the scanner the moment the grammar is violated.

    Carries the positioned ``Fault`` so the catch point can record it as-is.
    """

    def __init__(self, fault: Fault) -> None:
        super().__init__(fault.message)
        self.fault = fault

    @property
    def kind(self) -> FaultKind:
        return self.fault.kind
