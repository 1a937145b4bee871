"""Scan cursor: offset, line and column bookkeeping over the input text."""

from __future__ import annotations

from dataclasses import dataclass

from jsonhealer.models.faults import Fault, FaultKind, ParseFault, Position


@dataclass
class ScanCursor:
    """Mutable read position over *text*, advanced one character at a time.

    A fresh cursor is created for every parse and threaded through the
    recursive descent, so parser instances never carry scan state.
    """

    text: str
    offset: int = 0
    line: int = 1
    column: int = 1

    def at_end(self) -> bool:
        return self.offset >= len(self.text)

    def peek(self, ahead: int = 0) -> str:
        """Return the character *ahead* positions away, or ``""`` past the end."""
        index = self.offset + ahead
        if index < len(self.text):
            return self.text[index]
        return ""

    def advance(self) -> None:
        if self.at_end():
            return
        char = self.text[self.offset]
        self.offset += 1
        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.text[self.offset].isspace():
            self.advance()

    def consume(self, expected: str) -> bool:
        """Advance past *expected* if it is the current character."""
        if self.peek() == expected and expected:
            self.advance()
            return True
        return False

    def consume_literal(self, literal: str) -> bool:
        """Advance past *literal* if the text continues with it exactly."""
        if not self.text.startswith(literal, self.offset):
            return False
        for _ in literal:
            self.advance()
        return True

    def word(self, limit: int = 20) -> str:
        """The run of non-delimiter characters starting at the cursor."""
        end = self.offset
        while (
            end < len(self.text)
            and end - self.offset < limit
            and not self.text[end].isspace()
            and self.text[end] not in ",:[]{}\"'"
        ):
            end += 1
        return self.text[self.offset:end]

    def remaining(self, limit: int = 20) -> str:
        return self.text[self.offset:self.offset + limit]

    def position(self) -> Position:
        return Position(line=self.line, column=self.column, offset=self.offset)

    def fault(
        self,
        kind: FaultKind,
        message: str,
        context: str | None = None,
        position: Position | None = None,
    ) -> ParseFault:
        """Build a ``ParseFault`` anchored at *position* (default: here)."""
        return ParseFault(
            Fault(
                kind=kind,
                position=position or self.position(),
                message=message,
                context=context,
            )
        )
