"""Tolerant recursive-descent JSON scanner with typed, positioned faults.

The scanner is fail-fast: the first grammar violation aborts the parse and
becomes the single recorded fault.  The only addition is a trailing-content
fault when a complete top-level value is followed by more text.
"""

from __future__ import annotations

import logging
import sys

from jsonhealer.models.diagnostic import Diagnostic
from jsonhealer.models.faults import Fault, FaultKind, ParseFault, Position
from jsonhealer.parser.cursor import ScanCursor
from jsonhealer.parser.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

logger = logging.getLogger("jsonhealer.parser")

# Each nesting level costs two interpreter frames (value, then container);
# the margin leaves room for callers such as web handlers and test runners.
_FRAMES_PER_LEVEL = 2
_STACK_MARGIN = 200
DEFAULT_MAX_DEPTH = max(32, (sys.getrecursionlimit() - _STACK_MARGIN) // _FRAMES_PER_LEVEL)

# Integral floats inside this range are normalized to ``int``.
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1

_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_NUMBER_START = _DIGITS | {"-"}
_MISMATCHED_CLOSER = {"}": "]", "]": "}"}

_SIMPLE_ESCAPES = {
    '"': '"',
    "\\": "\\",
    "/": "/",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
}


class TolerantParser:
    """Recognizes JSON grammar and reports the first violation as a ``Fault``.

    Instances hold configuration only; each call scans with its own
    ``ScanCursor``, so one parser may be reused freely.
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        self._max_depth = max_depth

    # -- public API ----------------------------------------------------------

    def parse(self, text: str) -> Diagnostic:
        """Scan *text* and return the bare diagnostic (no suggestions)."""
        return Diagnostic.from_faults(text, self.scan(text))

    def scan(self, text: str) -> list[Fault]:
        """Scan *text* and return its faults (empty when it is valid JSON)."""
        cursor = ScanCursor(text)
        try:
            self._parse_document(cursor)
        except ParseFault as exc:
            logger.debug("scan stopped: %s", exc.fault.describe())
            return [exc.fault]
        except Exception as exc:  # noqa: BLE001
            logger.exception("unexpected scanner failure")
            return [
                Fault(
                    kind=FaultKind.INVALID_CHARACTER,
                    position=cursor.position(),
                    message=f"unexpected parser failure: {exc}",
                )
            ]
        return []

    def parse_value(self, text: str) -> JsonValue:
        """Parse *text* into the internal value tree.

        Raises ``ParseFault`` on the first violation, including trailing
        content and empty input.
        """
        return self._parse_document(ScanCursor(text))

    def _parse_document(self, cursor: ScanCursor) -> JsonValue:
        cursor.skip_whitespace()
        if cursor.at_end():
            raise cursor.fault(FaultKind.UNEXPECTED_END, "empty document")
        try:
            value = self._parse_value(cursor, depth=0)
        except RecursionError:
            raise cursor.fault(
                FaultKind.UNMATCHED_BRACKETS,
                "nesting is too deep for the interpreter stack",
            ) from None
        cursor.skip_whitespace()
        if not cursor.at_end():
            self._reject_comment(cursor)
            raise cursor.fault(
                FaultKind.INVALID_CHARACTER,
                "unexpected content after the top-level value",
                context=cursor.remaining(),
            )
        return value

    # -- values --------------------------------------------------------------

    def _parse_value(self, cursor: ScanCursor, depth: int) -> JsonValue:
        cursor.skip_whitespace()
        if cursor.at_end():
            raise cursor.fault(FaultKind.UNEXPECTED_END, "expected a value but reached the end")

        char = cursor.peek()
        if char == '"':
            return JsonString(self._parse_string(cursor))
        if char in ("{", "["):
            if depth >= self._max_depth:
                raise cursor.fault(
                    FaultKind.UNMATCHED_BRACKETS,
                    f"nesting exceeds the maximum depth of {self._max_depth}",
                    context=char,
                )
            if char == "{":
                return self._parse_object(cursor, depth)
            return self._parse_array(cursor, depth)
        if char in ("t", "f", "n"):
            return self._parse_literal(cursor)
        if char in _NUMBER_START:
            return self._parse_number(cursor)
        if char == "'":
            raise cursor.fault(
                FaultKind.SINGLE_QUOTES,
                "single quote found, JSON strings use double quotes",
                context=char,
            )
        self._reject_comment(cursor)
        raise cursor.fault(FaultKind.INVALID_CHARACTER, f"invalid character '{char}'", context=char)

    def _reject_comment(self, cursor: ScanCursor) -> None:
        """Raise ``comment_found`` if a ``//`` or ``/*`` starts here."""
        if cursor.peek() == "/" and cursor.peek(1) in ("/", "*"):
            raise cursor.fault(
                FaultKind.COMMENT_FOUND,
                "comments are not allowed in JSON",
                context="/" + cursor.peek(1),
            )

    # -- containers ----------------------------------------------------------

    def _parse_object(self, cursor: ScanCursor, depth: int) -> JsonObject:
        cursor.advance()  # '{'
        members: list[tuple[str, JsonValue]] = []
        seen: set[str] = set()

        cursor.skip_whitespace()
        if cursor.consume("}"):
            return JsonObject()

        while True:
            cursor.skip_whitespace()
            if cursor.at_end():
                raise cursor.fault(FaultKind.UNEXPECTED_END, "object is not closed, expected '}'")

            key_position = cursor.position()
            key = self._parse_key(cursor)
            if key in seen:
                raise cursor.fault(
                    FaultKind.DUPLICATE_KEY,
                    f"duplicate key '{key}'",
                    context=key,
                    position=key_position,
                )
            seen.add(key)

            cursor.skip_whitespace()
            if not cursor.consume(":"):
                if cursor.at_end():
                    raise cursor.fault(FaultKind.UNEXPECTED_END, "expected ':' but reached the end")
                raise cursor.fault(FaultKind.INVALID_CHARACTER, "expected ':' after object key")

            members.append((key, self._parse_value(cursor, depth + 1)))

            if self._parse_separator(cursor, "}", "object"):
                return JsonObject(tuple(members))

    def _parse_key(self, cursor: ScanCursor) -> str:
        char = cursor.peek()
        if char == '"':
            return self._parse_string(cursor)
        if char == "'":
            raise cursor.fault(
                FaultKind.SINGLE_QUOTES,
                "single quote found, JSON keys use double quotes",
                context=char,
            )
        if char.isalpha() or char == "_":
            start = cursor.position()
            identifier = self._lex_identifier(cursor)
            raise cursor.fault(
                FaultKind.UNQUOTED_KEY,
                "object keys must be wrapped in double quotes",
                context=identifier,
                position=Position(
                    line=cursor.line,
                    column=cursor.column - len(identifier),
                    offset=start.offset,
                ),
            )
        self._reject_comment(cursor)
        raise cursor.fault(FaultKind.INVALID_CHARACTER, "expected an object key", context=char)

    @staticmethod
    def _lex_identifier(cursor: ScanCursor) -> str:
        start = cursor.offset
        while not cursor.at_end():
            char = cursor.peek()
            if not (char.isalnum() or char == "_"):
                break
            cursor.advance()
        return cursor.text[start:cursor.offset]

    def _parse_array(self, cursor: ScanCursor, depth: int) -> JsonArray:
        cursor.advance()  # '['
        items: list[JsonValue] = []

        cursor.skip_whitespace()
        if cursor.consume("]"):
            return JsonArray()

        while True:
            items.append(self._parse_value(cursor, depth + 1))
            if self._parse_separator(cursor, "]", "array"):
                return JsonArray(tuple(items))

    def _parse_separator(self, cursor: ScanCursor, closer: str, container: str) -> bool:
        """Consume the token after a member; return True once *closer* is read."""
        cursor.skip_whitespace()
        if cursor.at_end():
            raise cursor.fault(
                FaultKind.UNEXPECTED_END, f"{container} is not closed, expected '{closer}'"
            )

        char = cursor.peek()
        if char == closer:
            cursor.advance()
            return True
        if char == ",":
            comma = cursor.position()
            cursor.advance()
            cursor.skip_whitespace()
            if cursor.peek() == closer:
                raise cursor.fault(
                    FaultKind.TRAILING_COMMA,
                    f"trailing comma before '{closer}'",
                    context=",",
                    position=comma,
                )
            return False
        if char == _MISMATCHED_CLOSER[closer]:
            raise cursor.fault(
                FaultKind.UNMATCHED_BRACKETS,
                f"'{char}' does not close the open {container}, expected '{closer}'",
                context=char,
            )
        self._reject_comment(cursor)
        raise cursor.fault(
            FaultKind.MISSING_COMMA, f"expected ',' or '{closer}'", context=cursor.word() or char
        )

    # -- scalars -------------------------------------------------------------

    def _parse_string(self, cursor: ScanCursor) -> str:
        cursor.advance()  # opening '"'
        chunks: list[str] = []

        while not cursor.at_end():
            char = cursor.peek()
            if char == '"':
                cursor.advance()
                return "".join(chunks)
            if char == "\\":
                cursor.advance()
                if cursor.at_end():
                    raise cursor.fault(FaultKind.INVALID_ESCAPE, "incomplete escape sequence")
                escape = cursor.peek()
                cursor.advance()
                if escape in _SIMPLE_ESCAPES:
                    chunks.append(_SIMPLE_ESCAPES[escape])
                elif escape == "u":
                    chunks.append(chr(self._parse_unicode_escape(cursor)))
                else:
                    raise cursor.fault(
                        FaultKind.INVALID_ESCAPE,
                        f"invalid escape character '{escape}'",
                        context="\\" + escape,
                    )
            elif ord(char) < 0x20:
                raise cursor.fault(
                    FaultKind.INVALID_CHARACTER,
                    "unescaped control character in string",
                    context=repr(char),
                )
            else:
                chunks.append(char)
                cursor.advance()

        raise cursor.fault(FaultKind.MISSING_QUOTES, "unterminated string, missing closing quote")

    @staticmethod
    def _parse_unicode_escape(cursor: ScanCursor) -> int:
        # TODO: combine escaped UTF-16 surrogate pairs into one code point.
        code_point = 0
        for _ in range(4):
            if cursor.at_end():
                raise cursor.fault(FaultKind.INVALID_UNICODE, "incomplete unicode escape sequence")
            char = cursor.peek()
            cursor.advance()
            if char not in _HEX_DIGITS:
                raise cursor.fault(
                    FaultKind.INVALID_UNICODE,
                    f"invalid character '{char}' in unicode escape",
                    context=char,
                )
            code_point = code_point * 16 + int(char, 16)
        return code_point

    def _parse_number(self, cursor: ScanCursor) -> JsonNumber:
        start = cursor.offset
        integral = True

        cursor.consume("-")
        if cursor.at_end():
            raise cursor.fault(FaultKind.INVALID_NUMBER, "incomplete number")

        char = cursor.peek()
        if char == "0":
            cursor.advance()
            if cursor.peek() in _DIGITS:
                raise cursor.fault(
                    FaultKind.INVALID_NUMBER,
                    "leading zeros are not allowed",
                    context=cursor.text[start:cursor.offset + 1],
                )
        elif char in _DIGITS:
            self._consume_digits(cursor)
        else:
            raise cursor.fault(FaultKind.INVALID_NUMBER, "expected a digit", context=char)

        if cursor.peek() == ".":
            integral = False
            cursor.advance()
            if not self._at_digit(cursor):
                raise cursor.fault(FaultKind.INVALID_NUMBER, "expected a digit after the decimal point")
            self._consume_digits(cursor)

        if cursor.peek() in ("e", "E"):
            integral = False
            cursor.advance()
            if cursor.peek() in ("+", "-"):
                cursor.advance()
            if not self._at_digit(cursor):
                raise cursor.fault(FaultKind.INVALID_NUMBER, "expected a digit in the exponent")
            self._consume_digits(cursor)

        numeral = cursor.text[start:cursor.offset]
        return JsonNumber(_normalize_number(numeral, integral))

    @staticmethod
    def _at_digit(cursor: ScanCursor) -> bool:
        return not cursor.at_end() and cursor.peek() in _DIGITS

    @staticmethod
    def _consume_digits(cursor: ScanCursor) -> None:
        while not cursor.at_end() and cursor.peek() in _DIGITS:
            cursor.advance()

    @staticmethod
    def _parse_literal(cursor: ScanCursor) -> JsonValue:
        if cursor.consume_literal("true"):
            return JsonBool(True)
        if cursor.consume_literal("false"):
            return JsonBool(False)
        if cursor.consume_literal("null"):
            return JsonNull()
        raise cursor.fault(
            FaultKind.INVALID_LITERAL,
            "expected 'true', 'false' or 'null'",
            context=cursor.word(),
        )


def _normalize_number(numeral: str, integral: bool) -> int | float:
    """Convert an accepted numeral, keeping integral values as ``int``."""
    if integral:
        return int(numeral)
    value = float(numeral)
    if value.is_integer() and _INT_MIN <= value <= _INT_MAX:
        return int(value)
    return value
