"""Tolerant JSON scanning with line/column fidelity."""

from jsonhealer.parser.cursor import ScanCursor
from jsonhealer.parser.scanner import DEFAULT_MAX_DEPTH, TolerantParser
from jsonhealer.parser.values import (
    JsonArray,
    JsonBool,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    JsonValue,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "JsonArray",
    "JsonBool",
    "JsonNull",
    "JsonNumber",
    "JsonObject",
    "JsonString",
    "JsonValue",
    "ScanCursor",
    "TolerantParser",
]
