"""Module-level shorthands over ``JSONHealer`` for str and bytes input."""

from __future__ import annotations

from jsonhealer.healer.pipeline import JSONHealer
from jsonhealer.healer.results import HealingResult
from jsonhealer.models.diagnostic import Diagnostic
from jsonhealer.models.options import HealerOptions


def diagnose(text: str, options: HealerOptions | None = None) -> Diagnostic:
    """Diagnose *text* and attempt a single repair pass."""
    return JSONHealer(options).diagnose(text)


def heal(text: str, options: HealerOptions | None = None) -> Diagnostic:
    return JSONHealer(options).heal(text)


def is_valid(text: str) -> bool:
    """Parse only; no suggestions or repair are computed."""
    return JSONHealer().is_valid(text)


def quick_repair(text: str, options: HealerOptions | None = None) -> str | None:
    return diagnose(text, options).repaired_text


def quick_fix(text: str) -> str | None:
    """Repair with every category enabled and at most five edits."""
    return JSONHealer(HealerOptions.quick_fix()).heal(text).repaired_text


def process(text: str, options: HealerOptions | None = None) -> HealingResult:
    return JSONHealer(options).process(text)


# -- bytes input -------------------------------------------------------------


def _decode(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def diagnose_bytes(data: bytes, options: HealerOptions | None = None) -> Diagnostic | None:
    """Diagnose a UTF-8 buffer; ``None`` when *data* is not valid UTF-8."""
    text = _decode(data)
    if text is None:
        return None
    return diagnose(text, options)


def heal_bytes(data: bytes, options: HealerOptions | None = None) -> Diagnostic | None:
    text = _decode(data)
    if text is None:
        return None
    return heal(text, options)


def is_valid_bytes(data: bytes) -> bool:
    text = _decode(data)
    return text is not None and is_valid(text)
