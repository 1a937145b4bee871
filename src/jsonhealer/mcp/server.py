"""FastMCP server exposing the JSON Healer pipeline as MCP tools.

Run via::

    jsonhealer-mcp                       # reads .env (default: stdio)
    MCP_TRANSPORT=http jsonhealer-mcp    # streamable HTTP on port 9000
    MCP_TRANSPORT=sse  jsonhealer-mcp    # legacy SSE on port 9000

Settings are loaded from environment variables and ``.env`` file.
"""

from __future__ import annotations

import json
import logging

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from jsonhealer import __version__
from jsonhealer.healer.pipeline import JSONHealer
from jsonhealer.healer.results import Critical, Healed, Healthy
from jsonhealer.limits import DocumentTooLargeError, check_document_size
from jsonhealer.models.diagnostic import Diagnostic
from jsonhealer.models.options import HealerOptions, UnknownPresetError
from jsonhealer.parser.scanner import TolerantParser
from jsonhealer.settings import Settings

# ---------------------------------------------------------------------------
# Server + shared state
# ---------------------------------------------------------------------------

logger = logging.getLogger("jsonhealer.mcp")

mcp = FastMCP("JSON Healer")
_settings: Settings | None = None


def _get_settings() -> Settings:
    global _settings  # noqa: PLW0603
    if _settings is None:
        _settings = Settings()
    return _settings


def _healer(preset: str | None) -> JSONHealer:
    settings = _get_settings()
    try:
        options = HealerOptions.preset(preset or settings.default_preset)
    except UnknownPresetError as exc:
        raise ToolError(exc.args[0]) from exc
    return JSONHealer(options, max_depth=settings.max_nesting_depth)


def _check_size(text: str) -> None:
    try:
        check_document_size(text, _get_settings().max_document_size)
    except DocumentTooLargeError as exc:
        logger.warning("rejected document: %s", exc)
        raise ToolError(str(exc)) from exc


def _format_report(diagnostic: Diagnostic) -> str:
    parts = [
        f"valid: {diagnostic.is_valid}",
        f"health: {diagnostic.health_status}",
    ]
    if diagnostic.faults:
        parts.append("faults:")
        parts.extend(f"  - [{f.kind}] {f.describe()}" for f in diagnostic.faults)
    if diagnostic.suggestions:
        parts.append("suggestions:")
        parts.extend(
            f"  - [{s.kind}] {s.explanation} (confidence {s.confidence:.2f}, "
            f"line {s.position.line}, column {s.position.column})"
            for s in diagnostic.suggestions
        )
    if diagnostic.repair_summary:
        parts.append(f"repair: {diagnostic.repair_summary}")
    if diagnostic.repaired_text is not None:
        parts.append("repaired text:")
        parts.append(diagnostic.repaired_text)
    return "\n".join(parts)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


@mcp.tool
def diagnose_json(text: str, preset: str | None = None) -> str:
    """Diagnose text that is meant to be JSON.

    Reports validity, health, the positioned fault, ranked repair
    suggestions and, when one repair pass succeeds, the repaired text.

    Args:
        text: The JSON-like text to inspect.
        preset: Option preset (default, conservative, aggressive, quick_fix).
    """
    logger.info("diagnose_json called (length=%d)", len(text))
    _check_size(text)
    return _format_report(_healer(preset).diagnose(text))


@mcp.tool
def repair_json(text: str, preset: str | None = None) -> str:
    """Repair JSON-like text and return only the valid JSON.

    Raises an error listing the faults when the text cannot be repaired in
    one pass.

    Args:
        text: The JSON-like text to repair.
        preset: Option preset (default, conservative, aggressive, quick_fix).
    """
    logger.info("repair_json called (length=%d)", len(text))
    _check_size(text)
    match _healer(preset).process(text):
        case Healthy(text=valid):
            return valid
        case Healed(repaired=repaired):
            return repaired
        case Critical(errors=errors):
            details = "\n".join(f"- {f.describe()}" for f in errors)
            raise ToolError(f"Could not repair the document:\n{details}")


@mcp.tool
def validate_json(text: str) -> str:
    """Check whether text is valid JSON without attempting repairs.

    Args:
        text: The text to validate.
    """
    logger.info("validate_json called (length=%d)", len(text))
    _check_size(text)
    faults = TolerantParser(max_depth=_get_settings().max_nesting_depth).scan(text)
    if not faults:
        return "Valid JSON."
    return "Invalid JSON:\n" + "\n".join(f"- {f.describe()}" for f in faults)


@mcp.tool
def list_presets() -> str:
    """List the repair option presets as JSON."""
    presets = {
        name: HealerOptions.preset(name).model_dump() for name in HealerOptions.preset_names()
    }
    return json.dumps(presets, indent=2)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Run the MCP server using settings from environment / .env file."""
    settings = _get_settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger.info(
        "JSON Healer MCP Server v%s starting (transport=%s)",
        __version__,
        settings.mcp_transport,
    )

    if settings.mcp_transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.run(
            transport=settings.mcp_transport,
            host=settings.mcp_server_host,
            port=settings.mcp_server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
