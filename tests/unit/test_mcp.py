"""Unit tests for MCP server tools: direct function calls, no transport.

FastMCP's ``@mcp.tool`` wraps functions in ``FunctionTool`` objects.  We call
the underlying function via ``.fn`` to test the tool logic directly.
"""

from __future__ import annotations

import json

import pytest
from fastmcp.exceptions import ToolError

import jsonhealer.mcp.server as mcp_mod
from jsonhealer.mcp.server import diagnose_json, list_presets, repair_json, validate_json
from jsonhealer.settings import Settings
from tests.conftest import (
    TRAILING_COMMA_OBJECT,
    UNCLOSED_ARRAY_OBJECT,
    UNQUOTED_KEY_OBJECT,
    VALID_DOCUMENT,
)

# Unwrap FunctionTool → raw functions
_diagnose_json = diagnose_json.fn
_repair_json = repair_json.fn
_validate_json = validate_json.fn
_list_presets = list_presets.fn


@pytest.fixture(autouse=True)
def _fresh_settings() -> None:
    """Give each test default settings, independent of any .env file."""
    mcp_mod._settings = Settings(_env_file=None)


class TestDiagnoseJson:
    def test_valid(self) -> None:
        result = _diagnose_json(VALID_DOCUMENT)
        assert "valid: True" in result
        assert "health: healthy" in result
        assert "faults:" not in result

    def test_trailing_comma(self) -> None:
        result = _diagnose_json(TRAILING_COMMA_OBJECT)
        assert "valid: False" in result
        assert "[trailing_comma]" in result
        assert "confidence 0.95" in result
        assert "repaired text:" in result

    def test_preset(self) -> None:
        result = _diagnose_json(UNQUOTED_KEY_OBJECT, preset="conservative")
        assert "[unquoted_key]" in result
        assert "suggestions:" not in result

    def test_unknown_preset(self) -> None:
        with pytest.raises(ToolError, match="Unknown option preset"):
            _diagnose_json("{}", preset="reckless")

    def test_size_limit(self) -> None:
        mcp_mod._settings = Settings(_env_file=None, max_document_size=10)
        with pytest.raises(ToolError, match="exceeds maximum size"):
            _diagnose_json(VALID_DOCUMENT)


class TestRepairJson:
    def test_valid_is_returned_unchanged(self) -> None:
        assert _repair_json(VALID_DOCUMENT) == VALID_DOCUMENT

    def test_healed(self) -> None:
        assert json.loads(_repair_json(TRAILING_COMMA_OBJECT)) == {"name": "Test", "age": 25}

    def test_critical(self) -> None:
        with pytest.raises(ToolError, match="Could not repair the document"):
            _repair_json(UNCLOSED_ARRAY_OBJECT)


class TestValidateJson:
    def test_valid(self) -> None:
        assert _validate_json("[1, 2]") == "Valid JSON."

    def test_invalid(self) -> None:
        result = _validate_json("[1, 2,]")
        assert result.startswith("Invalid JSON:")
        assert "Trailing comma" in result

    def test_depth_from_settings(self) -> None:
        mcp_mod._settings = Settings(_env_file=None, max_nesting_depth=2)
        assert _validate_json("[[1]]") == "Valid JSON."
        assert _validate_json("[[[1]]]").startswith("Invalid JSON:")


class TestListPresets:
    def test_lists_all(self) -> None:
        presets = json.loads(_list_presets())
        assert set(presets) == {"default", "conservative", "aggressive", "quick_fix"}
        assert presets["conservative"]["fix_unquoted_keys"] is False
        assert presets["aggressive"]["max_repair_attempts"] == 15
