"""Tests for the JSONHealer pipeline and its tri-state results."""

from __future__ import annotations

import json

import pytest

from jsonhealer.healer.pipeline import JSONHealer
from jsonhealer.healer.results import Critical, Healed, Healthy, result_from_diagnostic
from jsonhealer.models.diagnostic import HealthStatus
from jsonhealer.models.faults import FaultKind
from jsonhealer.models.options import HealerOptions
from tests.conftest import (
    BLOCK_COMMENT_OBJECT,
    LINE_COMMENT_OBJECT,
    MULTILINE_BLOCK_COMMENT_OBJECT,
    SINGLE_QUOTED_OBJECT,
    TRAILING_COMMA_ARRAY,
    TRAILING_COMMA_OBJECT,
    UNCLOSED_ARRAY_OBJECT,
    UNQUOTED_KEY_OBJECT,
    VALID_DOCUMENT,
)

REPAIRABLE = [
    TRAILING_COMMA_OBJECT,
    TRAILING_COMMA_ARRAY,
    SINGLE_QUOTED_OBJECT,
    UNQUOTED_KEY_OBJECT,
    LINE_COMMENT_OBJECT,
    BLOCK_COMMENT_OBJECT,
    '{"a": 1 "b": 2}',
]


class TestValidInput:
    def test_valid_document(self, healer: JSONHealer) -> None:
        diagnostic = healer.diagnose(VALID_DOCUMENT)
        assert diagnostic.is_valid
        assert diagnostic.health_status == HealthStatus.HEALTHY
        assert diagnostic.faults == []
        assert diagnostic.suggestions == []
        assert diagnostic.repaired_text is None
        assert diagnostic.repair_summary is None

    def test_is_valid(self, healer: JSONHealer) -> None:
        assert healer.is_valid(VALID_DOCUMENT)
        assert not healer.is_valid(TRAILING_COMMA_OBJECT)

    def test_quick_repair_of_valid_text(self, healer: JSONHealer) -> None:
        assert healer.quick_repair(VALID_DOCUMENT) is None


class TestRepairs:
    def test_trailing_comma_object(self, healer: JSONHealer) -> None:
        diagnostic = healer.diagnose(TRAILING_COMMA_OBJECT)
        assert not diagnostic.is_valid
        assert diagnostic.health_status == HealthStatus.WARNING
        [fault] = diagnostic.faults
        assert fault.kind == FaultKind.TRAILING_COMMA
        assert (fault.position.line, fault.position.column) == (3, 14)
        assert diagnostic.repaired_text == '{\n    "name": "Test",\n    "age": 25\n}'
        assert diagnostic.repair_summary is not None
        assert "removed trailing comma" in diagnostic.repair_summary

    def test_trailing_comma_array(self, healer: JSONHealer) -> None:
        repaired = healer.quick_repair(TRAILING_COMMA_ARRAY)
        assert repaired is not None
        assert json.loads(repaired) == ["apple", "banana", "orange"]

    def test_single_quotes(self, healer: JSONHealer) -> None:
        assert healer.quick_repair(SINGLE_QUOTED_OBJECT) == '{\n    "name": "John"\n}'

    def test_unquoted_key(self, healer: JSONHealer) -> None:
        assert healer.quick_repair(UNQUOTED_KEY_OBJECT) == '{\n    "name": "John"\n}'

    def test_line_comment(self, healer: JSONHealer) -> None:
        repaired = healer.quick_repair(LINE_COMMENT_OBJECT)
        assert repaired == '{\n    "name": "John",\n    "age": 30\n}'

    def test_block_comment(self, healer: JSONHealer) -> None:
        repaired = healer.quick_repair(BLOCK_COMMENT_OBJECT)
        assert repaired is not None
        assert json.loads(repaired) == {"name": "John", "age": 30}

    def test_comment_after_top_level_value(self, healer: JSONHealer) -> None:
        assert healer.quick_repair('{"a": 1} // note') == '{"a": 1}'

    def test_missing_comma(self, healer: JSONHealer) -> None:
        assert healer.quick_repair('{"a": 1 "b": 2}') == '{"a": 1, "b": 2}'

    @pytest.mark.parametrize("text", REPAIRABLE)
    def test_repaired_text_is_valid_and_stable(self, healer: JSONHealer, text: str) -> None:
        repaired = healer.quick_repair(text)
        assert repaired is not None
        again = healer.diagnose(repaired)
        assert again.is_valid
        assert again.repaired_text is None
        json.loads(repaired)

    @pytest.mark.parametrize("text", REPAIRABLE)
    def test_suggestion_confidence_in_range(self, healer: JSONHealer, text: str) -> None:
        for suggestion in healer.diagnose(text).suggestions:
            assert 0.0 <= suggestion.confidence <= 1.0


class TestUnrepairable:
    def test_unclosed_array(self, healer: JSONHealer) -> None:
        diagnostic = healer.diagnose(UNCLOSED_ARRAY_OBJECT)
        assert diagnostic.health_status == HealthStatus.FATAL
        assert diagnostic.faults[0].kind == FaultKind.UNMATCHED_BRACKETS
        assert diagnostic.suggestions == []
        assert diagnostic.repaired_text is None

    def test_empty_input(self, healer: JSONHealer) -> None:
        diagnostic = healer.diagnose("")
        assert diagnostic.faults[0].kind == FaultKind.UNEXPECTED_END
        assert diagnostic.health_status == HealthStatus.FATAL

    def test_unterminated_string_is_suggested_but_not_repaired(self, healer: JSONHealer) -> None:
        diagnostic = healer.diagnose('{"a": "b}')
        assert diagnostic.faults[0].kind == FaultKind.MISSING_QUOTES
        [suggestion] = diagnostic.suggestions
        assert suggestion.confidence == 0.7
        assert diagnostic.high_confidence_fixes == []
        assert diagnostic.repaired_text is None

    def test_multiline_block_comment(self, healer: JSONHealer) -> None:
        diagnostic = healer.diagnose(MULTILINE_BLOCK_COMMENT_OBJECT)
        assert diagnostic.faults[0].kind == FaultKind.COMMENT_FOUND
        assert diagnostic.suggestions == []
        assert diagnostic.repaired_text is None

    def test_max_depth(self) -> None:
        healer = JSONHealer(max_depth=4)
        diagnostic = healer.diagnose("[[[[[1]]]]]")
        assert diagnostic.faults[0].kind == FaultKind.UNMATCHED_BRACKETS


class TestOptionPresets:
    def test_conservative_leaves_unquoted_keys(self, conservative_healer: JSONHealer) -> None:
        diagnostic = conservative_healer.diagnose(UNQUOTED_KEY_OBJECT)
        assert diagnostic.faults[0].kind == FaultKind.UNQUOTED_KEY
        assert diagnostic.suggestions == []
        assert diagnostic.repaired_text is None

    @pytest.mark.parametrize("text", REPAIRABLE)
    def test_conservative_never_touches_keys_or_comments(
        self, conservative_healer: JSONHealer, text: str
    ) -> None:
        kinds = {s.kind for s in conservative_healer.diagnose(text).suggestions}
        assert FaultKind.UNQUOTED_KEY not in kinds
        assert FaultKind.COMMENT_FOUND not in kinds
        assert FaultKind.SINGLE_QUOTES not in kinds

    def test_conservative_still_fixes_trailing_commas(
        self, conservative_healer: JSONHealer
    ) -> None:
        assert conservative_healer.quick_repair(TRAILING_COMMA_ARRAY) is not None

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            (UNQUOTED_KEY_OBJECT, FaultKind.UNQUOTED_KEY),
            (SINGLE_QUOTED_OBJECT, FaultKind.SINGLE_QUOTES),
            (LINE_COMMENT_OBJECT, FaultKind.COMMENT_FOUND),
            (TRAILING_COMMA_OBJECT, FaultKind.TRAILING_COMMA),
        ],
    )
    def test_aggressive_suggests_every_eligible_kind(
        self, aggressive_healer: JSONHealer, text: str, kind: FaultKind
    ) -> None:
        assert [s.kind for s in aggressive_healer.diagnose(text).suggestions] == [kind]

    def test_zero_attempts_never_repairs(self) -> None:
        healer = JSONHealer(HealerOptions(max_repair_attempts=0))
        diagnostic = healer.diagnose(TRAILING_COMMA_OBJECT)
        assert diagnostic.suggestions
        assert diagnostic.repaired_text is None
        assert diagnostic.repair_summary is None

    def test_options_property(self, aggressive_healer: JSONHealer) -> None:
        assert aggressive_healer.options == HealerOptions.aggressive()


class TestProcess:
    def test_healthy(self, healer: JSONHealer) -> None:
        result = healer.process(VALID_DOCUMENT)
        assert isinstance(result, Healthy)
        assert result.is_successful
        assert result.final_text == VALID_DOCUMENT
        assert result.faults == []

    def test_healed(self, healer: JSONHealer) -> None:
        result = healer.process(TRAILING_COMMA_OBJECT)
        assert isinstance(result, Healed)
        assert result.original == TRAILING_COMMA_OBJECT
        assert result.final_text == result.repaired
        assert result.summary.startswith("Repaired 1 issue(s):")

    def test_critical(self, healer: JSONHealer) -> None:
        result = healer.process(UNCLOSED_ARRAY_OBJECT)
        assert isinstance(result, Critical)
        assert not result.is_successful
        assert result.final_text is None
        assert result.faults[0].kind == FaultKind.UNMATCHED_BRACKETS

    def test_match_statement(self, healer: JSONHealer) -> None:
        match healer.process("[1,]"):
            case Healed(repaired=repaired):
                assert repaired == "[1]"
            case _:
                pytest.fail("expected a healed result")

    def test_result_from_diagnostic(self, healer: JSONHealer) -> None:
        assert isinstance(result_from_diagnostic(healer.diagnose("{}")), Healthy)

    def test_heal_is_diagnose(self, healer: JSONHealer) -> None:
        assert healer.heal(TRAILING_COMMA_OBJECT) == healer.diagnose(TRAILING_COMMA_OBJECT)
