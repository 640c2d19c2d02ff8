"""Tests for structured-data and text recovery from agent call results."""

import pytest

from parsing.extractor import (
    NOT_FOUND,
    Recovered,
    call_error,
    call_succeeded,
    extract_artifacts,
    extract_data,
    extract_text,
    is_failure_envelope,
    recover_data,
)


def _result(result=None, message=None, raw=None, **extra):
    value = {"success": True, "response": {"result": result, "message": message}}
    if raw is not None:
        value["raw_response"] = raw
    value.update(extra)
    return value


class TestRecoveryStages:
    """Each stage is tried in order; the first usable mapping wins."""

    def test_structured_result_returned_as_is(self):
        record = {"prd_title": "Widget Tracker", "prd_markdown": "# Widget Tracker"}
        extraction = recover_data(_result(result=record))
        assert isinstance(extraction, Recovered)
        assert extraction.stage == "structured_result"
        assert extraction.record is record

    def test_string_result_parsed(self):
        extraction = recover_data(_result(result='{"document_title": "Roadmap"}'))
        assert extraction.stage == "string_result"
        assert extraction.record == {"document_title": "Roadmap"}

    def test_fenced_string_result_parsed(self):
        result = _result(result='Sure!\n```json\n{"prd_title": "T"}\n```')
        assert extract_data(result) == {"prd_title": "T"}

    def test_unknown_mapping_result_recovered_by_whole_response(self):
        extraction = recover_data(_result(result={"foo": 1}))
        assert extraction.stage == "whole_response"
        assert extraction.record == {"foo": 1}

    def test_whole_response_without_wrapper_keys(self):
        result = {"success": True, "response": {"prd_title": "T", "prd_markdown": "# T"}}
        extraction = recover_data(result)
        assert extraction.stage == "whole_response"
        assert extraction.record == {"prd_title": "T", "prd_markdown": "# T"}

    def test_raw_response_stage(self):
        result = _result(result="Analysis complete.", raw='{"document_title": "Spec"}')
        extraction = recover_data(result)
        assert extraction.stage == "raw_response"
        assert extraction.record == {"document_title": "Spec"}

    def test_message_stage(self):
        result = _result(result="", message='```json\n{"prd_title": "From message"}\n```')
        extraction = recover_data(result)
        assert extraction.stage == "message"
        assert extraction.record == {"prd_title": "From message"}


class TestFailureEnvelopes:
    """Parsed {"success": false, "data": null} is never treated as data."""

    def test_envelope_detection(self):
        assert is_failure_envelope({"success": False, "data": None}) is True
        assert is_failure_envelope({"success": False}) is False
        assert is_failure_envelope({"success": False, "data": {}}) is False
        assert is_failure_envelope({"success": True, "data": None}) is False

    def test_envelope_in_result_rejected(self):
        result = _result(result='{"success": false, "data": null}')
        assert recover_data(result) is NOT_FOUND
        assert extract_data(result) is None

    def test_envelope_in_raw_response_rejected(self):
        result = _result(result="", raw='Error: {"success": false, "data": null}')
        assert extract_data(result) is None

    def test_envelope_skipped_for_later_stage(self):
        result = _result(
            result='{"success": false, "data": null}',
            message='{"prd_title": "Recovered later"}',
        )
        assert extract_data(result) == {"prd_title": "Recovered later"}


class TestEmptyShapes:
    """Absent or malformed results give None / '' instead of raising."""

    @pytest.mark.parametrize("result", [
        None,
        {},
        {"success": True},
        {"success": True, "response": None},
        {"success": True, "response": {"result": None, "message": None}},
        {"success": True, "response": {"result": "   ", "message": ""}},
        "not a mapping",
    ])
    def test_nothing_recoverable(self, result):
        assert extract_data(result) is None
        assert extract_text(result) == ""

    def test_empty_mapping_is_not_data(self):
        assert extract_data(_result(result="{}")) is None

    def test_array_is_not_data(self):
        assert extract_data(_result(result="[1, 2, 3]")) is None

    def test_not_found_repr(self):
        assert repr(NOT_FOUND) == "NOT_FOUND"


class TestExtractText:
    """First non-blank text field in fixed order."""

    def test_result_string_wins(self):
        assert extract_text(_result(result="# PRD", message="other", raw="raw")) == "# PRD"

    def test_message_before_nested_fields(self):
        assert extract_text(_result(result={"text": "nested"}, message="msg")) == "msg"

    def test_nested_text_fields(self):
        assert extract_text(_result(result={"content": "body"})) == "body"
        assert extract_text(_result(result={"prd_markdown": "# md"})) == "# md"

    def test_raw_response_last(self):
        assert extract_text(_result(result="  ", raw="raw text")) == "raw text"

    def test_text_is_not_json_parsed(self):
        assert extract_text(_result(result='{"a": 1}')) == '{"a": 1}'


class TestCallHelpers:
    """Success flag, error text and artifacts."""

    def test_only_literal_true_succeeds(self):
        assert call_succeeded({"success": True}) is True
        assert call_succeeded({"success": "true"}) is False
        assert call_succeeded({"success": 1}) is False
        assert call_succeeded({}) is False
        assert call_succeeded(None) is False

    def test_call_error(self):
        assert call_error({"success": False, "error": "Rate limited"}) == "Rate limited"
        assert call_error({"success": False, "error": 500}) == ""
        assert call_error(None) == ""

    def test_extract_artifacts_skips_malformed(self):
        result = _result(module_outputs={"artifact_files": [
            {"file_url": "https://files.example.com/prd.pdf", "name": "prd.pdf"},
            {"name": "missing url"},
            "not a mapping",
            {"file_url": 12},
        ]})
        assert extract_artifacts(result) == [{"file_url": "https://files.example.com/prd.pdf", "name": "prd.pdf"}]

    def test_extract_artifacts_absent(self):
        assert extract_artifacts(_result()) == []
        assert extract_artifacts(_result(module_outputs={"artifact_files": "nope"})) == []
