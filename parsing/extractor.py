"""Recover structured data or fallback text from an agent call result.

The agent call result is a loosely typed mapping:
    {success, error?, session_id?, response?: {result?, message?},
     raw_response?, module_outputs?: {artifact_files?: [...]}}
Any field may be absent or of the wrong type, so every access goes through
`_field`.

`recover_data` runs the ordered recovery stages and returns a tagged result
(`Recovered` or `NOT_FOUND`); `extract_data` is the Optional-returning form.
Every parse stage runs the same two filters: drop parse failures, then drop
values that are really upstream failure envelopes ({"success": false, "data": null}).
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from parsing.json_parser import parse_llm_json, is_parse_failure
from logging_config import get_logger

logger = get_logger(__name__)


# Field names the ingestion and generation agents emit. A response.result
# mapping with any of these is already structured and is returned untouched.
SCHEMA_KEYS = frozenset({
    "prd_title", "prd_markdown", "document_title", "sections_extracted",
    "content_summary", "suggested_tags", "kpi_frameworks", "formatting_patterns",
    "industry", "product_type", "detail_level", "sections", "metadata",
})

# Wrapper slots of `response` that have their own recovery stages.
_WRAPPER_KEYS = ("result", "message")


@dataclass(frozen=True)
class Recovered:
    """Structured record recovered by `stage`."""
    record: Dict[str, Any]
    stage: str


class NotFound:
    """No structured data recoverable."""

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()

Extraction = Union[Recovered, NotFound]


def _field(container: Any, key: str) -> Any:
    if isinstance(container, Mapping):
        return container.get(key)
    return None


def is_failure_envelope(value: Any) -> bool:
    """True when a parsed value is an upstream 'reported failure' wrapper."""
    return (
        isinstance(value, Mapping)
        and "success" in value
        and value.get("success") is False
        and "data" in value
        and value.get("data") is None
    )


def _accept(value: Any) -> Optional[Dict[str, Any]]:
    """Shared post-parse filter applied after every parse attempt."""
    if is_parse_failure(value):
        return None
    if not isinstance(value, Mapping) or not value:
        return None
    if is_failure_envelope(value):
        return None
    return dict(value)


def _parse_stage(source: Any) -> Optional[Dict[str, Any]]:
    if source is None:
        return None
    if isinstance(source, str) and not source.strip():
        return None
    return _accept(parse_llm_json(source))


def _structured_result(result: Any) -> Optional[Dict[str, Any]]:
    candidate = _field(_field(result, "response"), "result")
    if isinstance(candidate, Mapping) and SCHEMA_KEYS.intersection(candidate.keys()):
        return candidate
    return None


def _string_result(result: Any) -> Optional[Dict[str, Any]]:
    candidate = _field(_field(result, "response"), "result")
    if isinstance(candidate, str):
        return _parse_stage(candidate)
    return None


def _whole_response(result: Any) -> Optional[Dict[str, Any]]:
    response = _field(result, "response")
    candidate = _field(response, "result")
    if candidate:
        return _parse_stage(candidate)
    if isinstance(response, Mapping):
        rest = {k: v for k, v in response.items() if k not in _WRAPPER_KEYS}
        return _parse_stage(rest)
    return _parse_stage(response)


def _raw_response(result: Any) -> Optional[Dict[str, Any]]:
    raw = _field(result, "raw_response")
    if isinstance(raw, str):
        return _parse_stage(raw)
    return None


def _message(result: Any) -> Optional[Dict[str, Any]]:
    message = _field(_field(result, "response"), "message")
    if isinstance(message, str):
        return _parse_stage(message)
    return None


_STAGES: List[Tuple[str, Callable[[Any], Optional[Dict[str, Any]]]]] = [
    ("structured_result", _structured_result),
    ("string_result", _string_result),
    ("whole_response", _whole_response),
    ("raw_response", _raw_response),
    ("message", _message),
]


def recover_data(result: Any) -> Extraction:
    """Run the recovery stages in order; first success wins."""
    for name, stage in _STAGES:
        record = stage(result)
        if record is not None:
            logger.debug("agent data recovered via %s", name)
            return Recovered(record=record, stage=name)
    return NOT_FOUND


def extract_data(result: Any) -> Optional[Dict[str, Any]]:
    """Structured record from an agent call result, or None."""
    extraction = recover_data(result)
    if isinstance(extraction, Recovered):
        return extraction.record
    return None


def extract_text(result: Any) -> str:
    """First non-empty plain-text/markdown field of the result, or ''.

    No JSON parsing happens here; this is the fallback when structured
    recovery fails but usable prose still exists.
    """
    response = _field(result, "response")
    inner = _field(response, "result")
    candidates = [
        inner,
        _field(response, "message"),
        _field(inner, "text"),
        _field(inner, "message"),
        _field(inner, "content"),
        _field(inner, "prd_markdown"),
        _field(result, "raw_response"),
    ]
    for value in candidates:
        if isinstance(value, str) and value.strip():
            return value
    return ""


def extract_artifacts(result: Any) -> List[Dict[str, Any]]:
    """Artifact file entries from module_outputs, skipping malformed items."""
    files = _field(_field(result, "module_outputs"), "artifact_files")
    if not isinstance(files, list):
        return []
    return [f for f in files if isinstance(f, Mapping) and isinstance(f.get("file_url"), str)]


def call_succeeded(result: Any) -> bool:
    """Only a literal True counts as success."""
    return _field(result, "success") is True


def call_error(result: Any) -> str:
    error = _field(result, "error")
    return error if isinstance(error, str) else ""
