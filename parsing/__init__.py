"""Parsing of semi-trusted agent output."""

from .json_parser import ParseFailure, parse_llm_json, is_parse_failure
from .extractor import (
    SCHEMA_KEYS,
    Recovered,
    NotFound,
    NOT_FOUND,
    recover_data,
    extract_data,
    extract_text,
    extract_artifacts,
    is_failure_envelope,
    call_succeeded,
    call_error,
)

__all__ = [
    "ParseFailure",
    "parse_llm_json",
    "is_parse_failure",
    "SCHEMA_KEYS",
    "Recovered",
    "NotFound",
    "NOT_FOUND",
    "recover_data",
    "extract_data",
    "extract_text",
    "extract_artifacts",
    "is_failure_envelope",
    "call_succeeded",
    "call_error",
]
