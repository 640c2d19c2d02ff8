"""Resilient JSON parsing for LLM/agent output.

`parse_llm_json` never raises. Anything it cannot turn into a value comes back
as a `ParseFailure`, which callers test with `is_parse_failure` instead of
catching exceptions.

Handles:
- Plain JSON text
- Markdown code fences (```json ... ```)
- JSON embedded in prose (first balanced {...} or [...] span)
- Minor syntax damage (trailing commas, single quotes, missing closers) via json_repair
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Optional

from json_repair import repair_json


_FENCE_RE = re.compile(r"```(?:json|JSON)?[ \t]*\n?(.*?)```", re.DOTALL)

_CLOSERS = {"{": "}", "[": "]"}


@dataclass(frozen=True)
class ParseFailure:
    """Sentinel for 'no usable value'. Never equal to a legitimate parsed value."""
    error: str
    raw: Optional[str] = None


def is_parse_failure(value: Any) -> bool:
    return isinstance(value, ParseFailure)


def _strip_fences(text: str) -> str:
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text


def _first_balanced_span(text: str) -> Optional[str]:
    """Return the first balanced {...} or [...] span, or the unterminated tail.

    Brackets inside JSON strings are ignored. If the first opener never closes,
    everything from it to the end is returned so json_repair can close it.
    """
    start = None
    for i, ch in enumerate(text):
        if ch in _CLOSERS:
            start = i
            break
    if start is None:
        return None

    stack = []
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
            continue
        if ch == '"':
            in_string = True
        elif ch in _CLOSERS:
            stack.append(_CLOSERS[ch])
        elif stack and ch == stack[-1]:
            stack.pop()
            if not stack:
                return text[start:i + 1]
    return text[start:]


def _loads(candidate: str) -> Any:
    try:
        return json.loads(candidate)
    except (json.JSONDecodeError, ValueError):
        return ParseFailure("invalid JSON", raw=candidate)


def parse_llm_json(text: Any) -> Any:
    """Coerce text that is expected to contain JSON into a value.

    Args:
        text: Raw agent output. Already-decoded dicts/lists pass through unchanged.

    Returns:
        The parsed value, or a ParseFailure.
    """
    if isinstance(text, (dict, list)):
        return text
    if text is None:
        return ParseFailure("empty input")
    if not isinstance(text, str):
        return ParseFailure(f"unsupported input type: {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        return ParseFailure("empty input", raw=text)

    value = _loads(stripped)
    if not is_parse_failure(value):
        return value

    unfenced = _strip_fences(stripped)
    if unfenced != stripped:
        value = _loads(unfenced)
        if not is_parse_failure(value):
            return value

    span = _first_balanced_span(unfenced)
    if span is None:
        return ParseFailure("no JSON object or array found", raw=text)

    value = _loads(span)
    if not is_parse_failure(value):
        return value

    try:
        repaired = repair_json(span, return_objects=True)
    except Exception as e:  # json_repair is best-effort; this function must not raise
        return ParseFailure(f"repair failed: {e}", raw=text)
    if repaired in ("", None):
        return ParseFailure("unrepairable JSON", raw=text)
    return repaired
