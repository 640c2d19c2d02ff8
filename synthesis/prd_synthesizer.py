"""Build a GeneratedPRD from a PRD generation agent result.

Two mutually exclusive paths:
- structured: extract_data recovered a record carrying prd_title, prd_markdown
  or sections; known keys are mapped, everything else defaults.
- unstructured: no such record, but the agent returned enough markdown; title,
  sections and word count are inferred from the text.
If neither applies, ExtractionError is raised and no record exists.
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from contracts import (
    ArtifactFile,
    GeneratedPRD,
    PRDMetadata,
    PRDRequest,
    PRDSection,
    new_record_id,
    utc_now,
)
from errors import AgentCallError, ExtractionError
from parsing import extract_data, extract_text, extract_artifacts, call_succeeded, call_error
from synthesis.markdown_inference import slugify_anchor, infer_title, infer_sections, count_words
from config import settings


DEFAULT_PRD_TITLE = "Untitled PRD"
GENERATION_FAILED_MESSAGE = "Failed to generate PRD"
PARSE_FAILED_MESSAGE = "Failed to parse PRD response. Please try again."


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return max(0, int(value))


def _is_structured(record: Optional[Dict[str, Any]]) -> bool:
    if not record:
        return False
    sections = record.get("sections")
    return bool(
        _text(record.get("prd_title"))
        or _text(record.get("prd_markdown"))
        or (isinstance(sections, list) and sections)
    )


def _sections(value: Any) -> List[PRDSection]:
    if not isinstance(value, list):
        return []
    sections = []
    for item in value:
        if isinstance(item, str):
            title, anchor = item.strip(), ""
        elif isinstance(item, Mapping):
            title, anchor = _text(item.get("title")), _text(item.get("anchor"))
        else:
            continue
        if title:
            sections.append(PRDSection(title=title, anchor=anchor or slugify_anchor(title)))
    return sections


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [item.strip() for item in value if isinstance(item, str) and item.strip()]


def _artifacts(agent_result: Any) -> List[ArtifactFile]:
    return [
        ArtifactFile(
            file_url=item["file_url"],
            name=item.get("name") if isinstance(item.get("name"), str) else None,
            format_type=item.get("format_type") if isinstance(item.get("format_type"), str) else None,
        )
        for item in extract_artifacts(agent_result)
    ]


def _from_record(request: PRDRequest, record: Dict[str, Any], fallback_text: str, base: Dict[str, Any]) -> GeneratedPRD:
    metadata = record.get("metadata")
    if not isinstance(metadata, Mapping):
        metadata = {}
    return GeneratedPRD(
        title=_text(record.get("prd_title")) or request.product_name.strip() or DEFAULT_PRD_TITLE,
        industry=_text(record.get("industry")) or request.industry,
        product_type=_text(record.get("product_type")) or request.product_type,
        detail_level=_text(record.get("detail_level")) or request.detail_level,
        markdown_body=_text(record.get("prd_markdown")) or fallback_text,
        sections=_sections(record.get("sections")),
        metadata=PRDMetadata(
            word_count=_count(metadata.get("word_count")),
            emphasis_areas=_strings(metadata.get("emphasis_areas")),
            reference_documents_used=_count(metadata.get("reference_documents_used")),
        ),
        **base,
    )


def _from_text(request: PRDRequest, text: str, base: Dict[str, Any]) -> GeneratedPRD:
    return GeneratedPRD(
        title=infer_title(text) or request.product_name.strip() or DEFAULT_PRD_TITLE,
        industry=request.industry,
        product_type=request.product_type,
        detail_level=request.detail_level,
        markdown_body=text,
        sections=infer_sections(text),
        metadata=PRDMetadata(
            word_count=count_words(text),
            emphasis_areas=list(request.emphasis_areas),
            reference_documents_used=0,
        ),
        **base,
    )


def synthesize_prd(
    request: PRDRequest,
    agent_result: Any,
    min_text_chars: Optional[int] = None,
    record_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> GeneratedPRD:
    """Map a generation agent result onto a GeneratedPRD.

    Raises:
        AgentCallError: The call itself reported failure (message is the upstream error).
        ExtractionError: The call succeeded but nothing usable came back.
    """
    if not call_succeeded(agent_result):
        raise AgentCallError(call_error(agent_result) or GENERATION_FAILED_MESSAGE)

    if min_text_chars is None:
        min_text_chars = settings.min_fallback_text_chars
    base = {
        "id": record_id or new_record_id(),
        "artifacts": _artifacts(agent_result),
        "created_at": now or utc_now(),
    }

    record = extract_data(agent_result)
    fallback_text = extract_text(agent_result)

    if _is_structured(record):
        return _from_record(request, record, fallback_text, base)
    if len(fallback_text.strip()) > min_text_chars:
        return _from_text(request, fallback_text, base)
    raise ExtractionError(PARSE_FAILED_MESSAGE)
