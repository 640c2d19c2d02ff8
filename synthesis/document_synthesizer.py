"""Build an UploadedDocumentProfile from an ingestion agent result.

A profile is always produced. When the agent call fails, every agent-derived
field keeps its empty default and the title falls back to the filename stem;
the failure is reported through `DocumentSynthesis.analysis_ok`, never stored
on the profile itself.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from contracts import (
    UploadedDocumentProfile,
    SectionExtracted,
    SuggestedTags,
    FormattingPatterns,
    new_record_id,
    utc_now,
)
from parsing import extract_data, extract_text, call_succeeded
from config import settings


_EXTENSION_RE = re.compile(r"\.[^/.]+$")


@dataclass(frozen=True)
class DocumentSynthesis:
    """Profile plus the analysis status shown to the user."""
    profile: UploadedDocumentProfile
    analysis_ok: bool

    @property
    def status_message(self) -> str:
        if self.analysis_ok:
            return f'Successfully uploaded and analyzed "{self.profile.document_title}"'
        return "Document uploaded but analysis failed. Metadata may be incomplete."


def title_from_file_name(file_name: str) -> str:
    """Filename without its last extension; the full name if that leaves nothing."""
    stem = _EXTENSION_RE.sub("", file_name)
    return stem or file_name or "Untitled document"


def _text(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def _sections(value: Any) -> List[SectionExtracted]:
    if not isinstance(value, list):
        return []
    sections = []
    for item in value:
        if not isinstance(item, Mapping):
            continue
        level = item.get("level")
        if isinstance(level, bool) or not isinstance(level, (int, float)):
            level = 1
        sections.append(SectionExtracted(
            heading=_text(item.get("heading")),
            level=max(1, int(level)),
            summary=_text(item.get("summary")),
        ))
    return sections


def _tags(value: Any) -> SuggestedTags:
    if not isinstance(value, Mapping):
        return SuggestedTags()
    return SuggestedTags(
        industry=_text(value.get("industry")),
        product_type=_text(value.get("product_type")),
        complexity=_text(value.get("complexity")),
        structural_type=_text(value.get("structural_type")),
    )


def _patterns(value: Any) -> FormattingPatterns:
    if not isinstance(value, Mapping):
        return FormattingPatterns()
    return FormattingPatterns(tone=_text(value.get("tone")), style=_text(value.get("style")))


def _unique_strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    seen: Dict[str, None] = {}
    for item in value:
        text = _text(item)
        if text:
            seen.setdefault(text, None)
    return list(seen)


def synthesize_document_profile(
    file_name: str,
    agent_result: Any,
    summary_limit: Optional[int] = None,
    record_id: Optional[str] = None,
    now: Optional[datetime] = None,
) -> DocumentSynthesis:
    """Map an ingestion agent result onto a document profile.

    Args:
        file_name: Name of the uploaded file, as supplied.
        agent_result: Raw agent call result mapping (any shape).
        summary_limit: Max characters of fallback text kept as summary.
        record_id: Override the generated id (tests, imports).
        now: Override the upload timestamp.

    Returns:
        DocumentSynthesis with the profile and whether analysis succeeded.
    """
    if summary_limit is None:
        summary_limit = settings.summary_max_chars
    base = {
        "id": record_id or new_record_id(),
        "file_name": file_name,
        "uploaded_at": now or utc_now(),
    }

    if not call_succeeded(agent_result):
        profile = UploadedDocumentProfile(document_title=title_from_file_name(file_name), **base)
        return DocumentSynthesis(profile=profile, analysis_ok=False)

    parsed = extract_data(agent_result) or {}
    summary = _text(parsed.get("content_summary"))
    if not summary:
        summary = extract_text(agent_result)[:summary_limit]

    profile = UploadedDocumentProfile(
        document_title=_text(parsed.get("document_title")) or title_from_file_name(file_name),
        sections=_sections(parsed.get("sections_extracted")),
        suggested_tags=_tags(parsed.get("suggested_tags")),
        kpi_frameworks=_unique_strings(parsed.get("kpi_frameworks")),
        formatting_patterns=_patterns(parsed.get("formatting_patterns")),
        content_summary=summary,
        **base,
    )
    return DocumentSynthesis(profile=profile, analysis_ok=True)
