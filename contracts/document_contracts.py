"""Contracts for uploaded reference documents and their analyzed profile."""

from pydantic import BaseModel, Field
from typing import List
from datetime import datetime, timezone
from uuid import uuid4


def new_record_id() -> str:
    """Opaque, never-reused record identifier."""
    return uuid4().hex


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SectionExtracted(BaseModel):
    """A section found in an uploaded document, in document order."""
    heading: str = ""
    level: int = Field(default=1, ge=1, description="Heading depth, 1 = top level")
    summary: str = ""


class SuggestedTags(BaseModel):
    """Classification tags suggested by the ingestion agent. Each may be empty."""
    industry: str = ""
    product_type: str = ""
    complexity: str = ""
    structural_type: str = ""


class FormattingPatterns(BaseModel):
    """Writing conventions detected in the document."""
    tone: str = ""
    style: str = ""


class UploadedDocumentProfile(BaseModel):
    """Analyzed profile of a reference document held in the knowledge base.

    Created once per upload (degraded when analysis fails). Only `starred` and
    `custom_tags` change afterwards, through the workspace store.
    """

    model_config = {"frozen": True}

    id: str = Field(default_factory=new_record_id, min_length=1)
    file_name: str
    document_title: str = Field(..., min_length=1, description="Defaults to the filename stem")
    sections: List[SectionExtracted] = Field(default_factory=list)
    suggested_tags: SuggestedTags = Field(default_factory=SuggestedTags)
    kpi_frameworks: List[str] = Field(default_factory=list)
    formatting_patterns: FormattingPatterns = Field(default_factory=FormattingPatterns)
    content_summary: str = ""
    uploaded_at: datetime = Field(default_factory=utc_now)
    starred: bool = False
    custom_tags: List[str] = Field(default_factory=list)
