"""Contracts for PRD generation requests and generated PRD records."""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime

from .document_contracts import new_record_id, utc_now


class PRDRequest(BaseModel):
    """Parameters of a single PRD generation, as entered by the user."""
    product_name: str
    industry: str
    product_type: str = "B2B"
    detail_level: str = "Standard"
    problem_statement: str = ""
    emphasis_areas: List[str] = Field(default_factory=list)


class PRDSection(BaseModel):
    """Navigable section of a generated PRD."""
    title: str
    anchor: str = Field(default="", description="URL-safe slug derived from title")


class PRDMetadata(BaseModel):
    word_count: int = Field(default=0, ge=0)
    emphasis_areas: List[str] = Field(default_factory=list)
    reference_documents_used: int = Field(default=0, ge=0)


class ArtifactFile(BaseModel):
    """File produced alongside the PRD by the generation agent."""
    file_url: str
    name: Optional[str] = None
    format_type: Optional[str] = None


class GeneratedPRD(BaseModel):
    """A PRD produced by one successful generation call. Immutable."""

    model_config = {"frozen": True}

    id: str = Field(default_factory=new_record_id, min_length=1)
    title: str
    industry: str = ""
    product_type: str = ""
    detail_level: str = ""
    markdown_body: str = Field(default="", description="May be empty; see synthesis.reconstruct_markdown")
    sections: List[PRDSection] = Field(default_factory=list)
    metadata: PRDMetadata = Field(default_factory=PRDMetadata)
    artifacts: List[ArtifactFile] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=utc_now)
