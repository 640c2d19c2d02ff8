"""Output shapes requested from the ingestion and generation agents.

These models only describe the JSON the agents are asked to emit (their JSON
schema is embedded in the system prompt). Agent replies are never validated
against them; parsing.extractor and synthesis read replies defensively.
"""

from pydantic import BaseModel, Field
from typing import List

from .document_contracts import SectionExtracted, SuggestedTags, FormattingPatterns
from .prd_contracts import PRDSection, PRDMetadata


class DocumentAnalysisOutput(BaseModel):
    """What the document ingestion agent should return for one uploaded file."""
    document_title: str = Field(..., description="Title of the analyzed document")
    sections_extracted: List[SectionExtracted] = Field(default_factory=list)
    suggested_tags: SuggestedTags = Field(default_factory=SuggestedTags)
    kpi_frameworks: List[str] = Field(default_factory=list, description="KPI frameworks named in the document")
    formatting_patterns: FormattingPatterns = Field(default_factory=FormattingPatterns)
    content_summary: str = Field(default="", description="Two to three sentence summary")


class PRDGenerationOutput(BaseModel):
    """What the PRD generation agent should return."""
    prd_title: str
    prd_markdown: str = Field(..., description="Complete PRD in markdown, # title and ## sections")
    industry: str = ""
    product_type: str = ""
    detail_level: str = ""
    sections: List[PRDSection] = Field(default_factory=list)
    metadata: PRDMetadata = Field(default_factory=PRDMetadata)
