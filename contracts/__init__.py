"""Pydantic contracts for PRD Studio.

Every record handed to list/detail views or exports is typed through these contracts.
"""

from .document_contracts import (
    new_record_id,
    utc_now,
    SectionExtracted,
    SuggestedTags,
    FormattingPatterns,
    UploadedDocumentProfile,
)

from .prd_contracts import (
    PRDRequest,
    PRDSection,
    PRDMetadata,
    ArtifactFile,
    GeneratedPRD,
)

from .activity_contracts import (
    ActivityKind,
    ActivityEntry,
)

from .agent_output_contracts import (
    DocumentAnalysisOutput,
    PRDGenerationOutput,
)

from .collaborator_contracts import (
    FileValidation,
    UploadOutcome,
)

__all__ = [
    # Helpers
    "new_record_id",
    "utc_now",
    # Documents
    "SectionExtracted",
    "SuggestedTags",
    "FormattingPatterns",
    "UploadedDocumentProfile",
    # PRDs
    "PRDRequest",
    "PRDSection",
    "PRDMetadata",
    "ArtifactFile",
    "GeneratedPRD",
    # Activity
    "ActivityKind",
    "ActivityEntry",
    # Agent outputs
    "DocumentAnalysisOutput",
    "PRDGenerationOutput",
    # Collaborators
    "FileValidation",
    "UploadOutcome",
]
