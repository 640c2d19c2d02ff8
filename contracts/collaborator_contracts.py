"""Results returned by the upload/validation and knowledge-base collaborators."""

from pydantic import BaseModel
from typing import Optional


class FileValidation(BaseModel):
    """Outcome of checking a candidate file before any network call."""
    valid: bool
    error: Optional[str] = None


class UploadOutcome(BaseModel):
    """Outcome of uploading a file into the knowledge base."""
    success: bool
    error: Optional[str] = None
    document_id: Optional[str] = None
