"""Error taxonomy for PRD Studio workflows."""


class PRDStudioError(Exception):
    """Base class for all PRD Studio errors."""


class FileValidationError(PRDStudioError):
    """Candidate file failed type/size checks before any upload."""


class UploadError(PRDStudioError):
    """Knowledge-base upload rejected or returned success=False."""


class AgentCallError(PRDStudioError):
    """Agent call returned success=False; message is the upstream error verbatim."""


class ExtractionError(PRDStudioError):
    """Agent call succeeded but no structured data or usable text was recovered."""


class ExportError(PRDStudioError):
    """Export content could not be built or written."""
