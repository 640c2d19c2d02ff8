"""Activity log contracts."""

from pydantic import BaseModel, Field
from datetime import datetime
from enum import Enum

from .document_contracts import utc_now


class ActivityKind(str, Enum):
    UPLOAD = "upload"
    GENERATION = "generation"


class ActivityEntry(BaseModel):
    """One line of the newest-first activity log. Never mutated."""

    model_config = {"frozen": True}

    kind: ActivityKind
    title: str
    timestamp: datetime = Field(default_factory=utc_now)
