"""Knowledge-base collaborator: RAGFlow client and upload validation."""

from .rag_client import KnowledgeBaseClient
from .validation import validate_file

__all__ = ["KnowledgeBaseClient", "validate_file"]
