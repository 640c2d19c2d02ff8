"""Configuration settings for PRD Studio."""

from dotenv import load_dotenv

from pydantic_settings import BaseSettings
from pydantic import Field
from typing import List
from pathlib import Path

# Load .env into os.environ so LiteLLM picks up provider keys (OPENAI_API_KEY, ...)
load_dotenv()


class Settings(BaseSettings):
    """Global settings for PRD Studio.

    Settings can be overridden via environment variables with PRD_STUDIO_ prefix.
    Example: PRD_STUDIO_SUMMARY_MAX_CHARS=800
    """

    # Model config
    default_model: str = Field(
        default="gpt-4o-mini",
        description="LiteLLM model string used for agent calls"
    )
    max_tokens_per_agent_call: int = Field(
        default=4096,
        description="Maximum tokens per individual agent call"
    )

    # Agents
    document_ingestion_agent_id: str = Field(
        default="document-ingestion",
        description="Agent that analyzes uploaded reference documents"
    )
    prd_generation_agent_id: str = Field(
        default="prd-generation",
        description="Agent that writes new PRDs"
    )

    # Synthesis thresholds
    summary_max_chars: int = Field(
        default=500,
        ge=0,
        description="Truncation length for the text-fallback document summary"
    )
    min_fallback_text_chars: int = Field(
        default=50,
        ge=0,
        description="Fallback text must be longer than this to become a PRD"
    )

    # Upload validation
    allowed_upload_extensions: List[str] = Field(
        default_factory=lambda: [".pdf", ".docx", ".txt"],
        description="File extensions accepted for knowledge-base upload"
    )
    max_upload_bytes: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum accepted upload size in bytes"
    )

    # Paths
    output_dir: str = Field(
        default="./outputs",
        description="Exported PRD directory"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Root log level for PRD Studio loggers"
    )

    # RAGFlow knowledge base
    knowledge_base_id: str = Field(
        default="",
        description="RAGFlow dataset ID holding the reference documents",
    )
    ragflow_api_url: str = Field(
        default="http://localhost:9380",
        description="RAGFlow API base URL (e.g. http://localhost:9380)",
    )
    ragflow_api_key: str = Field(
        default="",
        description="RAGFlow API key for authentication",
    )
    ragflow_timeout_sec: float = Field(
        default=60.0,
        description="Per-request timeout for RAGFlow calls",
    )

    model_config = {
        "env_prefix": "PRD_STUDIO_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",  # ignore extra env vars (e.g. OPENAI_API_KEY) not in schema
    }

    def get_output_path(self) -> Path:
        """Get output path as Path object."""
        return Path(self.output_dir)


# Option catalogs offered to the generation form
INDUSTRIES: List[str] = [
    "Technology", "Healthcare", "Finance", "E-commerce", "Education",
    "SaaS", "Manufacturing", "Retail", "Other",
]
PRODUCT_TYPES: List[str] = ["B2B", "B2C", "Internal Tool"]
DETAIL_LEVELS: List[str] = ["Lean", "Standard", "Comprehensive"]
EMPHASIS_OPTIONS: List[str] = [
    "KPIs & Metrics", "Risk Analysis", "Technical Scope", "User Stories",
    "Requirements", "Timeline", "Market Analysis",
]


# Create singleton instance
settings = Settings()
