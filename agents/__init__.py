"""Agent-call collaborator for PRD Studio.

Two agents: document ingestion (analyzes uploads) and PRD generation.
"""

from .agent_client import AgentClient, AgentSpec, default_agents
from .prompts import (
    DOCUMENT_INGESTION_PROMPT,
    PRD_GENERATION_PROMPT,
    build_analysis_prompt,
    build_generation_prompt,
)

__all__ = [
    "AgentClient",
    "AgentSpec",
    "default_agents",
    "DOCUMENT_INGESTION_PROMPT",
    "PRD_GENERATION_PROMPT",
    "build_analysis_prompt",
    "build_generation_prompt",
]
