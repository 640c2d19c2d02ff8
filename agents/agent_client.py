"""Agent-call collaborator.

`AgentClient.call_agent(prompt, agent_id)` runs the agent's system prompt plus
the user prompt through the configured provider and returns the loosely typed
agent call result mapping the rest of PRD Studio consumes:

    {"success": True, "session_id": ..., "response": {"result": <text>, "message": None},
     "raw_response": <text>, "module_outputs": {"artifact_files": []}}

Transport errors never propagate; they come back as {"success": False, "error": ...}.
"""

import json
import logging
from typing import Any, Dict, Optional, Type

from pydantic import BaseModel

from contracts import DocumentAnalysisOutput, PRDGenerationOutput, new_record_id
from providers import get_provider, LLMProvider
from agents.prompts import DOCUMENT_INGESTION_PROMPT, PRD_GENERATION_PROMPT
from logging_config import get_logger, log_with_context
from config import settings

logger = get_logger(__name__)


class AgentSpec(BaseModel):
    """Static definition of one agent: instructions and requested output shape."""
    agent_id: str
    system_prompt: str
    output_schema: Type[BaseModel]
    use_knowledge_base: bool = False


def default_agents() -> Dict[str, AgentSpec]:
    return {
        settings.document_ingestion_agent_id: AgentSpec(
            agent_id=settings.document_ingestion_agent_id,
            system_prompt=DOCUMENT_INGESTION_PROMPT,
            output_schema=DocumentAnalysisOutput,
            use_knowledge_base=True,
        ),
        settings.prd_generation_agent_id: AgentSpec(
            agent_id=settings.prd_generation_agent_id,
            system_prompt=PRD_GENERATION_PROMPT,
            output_schema=PRDGenerationOutput,
            use_knowledge_base=True,
        ),
    }


class AgentClient:
    """Runs registered agents against an LLM provider.

    Responsibilities:
    - Builds the full system prompt (instructions + knowledge-base passages + output schema)
    - Calls the provider
    - Wraps the completion, or the failure, into an agent call result mapping
    """

    def __init__(
        self,
        provider: Optional[LLMProvider] = None,
        model: Optional[str] = None,
        agents: Optional[Dict[str, AgentSpec]] = None,
        knowledge_base: Optional[Any] = None,
        knowledge_base_id: Optional[str] = None,
        context_top_k: int = 5,
    ):
        """Initialize the client.

        Args:
            provider: Completion provider; defaults to get_provider(model)
            model: Model override passed to get_provider
            agents: Agent registry keyed by agent id; defaults to default_agents()
            knowledge_base: Optional KnowledgeBaseClient used for reference passages
            knowledge_base_id: Dataset searched for passages (defaults to settings)
            context_top_k: Passages pulled per call
        """
        self.llm_provider = provider or get_provider(model)
        self.agents = agents if agents is not None else default_agents()
        self.knowledge_base = knowledge_base
        self.knowledge_base_id = knowledge_base_id or settings.knowledge_base_id
        self.context_top_k = context_top_k

    def _reference_context(self, spec: AgentSpec, prompt: str) -> str:
        if not (spec.use_knowledge_base and self.knowledge_base is not None and self.knowledge_base_id):
            return ""
        try:
            chunks = self.knowledge_base.search(prompt, dataset_id=self.knowledge_base_id, top_k=self.context_top_k)
        except Exception as e:
            logger.warning("knowledge base search failed for %s: %s", spec.agent_id, e)
            return ""
        passages = [c.get("content", "") for c in chunks if c.get("content")]
        return "\n\n---\n\n".join(passages)

    def _build_full_system_prompt(self, spec: AgentSpec, prompt: str) -> str:
        parts = [spec.system_prompt]

        context = self._reference_context(spec, prompt)
        if context:
            parts.append("\n\n# REFERENCE DOCUMENTS\n\n")
            parts.append(context)

        parts.append("\n\n# OUTPUT FORMAT\n")
        parts.append("You MUST respond with valid JSON matching this schema:\n\n")
        parts.append(f"```json\n{json.dumps(spec.output_schema.model_json_schema(), indent=2)}\n```")

        return "".join(parts)

    def call_agent(self, prompt: str, agent_id: str) -> Dict[str, Any]:
        """Call one agent. Never raises; see module docstring for the result shape."""
        spec = self.agents.get(agent_id)
        if spec is None:
            return {"success": False, "error": f"Unknown agent: {agent_id}"}

        self.llm_provider.set_metadata({"agent": agent_id})

        try:
            response = self.llm_provider.complete(
                system_prompt=self._build_full_system_prompt(spec, prompt),
                user_message=prompt,
                max_tokens=settings.max_tokens_per_agent_call,
            )
        except Exception as e:
            logger.warning("agent call failed agent=%s error=%s", agent_id, e)
            return {"success": False, "error": str(e) or type(e).__name__}

        log_with_context(
            logger, logging.INFO, "agent call finished",
            agent=agent_id, model=response.model, total_tokens=response.total_tokens,
        )
        return {
            "success": True,
            "session_id": response.response_id or new_record_id(),
            "response": {"result": response.content, "message": None},
            "raw_response": response.content,
            "module_outputs": {"artifact_files": []},
        }
