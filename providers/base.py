"""Completion provider interface used by the agent client."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class LLMResponse:
    """One completion as the agent client sees it."""
    content: str
    model: str
    provider: str
    input_tokens: int = 0
    output_tokens: int = 0
    response_id: Optional[str] = None

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens

    @classmethod
    def from_completion(cls, completion: Any, provider: str, fallback_model: str) -> "LLMResponse":
        """Read an OpenAI-shaped completion (choices[0].message.content, usage, id)."""
        choices = getattr(completion, "choices", None) or []
        content = choices[0].message.content if choices else None
        usage = getattr(completion, "usage", None)
        return cls(
            content=content or "",
            model=getattr(completion, "model", None) or fallback_model,
            provider=provider,
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            response_id=getattr(completion, "id", None),
        )


class LLMProvider(ABC):
    """Turns a system prompt plus user prompt into an LLMResponse."""

    name = "base"

    @abstractmethod
    def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        """Run one completion.

        Args:
            system_prompt: Agent instructions, reference passages and output schema
            user_message: Prompt built by the workflow
            model: Per-call model override
            max_tokens: Maximum tokens in the reply
        """

    def set_metadata(self, metadata: dict) -> None:
        """Attach per-call metadata (agent id). Ignored unless the backend uses it."""

    def is_available(self) -> bool:
        return True
