"""LiteLLM-backed provider. Single implementation for all agent completions."""

import os
from typing import Dict, Optional

from .base import LLMProvider, LLMResponse


# Short names accepted on the CLI -> LiteLLM model strings
MODEL_ALIASES: Dict[str, str] = {
    "gpt-4o": "gpt-4o",
    "gpt-4o-mini": "gpt-4o-mini",
    "claude-sonnet": "anthropic/claude-sonnet-4-20250514",
    "claude-haiku": "anthropic/claude-3-5-haiku-20241022",
    "gemini-flash": "gemini/gemini-2.0-flash",
    "gemini-pro": "gemini/gemini-2.5-pro",
    "deepseek-chat": "deepseek/deepseek-chat",
}

# Model prefix -> env var LiteLLM reads the key from
PROVIDER_KEY_ENV: Dict[str, str] = {
    "anthropic/": "ANTHROPIC_API_KEY",
    "gemini/": "GOOGLE_API_KEY",
    "deepseek/": "DEEPSEEK_API_KEY",
    "gpt": "OPENAI_API_KEY",
}


def resolve_model(model: str) -> str:
    return MODEL_ALIASES.get(model.lower(), model)


class LiteLLMProvider(LLMProvider):
    """Provider that delegates to litellm.completion()."""

    name = "litellm"

    def __init__(self, default_model: str, metadata: Optional[dict] = None):
        """Initialize with the model used when a call does not override it.

        Args:
            default_model: LiteLLM model string or alias (e.g. gpt-4o-mini, claude-sonnet).
            metadata: Optional dict passed through to litellm (e.g. agent id).
        """
        self.default_model = resolve_model(default_model)
        self._metadata = dict(metadata or {})

    def set_metadata(self, metadata: dict) -> None:
        self._metadata = dict(metadata)

    def complete(
        self,
        system_prompt: str,
        user_message: str,
        model: Optional[str] = None,
        max_tokens: int = 4096,
    ) -> LLMResponse:
        import litellm

        resolved_model = resolve_model(model) if model else self.default_model
        completion = litellm.completion(
            model=resolved_model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_message},
            ],
            max_tokens=max_tokens,
            metadata={**self._metadata},
        )
        return LLMResponse.from_completion(completion, provider=self.name, fallback_model=resolved_model)

    def is_available(self) -> bool:
        """True when the env var for this model's provider is set."""
        for prefix, env_var in PROVIDER_KEY_ENV.items():
            if self.default_model.startswith(prefix):
                return bool(os.environ.get(env_var, "").strip())
        return bool(self.default_model)
