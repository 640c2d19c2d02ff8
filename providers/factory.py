"""Factory for creating completion providers."""

from typing import Dict, Optional

from .base import LLMProvider
from .litellm_provider import LiteLLMProvider, MODEL_ALIASES
from config import settings


def get_provider(model: Optional[str] = None) -> LLMProvider:
    """Get a provider for `model` (defaults to settings.default_model).

    Examples:
        get_provider()                 # settings.default_model
        get_provider("claude-sonnet")  # alias -> anthropic/claude-sonnet-4-20250514
        get_provider("gemini/gemini-2.0-flash")
    """
    return LiteLLMProvider(default_model=model or settings.default_model)


def list_providers() -> Dict[str, bool]:
    """Map each model alias to whether its API key is configured."""
    return {alias: LiteLLMProvider(alias).is_available() for alias in MODEL_ALIASES}
