"""Completion providers: the LLMProvider interface and its LiteLLM implementation."""

from .base import LLMProvider, LLMResponse
from .factory import get_provider, list_providers

__all__ = [
    "LLMProvider",
    "LLMResponse",
    "get_provider",
    "list_providers",
]
