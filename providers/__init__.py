"""LLM providers."""

from .groq_provider import GroqAPIError, GroqProvider

__all__ = [
    "GroqAPIError",
    "GroqProvider",
]
