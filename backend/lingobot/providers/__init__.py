"""
LLM provider clients.

Each vendor's wire format lives in its provider implementation.
Routes and fallback strategies depend only on the LLMProvider interface.
"""

from lingobot.providers.base import LLMProvider
from lingobot.providers.factory import build_providers, get_provider

__all__ = ["LLMProvider", "build_providers", "get_provider"]
