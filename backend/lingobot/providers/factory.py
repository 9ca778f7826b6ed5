from __future__ import annotations

from typing import Dict, Mapping

import httpx

from lingobot.core.config import Settings
from lingobot.providers.base import LLMProvider
from lingobot.providers.cohere_provider import CohereProvider
from lingobot.providers.gemini_provider import GeminiProvider
from lingobot.providers.groq_provider import GroqProvider
from lingobot.providers.mistral_provider import MistralProvider
from lingobot.providers.openrouter_provider import OpenRouterProvider


def build_providers(client: httpx.AsyncClient, settings: Settings) -> Dict[str, LLMProvider]:
    """
    Build one client per vendor, all sharing ``client``, keyed by route name.
    """
    providers: list[LLMProvider] = [
        GeminiProvider(client, settings.google_gemini_api_key1),
        MistralProvider(client, settings.mistral_key),
        CohereProvider(client, settings.cohere_key),
        GroqProvider(client, settings.groq_key),
        OpenRouterProvider(
            client,
            settings.openrouter_key,
            referer=settings.openrouter_referer,
            title=settings.openrouter_title,
        ),
    ]
    return {provider.name: provider for provider in providers}


def get_provider(providers: Mapping[str, LLMProvider], provider_name: str) -> LLMProvider:
    """Return the provider registered under ``provider_name``."""
    name = provider_name.strip().lower()
    provider = providers.get(name)
    if provider is None:
        raise ValueError(
            f"Unsupported LLM provider: {provider_name!r}. "
            f"Use one of: {', '.join(sorted(providers))}."
        )
    return provider
