from __future__ import annotations

import logging
from typing import List, Mapping

from lingobot.providers.base import LLMProvider
from lingobot.providers.factory import get_provider
from lingobot.schemas.chat import ChatRequest
from lingobot.services.fallback import complete_with_fallback

logger = logging.getLogger(__name__)

# /ai tries these in order unless a force flag picks a single provider.
AUTO_FALLBACK_ORDER: tuple[str, ...] = ("gemini", "mistral")


class ChatService:
    """
    Dispatches chat requests to a single provider or to the /ai fallback plan.
    """

    def __init__(self, providers: Mapping[str, LLMProvider]) -> None:
        self._providers = providers

    async def complete(self, provider_name: str, text: str) -> str:
        provider = get_provider(self._providers, provider_name)
        return await provider.complete(text)

    def fallback_plan(self, request: ChatRequest) -> List[LLMProvider]:
        """
        Providers to try for /ai, in order.

        ``force_mistral`` wins over ``force_cohere``, which wins over
        ``force_groq``.
        """
        if request.force_mistral:
            names: tuple[str, ...] = ("mistral",)
        elif request.force_cohere:
            names = ("cohere",)
        elif request.force_groq:
            names = ("groq",)
        else:
            names = AUTO_FALLBACK_ORDER
        return [get_provider(self._providers, name) for name in names]

    async def complete_auto(self, request: ChatRequest) -> str:
        plan = self.fallback_plan(request)
        logger.info("Auto request plan: %s", [provider.name for provider in plan])
        return await complete_with_fallback(plan, request.text or "")
