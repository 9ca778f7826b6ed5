from __future__ import annotations

import logging
from typing import Any, Dict

from lingobot.providers.base import LLMProvider
from lingobot.providers.schemas import CohereChatResponse

logger = logging.getLogger(__name__)


class CohereProvider(LLMProvider):
    """LLM provider that calls the Cohere v1 chat endpoint."""

    name = "cohere"
    display_name = "cohere"
    endpoint = "https://api.cohere.ai/v1/chat"
    model = "command-r"

    async def complete(self, text: str) -> str:
        api_key = self._require_api_key()
        payload: Dict[str, Any] = {
            "message": text,
            "model": self.model,
            "temperature": 0.7,
            "max_tokens": 1000,
        }
        logger.info("Cohere request: model=%s", self.model)
        response = await self._post(payload, headers=self._bearer_headers(api_key))
        self._ensure_ok(response)
        return self._parse(response, CohereChatResponse).output_text
