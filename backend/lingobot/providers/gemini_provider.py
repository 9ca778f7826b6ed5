from __future__ import annotations

import logging
from typing import Any, Dict

from lingobot.providers.base import LLMProvider
from lingobot.providers.schemas import GeminiGenerateContentResponse

logger = logging.getLogger(__name__)


class GeminiProvider(LLMProvider):
    """
    LLM provider that calls the Gemini ``generateContent`` REST endpoint.

    Gemini authenticates with a ``key`` query parameter instead of a
    bearer header.
    """

    name = "gemini"
    display_name = "gemini"
    model = "gemini-2.0-flash"
    endpoint = (
        "https://generativelanguage.googleapis.com/v1beta/models/"
        f"{model}:generateContent"
    )

    async def complete(self, text: str) -> str:
        api_key = self._require_api_key()
        payload: Dict[str, Any] = {
            "contents": [
                {"parts": [{"text": text}]},
            ],
        }
        logger.info("Gemini request: model=%s", self.model)
        response = await self._post(payload, params={"key": api_key})
        self._ensure_ok(response)
        return self._parse(response, GeminiGenerateContentResponse).output_text
