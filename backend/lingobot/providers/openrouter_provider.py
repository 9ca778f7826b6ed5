from __future__ import annotations

from typing import Dict, Optional, Tuple

import httpx

from lingobot.providers.base import OpenAICompatibleProvider
from lingobot.providers.schemas import ChatCompletionResponse
from lingobot.services.fallback import first_available_model

# Free-tier models, most capable first.
OPENROUTER_CANDIDATE_MODELS: Tuple[str, ...] = (
    "qwen/qwen3-235b-a22b-07-25:free",
    "meta-llama/llama-3.1-8b-instruct:free",
    "microsoft/phi-3-mini-128k-instruct:free",
    "google/gemma-2-9b-it:free",
)


class OpenRouterProvider(OpenAICompatibleProvider):
    """
    LLM provider that calls OpenRouter, walking a list of candidate models
    until one answers.
    """

    name = "openrouter"
    display_name = "openRouter"
    endpoint = "https://openrouter.ai/api/v1/chat/completions"
    max_tokens = 1000

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: Optional[str],
        *,
        referer: str,
        title: str,
        models: Tuple[str, ...] = OPENROUTER_CANDIDATE_MODELS,
    ) -> None:
        super().__init__(client, api_key)
        self._referer = referer
        self._title = title
        self.models = models

    def _headers(self, api_key: str) -> Dict[str, str]:
        headers = self._bearer_headers(api_key)
        headers["HTTP-Referer"] = self._referer
        headers["X-Title"] = self._title
        return headers

    async def complete(self, text: str) -> str:
        api_key = self._require_api_key()

        async def attempt(model: str) -> str:
            response = await self._send(text, model, api_key)
            self._ensure_ok(response)
            return self._parse(response, ChatCompletionResponse).output_text

        return await first_available_model(self.display_name, self.models, attempt)
