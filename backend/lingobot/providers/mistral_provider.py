from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from lingobot.providers.base import OpenAICompatibleProvider
from lingobot.providers.schemas import ChatCompletionResponse
from lingobot.services.fallback import SleepFn, retry_with_backoff


class MistralProvider(OpenAICompatibleProvider):
    """
    LLM provider that calls the Mistral chat completions API.

    Transport failures and HTTP 429 are retried up to ``max_attempts``
    times with exponential backoff (1s, 2s, ...).
    """

    name = "mistral"
    display_name = "mistral"
    endpoint = "https://api.mistral.ai/v1/chat/completions"
    model = "mistral-tiny"
    max_tokens = 2000

    max_attempts = 3
    backoff_base_seconds = 1.0

    def __init__(
        self,
        client: httpx.AsyncClient,
        api_key: Optional[str],
        sleep: SleepFn = asyncio.sleep,
    ) -> None:
        super().__init__(client, api_key)
        self._sleep = sleep

    async def complete(self, text: str) -> str:
        api_key = self._require_api_key()

        async def attempt() -> str:
            response = await self._send(text, self.model, api_key)
            self._ensure_ok(response)
            return self._parse(response, ChatCompletionResponse).output_text

        return await retry_with_backoff(
            attempt,
            provider=self.display_name,
            max_attempts=self.max_attempts,
            backoff_base_seconds=self.backoff_base_seconds,
            sleep=self._sleep,
        )
