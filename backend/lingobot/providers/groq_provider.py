from __future__ import annotations

from lingobot.providers.base import OpenAICompatibleProvider
from lingobot.providers.schemas import ChatCompletionResponse


class GroqProvider(OpenAICompatibleProvider):
    """LLM provider that calls Groq's OpenAI-compatible chat API."""

    name = "groq"
    display_name = "groq"
    endpoint = "https://api.groq.com/openai/v1/chat/completions"
    model = "meta-llama/llama-4-scout-17b-16e-instruct"

    async def complete(self, text: str) -> str:
        api_key = self._require_api_key()
        response = await self._send(text, self.model, api_key)
        self._ensure_ok(response)
        return self._parse(response, ChatCompletionResponse).output_text
