"""
Typed response bodies for the upstream vendors.

Only the fields the gateway reads are declared; everything else in the
vendor payload is ignored. A body that does not match raises
``pydantic.ValidationError``, which providers turn into ``ParseError``.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class CohereChatResponse(BaseModel):
    text: str

    @property
    def output_text(self) -> str:
        return self.text


class _ChatMessage(BaseModel):
    content: str


class _ChatChoice(BaseModel):
    message: _ChatMessage


class ChatCompletionResponse(BaseModel):
    """OpenAI-compatible chat completion (Groq, OpenRouter, Mistral)."""

    choices: List[_ChatChoice] = Field(min_length=1)

    @property
    def output_text(self) -> str:
        return self.choices[0].message.content


class _GeminiPart(BaseModel):
    text: str


class _GeminiContent(BaseModel):
    parts: List[_GeminiPart] = Field(min_length=1)


class _GeminiCandidate(BaseModel):
    content: _GeminiContent


class GeminiGenerateContentResponse(BaseModel):
    candidates: List[_GeminiCandidate] = Field(min_length=1)

    @property
    def output_text(self) -> str:
        return self.candidates[0].content.parts[0].text
