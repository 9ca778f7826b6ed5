from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from lingobot.core.errors import ConfigError, ParseError, TransportError, UpstreamError

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class LLMProvider(ABC):
    """
    Interface for the upstream LLM vendors.

    Implementations build the vendor payload, POST it through the shared
    HTTP client and return the assistant text. Errors are raised as
    ``ConfigError``, ``TransportError``, ``UpstreamError`` or ``ParseError``.
    """

    name: str
    display_name: str
    endpoint: str

    def __init__(self, client: httpx.AsyncClient, api_key: Optional[str]) -> None:
        self._client = client
        self._api_key = api_key

    @abstractmethod
    async def complete(self, text: str) -> str:
        """
        Send ``text`` as a single user message and return the reply text.
        """
        ...

    def _require_api_key(self) -> str:
        if not self._api_key:
            raise ConfigError(f"{self.display_name} API key not configured")
        return self._api_key

    async def _post(
        self,
        payload: Dict[str, Any],
        *,
        url: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        try:
            return await self._client.post(
                url or self.endpoint,
                json=payload,
                headers=headers,
                params=params,
            )
        except httpx.RequestError as exc:
            raise TransportError(f"{self.display_name} request failed: {exc}") from exc

    def _ensure_ok(self, response: httpx.Response) -> None:
        if response.status_code != httpx.codes.OK:
            raise UpstreamError(self.display_name, response.status_code)

    def _parse(self, response: httpx.Response, schema: Type[ResponseT]) -> ResponseT:
        try:
            return schema.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning(
                "%s response did not match %s: %s",
                self.display_name,
                schema.__name__,
                exc.errors(include_url=False),
            )
            raise ParseError(f"{self.display_name} returned an unexpected response") from exc

    def _bearer_headers(self, api_key: str) -> Dict[str, str]:
        return {"Authorization": f"Bearer {api_key}"}


class OpenAICompatibleProvider(LLMProvider):
    """
    Shared request/response handling for vendors exposing the OpenAI
    chat completions schema.
    """

    model: str
    temperature: float = 0.7
    max_tokens: Optional[int] = None

    def _build_payload(self, text: str, model: str) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "model": model,
            "messages": [{"role": "user", "content": text}],
            "temperature": self.temperature,
        }
        if self.max_tokens is not None:
            payload["max_tokens"] = self.max_tokens
        return payload

    def _headers(self, api_key: str) -> Dict[str, str]:
        return self._bearer_headers(api_key)

    async def _send(self, text: str, model: str, api_key: str) -> httpx.Response:
        logger.info("%s request: model=%s", self.display_name, model)
        return await self._post(
            self._build_payload(text, model),
            headers=self._headers(api_key),
        )
