from typing import Awaitable, Callable, Dict

from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError

from lingobot.core.errors import RequestValidationFailed
from lingobot.schemas.chat import ChatRequest, ChatResponse
from lingobot.services.chat_service import ChatService


router = APIRouter()

# Route name -> summary for the single-provider endpoints (no fallback).
DIRECT_PROVIDER_ROUTES: Dict[str, str] = {
    "gemini": "Google Gemini",
    "mistral": "Mistral AI (retries on 429 and network errors)",
    "cohere": "Cohere",
    "groq": "Groq",
    "openrouter": "OpenRouter (falls back across free models)",
}


def get_service(request: Request) -> ChatService:
    return request.app.state.chat_service


async def read_chat_request(request: Request) -> ChatRequest:
    """
    Decode the raw body regardless of Content-Type and require ``text``.
    """
    body = await request.body()
    if body.strip() == b"null":
        # A JSON null decodes to an empty request.
        payload = ChatRequest()
    else:
        try:
            payload = ChatRequest.model_validate_json(body)
        except ValidationError as exc:
            raise RequestValidationFailed("invalid JSON") from exc
    if not payload.text:
        raise RequestValidationFailed("text field is required")
    return payload


@router.post(
    "/ai",
    response_model=ChatResponse,
    summary="Gemini with automatic fallback to Mistral",
)
async def chat_auto(
    payload: ChatRequest = Depends(read_chat_request),
    service: ChatService = Depends(get_service),
) -> ChatResponse:
    """
    Try Gemini, then Mistral. ``force_mistral``, ``force_cohere`` or
    ``force_groq`` call that provider alone.
    """
    text = await service.complete_auto(payload)
    return ChatResponse(response=text)


def _provider_endpoint(provider_name: str) -> Callable[..., Awaitable[ChatResponse]]:
    async def endpoint(
        payload: ChatRequest = Depends(read_chat_request),
        service: ChatService = Depends(get_service),
    ) -> ChatResponse:
        text = await service.complete(provider_name, payload.text or "")
        return ChatResponse(response=text)

    endpoint.__name__ = f"chat_{provider_name}"
    return endpoint


for _name, _summary in DIRECT_PROVIDER_ROUTES.items():
    router.add_api_route(
        f"/{_name}",
        _provider_endpoint(_name),
        methods=["POST"],
        response_model=ChatResponse,
        summary=_summary,
    )
