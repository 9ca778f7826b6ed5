"""
Single entrypoint for the Lingobot LLM gateway.

Run from backend directory: uvicorn lingobot.main:app
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI

from lingobot.api import register_routes
from lingobot.api.errors import register_exception_handlers
from lingobot.api.middleware import install_cors
from lingobot.core.config import Settings, get_settings
from lingobot.core.http_client import build_http_client
from lingobot.core.logging_config import configure_logging
from lingobot.providers import build_providers
from lingobot.services.chat_service import ChatService

logger = logging.getLogger(__name__)

ENDPOINTS = (
    "POST /ai          (automatic fallback)",
    "POST /gemini      (Google Gemini)",
    "POST /mistral     (Mistral AI)",
    "POST /cohere      (Cohere)",
    "POST /groq        (Groq)",
    "POST /openrouter  (OpenRouter)",
    "GET  /health      (Health check)",
)


def create_app(
    settings: Optional[Settings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPI:
    """
    Application factory for the FastAPI app.

    The shared HTTP client and provider registry are built here, not in the
    lifespan, so the app is usable under transports that skip lifespan
    events. A client passed in by the caller is not closed on shutdown.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    owns_client = http_client is None
    client = http_client or build_http_client(settings)
    providers = build_providers(client, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "%s (%s) starting on http://%s:%s",
            settings.app_name,
            settings.environment,
            settings.host,
            settings.port,
        )
        for endpoint in ENDPOINTS:
            logger.info("  %s", endpoint)
        yield
        if owns_client:
            await client.aclose()

    app = FastAPI(
        title="Lingobot Gateway",
        description=(
            "Forwards text to Gemini, Mistral, Cohere, Groq or OpenRouter "
            "and returns the reply as JSON, with provider and model fallback."
        ),
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )

    app.state.chat_service = ChatService(providers)

    install_cors(app)
    register_exception_handlers(app)
    register_routes(app)

    return app


app = create_app()

