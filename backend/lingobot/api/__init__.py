from fastapi import APIRouter, FastAPI

from . import chat, health


def get_api_router() -> APIRouter:
    """
    Aggregate and return the root API router.
    """
    root_router = APIRouter()

    root_router.include_router(health.router, tags=["health"])
    root_router.include_router(chat.router, tags=["chat"])

    return root_router


def register_routes(app: FastAPI) -> None:
    """
    Attach all API routes to the FastAPI application.
    """
    app.include_router(get_api_router())
