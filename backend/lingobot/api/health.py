from fastapi import APIRouter
from fastapi.responses import PlainTextResponse


router = APIRouter()


@router.api_route(
    "/health",
    methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"],
    response_class=PlainTextResponse,
    summary="Service health check",
)
async def health_check() -> str:
    """
    Liveness probe; answers any method with a plain ``OK``.
    """
    return "OK"
