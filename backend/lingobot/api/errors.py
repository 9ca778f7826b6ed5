import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from lingobot.api.middleware import CORS_HEADERS
from lingobot.core.errors import GatewayError, RequestValidationFailed

logger = logging.getLogger(__name__)

_HTTP_ERROR_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "endpoint not found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method not allowed",
}


def register_exception_handlers(app: FastAPI) -> None:
    """
    Render every failure as ``{"error": "<message>"}``.
    """

    @app.exception_handler(RequestValidationFailed)
    async def request_validation_handler(request: Request, exc: RequestValidationFailed):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": str(exc)},
        )

    @app.exception_handler(GatewayError)
    async def gateway_error_handler(request: Request, exc: GatewayError):
        logger.warning(
            "Request failed | path=%s error_type=%s error=%s",
            request.url.path,
            type(exc).__name__,
            exc,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = _HTTP_ERROR_MESSAGES.get(exc.status_code, str(exc.detail))
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": message},
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception | path=%s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "internal server error"},
            headers=CORS_HEADERS,
        )
