from __future__ import annotations

import httpx

from lingobot.core.config import Settings, get_settings


def build_http_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """
    Create the pooled ``httpx.AsyncClient`` shared by every provider.

    One instance is built per application and closed on shutdown.
    """
    settings = settings or get_settings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(
            connect=settings.http_connect_timeout_seconds,
            read=settings.http_read_timeout_seconds,
            write=settings.http_write_timeout_seconds,
            pool=settings.http_connect_timeout_seconds,
        ),
        limits=httpx.Limits(
            max_connections=settings.http_max_connections,
            max_keepalive_connections=settings.http_max_connections,
            keepalive_expiry=settings.http_keepalive_expiry_seconds,
        ),
    )
