"""
Fallback and retry strategies used by the gateway.

- ``complete_with_fallback``: try several providers in order, first success wins.
- ``first_available_model``: try candidate models of one provider in order.
- ``retry_with_backoff``: retry one call on transport errors and HTTP 429,
  sleeping 1s, 2s, 4s, ... between attempts.

All attempts within one request run strictly in sequence.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, Sequence

from lingobot.core.errors import (
    AllModelsUnavailableError,
    GatewayError,
    ParseError,
    TransportError,
    UpstreamError,
)

if TYPE_CHECKING:
    from lingobot.providers.base import LLMProvider

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]

MODEL_OVERLOADED_STATUS = 503
RATE_LIMITED_STATUS = 429


async def complete_with_fallback(providers: Sequence["LLMProvider"], text: str) -> str:
    """
    Return the reply of the first provider that succeeds.

    Any error kind moves on to the next provider. When every provider
    fails, the last provider's error is raised unchanged.
    """
    last_error: Optional[GatewayError] = None

    for index, provider in enumerate(providers):
        try:
            return await provider.complete(text)
        except GatewayError as exc:
            last_error = exc
            if index < len(providers) - 1:
                logger.warning(
                    "%s failed, falling back to %s: %s",
                    provider.display_name,
                    providers[index + 1].display_name,
                    exc,
                )

    if last_error is None:
        raise ValueError("complete_with_fallback needs at least one provider")
    raise last_error


async def first_available_model(
    provider: str,
    models: Sequence[str],
    call: Callable[[str], Awaitable[str]],
) -> str:
    """
    Try ``call(model)`` for each model in order and return the first reply.

    Transport and parse failures skip to the next model, as does any
    non-200 status. HTTP 503 is the documented "overloaded" signal; other
    statuses are skipped too but logged as unexpected. No backoff is applied.
    """
    for model in models:
        try:
            return await call(model)
        except (TransportError, ParseError) as exc:
            logger.warning("%s model %s failed, trying next: %s", provider, model, exc)
        except UpstreamError as exc:
            if exc.status_code == MODEL_OVERLOADED_STATUS:
                logger.info("%s model %s is overloaded, trying next", provider, model)
            else:
                logger.warning(
                    "%s model %s returned unexpected status %s, trying next",
                    provider,
                    model,
                    exc.status_code,
                )

    raise AllModelsUnavailableError(provider, list(models))


async def retry_with_backoff(
    call: Callable[[], Awaitable[str]],
    *,
    provider: str,
    max_attempts: int = 3,
    backoff_base_seconds: float = 1.0,
    sleep: SleepFn = asyncio.sleep,
) -> str:
    """
    Run ``call`` up to ``max_attempts`` times.

    Transport errors and HTTP 429 are retried after ``base * 2**n`` seconds.
    Once attempts run out, the last of those errors is raised as-is, so an
    exhausted 429 surfaces as ``UpstreamError`` with status 429. Any other
    status or a parse failure is raised immediately.
    """
    last_error: Optional[GatewayError] = None

    for attempt in range(1, max_attempts + 1):
        try:
            return await call()
        except (TransportError, UpstreamError) as exc:
            if isinstance(exc, UpstreamError) and exc.status_code != RATE_LIMITED_STATUS:
                raise
            last_error = exc
            if attempt >= max_attempts:
                break
            delay = backoff_base_seconds * (2 ** (attempt - 1))
            logger.warning(
                "%s attempt %s/%s failed, retrying in %ss: %s",
                provider,
                attempt,
                max_attempts,
                delay,
                exc,
            )
            await sleep(delay)

    assert last_error is not None
    raise last_error
