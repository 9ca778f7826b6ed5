"""
Error kinds raised by provider clients and the fallback strategies.

Every error carries a user-facing message; the HTTP layer returns
``str(exc)`` unchanged in the ``error`` field.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base class for all errors produced while serving a chat request."""


class ConfigError(GatewayError):
    """A provider was invoked without its API key configured."""


class TransportError(GatewayError):
    """The upstream could not be reached (connection, DNS, TLS, timeout)."""


class UpstreamError(GatewayError):
    """The upstream answered with a non-200 status."""

    def __init__(self, provider: str, status_code: int) -> None:
        super().__init__(f"{provider} API returned status {status_code}")
        self.provider = provider
        self.status_code = status_code


class ParseError(GatewayError):
    """The upstream body was not JSON or did not have the expected shape."""


class AllModelsUnavailableError(GatewayError):
    """Every candidate model of a provider failed."""

    def __init__(self, provider: str, models: list[str]) -> None:
        super().__init__("all models are currently unavailable")
        self.provider = provider
        self.models = models


class RequestValidationFailed(GatewayError):
    """The client request body was rejected before any provider was called."""
