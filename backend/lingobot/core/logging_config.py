import logging
import sys
from typing import Optional

from lingobot.core.config import get_settings


_configured = False

# Server and client libraries kept quiet unless the gateway runs at DEBUG.
_LIBRARY_LOGGERS = ("uvicorn", "uvicorn.access", "httpx")


def library_log_level(gateway_level: str) -> int:
    """
    Level for third-party loggers given the gateway's own level.

    At DEBUG the outbound httpx request lines ("HTTP Request: POST ...")
    stay visible so every vendor call can be traced; otherwise they are
    reduced to warnings.
    """
    if gateway_level.upper() == "DEBUG":
        return logging.INFO
    return logging.WARNING


def configure_logging(level_override: Optional[str] = None) -> None:
    """
    Configure process-wide logging for the gateway.

    This is idempotent and safe to call multiple times.
    """
    global _configured

    if _configured:
        return

    gateway_level = (level_override or get_settings().log_level).upper()

    logging.basicConfig(
        level=gateway_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stdout,
    )

    for name in _LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_log_level(gateway_level))

    _configured = True
