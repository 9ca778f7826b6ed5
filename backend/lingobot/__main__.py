"""
Allow running as: python -m lingobot

Serves the module-level app from lingobot.main on HOST:PORT.
"""
import uvicorn

from lingobot.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "lingobot.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        workers=1,
    )


if __name__ == "__main__":
    main()
