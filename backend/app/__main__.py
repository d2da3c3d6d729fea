"""Entry point for `python -m app`."""

import logging
import socket

import uvicorn

from app.core.config import settings
from app.core.logging_config import configure_logging

logger = logging.getLogger(__name__)


class ReadyLoggingServer(uvicorn.Server):
    """Uvicorn server that announces itself once its sockets are bound."""

    async def startup(self, sockets: list[socket.socket] | None = None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            logger.info(
                "API ready on http://localhost:%s (%s)",
                self.config.port,
                settings.ENVIRONMENT,
            )


def main() -> None:
    configure_logging(
        settings.LOG_LEVEL,
        settings.LOG_FORMAT,
        service=settings.PROJECT_NAME,
        environment=settings.ENVIRONMENT,
    )
    config = uvicorn.Config(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_config=None,
    )
    ReadyLoggingServer(config).run()


if __name__ == "__main__":
    main()
