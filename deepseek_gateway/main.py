import logging

import uvicorn

from .app import create_app
from .config import GatewaySettings


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def run() -> None:
    """Console entry point: load settings from the environment and serve."""
    settings = GatewaySettings.from_env()
    configure_logging(settings.log_level)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    # python -m deepseek_gateway.main
    run()
