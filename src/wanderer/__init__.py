"""Wanderer: a turn-based adventure world over Gemini and the console."""

from .app import create_app
from .config import Config
from .logging import configure_from_config, get_logger

__all__ = ["main", "create_app", "Config"]


def main() -> None:
    """Entry point for the Gemini server."""
    config = Config.from_env()

    configure_from_config(config)

    logger = get_logger(__name__)
    logger.info(
        "application_starting",
        host=config.host,
        port=config.port,
        world=config.world,
        log_level=config.log_level,
    )

    app = create_app(config)
    app.run(
        host=config.host,
        port=config.port,
        certfile=str(config.certfile) if config.certfile else None,
        keyfile=str(config.keyfile) if config.keyfile else None,
    )
