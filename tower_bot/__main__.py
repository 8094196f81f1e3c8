"""Run the bot: python -m tower_bot"""

import logging

import uvicorn

from tower_bot.config import configure_logging, load_settings

log = logging.getLogger(__name__)


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    log.info("Kingdom Wars bot running on port %s", settings.port)
    uvicorn.run(
        "tower_bot.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
