import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from players_api.web.app import Application


def setup_logging(app: "Application") -> None:
    logger.remove()
    logger.add(sys.stderr, level=app.config.logging.level.upper())
