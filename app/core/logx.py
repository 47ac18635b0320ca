import logging
import sys

from app.core.config import settings

LOG_FORMAT = "[%(levelname)s] %(asctime)s %(name)s - %(message)s"

logger = logging.getLogger("snsserver")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)

logger.setLevel(settings.LOG_LEVEL)
logger.propagate = False
