import logging
import sys
from pythonjsonlogger import jsonlogger

from pathway.config import settings

# One stdout handler shared by every package logger.
_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(jsonlogger.JsonFormatter('%(asctime)s %(name)s %(levelname)s %(message)s'))


def get_logger(name: str) -> logging.Logger:
    """
    Returns a logger whose records come out as structured JSON. The handler sits
    on the top-level package logger ('pathway', 'discovery', 'api'), so module
    loggers below it propagate there and each record is written once.
    """
    package_logger = logging.getLogger(name.split(".")[0])
    if _handler not in package_logger.handlers:
        package_logger.setLevel(settings.LOG_LEVEL.upper())
        package_logger.addHandler(_handler)
        package_logger.propagate = False

    return logging.getLogger(name)
