import logging
import sys

from .constants import DEFAULT_LOG_LEVEL, LOG_FORMAT

logger = logging.getLogger("debounced")


def setup_logging(level=DEFAULT_LOG_LEVEL, stream=None):
    logging.basicConfig(
        level=level, format=LOG_FORMAT, stream=stream or sys.stderr
    )
    logger.setLevel(level)
