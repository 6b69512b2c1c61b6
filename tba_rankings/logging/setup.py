import sys
import logging
from typing import Any, Optional, Union

from loguru import logger

from tba_rankings.config.settings import settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


def _loguru_level(record: logging.LogRecord) -> Union[str, int]:
    """Loguru level name for a stdlib record, or its number if loguru has none."""
    try:
        return logger.level(record.levelname).name
    except ValueError:
        return record.levelno


def _caller_depth() -> int:
    """Stack depth of the first frame outside the logging module."""
    frame, depth = sys._getframe(1), 0
    while frame is not None and frame.f_code.co_filename in (
        logging.__file__,
        __file__,
    ):
        frame = frame.f_back
        depth += 1
    return depth


class InterceptHandler(logging.Handler):
    """Forwards stdlib logging records (e.g. from pydantic-settings) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        logger.opt(depth=_caller_depth(), exception=record.exc_info).log(
            _loguru_level(record), record.getMessage()
        )


def setup_logging(level: Optional[str] = None, sink: Any = None) -> None:
    """Sends all logging, loguru and stdlib, to one sink (stderr by default)."""
    level = (level or settings.log_level).upper()
    logger.remove()
    logger.add(
        sink if sink is not None else sys.stderr,
        level=level,
        format=LOG_FORMAT,
        backtrace=True,
        diagnose=False,
    )

    root = logging.getLogger()
    root.handlers = [InterceptHandler()]
    root.setLevel(logging.NOTSET)
    logger.debug(f"Logging initialized with level: {level}")
