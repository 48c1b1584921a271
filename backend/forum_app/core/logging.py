"""
Logging setup.

Installs a single loguru sink and forwards stdlib logging records
(uvicorn, SQLAlchemy) into loguru.
"""

import logging
import sys

from loguru import logger

from forum_app.core.config import settings


class InterceptHandler(logging.Handler):
    """Route stdlib logging records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: str | None = None) -> None:
    """
    Configure loguru and stdlib logging once at startup.

    Args:
        level: Log level name; defaults to ``settings.log_level``.
    """
    level = (level or settings.log_level).upper()

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=(
            "<green>{time:MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
            "<cyan>{extra[component]}</cyan> | {message}"
        ),
    )
    logger.configure(extra={"component": "app"})

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(name).handlers = [InterceptHandler()]
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
