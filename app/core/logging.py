"""
Logging configuration using Loguru.
"""
import logging
import sys
from typing import Any, Optional

from loguru import logger

from app.core.config import settings


class InterceptHandler(logging.Handler):
    """Handler that intercepts standard logging and redirects to Loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        """
        Emit a log record by redirecting to Loguru.

        Args:
            record: The log record from standard logging.
        """
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk out of the logging module to the real caller
        frame = logging.currentframe()
        depth = 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(
            level, record.getMessage()
        )


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging with Loguru.

    Removes existing handlers, routes standard library logging (uvicorn,
    sqlalchemy, httpx) through Loguru and installs a console sink plus an
    optional rotating file sink.

    Args:
        level: Minimum level for all sinks. Defaults to ``settings.LOG_LEVEL``.
        log_file: Path of the file sink. Defaults to ``settings.LOG_FILE``;
            an empty value disables the file sink.
    """
    level = level or settings.LOG_LEVEL
    log_file = settings.LOG_FILE if log_file is None else log_file

    logging.root.handlers = []
    logging.basicConfig(handlers=[InterceptHandler()], level=0)

    for logger_name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = [InterceptHandler()]
        logging_logger.propagate = False

    logger.remove()

    def add_request_id(record: dict[str, Any]) -> None:
        record["extra"].setdefault("request_id", "N/A")

    logger.configure(patcher=add_request_id)

    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<magenta>{extra[request_id]}</magenta> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=level,
    )

    if log_file:
        logger.add(
            log_file,
            rotation="10 MB",
            retention="30 days",
            compression="zip",
            enqueue=True,
            level=level,
            format=(
                "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | "
                "{extra[request_id]} | {name}:{function}:{line} - {message}"
            ),
        )
