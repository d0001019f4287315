"""Loguru sinks scoped to webdriver_http records"""

import sys
from pathlib import Path
from typing import List, Optional, TextIO

from loguru import logger

PACKAGE = "webdriver_http"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} | {thread.name} | {message}"


def setup_logging(
    verbose: bool = False,
    log_file: Optional[Path] = None,
    stream: Optional[TextIO] = None,
) -> List[int]:
    """
    Add sinks that only receive this package's records.

    Handlers already installed by the host application are left alone.
    Pass the returned ids to ``logger.remove`` to detach the sinks.

    Args:
        verbose: Include per-request debug records
        log_file: Optional file for the full debug trace of requests and retries
        stream: Console stream, stderr by default
    """
    handler_ids = [
        logger.add(
            stream or sys.stderr,
            format=CONSOLE_FORMAT,
            level="DEBUG" if verbose else "INFO",
            filter=PACKAGE,
            colorize=False,
        )
    ]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler_ids.append(
            logger.add(
                log_file,
                format=FILE_FORMAT,
                level="DEBUG",
                filter=PACKAGE,
                rotation="10 MB",
                retention=3,
                enqueue=True,  # Parallel test workers share the file
            )
        )

    return handler_ids
