"""Logging setup.

stdout carries command results for the host application, so every log sink
writes to stderr or to a file.
"""

import sys

from loguru import logger

from swiftkit.config import EngineSettings


STDERR_FORMAT = "<level>{level: <8}</level> | <cyan>{name}</cyan> - {message}"
FILE_FORMAT = "{time:YYYY-MM-DDTHH:mm:ss.SSSZ} - {level} - {name} - {message}"


def configure_logging(settings: EngineSettings) -> None:
    """Replace loguru's default handler with sinks matching ``settings``."""
    logger.remove()
    logger.add(sys.stderr, level=settings.log_level.upper(), format=STDERR_FORMAT, colorize=False)

    if settings.log_file is not None:
        logger.add(
            settings.log_file,
            level="DEBUG",
            format=FILE_FORMAT,
            encoding="utf-8",
            errors="backslashreplace",
        )
