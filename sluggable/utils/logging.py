"""Loguru setup for applications embedding sluggable."""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from loguru import Logger

from sluggable.models.config import LoggingConfig

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level> | {extra}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]} | {message} | {extra}"


def setup_logging(config: LoggingConfig) -> None:
    """
    Replace loguru's sinks with the ones described by ``config``.

    Slug decisions are logged at DEBUG with the record type and attribute
    bound as extras; configuration errors are logged at ERROR before they
    are raised. A rotating file sink is only added when ``file_path`` is set.

    Args:
        config: Logging settings
    """
    logger.remove()
    logger.configure(extra={"name": "sluggable"})

    logger.add(
        sys.stderr,
        level=config.level,
        format=CONSOLE_FORMAT,
        colorize=config.colorize,
        serialize=False,
    )

    if config.file_path:
        Path(config.file_path).parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            config.file_path,
            level=config.level,
            format=FILE_FORMAT,
            rotation=config.rotation,
            retention=config.retention,
            compression=config.compression,
            serialize=config.serialize,
        )

    logger.info("Logging configured", level=config.level, file=config.file_path)


def get_logger(name: str) -> "Logger":
    """Logger bound to a module name (pass ``__name__``)."""
    return logger.bind(name=name)
