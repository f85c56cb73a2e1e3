"""Loguru setup and the structured event helper used across the service."""

import sys
from typing import Any

from loguru import logger

SERVICE_NAME = "cars-api"


def configure_logging(level: str = "INFO", json: bool = False) -> None:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        level: Minimum level to emit (loguru level name)
        json: Serialize each record (including bound fields) as JSON
    """
    logger.remove()
    logger.add(sys.stderr, level=level, serialize=json, backtrace=False, diagnose=False)


def log_event(
    event: str,
    level: str = "INFO",
    exception: BaseException | None = None,
    **fields: Any,
) -> None:
    """Emit a structured event; the context lives in the bound extras.

    Args:
        event: Event name, also used as the message
        level: Loguru level name
        exception: Attach this exception's traceback to the record
        **fields: Extra context (operation, car_id, row counts, ...)
    """
    logger.bind(service_name=SERVICE_NAME, event=event, **fields).opt(exception=exception).log(
        level, event
    )
