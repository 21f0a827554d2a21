"""Logging configuration helpers."""

import logging

# Keys passed through ``extra=`` by the services and adapters.
CONTEXT_KEYS = (
    "user_id",
    "day",
    "food_id",
    "items",
    "fields",
    "action",
    "offline_reads",
    "environment",
    "path",
)


class ContextFormatter(logging.Formatter):
    """Formatter that appends known ``extra`` fields as ``key=value`` pairs."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        context = " ".join(
            f"{key}={getattr(record, key)}"
            for key in CONTEXT_KEYS
            if hasattr(record, key)
        )
        return f"{message} [{context}]" if context else message


def configure_logging(level: int | str = logging.INFO) -> None:
    """Configure the calorie_tracker logger with a single stream handler.

    Repeated calls only adjust the level.
    """
    logger = logging.getLogger("calorie_tracker")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        ContextFormatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
