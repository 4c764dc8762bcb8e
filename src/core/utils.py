import sys
import time

from loguru import logger

TRANSACTION_ID_PREFIX = "TXN"


def configure_logging(level: str = "INFO", sink=None):
    """Replace loguru's sinks with a single sink (stderr by default) at the given level."""
    logger.remove()
    return logger.add(sink or sys.stderr, level=level.upper())


def current_millis() -> int:
    """Wall-clock time as integer milliseconds since the epoch."""
    return int(time.time() * 1000)


def generate_transaction_id(now_ms: int | None = None) -> str:
    """
    Build a transaction id from the current time.

    :param now_ms: Epoch milliseconds to use instead of the clock

    :return str: "TXN" followed by the epoch milliseconds. Two calls within
        the same millisecond return the same id.
    """
    if now_ms is None:
        now_ms = current_millis()
    return f"{TRANSACTION_ID_PREFIX}{now_ms}"
