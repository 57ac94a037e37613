"""Utility functions for the dashboard."""
import logging
import math
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from datadash.config import LOG_DIR


def setup_logger(name: str = __name__) -> logging.Logger:
    """Set up and return a logger instance."""
    log_file = LOG_DIR / f"dashboard_{datetime.now().strftime('%Y%m%d')}.log"

    logger = logging.getLogger(name)
    logger.setLevel(logging.INFO)

    # Avoid duplicate handlers
    if logger.handlers:
        return logger

    # File handler
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.INFO)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)

    # Formatter
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    file_handler.setFormatter(formatter)
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity (never banker's rounding)."""
    return int(math.floor(value + 0.5))


def round_to(value: float, places: int = 2) -> float:
    """Round to a fixed number of decimals, ties away from zero."""
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


_COMPACT_SUFFIXES = ((1e12, "T"), (1e9, "B"), (1e6, "M"), (1e3, "K"))


def format_compact(value: float, digits: int = 1) -> str:
    """Format a number as e.g. 6.2B / 840M / 15.3K."""
    for threshold, suffix in _COMPACT_SUFFIXES:
        if abs(value) >= threshold:
            text = f"{value / threshold:.{digits}f}".rstrip("0").rstrip(".")
            return f"{text}{suffix}"
    return f"{value:.{digits}f}".rstrip("0").rstrip(".")


def format_currency(value: float) -> str:
    """Compact USD formatting; sub-unit prices keep their significant digits."""
    if abs(value) >= 1000:
        return f"${format_compact(value, 2)}"
    if 0 < abs(value) < 0.01:
        return f"${value:.8f}".rstrip("0")
    return f"${value:,.2f}"


def format_signed_pct(value: float) -> str:
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:.2f}%"
