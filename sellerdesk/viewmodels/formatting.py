"""Text <-> value helpers used by the form view models.

Formatting takes explicit parameters instead of relying on a process-wide
locale, so every form renders amounts the same way regardless of the host.
Parsing is lenient: unparseable text yields ``None`` instead of raising.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Optional


def is_blank(value: Any) -> bool:
    """Return True for ``None`` and whitespace-only strings."""
    if value is None:
        return True
    return not str(value).strip()


def try_parse_int(text: Optional[str]) -> Optional[int]:
    if text is None:
        return None
    try:
        return int(text)
    except (TypeError, ValueError):
        return None


def try_parse_float(text: Optional[str], *, decimal_point: str = ".") -> Optional[float]:
    if text is None:
        return None
    normalized = str(text)
    if decimal_point != ".":
        normalized = normalized.replace(decimal_point, ".")
    try:
        return float(normalized)
    except (TypeError, ValueError):
        return None


def format_int(value: Optional[int]) -> str:
    return "" if value is None else str(value)


def format_amount(
    value: Optional[float],
    *,
    decimal_places: int = 2,
    decimal_point: str = ".",
) -> str:
    """Render ``value`` with a fixed number of decimals and no grouping."""
    if value is None:
        return ""
    text = f"{float(value):.{int(decimal_places)}f}"
    if decimal_point != ".":
        text = text.replace(".", decimal_point)
    return text


def format_date(value: Optional[date], date_format: str) -> str:
    if value is None:
        return ""
    return value.strftime(date_format)


def parse_date(text: Optional[str], date_format: str) -> Optional[date]:
    """Parse ``text`` with ``date_format``; blank or malformed text gives ``None``."""
    if is_blank(text):
        return None
    try:
        return datetime.strptime(str(text).strip(), date_format).date()
    except ValueError:
        return None


def to_local_date(value: Optional[datetime]) -> Optional[date]:
    """Convert a stored date-time to the local calendar date shown by the picker."""
    if value is None:
        return None
    if value.tzinfo is not None:
        value = value.astimezone()
    return value.date()


def start_of_day(value: Optional[date]) -> Optional[datetime]:
    """Local midnight of ``value`` (naive), the representation stored on entities."""
    if value is None:
        return None
    return datetime.combine(value, time.min)


__all__ = [
    "format_amount",
    "format_date",
    "format_int",
    "is_blank",
    "parse_date",
    "start_of_day",
    "to_local_date",
    "try_parse_float",
    "try_parse_int",
]
