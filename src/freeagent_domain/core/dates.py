"""Date helpers for request payloads.

FreeAgent expects request dates as `yyyy-MM-dd` regardless of the host
locale, so these helpers never go through `strftime`.
"""

from __future__ import annotations

from datetime import date, datetime


def format_date(value: date) -> str:
    """Return `value` as the 10-character `yyyy-MM-dd` string the API requires."""

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_datetime_as_date(value: datetime) -> str:
    """Calendar date part of `value`, as written (no timezone conversion)."""

    return format_date(value.date())


class ShortDateFormat:
    """Company-level short date format settings."""

    ABBREVIATED_MONTH = "dd mmm yy"
    EUROPEAN = "dd-mm-yyyy"
    US = "mm/dd/yyyy"
    ISO = "yyyy-mm-dd"

    @classmethod
    def valid_formats(cls) -> tuple[str, ...]:
        return (cls.ABBREVIATED_MONTH, cls.EUROPEAN, cls.US, cls.ISO)

    @classmethod
    def is_valid(cls, value: str | None) -> bool:
        return value in cls.valid_formats()
