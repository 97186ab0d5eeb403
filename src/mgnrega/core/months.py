"""Calendar-month helpers.

Performance data is monthly: every month value in the system is a ``date``
pinned to day 1, and any two timestamps in the same month are equivalent.
"""

import re
from datetime import date, datetime
from typing import Optional, Union

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from mgnrega.core.exceptions import ValidationError
from mgnrega.core.timezone import now_ist, to_ist

MonthLike = Union[date, datetime, str]

# YYYY-MM, optionally followed by a day and a time
_MONTH_PATTERN = re.compile(r"(\d{4})-(\d{1,2})(-\d{1,2}([T ].*)?)?")


def normalize_month(value: MonthLike) -> date:
    """Return the first day of the month containing ``value``."""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = to_ist(value)
        return date(value.year, value.month, 1)
    if isinstance(value, date):
        return date(value.year, value.month, 1)
    if isinstance(value, str):
        return _parse_month(value)
    raise ValidationError(f"Invalid month value: {value!r}")


def _parse_month(value: str) -> date:
    text = value.strip()
    if not text:
        raise ValidationError("Month must not be empty. Use YYYY-MM or YYYY-MM-DD")
    match = _MONTH_PATTERN.fullmatch(text)
    if match is None:
        raise ValidationError(
            f"Invalid month format: {value!r}. Use YYYY-MM or YYYY-MM-DD"
        )
    year, month = int(match.group(1)), int(match.group(2))
    if year < 1 or not 1 <= month <= 12:
        raise ValidationError(f"Invalid month: {value!r}. Use YYYY-MM with a month from 01 to 12")
    if match.group(3):
        # Full dates still have to be real calendar dates
        try:
            date_parser.parse(text)
        except (ValueError, OverflowError):
            raise ValidationError(
                f"Invalid month format: {value!r}. Use YYYY-MM or YYYY-MM-DD"
            )
    return date(year, month, 1)


def current_month(today: Optional[date] = None) -> date:
    """First day of the current month (IST)."""
    return normalize_month(today or now_ist())


def add_months(month: date, count: int) -> date:
    """Shift a normalized month by ``count`` months (negative goes back)."""
    return normalize_month(month) + relativedelta(months=count)


def month_label(month: date) -> str:
    """``YYYY-MM`` label used in cache keys and API payloads."""
    return f"{month.year:04d}-{month.month:02d}"


def trailing_months(months_back: int, end: Optional[date] = None) -> list[date]:
    """
    Consecutive months ending at ``end`` (default: current month).

    Ordered oldest to newest.
    """
    last = current_month(end)
    return [add_months(last, -offset) for offset in range(months_back - 1, -1, -1)]
