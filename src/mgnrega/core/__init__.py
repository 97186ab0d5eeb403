"""Core utilities and shared functionality."""

from mgnrega.core.timezone import (
    now_ist,
    to_ist,
    to_naive_ist,
    IST_TZ,
)
from mgnrega.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    StoreError,
)
from mgnrega.core.months import (
    normalize_month,
    current_month,
    add_months,
    month_label,
    trailing_months,
)

__all__ = [
    "now_ist",
    "to_ist",
    "to_naive_ist",
    "IST_TZ",
    "AppError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
    "normalize_month",
    "current_month",
    "add_months",
    "month_label",
    "trailing_months",
]
