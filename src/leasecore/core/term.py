# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar month arithmetic for lease terms.

Month counts are calendar based: only the year and month of each date take
part, the day of month is ignored. A lease ending on the 1st and one ending
on the 28th of the same month therefore report the same number of months.
Derived values already stored by callers depend on this convention.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Union

import pandas as pd

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime, pd.Timestamp, pd.Period, str]


def to_month(value: DateLike) -> pd.Period:
    """
    Normalize a date-like value to a monthly ``pd.Period``.

    Args:
        value: A ``date``, ``datetime``, ``pd.Timestamp``, ``pd.Period`` or an
            ISO-formatted date string

    Returns:
        Monthly period containing ``value``

    Raises:
        ValueError: If ``value`` is None or cannot be parsed as a date
    """
    if value is None:
        raise ValueError("Cannot convert None to a monthly period")
    if isinstance(value, pd.Period):
        if value.freqstr != "M":
            return pd.Period(value.to_timestamp(), freq="M")
        return value
    if isinstance(value, str):
        value = pd.Timestamp(value)
    return pd.Period(value, freq="M")


def months_between(start: DateLike, end: DateLike) -> int:
    """
    Count calendar months from ``start`` to ``end``.

    The result is negative when ``end`` falls in an earlier month than
    ``start``; rejecting out-of-order dates is the caller's job.

    Example:
        >>> months_between(date(2024, 1, 31), date(2024, 3, 1))
        2
    """
    start_month = to_month(start)
    end_month = to_month(end)
    months = (end_month.year - start_month.year) * 12 + (end_month.month - start_month.month)
    if months < 0:
        logger.debug(f"End month {end_month} precedes start month {start_month} ({months} months)")
    return months


def remaining_months(end: DateLike, as_of: Optional[DateLike] = None) -> int:
    """Months from ``as_of`` (default: today) to ``end``, never below zero."""
    if as_of is None:
        as_of = date.today()
    return max(0, months_between(as_of, end))


def shift_months(value: DateLike, months: int) -> date:
    """
    Move a date by whole calendar months.

    The day of month is kept where possible and clamped to the last day of
    the target month otherwise (2024-03-31 shifted by -1 gives 2024-02-29).
    """
    if isinstance(value, pd.Period):
        value = value.to_timestamp()
    shifted = pd.Timestamp(value) + pd.DateOffset(months=months)
    return shifted.date()
