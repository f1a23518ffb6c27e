"""Date-valued intervals for common calendar spans.

Calendar months and years as closed `Interval[date]` values, plus day
iteration over bounded date intervals. Month arithmetic is delegated to
python-dateutil's relativedelta and rrule.
"""

from collections.abc import Iterator
from datetime import date, timedelta
from typing import Any

from dateutil.relativedelta import relativedelta
from dateutil.rrule import DAILY, rrule

from intervalgebra.interval import Interval
from intervalgebra.limit_value import LimitValue


def year_month(year: int, month: int) -> Interval[date]:
    """
    Return the closed interval covering one calendar month.

    Args:
        year: Calendar year
        month: Month of year (1-12)

    Returns:
        [first day of month, last day of month]

    Example:
        >>> str(year_month(2024, 2))
        '[2024-02-01, 2024-02-29]'
    """
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1-12, got {month}")
    first = date(year, month, 1)
    last = first + relativedelta(months=1, days=-1)
    return Interval.closed(first, last)


def calendar_year(year: int) -> Interval[date]:
    """Return [January 1st, December 31st] of ``year``."""
    return Interval.closed(date(year, 1, 1), date(year, 12, 31))


def days(interval: Interval[date]) -> Iterator[date]:
    """Yield every date contained in a bounded date interval, in order.

    Open limits exclude their own day.

    Raises:
        UnboundedAccessError: If either side of the interval is unbounded
    """
    first = interval.lower_limit.unwrap()
    last = interval.upper_limit.unwrap()
    if interval.is_empty:
        return
    if not interval.includes_lower_limit:
        first += timedelta(days=1)
    if not interval.includes_upper_limit:
        last -= timedelta(days=1)
    if first > last:
        return
    for occurrence in rrule(DAILY, dtstart=first, until=last):
        yield occurrence.date()


def shift(interval: Interval[Any], **delta: Any) -> Interval[Any]:
    """Move every bounded limit of ``interval`` by a relativedelta.

    Keyword arguments are passed to `dateutil.relativedelta.relativedelta`
    (``days=``, ``months=``, ``years=``, ...). Unbounded sides and openness
    are preserved.

    Example:
        >>> str(shift(year_month(2024, 1), months=1))
        '[2024-02-01, 2024-02-29]'
    """
    offset = relativedelta(**delta)

    def moved(limit: LimitValue[Any]) -> LimitValue[Any] | Any:
        if limit.is_limitless:
            return limit
        return limit.unwrap() + offset

    return Interval.over(
        moved(interval.lower_limit),
        interval.includes_lower_limit,
        moved(interval.upper_limit),
        interval.includes_upper_limit,
    )
