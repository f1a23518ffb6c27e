import logging

from .calendar import calendar_year, days, shift, year_month
from .errors import InvalidRangeError, UnboundedAccessError
from .interval import Interval
from .interval_limit import DEFAULT_TIE_BREAK, IntervalLimit, Role, TieBreak
from .limit_value import LIMITLESS, Limit, Limitless, LimitValue, as_limit_value

# Library logging: records are emitted only if the application configures handlers
logger = logging.getLogger("intervalgebra")
logger.addHandler(logging.NullHandler())

__all__ = [
    "Interval",
    "IntervalLimit",
    "Role",
    "TieBreak",
    "DEFAULT_TIE_BREAK",
    "LimitValue",
    "Limit",
    "Limitless",
    "LIMITLESS",
    "as_limit_value",
    "InvalidRangeError",
    "UnboundedAccessError",
    "year_month",
    "calendar_year",
    "days",
    "shift",
    "logger",
]
