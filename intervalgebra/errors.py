"""Exceptions raised for invalid use of the interval API."""


class InvalidRangeError(ValueError):
    """Raised when an interval's lower limit does not precede its upper limit."""


class UnboundedAccessError(ValueError):
    """Raised when the value of an unbounded limit is read without a fallback."""
