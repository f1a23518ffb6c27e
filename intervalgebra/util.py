"""Utility helpers for intervalgebra.

Values of any type can bound an interval as long as they support ``==`` and
``<``/``>`` against each other. These helpers turn that into a three-way
comparison so the limit and interval layers never depend on rich comparison
operators directly.
"""

from typing import Any


def compare_values(left: Any, right: Any) -> int:
    """Return -1, 0 or 1 as ``left`` is less than, equal to or greater than ``right``.

    Raises:
        TypeError: If the values are neither equal nor ordered (e.g. NaN, or
            a partial order with incomparable elements)
    """
    if left == right:
        return 0
    if left < right:
        return -1
    if left > right:
        return 1
    raise TypeError(
        f"Interval limits must be totally ordered.\n"
        f"Got incomparable values: {left!r} and {right!r}\n"
        f"Hint: avoid NaN and values from a partial order as interval limits"
    )
