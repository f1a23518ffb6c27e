import logging
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import override

from intervalgebra.errors import InvalidRangeError
from intervalgebra.interval_limit import IntervalLimit
from intervalgebra.limit_value import LIMITLESS, LimitValue
from intervalgebra.util import compare_values

T = TypeVar("T")

logger = logging.getLogger("intervalgebra")


@dataclass(frozen=True, eq=False)
class Interval(Generic[T]):
    """A range over an ordered type, bounded or not, open or closed on each side.

    Build intervals with the factories rather than from raw limits:

        >>> Interval.closed(1, 10)          # [1, 10]
        >>> Interval.over(0, True, 5, False)  # [0, 5)
        >>> Interval.and_more(3)            # [3, +∞)
        >>> Interval.under(100)             # (-∞, 100)

    Every factory accepts a raw value, a `LimitValue`, or ``None`` for an
    unbounded side.
    """

    lower: IntervalLimit[T]
    upper: IntervalLimit[T]

    def __post_init__(self) -> None:
        if not (self.lower.is_lower_role and self.upper.is_upper_role):
            raise InvalidRangeError(
                f"Interval limits have the wrong roles.\n"
                f"Got lower={self.lower!r}, upper={self.upper!r}\n"
                f"Hint: build limits with IntervalLimit.lower(...) and "
                f"IntervalLimit.upper(...), or use the Interval factories"
            )
        if self.lower > self.upper:
            logger.debug("rejecting interval %s, %s", self.lower, self.upper)
            raise InvalidRangeError(
                f"Interval lower limit must not exceed its upper limit.\n"
                f"Got lower {self.lower}, upper {self.upper}\n"
                f"Hint: swap the arguments, e.g. Interval.closed(small, large)"
            )

        # A half-closed single point, [v, v) or (v, v], is the same set as [v, v].
        if (
            not self.lower.is_unbounded
            and not self.upper.is_unbounded
            and self.lower.value == self.upper.value
            and self.lower.closed != self.upper.closed
        ):
            logger.debug(
                "normalizing %s, %s to a closed single element", self.lower, self.upper
            )
            value = self.lower.value
            object.__setattr__(self, "lower", IntervalLimit.lower(True, value))
            object.__setattr__(self, "upper", IntervalLimit.upper(True, value))

    # Factories

    @classmethod
    def over(
        cls,
        lower: "LimitValue[T] | T | None",
        lower_closed: bool,
        upper: "LimitValue[T] | T | None",
        upper_closed: bool,
    ) -> "Interval[T]":
        return cls(
            IntervalLimit.lower(lower_closed, lower),
            IntervalLimit.upper(upper_closed, upper),
        )

    @classmethod
    def closed(
        cls, lower: "LimitValue[T] | T | None", upper: "LimitValue[T] | T | None"
    ) -> "Interval[T]":
        return cls.over(lower, True, upper, True)

    @classmethod
    def open(
        cls, lower: "LimitValue[T] | T | None", upper: "LimitValue[T] | T | None"
    ) -> "Interval[T]":
        return cls.over(lower, False, upper, False)

    @classmethod
    def and_more(cls, lower: "LimitValue[T] | T") -> "Interval[T]":
        """[lower, +∞)"""
        return cls.closed(lower, LIMITLESS)

    @classmethod
    def more_than(cls, lower: "LimitValue[T] | T") -> "Interval[T]":
        """(lower, +∞)"""
        return cls.open(lower, LIMITLESS)

    @classmethod
    def under(cls, upper: "LimitValue[T] | T") -> "Interval[T]":
        """(-∞, upper)"""
        return cls.open(LIMITLESS, upper)

    @classmethod
    def up_to(cls, upper: "LimitValue[T] | T") -> "Interval[T]":
        """(-∞, upper]"""
        return cls.closed(LIMITLESS, upper)

    @classmethod
    def single_element(cls, element: "LimitValue[T] | T") -> "Interval[T]":
        return cls.closed(element, element)

    def empty_of_same_type(self) -> "Interval[T]":
        """Return an empty interval anchored at this interval's lower value.

        Falls back to the upper value when the lower side is unbounded.

        Raises:
            UnboundedAccessError: If both sides are unbounded
        """
        anchor = self.lower_limit if self.has_lower_limit else self.upper_limit
        value = anchor.unwrap()
        return Interval.open(value, value)

    # Limits

    @property
    def lower_limit(self) -> LimitValue[T]:
        return self.lower.value

    @property
    def upper_limit(self) -> LimitValue[T]:
        return self.upper.value

    @property
    def has_lower_limit(self) -> bool:
        return not self.lower.is_unbounded

    @property
    def has_upper_limit(self) -> bool:
        return not self.upper.is_unbounded

    # On an unbounded side the closed flag is kept as given, so intervals
    # that compare equal, such as up_to(5) and over(None, False, 5, True),
    # can still disagree on includes_*_limit, is_open and is_closed.

    @property
    def includes_lower_limit(self) -> bool:
        return self.lower.closed

    @property
    def includes_upper_limit(self) -> bool:
        return self.upper.closed

    @property
    def is_open(self) -> bool:
        return not self.includes_lower_limit and not self.includes_upper_limit

    @property
    def is_closed(self) -> bool:
        return self.includes_lower_limit and self.includes_upper_limit

    @property
    def is_empty(self) -> bool:
        """True for an open single point such as (v, v), which holds nothing."""
        if not self.has_lower_limit and not self.has_upper_limit:
            return False
        return self.is_open and self.lower_limit == self.upper_limit

    @property
    def is_single_element(self) -> bool:
        if not self.has_upper_limit:
            return False
        return self.lower_limit == self.upper_limit and not self.is_empty

    # Membership

    def is_below(self, value: T) -> bool:
        """True if every element of this interval is less than ``value``."""
        if not self.has_upper_limit:
            return False
        order = compare_values(self.upper_limit.unwrap(), value)
        return order < 0 or (order == 0 and not self.includes_upper_limit)

    def is_above(self, value: T) -> bool:
        """True if every element of this interval is greater than ``value``."""
        if not self.has_lower_limit:
            return False
        order = compare_values(self.lower_limit.unwrap(), value)
        return order > 0 or (order == 0 and not self.includes_lower_limit)

    def contains(self, value: T) -> bool:
        return not self.is_below(value) and not self.is_above(value)

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def covers(self, other: "Interval[T]") -> bool:
        """True if every element of ``other`` is also in this interval."""
        if other.is_empty:
            return True
        return self._lower_reaches(other) and self._upper_reaches(other)

    def _lower_reaches(self, other: "Interval[T]") -> bool:
        if not self.has_lower_limit:
            return True
        if not other.has_lower_limit:
            return False
        order = compare_values(self.lower_limit.unwrap(), other.lower_limit.unwrap())
        if order == 0:
            return self.includes_lower_limit or not other.includes_lower_limit
        return order < 0

    def _upper_reaches(self, other: "Interval[T]") -> bool:
        if not self.has_upper_limit:
            return True
        if not other.has_upper_limit:
            return False
        order = compare_values(self.upper_limit.unwrap(), other.upper_limit.unwrap())
        if order == 0:
            return self.includes_upper_limit or not other.includes_upper_limit
        return order > 0

    # Algebra

    def greater_of_lower_limits(self, other: "Interval[T]") -> IntervalLimit[T]:
        """Pick the lower limit that starts later. An unbounded one never wins."""
        if not self.has_lower_limit:
            return other.lower
        if not other.has_lower_limit or self.lower >= other.lower:
            return self.lower
        return other.lower

    def lesser_of_upper_limits(self, other: "Interval[T]") -> IntervalLimit[T]:
        """Pick the upper limit that ends sooner. An unbounded one never wins."""
        if not self.has_upper_limit:
            return other.upper
        if not other.has_upper_limit or self.upper <= other.upper:
            return self.upper
        return other.upper

    def _included_in_both(self, other: "Interval[T]", limit: IntervalLimit[T]) -> bool:
        value = limit.value.unwrap()
        return self.contains(value) and other.contains(value)

    def _included_in_either(
        self, other: "Interval[T]", limit: IntervalLimit[T]
    ) -> bool:
        value = limit.value.unwrap()
        return self.contains(value) or other.contains(value)

    def intersects(self, other: "Interval[T]") -> bool:
        """True if the two intervals share at least one element.

        Touching limits only intersect when both intervals include the
        touching value: [0, 5] and [5, 10] intersect, [0, 5) and [5, 10]
        do not.
        """
        # Two rays to +∞ always overlap.
        if not self.has_upper_limit and not other.has_upper_limit:
            return True

        greater_lower = self.greater_of_lower_limits(other)
        lesser_upper = self.lesser_of_upper_limits(other)
        order = greater_lower.compare(lesser_upper)
        if order < 0:
            return True
        if order > 0:
            return False
        return self._included_in_both(other, greater_lower) and self._included_in_both(
            other, lesser_upper
        )

    def intersect(self, other: "Interval[T]") -> "Interval[T]":
        """Return the overlap of the two intervals, empty if they are disjoint."""
        if not self.intersects(other):
            return self.gap(other).empty_of_same_type()

        greater_lower = self.greater_of_lower_limits(other)
        lesser_upper = self.lesser_of_upper_limits(other)
        lower_closed = (
            greater_lower.closed
            if greater_lower.is_unbounded
            else self._included_in_both(other, greater_lower)
        )
        upper_closed = (
            lesser_upper.closed
            if lesser_upper.is_unbounded
            else self._included_in_both(other, lesser_upper)
        )
        return Interval.over(
            greater_lower.value, lower_closed, lesser_upper.value, upper_closed
        )

    def gap(self, other: "Interval[T]") -> "Interval[T]":
        """Return the interval strictly between two disjoint intervals.

        Empty when the intervals intersect or merely touch. The empty result is
        anchored at a bounded limit of either interval.

        Raises:
            UnboundedAccessError: If both intervals are the whole line, which
                leaves no value to anchor the empty result on
        """
        if self.intersects(other):
            bounded = self.has_lower_limit or self.has_upper_limit
            return (self if bounded else other).empty_of_same_type()

        lesser_upper = self.lesser_of_upper_limits(other)
        greater_lower = self.greater_of_lower_limits(other)
        return Interval.over(
            lesser_upper.value,
            not self._included_in_either(other, lesser_upper),
            greater_lower.value,
            not self._included_in_either(other, greater_lower),
        )

    def abuts(self, other: "Interval[T]") -> bool:
        """True if the intervals are disjoint but leave no gap.

        [0, 5) abuts [5, 10]; [0, 5] and [5, 10] overlap instead.
        """
        return not self.intersects(other) and self.gap(other).is_empty

    def left_complement_relative_to(
        self, other: "Interval[T]"
    ) -> "Interval[T] | None":
        """Return the part of ``other`` lying below this interval's lower limit.

        Returns None when this interval does not cut into ``other`` from below.
        """
        if not self.has_lower_limit:
            return None
        below = Interval.over(
            LIMITLESS, False, self.lower_limit, not self.includes_lower_limit
        )
        if not below.intersects(other):
            return None
        return below.intersect(other)

    def right_complement_relative_to(
        self, other: "Interval[T]"
    ) -> "Interval[T] | None":
        """Return the part of ``other`` lying above this interval's upper limit.

        Returns None when this interval does not cut into ``other`` from above.
        """
        if not self.has_upper_limit:
            return None
        above = Interval.over(
            self.upper_limit, not self.includes_upper_limit, LIMITLESS, False
        )
        if not above.intersects(other):
            return None
        return above.intersect(other)

    def complement_relative_to(self, other: "Interval[T]") -> list["Interval[T]"]:
        """Return the pieces of ``other`` not covered by this interval, in order.

        Holds zero, one or two intervals. When the intervals do not
        intersect, ``other`` is returned unchanged.
        """
        if not self.intersects(other):
            return [other]
        pieces = (
            self.left_complement_relative_to(other),
            self.right_complement_relative_to(other),
        )
        return [piece for piece in pieces if piece is not None]

    def __and__(self, other: "Interval[T]") -> "Interval[T]":
        return self.intersect(other)

    def __sub__(self, other: "Interval[T]") -> list["Interval[T]"]:
        return other.complement_relative_to(self)

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        try:
            return (
                self.lower.compare(other.lower) == 0
                and self.upper.compare(other.upper) == 0
            )
        except TypeError:
            # Limits of unrelated types are never equal.
            return False

    @override
    def __hash__(self) -> int:
        # Openness of an unbounded side does not take part in equality.
        return hash((self._hash_key(self.lower), self._hash_key(self.upper)))

    @staticmethod
    def _hash_key(limit: IntervalLimit[T]) -> Any:
        return None if limit.is_unbounded else (limit.value, limit.closed)

    @override
    def __str__(self) -> str:
        """Interval notation, e.g. ``[1, 10)`` or ``(-∞, 5]``."""
        return f"{self.lower}, {self.upper}"
