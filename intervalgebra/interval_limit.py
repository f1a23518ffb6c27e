"""Interval endpoints and the role-aware order between them."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from typing_extensions import override

from intervalgebra.limit_value import LimitValue, as_limit_value

T = TypeVar("T")


class Role(Enum):
    LOWER = "lower"
    UPPER = "upper"


class TieBreak(Enum):
    """How endpoints of different roles at the same value are ordered.

    BY_VALUE: fall through to the value comparison, so a lower and an upper
        endpoint at the same value are always equal. Interval construction
        and intersection rely on this.
    CLOSED_FIRST: when exactly one of them is closed, the closed endpoint
        ranks before the open one.
    """

    BY_VALUE = "by_value"
    CLOSED_FIRST = "closed_first"


DEFAULT_TIE_BREAK = TieBreak.BY_VALUE


@dataclass(frozen=True, kw_only=True, eq=False)
class IntervalLimit(Generic[T]):
    role: Role
    closed: bool
    value: LimitValue[T]

    @classmethod
    def lower(
        cls, closed: bool, value: "LimitValue[T] | T | None"
    ) -> "IntervalLimit[T]":
        return cls(role=Role.LOWER, closed=closed, value=as_limit_value(value))

    @classmethod
    def upper(
        cls, closed: bool, value: "LimitValue[T] | T | None"
    ) -> "IntervalLimit[T]":
        return cls(role=Role.UPPER, closed=closed, value=as_limit_value(value))

    @property
    def is_unbounded(self) -> bool:
        return self.value.is_limitless

    @property
    def is_open(self) -> bool:
        return not self.closed

    @property
    def is_closed(self) -> bool:
        return self.closed

    @property
    def is_lower_role(self) -> bool:
        return self.role is Role.LOWER

    @property
    def is_upper_role(self) -> bool:
        return not self.is_lower_role

    def compare(
        self,
        other: "IntervalLimit[T]",
        *,
        tie_break: TieBreak = DEFAULT_TIE_BREAK,
    ) -> int:
        """Three-way comparison of two endpoints, possibly from different intervals.

        Rules, in order:
        1. Both unbounded: equal for the same role, otherwise the lower one
           (-inf) comes first. Openness is ignored.
        2. One unbounded: it comes first when it is a lower limit (-inf) and
           last when it is an upper limit (+inf).
        3. Both bounded at the same value with different openness:
           - same role: the closed endpoint ranks after the open one;
           - different roles: decided by `tie_break` (see `TieBreak`).
        4. Otherwise the bounded values decide.

        Returns:
            -1, 0 or 1 as ``self`` sorts before, with or after ``other``
        """
        if self.is_unbounded and other.is_unbounded:
            if self.role is other.role:
                return 0
            return -1 if self.is_lower_role else 1
        if self.is_unbounded:
            return -1 if self.is_lower_role else 1
        if other.is_unbounded:
            return 1 if other.is_lower_role else -1

        order = self.value.compare(other.value)
        if order != 0 or self.closed == other.closed:
            return order
        if self.role is other.role:
            return 1 if self.closed else -1
        if tie_break is TieBreak.CLOSED_FIRST:
            return -1 if self.closed else 1
        return order

    def __lt__(self, other: "IntervalLimit[T]") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "IntervalLimit[T]") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "IntervalLimit[T]") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "IntervalLimit[T]") -> bool:
        return self.compare(other) >= 0

    @override
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntervalLimit):
            return NotImplemented
        try:
            return self.compare(other) == 0
        except TypeError:
            return False

    @override
    def __hash__(self) -> int:
        # Equal endpoints always share a value, and unbounded ones a role.
        if self.is_unbounded:
            return hash((self.value, self.role))
        return hash(self.value)

    @override
    def __str__(self) -> str:
        if self.is_lower_role:
            if self.is_unbounded:
                return "(-∞"
            return f"{'[' if self.closed else '('}{self.value}"
        if self.is_unbounded:
            return "+∞)"
        return f"{self.value}{']' if self.closed else ')'}"
