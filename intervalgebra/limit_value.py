"""Boundary values: a concrete limit or the absence of one.

A `LimitValue` carries no direction. `LIMITLESS` only becomes -inf or +inf
once it is wrapped in an `IntervalLimit` with a lower or upper role.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from typing_extensions import override

from intervalgebra.errors import UnboundedAccessError
from intervalgebra.util import compare_values

T = TypeVar("T")


class LimitValue(ABC, Generic[T]):
    """Either ``Limit(value)`` or ``LIMITLESS``."""

    @property
    @abstractmethod
    def is_limitless(self) -> bool:
        pass

    @abstractmethod
    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            UnboundedAccessError: If this is ``LIMITLESS``
        """
        pass

    @abstractmethod
    def unwrap_or(self, default: T) -> T:
        pass

    def compare(self, other: "LimitValue[T]") -> int:
        """Directionless three-way comparison.

        ``LIMITLESS`` equals itself and is less than every ``Limit``. Two
        limits compare by their values. Endpoint comparisons must go through
        `IntervalLimit.compare` instead, which knows which side is -inf.
        """
        if self.is_limitless:
            return 0 if other.is_limitless else -1
        if other.is_limitless:
            return 1
        return compare_values(self.unwrap(), other.unwrap())

    def __lt__(self, other: "LimitValue[T]") -> bool:
        return self.compare(other) < 0

    def __le__(self, other: "LimitValue[T]") -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: "LimitValue[T]") -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: "LimitValue[T]") -> bool:
        return self.compare(other) >= 0


@dataclass(frozen=True)
class Limit(LimitValue[T]):
    value: T

    @property
    @override
    def is_limitless(self) -> bool:
        return False

    @override
    def unwrap(self) -> T:
        return self.value

    @override
    def unwrap_or(self, default: T) -> T:
        return self.value

    @override
    def __str__(self) -> str:
        return str(self.value)


class Limitless(LimitValue[Any]):
    """The unbounded side of a range. Use the `LIMITLESS` singleton."""

    _instance: "Limitless | None" = None

    def __new__(cls) -> "Limitless":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    @override
    def is_limitless(self) -> bool:
        return True

    @override
    def unwrap(self) -> Any:
        raise UnboundedAccessError(
            "Cannot read the value of an unbounded limit.\n"
            "Hint: check `is_limitless` (or `has_lower_limit`/`has_upper_limit` "
            "on the interval) first, or use `unwrap_or(default)`"
        )

    @override
    def unwrap_or(self, default: Any) -> Any:
        return default

    @override
    def __eq__(self, other: object) -> bool:
        return isinstance(other, Limitless)

    @override
    def __hash__(self) -> int:
        return hash(Limitless)

    @override
    def __repr__(self) -> str:
        return "LIMITLESS"

    def __reduce__(self) -> str:
        return "LIMITLESS"


LIMITLESS: Limitless = Limitless()


def as_limit_value(bound: "LimitValue[T] | T | None") -> LimitValue[T]:
    """Coerce a factory argument to a `LimitValue`.

    Accepts:
    - LimitValue: Passed through as-is
    - None: Unbounded (``LIMITLESS``)
    - anything else: Wrapped in ``Limit``
    """
    if isinstance(bound, LimitValue):
        return bound
    if bound is None:
        return LIMITLESS
    return Limit(bound)
