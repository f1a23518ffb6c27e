import itertools

import pytest

from intervalgebra import (
    LIMITLESS,
    Interval,
    IntervalLimit,
    Limit,
    UnboundedAccessError,
)

SAMPLES = [
    Interval.closed(0, 5),
    Interval.open(0, 5),
    Interval.over(0, True, 5, False),
    Interval.over(5, False, 10, True),
    Interval.closed(5, 10),
    Interval.open(5, 10),
    Interval.closed(5, 5),
    Interval.open(5, 5),
    Interval.closed(-3, 20),
    Interval.and_more(5),
    Interval.more_than(5),
    Interval.under(5),
    Interval.up_to(5),
    Interval.open(None, None),
]


@pytest.mark.parametrize("left, right", list(itertools.product(SAMPLES, repeat=2)))
def test_intersects_is_symmetric(left: Interval, right: Interval) -> None:
    assert left.intersects(right) == right.intersects(left)


@pytest.mark.parametrize("left, right", list(itertools.product(SAMPLES, repeat=2)))
def test_intersect_agrees_with_intersects(left: Interval, right: Interval) -> None:
    overlap = left & right
    assert overlap == right & left
    assert overlap.is_empty != left.intersects(right)


def test_closed_touch_intersects() -> None:
    assert Interval.closed(0, 5).intersects(Interval.closed(5, 10))


def test_open_touch_does_not_intersect() -> None:
    left = Interval.open(0, 5)
    right = Interval.open(5, 10)
    assert not left.intersects(right)
    assert not left.contains(5)
    assert not right.contains(5)


def test_half_open_touch_does_not_intersect() -> None:
    assert not Interval.over(0, True, 5, False).intersects(Interval.closed(5, 10))
    assert not Interval.closed(0, 5).intersects(Interval.over(5, False, 10, True))


def test_disjoint_and_overlapping() -> None:
    assert not Interval.closed(0, 4).intersects(Interval.closed(5, 10))
    assert Interval.closed(0, 6).intersects(Interval.closed(5, 10))
    assert Interval.closed(0, 10).intersects(Interval.closed(3, 4))


def test_empty_interval_intersects_nothing() -> None:
    empty = Interval.open(5, 5)
    assert not empty.intersects(Interval.closed(0, 10))
    assert not empty.intersects(empty)


def test_unbounded_rays() -> None:
    assert Interval.more_than(0).intersects(Interval.under(100))
    assert Interval.and_more(10**9).intersects(Interval.and_more(-(10**9)))
    assert Interval.and_more(3).intersects(Interval.and_more(3))
    assert not Interval.under(0).intersects(Interval.more_than(0))
    assert Interval.up_to(0).intersects(Interval.and_more(0))


def test_overlap_scenario() -> None:
    left = Interval.closed(1, 10)
    right = Interval.closed(5, 15)

    assert left.intersects(right)
    overlap = left.intersect(right)
    assert overlap.lower_limit == Limit(5)
    assert overlap.includes_lower_limit
    assert overlap.upper_limit == Limit(10)
    assert overlap.includes_upper_limit
    assert overlap == Interval.closed(5, 10)


def test_intersect_keeps_the_stricter_limit() -> None:
    assert Interval.closed(0, 10) & Interval.open(0, 5) == Interval.open(0, 5)
    assert Interval.closed(0, 5) & Interval.closed(5, 10) == Interval.single_element(5)
    assert Interval.up_to(5) & Interval.more_than(0) == Interval.over(0, False, 5, True)
    assert Interval.under(5) & Interval.under(7) == Interval.under(5)


def test_intersect_of_disjoint_is_empty() -> None:
    assert (Interval.closed(0, 1) & Interval.closed(3, 4)).is_empty
    assert (Interval.under(0) & Interval.more_than(0)).is_empty


def test_limit_selection() -> None:
    left = Interval.closed(0, 10)
    right = Interval.open(3, 7)
    assert left.greater_of_lower_limits(right) == IntervalLimit.lower(False, 3)
    assert left.lesser_of_upper_limits(right) == IntervalLimit.upper(False, 7)


def test_limit_selection_skips_unbounded() -> None:
    bounded = Interval.closed(0, 10)
    ray = Interval.open(None, None)
    assert ray.greater_of_lower_limits(bounded) == IntervalLimit.lower(True, 0)
    assert bounded.greater_of_lower_limits(ray) == IntervalLimit.lower(True, 0)
    assert ray.lesser_of_upper_limits(bounded) == IntervalLimit.upper(True, 10)
    assert bounded.lesser_of_upper_limits(ray) == IntervalLimit.upper(True, 10)
    assert ray.greater_of_lower_limits(ray).value is LIMITLESS


def test_covers() -> None:
    outer = Interval.closed(0, 10)
    assert outer.covers(Interval.open(0, 10))
    assert outer.covers(outer)
    assert not Interval.open(0, 10).covers(outer)
    assert not outer.covers(Interval.closed(5, 11))
    assert Interval.and_more(0).covers(Interval.and_more(1))
    assert not Interval.closed(0, 100).covers(Interval.and_more(1))
    assert Interval.open(None, None).covers(Interval.under(3))
    assert outer.covers(Interval.open(50, 50))


def test_gap() -> None:
    assert Interval.closed(0, 3).gap(Interval.closed(5, 8)) == Interval.open(3, 5)
    assert Interval.closed(5, 8).gap(Interval.open(0, 3)) == Interval.over(3, True, 5, False)
    assert Interval.closed(0, 5).gap(Interval.closed(3, 8)).is_empty
    assert Interval.over(0, True, 5, False).gap(Interval.closed(5, 8)).is_empty


def test_abuts() -> None:
    assert Interval.over(0, True, 5, False).abuts(Interval.closed(5, 8))
    assert Interval.closed(5, 8).abuts(Interval.over(0, True, 5, False))
    assert not Interval.closed(0, 5).abuts(Interval.closed(5, 8))
    assert not Interval.open(0, 5).abuts(Interval.open(5, 8))
    assert not Interval.closed(0, 3).abuts(Interval.closed(5, 8))
    assert Interval.closed(0, 5).abuts(Interval.over(5, False, 8, True))


def test_gap_with_whole_line_is_empty() -> None:
    everything = Interval.open(None, None)
    assert everything.gap(Interval.closed(0, 1)).is_empty
    assert Interval.closed(0, 1).gap(everything).is_empty
    assert everything.gap(Interval.under(3)) == Interval.open(3, 3)


def test_gap_between_two_whole_lines_has_no_anchor() -> None:
    everything = Interval.open(None, None)
    with pytest.raises(UnboundedAccessError):
        everything.gap(everything)
