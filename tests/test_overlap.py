"""Tests for classifying an interval against buckets."""

import itertools

import pytest

from rangeflags import (
    Interval,
    completely_in_range,
    contains_range,
    intersects_range_partially,
    overlap_flags,
    overlapping,
    overlaps,
    parse_bucket,
    parse_buckets,
)
from rangeflags.bucket import Bucket

USER = Interval(start=500, end=1000)


def test_partial_overlap_on_high_edge():
    """500-1000 runs past the top of 300-600."""
    bucket = parse_bucket("300-600")
    assert not completely_in_range(bucket).apply(USER)
    assert intersects_range_partially(bucket).apply(USER)
    assert not contains_range(bucket).apply(USER)
    assert overlaps(USER, bucket)


def test_interval_contains_bucket():
    bucket = parse_bucket("601-900")
    assert contains_range(bucket).apply(USER)
    assert overlaps(USER, bucket)


def test_bucket_reached_by_interval_end():
    """till=1000 lies inside 901-1500, crossing the bucket's low edge."""
    bucket = parse_bucket("901-1500")
    assert intersects_range_partially(bucket).apply(USER)
    assert overlaps(USER, bucket)


def test_disjoint_bucket():
    far = parse_bucket("1001-1500")
    assert not completely_in_range(far).apply(USER)
    assert not intersects_range_partially(far).apply(USER)
    assert not contains_range(far).apply(USER)
    assert not overlaps(USER, far)


def test_completely_in_range():
    bucket = parse_bucket("0-2000")
    assert completely_in_range(bucket).apply(USER)
    assert overlaps(USER, bucket)


def test_touching_boundaries_overlap():
    """Closed intervals touching at one point overlap."""
    assert overlaps(Interval(start=100, end=300), parse_bucket("300-600"))
    assert overlaps(Interval(start=600, end=700), parse_bucket("300-600"))
    assert not overlaps(Interval(start=100, end=299), parse_bucket("300-600"))
    assert not overlaps(Interval(start=601, end=700), parse_bucket("300-600"))


def test_open_high_bucket():
    bucket = parse_bucket("901-")
    assert overlaps(Interval(start=5000, end=100000), bucket)
    assert not overlaps(Interval(start=10, end=900), bucket)


def test_open_low_bucket():
    bucket = parse_bucket("-600")
    assert overlaps(Interval(start=0, end=10), bucket)
    assert overlaps(Interval(start=599, end=1000), bucket)
    assert not overlaps(Interval(start=601, end=1000), bucket)


def test_filter_is_callable():
    assert overlapping(parse_bucket("300-600"))(USER)


def test_overlap_flags_keyed_by_descriptor():
    flags = overlap_flags(USER, parse_buckets(["300-600", "601-900", "1001-1500"]))
    assert flags == {"300-600": True, "601-900": True, "1001-1500": False}


def test_overlap_flags_without_buckets():
    assert overlap_flags(USER, []) == {}


def _intersects(a_lo: int, a_hi: int, b_lo: int, b_hi: int) -> bool:
    return max(a_lo, b_lo) <= min(a_hi, b_hi)


def test_matches_closed_interval_intersection_exhaustively():
    """For ordered bounds, the three conditions amount to plain intersection."""
    values = range(0, 7)
    for start, end, low, high in itertools.product(values, repeat=4):
        if start > end or low > high:
            continue
        interval = Interval(start=start, end=end)
        bucket = Bucket(descriptor=f"{low}-{high}", low=low, high=high)
        assert overlaps(interval, bucket) == _intersects(start, end, low, high), (
            interval,
            bucket,
        )


@pytest.mark.parametrize(
    "start, end, expected",
    [
        (700, 400, True),  # 700 >= 300 and 400 <= 600
        (2000, 1000, False),
    ],
)
def test_unordered_interval_is_evaluated_as_given(start, end, expected):
    """from > till is not rejected; the conditions are applied literally."""
    assert overlaps(Interval(start=start, end=end), parse_bucket("300-600")) is expected
