"""Interval-versus-bucket overlap classification.

Each condition is a filter over an ``Interval``, built from the ``start`` and
``end`` properties and a bucket's bounds. ``overlapping(bucket)`` ORs the
three together; the conditions share regions, which is fine for a boolean.

::

    completely_in_range          -----
                               [ RANGE ]

    intersects_range_partially       -------      ------
                               [ RANGE ]             [ RANGE ]

    contains_range             -----------
                                [ RANGE ]
"""

from collections.abc import Iterable

from rangeflags.bucket import Bucket
from rangeflags.core import Filter
from rangeflags.interval import Interval
from rangeflags.properties import end, start


def completely_in_range(bucket: Bucket) -> Filter[Interval]:
    """Interval lies inside the bucket (inclusive)."""
    return (start >= bucket.low) & (end <= bucket.high)


def intersects_range_partially(bucket: Bucket) -> Filter[Interval]:
    """Interval crosses or touches either end of the bucket."""
    crosses_low = (start <= bucket.low) & (end >= bucket.low)
    crosses_high = (start <= bucket.high) & (end >= bucket.high)
    return crosses_low | crosses_high


def contains_range(bucket: Bucket) -> Filter[Interval]:
    """Interval strictly encloses the bucket."""
    return (start < bucket.low) & (end > bucket.high)


def overlapping(bucket: Bucket) -> Filter[Interval]:
    return (
        completely_in_range(bucket)
        | intersects_range_partially(bucket)
        | contains_range(bucket)
    )


def overlaps(interval: Interval, bucket: Bucket) -> bool:
    """True if ``interval`` and ``bucket`` share at least one point."""
    return overlapping(bucket).apply(interval)


def overlap_flags(interval: Interval, buckets: Iterable[Bucket]) -> dict[str, bool]:
    """Map each bucket's descriptor to whether ``interval`` overlaps it."""
    return {bucket.descriptor: overlaps(interval, bucket) for bucket in buckets}
