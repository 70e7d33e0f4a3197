"""Denormalized range records.

A saved range is stored together with one overlap flag per configured bucket:

    {"from": 500, "till": 1000,
     "ranges": {"300-600": True, "601-900": True, "1001-1500": False}}

so that a search for "everything in 601-900" is a plain equality lookup on
``ranges.601-900`` instead of interval arithmetic at query time.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from rangeflags.bucket import parse_buckets
from rangeflags.interval import Interval
from rangeflags.overlap import overlap_flags
from rangeflags.util import DEFAULT_DELIMITER, DEFAULT_LABELS, Labels, normalize_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class RangeRecord(Interval):
    ranges: dict[str, bool] = field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        """Return the mapping written to the document store."""
        return {"from": self.start, "till": self.end, "ranges": dict(self.ranges)}

    @classmethod
    def from_document(cls, document: Mapping[str, Any]) -> "RangeRecord":
        """Read back a stored record.

        Bounds go through ``normalize_number`` so a hand-edited document with
        string bounds still loads.
        """
        ranges = document.get("ranges")
        if not isinstance(ranges, Mapping):
            ranges = {}
        return cls(
            start=normalize_number(document.get("from")),
            end=normalize_number(document.get("till")),
            ranges={str(key): bool(value) for key, value in ranges.items()},
        )


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, Mapping):
        return len(value) == 0
    return False


def build_record(
    value: "Mapping[str, Any] | Interval | None",
    ranges: Iterable[str] | None = None,
) -> RangeRecord | None:
    """Normalize a submitted from/till value and compute its bucket flags.

    Args:
        value: Raw form value, ``{"from": ..., "till": ...}``, or an Interval
        ranges: Configured bucket descriptors; None means no buckets

    Returns:
        The record to store, or None when nothing was entered. A blank
        submission (both bounds zero) is not stored, so untouched fields
        don't fill the store with all-false flags.
    """
    if _is_blank(value):
        logger.debug("Range value is blank, record omitted")
        return None

    interval = Interval.from_value(value)
    if interval.is_blank:
        logger.debug("Range value normalizes to 0-0, record omitted")
        return None

    flags = overlap_flags(interval, parse_buckets(ranges))
    logger.debug(
        "Computed %d bucket flags for %s (%d overlapping)",
        len(flags),
        interval,
        sum(flags.values()),
    )
    return RangeRecord(start=interval.start, end=interval.end, ranges=flags)


def describe(
    value: "Mapping[str, Any] | Interval | None",
    delimiter: str | None = None,
    labels: Labels | None = None,
) -> str:
    """Render a range as text.

    Examples (default labels):
        from 10 / till 20   -> "10–20"
        from 10 / till 10   -> "10"
        from 10 / till 0    -> "from 10"
        from 0  / till 20   -> "till 20"
        from 0  / till 0    -> ""
    """
    if _is_blank(value):
        return ""

    delimiter = delimiter or DEFAULT_DELIMITER
    labels = labels or DEFAULT_LABELS
    interval = Interval.from_value(value)

    if interval.is_blank:
        return ""
    if interval.start == 0:
        return f"{labels.till} {interval.end}"
    if interval.end == 0:
        return f"{labels.from_} {interval.start}"
    if interval.start == interval.end:
        return str(interval.start)
    return f"{interval.start}{delimiter}{interval.end}"


def search_filter(field: str, descriptor: str) -> dict[str, bool]:
    """Equality filter selecting stored records that overlap ``descriptor``."""
    return {f"{field}.ranges.{descriptor}": True}
