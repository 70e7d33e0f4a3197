from .bucket import Bucket, humanize_bucket, parse_bucket, parse_buckets, select_options
from .core import Filter, all_of, any_of
from .field import RangeField
from .interval import Interval
from .overlap import (
    completely_in_range,
    contains_range,
    intersects_range_partially,
    overlap_flags,
    overlapping,
    overlaps,
)
from .properties import Property, end, start
from .record import RangeRecord, build_record, describe, search_filter
from .util import MAX_32BIT, Labels, is_number_text, normalize_number

__all__ = [
    "Interval",
    "Bucket",
    "RangeRecord",
    "RangeField",
    "Labels",
    "Filter",
    "Property",
    "start",
    "end",
    "any_of",
    "all_of",
    "normalize_number",
    "is_number_text",
    "parse_bucket",
    "parse_buckets",
    "humanize_bucket",
    "select_options",
    "completely_in_range",
    "intersects_range_partially",
    "contains_range",
    "overlapping",
    "overlaps",
    "overlap_flags",
    "build_record",
    "describe",
    "search_filter",
    "MAX_32BIT",
]
