"""Number-range field type.

``RangeField`` carries the per-field configuration (the bucket descriptors and
the display words) and exposes the operations a form/storage layer needs:
turning a submitted value into a storable document, rendering a stored value,
building a search filter for a bucket, and listing buckets as select options.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from rangeflags.bucket import Bucket, parse_buckets, select_options
from rangeflags.interval import Interval
from rangeflags.record import build_record, describe, search_filter
from rangeflags.util import DEFAULT_DELIMITER, DEFAULT_LABELS, Labels

logger = logging.getLogger(__name__)


class RangeField:
    """A from/till field whose saves are flagged against configured buckets.

    Example:
        >>> price = RangeField(ranges=["300-600", "601-900", "1001-1500"])
        >>> price.to_document({"from": "500", "till": "1000"})
        {'from': 500, 'till': 1000, 'ranges': {'300-600': True, '601-900': True, '1001-1500': False}}
        >>> price.search("price", "601-900")
        {'price.ranges.601-900': True}
    """

    def __init__(
        self,
        ranges: Iterable[str] | None = None,
        labels: Labels | None = None,
        delimiter: str | None = None,
    ) -> None:
        if isinstance(ranges, str):
            raise TypeError(
                f"RangeField ranges must be a list of descriptors, got a string: "
                f"{ranges!r}\n"
                f"Hint: Wrap it in a list: RangeField(ranges=[{ranges!r}])"
            )
        descriptors = tuple(ranges) if ranges is not None else ()
        for descriptor in descriptors:
            if not isinstance(descriptor, str):
                raise TypeError(
                    f"Bucket descriptors must be strings.\n"
                    f"Got {type(descriptor).__name__!r}: {descriptor!r}\n"
                    f"Examples: '300-600', '-600', '901-'"
                )
        self.ranges: tuple[str, ...] = descriptors
        self.labels: Labels = labels or DEFAULT_LABELS
        self.delimiter: str = delimiter or DEFAULT_DELIMITER

    def buckets(self) -> list[Bucket]:
        return parse_buckets(self.ranges)

    def to_document(
        self, value: "Mapping[str, Any] | Interval | None"
    ) -> dict[str, Any] | None:
        """Storable form of ``value``, or None when nothing was entered."""
        record = build_record(value, self.ranges)
        if record is None:
            return None
        logger.debug("Storing range %s with %d flags", record, len(record.ranges))
        return record.to_document()

    def to_text(
        self,
        value: "Mapping[str, Any] | Interval | None",
        delimiter: str | None = None,
    ) -> str:
        return describe(value, delimiter or self.delimiter, self.labels)

    def search(self, field: str, descriptor: str) -> dict[str, bool]:
        if descriptor not in self.ranges:
            logger.debug(
                "Searching %s by unconfigured bucket %r; no stored flag will match",
                field,
                descriptor,
            )
        return search_filter(field, descriptor)

    def select_options(self) -> list[tuple[str, str]]:
        return select_options(self.ranges, self.labels)

    def __repr__(self) -> str:
        return f"RangeField(ranges={list(self.ranges)!r})"
