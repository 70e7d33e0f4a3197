"""Bucket descriptors: named reference intervals used for overlap flags.

A bucket is configured as text such as ``"300-600"``, ``"-600"`` or ``"901-"``.
The low and high parts are separated by one of ``-``, ``:`` or ``\\``, and
either part may be left empty. An empty or non-numeric high part means the
bucket is open above and is capped at ``MAX_32BIT``. An empty low part simply
becomes 0, so ``"-600"`` and ``"0-600"`` describe the same bucket.

The descriptor text is kept verbatim: it is the key under which overlap
flags are stored and later searched.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from rangeflags.util import (
    DEFAULT_DELIMITER,
    DEFAULT_LABELS,
    MAX_32BIT,
    Labels,
    is_number_text,
    normalize_number,
    split_descriptor,
)


@dataclass(frozen=True, kw_only=True)
class Bucket:
    descriptor: str
    low: int
    high: int

    @property
    def is_open(self) -> bool:
        """True if the high end was left unbounded."""
        return self.high == MAX_32BIT

    def __str__(self) -> str:
        return f"Bucket({self.descriptor!r}: {self.low}→{self.high})"


def parse_bucket(descriptor: str) -> Bucket:
    """Parse a bucket descriptor into normalized bounds.

    Example:
        >>> parse_bucket("901-")
        Bucket(descriptor='901-', low=901, high=2147483647)
    """
    low_text, high_text = split_descriptor(descriptor)
    high = normalize_number(high_text) if is_number_text(high_text) else MAX_32BIT
    return Bucket(descriptor=descriptor, low=normalize_number(low_text), high=high)


def parse_buckets(descriptors: Iterable[str] | None) -> list[Bucket]:
    """Parse every configured descriptor, keeping their order."""
    if descriptors is None:
        return []
    return [parse_bucket(descriptor) for descriptor in descriptors]


def humanize_bucket(descriptor: str, labels: Labels | None = None) -> str:
    """Render a descriptor as a label for a search select box.

    ``"-600"`` becomes ``"less than 600"``, ``"901-"`` becomes
    ``"more than 901"`` and ``"300-600"`` becomes ``"300–600"``.
    """
    labels = labels or DEFAULT_LABELS
    low_text, high_text = split_descriptor(descriptor)
    if not is_number_text(low_text):
        return f"{labels.less_than} {high_text}"
    if not is_number_text(high_text):
        return f"{labels.more_than} {low_text}"
    return DEFAULT_DELIMITER.join([low_text, high_text])


def select_options(
    descriptors: Iterable[str] | None, labels: Labels | None = None
) -> list[tuple[str, str]]:
    """Build ``(label, descriptor)`` choices, led by an empty choice."""
    options = [("", "")]
    if descriptors is None:
        return options
    options.extend(
        (humanize_bucket(descriptor, labels), descriptor) for descriptor in descriptors
    )
    return options
