"""Utility constants and helpers for rangeflags.

Numbers reach this package as raw form input: ints, numeric strings, blanks,
or garbage. ``normalize_number`` turns any of those into an int without ever
raising; ``is_number_text`` tells whether a piece of text survives that
conversion unchanged, which is how open bucket ends are detected.
"""

import math
import re
from dataclasses import dataclass
from typing import Any

# Stand-in for an open (unbounded) high end of a bucket
MAX_32BIT = 2_147_483_647

# Separators accepted between the low and high parts of a bucket descriptor
RANGE_DELIMITERS = re.compile(r"[-:\\]")

# En dash, used when rendering ranges and bucket labels
DEFAULT_DELIMITER = "–"


@dataclass(frozen=True)
class Labels:
    """Words used when rendering ranges for people.

    Defaults are English; pass translated strings to localize.
    """

    from_: str = "from"
    till: str = "till"
    less_than: str = "less than"
    more_than: str = "more than"


DEFAULT_LABELS = Labels()

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

# Default limit of int/str conversion on CPython 3.11+
_MAX_DIGITS = 4300


def normalize_number(value: Any) -> int:
    """Coerce a raw input value to an int.

    Blank, absent and non-numeric values become 0. Text is read up to the
    first character that can't belong to an integer, so ``"12.7"`` is 12 and
    ``"12abc"`` is 12. Floats are truncated toward zero. Digit runs too long
    for the interpreter's int conversion limit count as non-numeric.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return 0
        return int(value)
    if isinstance(value, (str, bytes)):
        text = value.decode(errors="replace") if isinstance(value, bytes) else value
        match = _LEADING_INT.match(text)
        if not match or len(match.group(1).lstrip("+-")) > _MAX_DIGITS:
            return 0
        try:
            return int(match.group(1))
        except ValueError:
            return 0
    return 0


def is_number_text(value: Any) -> bool:
    """True if ``value`` round-trips through ``normalize_number`` unchanged."""
    if value is None:
        return False
    try:
        return str(normalize_number(value)) == str(value)
    except ValueError:
        return False


def split_descriptor(descriptor: str) -> tuple[str, str]:
    """Split a bucket descriptor on its first delimiter.

    A descriptor with no delimiter has an empty high part.
    """
    parts = RANGE_DELIMITERS.split(descriptor, maxsplit=1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1]
