from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

from rangeflags.util import normalize_number


@dataclass(frozen=True, kw_only=True)
class Interval:
    """A normalized from/till pair.

    Bounds are not checked against each other: a user may submit ``from``
    greater than ``till`` and it is stored as entered.
    """

    start: int
    end: int

    @classmethod
    def from_value(cls, value: "Mapping[str, Any] | Interval | None") -> "Interval":
        """Build an interval from a raw form value (``{"from": ..., "till": ...}``)."""
        if isinstance(value, Interval):
            return cls(start=value.start, end=value.end)
        if not isinstance(value, Mapping):
            return cls(start=0, end=0)
        return cls(
            start=normalize_number(value.get("from")),
            end=normalize_number(value.get("till")),
        )

    @property
    def is_blank(self) -> bool:
        return self.start == 0 and self.end == 0

    def __str__(self) -> str:
        return f"Interval({self.start}→{self.end})"


IvlIn = TypeVar("IvlIn", bound="Interval", contravariant=True)
