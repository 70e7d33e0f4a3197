"""Comparable bounds of a submitted range.

``start`` reads an interval's ``from`` value and ``end`` its ``till`` value.
Comparing either one with a number gives a ``Comparison`` filter, which lets
bucket conditions read like the arithmetic they stand for::

    (start >= bucket.low) & (end <= bucket.high)
"""

import operator as op
from typing import Callable, Generic

from typing_extensions import override

from .core import Filter
from .interval import Interval, IvlIn

_SYMBOLS = {op.ge: ">=", op.le: "<=", op.gt: ">", op.lt: "<"}


class Comparison(Filter[IvlIn]):
    """One bound of an interval checked against a fixed number."""

    def __init__(
        self,
        bound: "Property[IvlIn]",
        limit: int,
        operator: Callable[[int, int], bool],
    ):
        self.bound: Property[IvlIn] = bound
        self.limit: int = limit
        self.operator: Callable[[int, int], bool] = operator

    @override
    def apply(self, event: IvlIn) -> bool:
        return self.operator(self.bound.apply(event), self.limit)

    def __repr__(self) -> str:
        return f"({self.bound.name} {_SYMBOLS[self.operator]} {self.limit})"


class Property(Generic[IvlIn]):
    name: str = "?"

    def apply(self, event: IvlIn) -> int:
        raise NotImplementedError

    def __ge__(self, limit: int) -> Comparison[IvlIn]:
        return Comparison(self, limit, op.ge)

    def __le__(self, limit: int) -> Comparison[IvlIn]:
        return Comparison(self, limit, op.le)

    def __gt__(self, limit: int) -> Comparison[IvlIn]:
        return Comparison(self, limit, op.gt)

    def __lt__(self, limit: int) -> Comparison[IvlIn]:
        return Comparison(self, limit, op.lt)


class Start(Property[Interval]):
    name = "start"

    @override
    def apply(self, event: Interval) -> int:
        return event.start


class End(Property[Interval]):
    name = "end"

    @override
    def apply(self, event: Interval) -> int:
        return event.end


start: Start = Start()
end: End = End()
