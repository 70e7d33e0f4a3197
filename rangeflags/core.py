from abc import ABC, abstractmethod
from typing import Any, Generic

from typing_extensions import override

from rangeflags.interval import IvlIn


class Filter(ABC, Generic[IvlIn]):

    @abstractmethod
    def apply(self, event: IvlIn) -> bool:
        pass

    def __call__(self, event: IvlIn) -> bool:
        return self.apply(event)

    def __or__(self, other: "Filter[IvlIn]") -> "Filter[IvlIn]":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot union (|) a Filter with {type(other).__name__}.\n"
                f"Hint: Build conditions from properties first: "
                f"(start >= 300) | (end <= 600)"
            )
        return Or(self, other)

    def __and__(self, other: "Filter[IvlIn]") -> "Filter[IvlIn]":
        if not isinstance(other, Filter):
            raise TypeError(
                f"Cannot intersect (&) a Filter with {type(other).__name__}.\n"
                f"Hint: Build conditions from properties first: "
                f"(start >= 300) & (end <= 600)"
            )
        return And(self, other)


class Or(Filter[IvlIn]):
    def __init__(self, *filters: Filter[IvlIn]):
        super().__init__()
        flattened: list[Filter[IvlIn]] = []
        for f in filters:
            if isinstance(f, Or):
                flattened.extend(f.filters)
            else:
                flattened.append(f)
        self.filters: tuple[Filter[IvlIn], ...] = tuple(flattened)

    @override
    def apply(self, event: IvlIn) -> bool:
        return any(f.apply(event) for f in self.filters)


class And(Filter[IvlIn]):
    def __init__(self, *filters: Filter[IvlIn]):
        super().__init__()
        flattened: list[Filter[IvlIn]] = []
        for f in filters:
            if isinstance(f, And):
                flattened.extend(f.filters)
            else:
                flattened.append(f)
        self.filters: tuple[Filter[IvlIn], ...] = tuple(flattened)

    @override
    def apply(self, event: IvlIn) -> bool:
        return all(f.apply(event) for f in self.filters)


def any_of(*filters: "Filter[Any]") -> "Filter[Any]":
    """Compose filters with OR semantics (equivalent to chaining `|`)."""

    if not filters:
        raise ValueError(
            f"any_of() requires at least one filter argument.\n"
            f"Example: any_of(start >= 300, end <= 600)"
        )
    return Or(*filters)


def all_of(*filters: "Filter[Any]") -> "Filter[Any]":
    """Compose filters with AND semantics (equivalent to chaining `&`)."""

    if not filters:
        raise ValueError(
            f"all_of() requires at least one filter argument.\n"
            f"Example: all_of(start >= 300, end <= 600)"
        )
    return And(*filters)
