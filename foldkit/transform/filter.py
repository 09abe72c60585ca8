"""Filter combinators

Keep the items matching a predicate, in their original order."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .._helpers import spread
from .._types import Predicate
from ..collection.fold import reduce
from ..curry import curry

@curry(2)
def filter[T](predicate: Predicate[T], target: Iterable[T] | None) -> list[T]:
    """
    New list of the items for which predicate(item, index, items) is truthy.
    """
    matches = spread(predicate, 3)

    def keep(acc: list[T], item: T, index: int, items: Sequence[T]) -> list[T]:
        if matches(item, index, items):
            acc.append(item)
        return acc

    return reduce([], keep, target)

__all__ = ("filter",)
