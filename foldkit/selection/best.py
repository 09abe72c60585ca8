"""Best-of combinators

Selection of the extreme mapped value."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable

from .._types import Mapper
from ..collection.fold import reduce
from ..curry import curry
from ..transform.map import map

def _extreme[T, K](
    better: Callable[[K, K], bool],
    mapper: Mapper[T, K],
    target: Iterable[T] | None,
) -> K | None:
    values = map(mapper, target)
    if not values:
        return None

    def pick(best: K, value: K) -> K:
        return value if better(value, best) else best

    return reduce(pick, values)

@curry(2)
def max[T, K](mapper: Mapper[T, K], target: Iterable[T] | None) -> K | None:
    """Largest mapper(item, index, items) value, None for an empty target."""
    return _extreme(operator.gt, mapper, target)

@curry(2)
def min[T, K](mapper: Mapper[T, K], target: Iterable[T] | None) -> K | None:
    """Smallest mapper(item, index, items) value, None for an empty target."""
    return _extreme(operator.lt, mapper, target)

__all__ = ("max", "min")
