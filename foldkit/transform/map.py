"""Map combinators

Element-wise transforms built on the fold engine. Every result is a new list."""

from __future__ import annotations

import typing
from collections.abc import Iterable, Sequence

from .._helpers import is_sequence, spread
from .._types import Mapper
from ..collection.fold import reduce
from ..curry import curry

@curry(2)
def map[T, U](mapper: Mapper[T, U], target: Iterable[T] | None) -> list[U]:
    """[mapper(item, index, items) for each item], same order and length."""
    produce = spread(mapper, 3)

    def collect(acc: list[U], item: T, index: int, items: Sequence[T]) -> list[U]:
        acc.append(produce(item, index, items))
        return acc

    return reduce([], collect, target)

def _concat[U](acc: list[U], produced: typing.Any) -> list[U]:
    # Mapper results are spliced in; a non-iterable or text result is one item
    if isinstance(produced, Iterable) and not isinstance(produced, (str, bytes, bytearray)):
        acc.extend(produced)
    else:
        acc.append(produced)
    return acc

@curry(2)
def flat_map[T, U](mapper: Mapper[T, Iterable[U]], target: Iterable[T] | None) -> list[U]:
    """Map, then flatten exactly one level."""
    produce = spread(mapper, 3)

    def collect(acc: list[U], item: T, index: int, items: Sequence[T]) -> list[U]:
        return _concat(acc, produce(item, index, items))

    return reduce([], collect, target)

def _flatten_item(item: typing.Any) -> list[typing.Any]:
    if is_sequence(item):
        return flatten(item)
    return [item]

@curry(1)
def flatten(target: Iterable[typing.Any] | None) -> list[typing.Any]:
    """
    Flatten arbitrarily nested sequences, depth-first, left to right.

    Example:
        flatten([1, 2, [4, 5, 6, [7, 8, 9]]])  # [1, 2, 4, 5, 6, 7, 8, 9]

    Strings are atoms and are never split into characters.
    """
    return flat_map(_flatten_item, target)

__all__ = ("flat_map", "flatten", "map")
