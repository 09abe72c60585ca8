"""Traverse operations

Short-circuiting traversal in either direction over a snapshot."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Sequence

from .._helpers import snapshot, spread
from .._types import Visitor
from ..curry import curry

# Direction = snapshot length -> indices to visit, in order
type Direction = Callable[[int], Iterable[int]]

def forward(length: int) -> Iterable[int]:
    return range(length)

def backward(length: int) -> Iterable[int]:
    return range(length - 1, -1, -1)

# Generic traversal (direction as a parameter)
def walk[T](
    direction: Direction,
    visitor: Visitor[T],
    target: Iterable[T] | None,
) -> None:
    """
    Visit the snapshot of target in `direction` order.

    Stops the first time visitor returns exactly False. Any other value,
    falsy or not, continues.
    """
    items = snapshot(target)
    visit = spread(visitor, 3)

    for index in direction(len(items)):
        if visit(items[index], index, items) is False:
            return

def _ignoring_result[T](visitor: Visitor[T]) -> Visitor[T]:
    visit = spread(visitor, 3)

    def run(item: T, index: int, items: Sequence[T]) -> None:
        visit(item, index, items)

    return run

# Short-circuiting traversal
@curry(2)
def each_until[T](visitor: Visitor[T], target: Iterable[T] | None) -> None:
    """Visit items in index order until visitor returns False."""
    walk(forward, visitor, target)

@curry(2)
def each_in_reverse_until[T](visitor: Visitor[T], target: Iterable[T] | None) -> None:
    """Visit items from the last index down until visitor returns False."""
    walk(backward, visitor, target)

# Full traversal
@curry(2)
def each[T](visitor: Callable[..., typing.Any], target: Iterable[T] | None) -> None:
    """Visit every item in index order; the visitor's return value is ignored."""
    walk(forward, _ignoring_result(visitor), target)

@curry(2)
def each_in_reverse[T](visitor: Callable[..., typing.Any], target: Iterable[T] | None) -> None:
    """Visit every item from the last index down; return values are ignored."""
    walk(backward, _ignoring_result(visitor), target)

__all__ = (
    "backward",
    "each",
    "each_in_reverse",
    "each_in_reverse_until",
    "each_until",
    "forward",
    "walk",
)
