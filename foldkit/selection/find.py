"""
Find combinators
================

Searching with early termination, plus the boolean quantifiers.

first/last are overloaded on the kind of their first argument:

    first(items)          # lone sequence: its first item, None if empty
    first(None, ...)      # no predicate: None
    first(is_even)        # predicate: partial application awaiting items
    first(is_even, items) # first matching item, None if no match
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Sequence

from .._helpers import ArgKind, kind_of, lone_target, snapshot, spread
from .._types import Predicate
from ..collection.fold import reduce
from ..collection.traverse import each_in_reverse_until, each_until
from ..curry import Curried, curry


def _scan[T](
    traverse: Curried[None],
    predicate: Predicate[T],
    target: Iterable[T] | None,
) -> tuple[bool, T | None]:
    """(found, item) for the first match in `traverse` order."""
    matches = spread(predicate, 3)
    hit: list[T] = []

    def visit(item: T, index: int, items: Sequence[T]) -> bool:
        if matches(item, index, items):
            hit.append(item)
            return False
        return True

    traverse(visit, target)
    if hit:
        return True, hit[0]
    return False, None


def _locate(
    traverse: Curried[None],
    edge: int,
    head: typing.Any,
    rest: tuple[typing.Any, ...],
) -> typing.Any:
    match kind_of(head):
        case ArgKind.ABSENT:
            return None
        case ArgKind.SEQUENCE:
            items = snapshot(head)
            return items[edge] if items else None
        case _:
            _, item = _scan(traverse, head, rest[0])
            return item


@curry(2, ready=lone_target)
def first(predicate_or_target: typing.Any, *rest: typing.Any) -> typing.Any:
    """First item matching the predicate, scanning from index 0."""
    return _locate(each_until, 0, predicate_or_target, rest)


@curry(2, ready=lone_target)
def last(predicate_or_target: typing.Any, *rest: typing.Any) -> typing.Any:
    """First item matching the predicate, scanning from the last index."""
    return _locate(each_in_reverse_until, -1, predicate_or_target, rest)


@curry(2)
def any[T](predicate: Predicate[T] | None, target: Iterable[T] | None) -> bool:
    """True if some item matches. Stops at the first match."""
    if predicate is None:
        return False
    found, _ = _scan(each_until, predicate, target)
    return found


@curry(2)
def none[T](predicate: Predicate[T] | None, target: Iterable[T] | None) -> bool:
    """True if no item matches."""
    return not any(predicate, target)


@curry(2)
def all[T](predicate: Predicate[T], target: Iterable[T] | None) -> bool:
    """
    True if every item matches.

    NOTE: Does not short-circuit. The predicate is called once per item even
          after a mismatch, so side effects and call counts are predictable.
    """
    matches = spread(predicate, 3)

    def conjoin(acc: bool, item: T, index: int, items: Sequence[T]) -> bool:
        matched = bool(matches(item, index, items))
        return acc and matched

    return reduce(True, conjoin, target)


true_for_all = all

__all__ = ("all", "any", "first", "last", "none", "true_for_all")
