"""Order combinators

Non-mutating stable sort."""

from __future__ import annotations

import functools
import typing
from collections.abc import Iterable

from .._helpers import ArgKind, kind_of, lone_target, natural_compare, snapshot
from .._types import Comparer
from ..curry import curry

def sort_with[T](comparer: Comparer[T], target: Iterable[T] | None) -> list[T]:
    """New list ordered by comparer; equal items keep their input order."""
    return sorted(snapshot(target), key=functools.cmp_to_key(comparer))

@curry(2, ready=lone_target)
def sort(comparer_or_target: typing.Any, *rest: typing.Any) -> typing.Any:
    """
    sort(items) - natural order
    sort(comparer, items) - comparer(a, b) -> negative / 0 / positive
    sort(None) - []
    The input is never modified.
    """
    match kind_of(comparer_or_target):
        case ArgKind.ABSENT:
            return []
        case ArgKind.SEQUENCE:
            return sort_with(natural_compare, comparer_or_target)
        case _:
            return sort_with(comparer_or_target, rest[0])

__all__ = ("sort", "sort_with")
