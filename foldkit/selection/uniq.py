"""Uniq combinators

One item per distinct key, first occurrence wins, original order kept."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from .._helpers import ArgKind, identity, kind_of, lone_target, spread
from .._types import Selector
from ..curry import curry
from ..transform.filter import filter

class SeenKeys:
    """
    Membership record for keys already encountered.

    Hashable keys go into a set (O(1)); unhashable ones (dicts, lists)
    fall back to a list compared with ==.
    """

    __slots__ = ("_hashed", "_unhashable")

    def __init__(self) -> None:
        self._hashed: set[typing.Any] = set()
        self._unhashable: list[typing.Any] = []

    def add(self, key: typing.Any) -> bool:
        """Record key, True if it had not been seen before."""
        try:
            if key in self._hashed:
                return False
            self._hashed.add(key)
        except TypeError:
            if key in self._unhashable:
                return False
            self._unhashable.append(key)
        return True

def uniq_by[T, K](key: Selector[T, K], target: Iterable[T] | None) -> list[T]:
    """Keep the first item for every distinct key(item)."""
    key_of = spread(key, 1)
    seen = SeenKeys()
    return filter(lambda item: seen.add(key_of(item)), target)

@curry(2, ready=lone_target)
def uniq(mapper_or_target: typing.Any, *rest: typing.Any) -> typing.Any:
    """
    uniq(items) - unique by the items themselves
    uniq(key, items) - unique by key(item)
    uniq(None) - []; uniq(None, items) is the same as uniq(items)
    """
    match kind_of(mapper_or_target):
        case ArgKind.SEQUENCE:
            return uniq_by(identity, mapper_or_target)
        case ArgKind.ABSENT:
            return uniq_by(identity, rest[0]) if rest else []
        case _:
            return uniq_by(mapper_or_target, rest[0])

__all__ = ("SeenKeys", "uniq", "uniq_by")
