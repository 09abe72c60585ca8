"""
Fold operations
===============

Left fold on top of the traversal engine, with three call shapes:

    reduce(0, add, items)   # explicit accumulator
    reduce(add, items)      # accumulator seeded from items[0]
    reduce("+", items)      # operator shorthand, same seeding rules
"""

from __future__ import annotations

import enum
import logging
import operator
import typing
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .._errors import EmptyReductionError
from .._helpers import ArgKind, is_target, kind_of, snapshot, spread
from .._types import OperatorSymbol, Reducer
from ..curry import curry
from .traverse import each

logger = logging.getLogger(__name__)

# ============================================================================
# Operator shorthand
# ============================================================================

OPERATORS: Mapping[OperatorSymbol, Callable[[typing.Any, typing.Any], typing.Any]] = MappingProxyType(
    {
        "+": operator.add,
        "-": operator.sub,
        "*": operator.mul,
        "/": operator.truediv,
    }
)


def is_operator(value: object) -> bool:
    """True if value is one of the OPERATORS symbols."""
    return isinstance(value, str) and value in OPERATORS


class _Missing(enum.Enum):
    MISSING = enum.auto()


MISSING = _Missing.MISSING


# ============================================================================
# Plain fold (keyword API)
# ============================================================================


def fold_left[A, T](
    reducer: Reducer[A, T],
    target: Iterable[T] | None,
    *,
    initial: A | _Missing = MISSING,
) -> A:
    """
    Fold target left to right.

    Without `initial` the accumulator starts as the first item and folding
    starts at index 1; an empty target raises EmptyReductionError.
    The reducer receives (accumulator, item, index, snapshot).
    """
    items = snapshot(target)
    step = spread(reducer, 4)

    if initial is MISSING:
        if not items:
            logger.debug("reduce(): empty sequence and no initial value")
            raise EmptyReductionError()
        accumulator = items[0]
        start = 1
    else:
        accumulator = initial
        start = 0

    def visit(item: T, index: int, visited: Sequence[T]) -> None:
        nonlocal accumulator
        if index >= start:
            accumulator = step(accumulator, item, index, visited)

    each(visit, items)
    return typing.cast(A, accumulator)


# ============================================================================
# Call shape resolution
# ============================================================================


@dataclass(frozen=True, slots=True)
class ReduceShape:
    """A resolved reduce() call."""

    reducer: Callable[..., typing.Any]
    initial: typing.Any
    target: typing.Any


def _reducer_for(head: typing.Any) -> Callable[..., typing.Any]:
    if is_operator(head):
        return OPERATORS[head]
    return head


def _completes_implicit(args: tuple[typing.Any, ...]) -> bool:
    # (reducer | symbol, target) is already a whole call
    if len(args) != 2:
        return False
    head, target = args
    head_ok = kind_of(head) is ArgKind.CALLABLE or is_operator(head)
    return head_ok and is_target(target)


def resolve_reduce(args: tuple[typing.Any, ...]) -> ReduceShape:
    """
    Decide which reduce() call shape `args` is.

    - (reducer, target): implicit accumulator
    - (symbol, target): operator, implicit accumulator
    - (symbol, initial, target): operator, explicit accumulator, unless
      `initial` is callable, in which case the symbol is a plain initial value
    - (initial, reducer, target): explicit accumulator
    Extra trailing arguments are ignored.
    """
    match args:
        case (head, target):
            return ReduceShape(_reducer_for(head), MISSING, target)
        case (head, second, target, *_) if is_operator(head) and kind_of(second) is not ArgKind.CALLABLE:
            return ReduceShape(OPERATORS[head], second, target)
        case (initial, reducer, target, *_):
            return ReduceShape(reducer, initial, target)
        case _:
            raise TypeError(f"reduce(): cannot resolve call with {len(args)} argument(s)")


# ============================================================================
# Curried sugar
# ============================================================================


@curry(3, ready=_completes_implicit)
def reduce(*args: typing.Any) -> typing.Any:
    """reduce(initial, reducer, target) / reduce(reducer, target) / reduce("+", ...)."""
    shape = resolve_reduce(args)
    return fold_left(shape.reducer, shape.target, initial=shape.initial)


__all__ = (
    "MISSING",
    "OPERATORS",
    "ReduceShape",
    "fold_left",
    "is_operator",
    "reduce",
    "resolve_reduce",
)
