"""Internal helpers for foldkit.

Common functions used across multiple operation modules.
These are not part of the public API but are handy for writing custom operations."""

from __future__ import annotations

import enum
import inspect
import typing
from collections.abc import Callable, Iterable, Sequence

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Snapshot
def snapshot[T](target: Iterable[T] | None) -> tuple[T, ...]:
    """
    Copy target into an immutable tuple.

    Every traversal works on the snapshot, so a callback that mutates the
    original container cannot change what gets visited. None is the empty
    sequence.
    """
    if target is None:
        return ()
    return tuple(target)

# Argument kinds (tagged dispatch for overloaded operations)
class ArgKind(enum.Enum):
    ABSENT = "absent"
    SEQUENCE = "sequence"
    CALLABLE = "callable"
    OTHER = "other"

_TEXT_TYPES = (str, bytes, bytearray)

def is_sequence(value: object) -> bool:
    """
    True for ordered containers the library traverses.

    Text is an atom: str/bytes are never treated as sequences of characters.
    """
    return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)

def kind_of(value: object) -> ArgKind:
    """Classify an argument for overload resolution."""
    if value is None:
        return ArgKind.ABSENT
    if is_sequence(value):
        return ArgKind.SEQUENCE
    if callable(value):
        return ArgKind.CALLABLE
    return ArgKind.OTHER

def is_target(value: object) -> bool:
    """
    True for anything a traversal accepts as its target.

    None, sequences and other non-text iterables such as generators.
    Callables are never targets.
    """
    match kind_of(value):
        case ArgKind.ABSENT | ArgKind.SEQUENCE:
            return True
        case ArgKind.CALLABLE:
            return False
        case _:
            return isinstance(value, Iterable) and not isinstance(value, _TEXT_TYPES)

def lone_target(args: tuple[typing.Any, ...]) -> bool:
    """
    Readiness for overloaded operations: a single sequence or None is a
    complete call on its own (first(items), sort(None), ...).
    """
    return len(args) == 1 and kind_of(args[0]) in (ArgKind.SEQUENCE, ArgKind.ABSENT)

# Argument fitting
def accepted_positional(fn: Callable[..., typing.Any]) -> int | None:
    """
    Number of positional arguments fn accepts, None when unbounded (*args).

    Callables without an inspectable signature are assumed to take one.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return 1

    count = 0
    for parameter in signature.parameters.values():
        match parameter.kind:
            case inspect.Parameter.VAR_POSITIONAL:
                return None
            case inspect.Parameter.POSITIONAL_ONLY | inspect.Parameter.POSITIONAL_OR_KEYWORD:
                count += 1
    return count

def spread[R](fn: Callable[..., R], limit: int) -> Callable[..., R]:
    """
    Fit fn to a callback protocol that supplies up to `limit` arguments.

    Usage:
        visit = spread(lambda item: print(item), 3)
        visit(item, index, items)  # only item is passed on
    """
    accepted = accepted_positional(fn)
    if accepted is None or accepted >= limit:
        return fn

    def fitted(*args: typing.Any) -> R:
        return fn(*args[:accepted])

    return fitted

# Default ordering
def natural_compare(a: typing.Any, b: typing.Any) -> int:
    """Comparer using natural < / > ordering."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0

__all__ = (
    "ArgKind",
    "accepted_positional",
    "identity",
    "is_sequence",
    "is_target",
    "kind_of",
    "lone_target",
    "natural_compare",
    "snapshot",
    "spread",
)
