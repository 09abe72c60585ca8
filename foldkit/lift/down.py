"""
Getting values back out of Result.
"""

from __future__ import annotations

from kungfu import Error, Ok, Result


def to_result[T, E](result: Result[T, E]) -> Result[T, E]:
    """Identity on Result, for symmetry with the up namespace."""
    return result


def unsafe[T, E](result: Result[T, E]) -> T:
    """
    Unwrap, raising on Error.

    NOTE: Use only when success is certain or the error should propagate.
    """
    return result.unwrap()


def or_else[T, E](result: Result[T, E], default: T) -> T:
    """
    Value or default.

    Example:
        from foldkit import reduce, lift as L

        L.down.or_else(L.call(reduce, "+", []), 0)  # 0
    """
    match result:
        case Ok(v):
            return v
        case Error(_):
            return default


__all__ = ("or_else", "to_result", "unsafe")
