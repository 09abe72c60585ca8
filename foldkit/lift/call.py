"""
Calling operations with automatic lifting.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import wraps

from kungfu import Result

from .._errors import FoldkitError
from .._helpers import identity
from .up import catching


def call[T](
    func: Callable[..., T],
    *args: typing.Any,
    **kwargs: typing.Any,
) -> Result[T, FoldkitError]:
    """
    Call an operation and lift its outcome into a Result.

    Example:
        from foldkit import generate, lift as L

        L.call(generate, -1, str)  # Error(InvalidArityError(-1))
        L.call(generate, 2, str)   # Ok(["0", "1"])

    NOTE: A partial application is a value like any other, so
          L.call(reduce, add) is Ok(<curried reduce>).
    """
    return catching(lambda: func(*args, **kwargs), on_error=identity)


def lifted[T](func: Callable[..., T]) -> Callable[..., Result[T, FoldkitError]]:
    """
    Decorator form of call().

    Example:
        from foldkit import reduce, lift as L

        @L.lifted
        def total(items):
            return reduce("+", items)

        total([])  # Error(EmptyReductionError(...))
    """
    @wraps(func)
    def wrapper(*args: typing.Any, **kwargs: typing.Any) -> Result[T, FoldkitError]:
        return call(func, *args, **kwargs)

    return wrapper


__all__ = ("call", "lifted")
