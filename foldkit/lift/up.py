"""
Lifting values into Result.

Bridges between foldkit's exception-based operations and kungfu Result.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from kungfu import Error, Ok, Result

from .._errors import FoldkitError

logger = logging.getLogger(__name__)


def pure[T](value: T) -> Result[T, FoldkitError]:
    """
    Lift a plain value into an Ok.

    Example:
        from foldkit import lift as L

        L.up.pure(10)  # Ok(10)
    """
    return Ok(value)


def optional[T, E](
    value: T | None,
    *,
    error: Callable[[], E],
) -> Result[T, E]:
    """
    Convert Optional to Result. None becomes Error(error()).

    **When to use:** first()/last() return None when nothing matches;
    lift that into a Result when a miss is an error for the caller.

    Example:
        from foldkit import first, lift as L

        L.up.optional(first(is_admin, users), error=lambda: NoAdmin())

    NOTE: error is a thunk so it is only built on a miss.
    """
    if value is None:
        return Error(error())
    return Ok(value)


def catching[T, E](
    thunk: Callable[[], T],
    *,
    on_error: Callable[[FoldkitError], E],
) -> Result[T, E]:
    """
    Run thunk, turning a FoldkitError into Error(on_error(exc)).

    Example:
        from foldkit import reduce, lift as L

        L.up.catching(lambda: reduce(add, []), on_error=str)
        # Error("reduce() of empty sequence with no initial value")

    NOTE: Only foldkit's own errors are caught. Exceptions raised by
          predicates, mappers and reducers propagate unchanged.
    """
    try:
        return Ok(thunk())
    except FoldkitError as exc:
        logger.debug("lifted %s into Error", type(exc).__name__)
        return Error(on_error(exc))


__all__ = ("catching", "optional", "pure")
