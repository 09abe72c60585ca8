"""Replicate operations

Building sequences of a fixed length."""

from __future__ import annotations

import logging
from collections.abc import Callable

from .._errors import InvalidArityError
from .._helpers import spread

logger = logging.getLogger(__name__)

def generate[T](n: int, mapper: Callable[[int], T]) -> list[T]:
    """Build [mapper(0), ..., mapper(n - 1)]. Not curried."""
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        logger.debug("generate(): rejected count %r", n)
        raise InvalidArityError(n)

    from ..transform.map import map
    produce = spread(mapper, 1)
    return map(lambda _, index: produce(index), [None] * n)

__all__ = ("generate",)
