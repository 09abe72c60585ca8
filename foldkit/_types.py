"""
Core type definitions for foldkit.

Callback shapes shared by every operation in the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

# ============================================================================
# Callback aliases
# ============================================================================

# Visitor = called per element; returning exactly False stops traversal
type Visitor[T] = Callable[[T, int, Sequence[T]], bool | None]

# Predicate = function that tests an element
type Predicate[T] = Callable[[T, int, Sequence[T]], bool]

# Reducer = folds one element into the running accumulator
type Reducer[A, T] = Callable[[A, T, int, Sequence[T]], A]

# Mapper = produces a transformed value for an element
type Mapper[T, U] = Callable[[T, int, Sequence[T]], U]

# Selector = function that extracts a key for comparison/uniqueness
type Selector[T, K] = Callable[[T], K]

# Comparer = negative / zero / positive, like cmp()
type Comparer[T] = Callable[[T, T], int]

# ============================================================================
# Reduce shorthand
# ============================================================================

# NOTE: Only these four symbols are understood by reduce().
type OperatorSymbol = typing.Literal["+", "-", "*", "/"]

__all__ = (
    "Visitor",
    "Predicate",
    "Reducer",
    "Mapper",
    "Selector",
    "Comparer",
    "OperatorSymbol",
)
