"""
foldkit - curried operations over ordered sequences.

Traversal, folding, searching, transformation, deduplication, ordering and
generation as small composable operations. Every operation except
generate() supports partial application:

    from foldkit import filter, first, reduce

    evens = filter(lambda x: x % 2 == 0)
    evens([1, 2, 3, 4])            # [2, 4]
    first(lambda x: x > 2)([1, 5]) # 5
    reduce("+", [1, 2, 3, 4])      # 10

Architecture:
- curry       - partial application adapter every operation is built from
- collection  - traversal engine, fold engine, generation
- transform   - map / filter / flat_map / flatten (on the fold engine)
- selection   - search, quantifiers, max/min, uniq, sort
- lift        - kungfu Result bridge for the toolkit's own errors
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
import typing

# Core types
from ._types import Comparer, Mapper, OperatorSymbol, Predicate, Reducer, Selector, Visitor

# Internal helpers (for custom operations)
from . import _helpers

# Partial application
from .curry import Curried, curry

# Traversal, fold, generation
from .collection import (
    OPERATORS,
    each,
    each_in_reverse,
    each_in_reverse_until,
    each_until,
    fold_left,
    generate,
    reduce,
)

# Transforms
from .transform import filter, flat_map, flatten, map

# Selection
from .selection import (
    all,
    any,
    first,
    last,
    max,
    min,
    none,
    sort,
    true_for_all,
    uniq,
)

# Result bridge
from . import lift

# Logging
from .logger import setup_logger

# Errors
from ._errors import EmptyReductionError, FoldkitError, InvalidArityError

operations: Mapping[str, Callable[..., typing.Any]] = MappingProxyType(
    {
        "each": each,
        "each_until": each_until,
        "each_in_reverse": each_in_reverse,
        "each_in_reverse_until": each_in_reverse_until,
        "last": last,
        "first": first,
        "any": any,
        "none": none,
        "all": all,
        "filter": filter,
        "map": map,
        "flat_map": flat_map,
        "flatten": flatten,
        "uniq": uniq,
        "true_for_all": true_for_all,
        "reduce": reduce,
        "sort": sort,
        "max": max,
        "min": min,
        "generate": generate,
    }
)

__all__ = (
    # Types
    "Comparer",
    "Mapper",
    "OperatorSymbol",
    "Predicate",
    "Reducer",
    "Selector",
    "Visitor",
    # Internal helpers
    "_helpers",
    # Curry
    "Curried",
    "curry",
    # Traversal
    "each",
    "each_in_reverse",
    "each_in_reverse_until",
    "each_until",
    # Fold
    "OPERATORS",
    "fold_left",
    "reduce",
    # Generation
    "generate",
    # Transform
    "filter",
    "flat_map",
    "flatten",
    "map",
    # Selection
    "all",
    "any",
    "first",
    "last",
    "max",
    "min",
    "none",
    "sort",
    "true_for_all",
    "uniq",
    # Aggregate
    "operations",
    # Lift
    "lift",
    # Logging
    "setup_logger",
    # Errors
    "EmptyReductionError",
    "FoldkitError",
    "InvalidArityError",
)
