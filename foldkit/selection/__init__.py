from .best import max, min
from .find import all, any, first, last, none, true_for_all
from .order import sort, sort_with
from .uniq import uniq, uniq_by

__all__ = (
    # Search
    "all",
    "any",
    "first",
    "last",
    "none",
    "true_for_all",
    # Best
    "max",
    "min",
    # Uniqueness / ordering
    "sort",
    "sort_with",
    "uniq",
    "uniq_by",
)
