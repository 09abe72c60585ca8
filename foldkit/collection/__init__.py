from .traverse import each, each_in_reverse, each_in_reverse_until, each_until, walk
from .fold import OPERATORS, fold_left, reduce, resolve_reduce
from .replicate import generate

__all__ = (
    # Traversal
    "each",
    "each_in_reverse",
    "each_in_reverse_until",
    "each_until",
    "walk",
    # Fold
    "OPERATORS",
    "fold_left",
    "reduce",
    "resolve_reduce",
    # Generation
    "generate",
)
