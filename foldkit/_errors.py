from __future__ import annotations

class FoldkitError(Exception):
    """Base class for errors raised by foldkit itself."""

class EmptyReductionError(FoldkitError, ValueError):
    """reduce() without an initial value was given an empty sequence."""

    operation: str

    def __init__(self, operation: str = "reduce") -> None:
        self.operation = operation
        super().__init__(f"{operation}() of empty sequence with no initial value")

class InvalidArityError(FoldkitError, ValueError):
    """generate() was asked for a negative or non-integer number of items."""

    count: object

    def __init__(self, count: object) -> None:
        self.count = count
        super().__init__(f"generate(): n must be a non-negative int, got {count!r}")

__all__ = ("EmptyReductionError", "FoldkitError", "InvalidArityError")
