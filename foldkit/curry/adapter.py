"""
Partial application adapter
===========================

Every public operation is a Curried: calling it with fewer arguments than
its arity returns a new Curried awaiting the rest.
"""

from __future__ import annotations

import functools
import inspect
import typing
from collections.abc import Callable

# Ready = decides from the bound positional arguments whether to invoke early
type Ready = Callable[[tuple[typing.Any, ...]], bool]

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


class Curried[R]:
    """
    Immutable partial application of `func`.

    Bound arguments live in a tuple; every partial step builds a fresh
    Curried, so partial applications can be shared and re-used freely:

        add3 = curry(3)(lambda a, b, c: a + b + c)
        plus_one = add3(1)
        plus_one(2)(3)  # 6
        plus_one(10, 20)  # 31, plus_one is unchanged

    Keyword arguments are bound too but never count towards the arity.
    """

    def __init__(
        self,
        func: Callable[..., R],
        arity: int,
        args: tuple[typing.Any, ...] = (),
        kwargs: dict[str, typing.Any] | None = None,
        ready: Ready | None = None,
    ) -> None:
        self._func = func
        self._arity = arity
        self._args = args
        self._kwargs = dict(kwargs or {})
        self._ready = ready
        functools.update_wrapper(self, func)

    @property
    def arity(self) -> int:
        """Declared number of positional arguments."""
        return self._arity

    @property
    def args(self) -> tuple[typing.Any, ...]:
        """Positional arguments bound so far."""
        return self._args

    @property
    def remaining(self) -> int:
        """Positional arguments still awaited (by count)."""
        return max(self._arity - len(self._args), 0)

    @property
    def __signature__(self) -> inspect.Signature:
        # Awaited positional parameters only, so a partial step can itself be
        # handed to an operation as a callback.
        try:
            parameters = [
                p for p in inspect.signature(self._func).parameters.values() if p.kind in _POSITIONAL
            ]
        except (TypeError, ValueError):
            parameters = []

        start = len(self._args)
        awaited = [
            p.replace(kind=inspect.Parameter.POSITIONAL_ONLY, default=inspect.Parameter.empty)
            for p in parameters[start : start + self.remaining]
        ]
        taken = {p.name for p in awaited}
        for position in range(len(awaited), self.remaining):
            name = f"arg{start + position}"
            while name in taken:
                name = f"_{name}"
            taken.add(name)
            awaited.append(inspect.Parameter(name, inspect.Parameter.POSITIONAL_ONLY))
        return inspect.Signature(awaited)

    def _is_ready(self, args: tuple[typing.Any, ...]) -> bool:
        if len(args) >= self._arity:
            return True
        return self._ready is not None and self._ready(args)

    def __call__(self, *args: typing.Any, **kwargs: typing.Any) -> R | Curried[R]:
        bound = self._args + args
        merged = {**self._kwargs, **kwargs}
        if self._is_ready(bound):
            return self._func(*bound, **merged)
        return Curried(self._func, self._arity, bound, merged, self._ready)

    def __repr__(self) -> str:
        shown = [repr(a) for a in self._args]
        shown.extend(f"{k}={v!r}" for k, v in self._kwargs.items())
        return f"<curried {self._func.__name__}({', '.join(shown)}) awaiting {self.remaining}>"


def curry[R](arity: int, *, ready: Ready | None = None) -> Callable[[Callable[..., R]], Curried[R]]:
    """
    Decorator: turn a function of `arity` positional arguments into a Curried.

    `ready` lets overloaded operations finish early when the arguments bound
    so far already form a complete call shape (e.g. `first(items)`).

    Example:
        @curry(2)
        def each(visitor, target): ...

        visit_all = each(print)
        visit_all([1, 2, 3])
    """
    if arity < 0:
        raise ValueError(f"curry(): arity must be >= 0, got {arity}")

    def decorate(func: Callable[..., R]) -> Curried[R]:
        return Curried(func, arity, ready=ready)

    return decorate


__all__ = ("Curried", "Ready", "curry")
