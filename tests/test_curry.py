"""
Partial application adapter.
"""

import inspect

import pytest

from foldkit import Curried, curry


@pytest.fixture
def add3():
    return curry(3)(lambda a, b, c: a + b + c)


def test_full_call_invokes_immediately(add3):
    assert add3(1, 2, 3) == 6


def test_partial_call_returns_curried(add3):
    partial = add3(1)
    assert isinstance(partial, Curried)
    assert partial.remaining == 2
    assert partial.args == (1,)


def test_chains_of_arbitrary_depth(add3):
    assert add3(1)(2)(3) == 6
    assert add3(1, 2)(3) == 6
    assert add3(1)(2, 3) == 6
    assert add3()(1)()(2)(3) == 6


def test_partial_applications_are_independent(add3):
    plus_one = add3(1)
    first = plus_one(10)
    second = plus_one(100)

    assert first(1) == 12
    assert second(1) == 102
    assert plus_one.args == (1,)
    assert plus_one(2, 3) == 6


def test_extra_arguments_are_forwarded():
    collect = curry(2)(lambda *args: args)
    assert collect(1)(2, 3, 4) == (1, 2, 3, 4)


def test_keywords_are_bound_but_not_counted():
    tag = curry(2)(lambda a, b, sep="-": f"{a}{sep}{b}")
    assert tag(sep="+")("x")("y") == "x+y"
    assert tag("x", sep="/")("y") == "x/y"


def test_ready_resolver_finishes_early():
    head = curry(2, ready=lambda args: isinstance(args[0], list))(lambda *args: args)
    assert head([1]) == ([1],)
    assert isinstance(head(1), Curried)


def test_wraps_metadata():
    @curry(2)
    def pair(left, right):
        """Make a pair."""
        return (left, right)

    assert pair.__name__ == "pair"
    assert pair.__doc__ == "Make a pair."
    assert "pair" in repr(pair("a"))


def test_signature_lists_awaited_parameters():
    @curry(3)
    def join(a, b, c):
        return a + b + c

    assert list(inspect.signature(join("x")).parameters) == ["b", "c"]
    assert list(inspect.signature(join("x", "y")).parameters) == ["c"]


def test_negative_arity_rejected():
    with pytest.raises(ValueError):
        curry(-1)
