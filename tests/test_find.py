"""
Search primitives: first / last / any / none / all.
"""

import pytest

from foldkit import Curried, all, any, first, last, none, true_for_all
from foldkit._helpers import lone_target


class Counter:
    def __init__(self, predicate):
        self.calls = 0
        self.predicate = predicate

    def __call__(self, value):
        self.calls += 1
        return self.predicate(value)


@pytest.fixture
def is_even():
    return Counter(lambda value: value % 2 == 0)


# ============================================================================
# first
# ============================================================================


def test_first_deferred_returns_match_without_full_scan(is_even):
    deferred = first(is_even)
    assert isinstance(deferred, Curried)
    assert deferred([1, 2, 3]) == 2
    assert is_even.calls == 2


def test_first_stops_after_first_of_several_matches(is_even):
    assert first(is_even, [1, 2, 3, 4]) == 2
    assert is_even.calls == 2


def test_first_no_match_scans_everything():
    over_ten = Counter(lambda value: value > 10)
    assert first(over_ten, [1, 2, 3, 4]) is None
    assert over_ten.calls == 4


def test_first_of_lone_sequence():
    assert first([7, 8, 9]) == 7
    assert first([]) is None


def test_first_of_lone_sequence_keeps_falsy_items():
    assert first([0, 1]) == 0


def test_first_without_predicate():
    assert first(None) is None
    assert first(None, [1, 2]) is None


def test_first_predicate_can_use_index():
    assert first(lambda value, index: index == 2, ["a", "b", "c"]) == "c"


# ============================================================================
# last
# ============================================================================


def test_last_scans_from_the_end():
    divisible_by_three = Counter(lambda value: value % 3 == 0)
    assert last(divisible_by_three, [1, 2, 3]) == 3
    assert divisible_by_three.calls == 1


def test_last_returns_last_of_several_matches():
    divisible_by_four = Counter(lambda value: value % 4 == 0)
    assert last(divisible_by_four, [1, 2, 4, 3, 4]) == 4
    assert divisible_by_four.calls == 1


def test_last_no_match_scans_everything():
    over_ten = Counter(lambda value: value > 10)
    assert last(over_ten, [1, 2, 3, 4]) is None
    assert over_ten.calls == 4


def test_last_of_lone_sequence():
    assert last([7, 8, 9]) == 9
    assert last([]) is None


# ============================================================================
# any / none
# ============================================================================


def test_any():
    assert any(lambda value: value > 0, [1, 2, 3, 4]) is True
    assert any(lambda value: value > 8, [1, 0, 3, 4]) is False


def test_any_stops_at_first_match(is_even):
    assert any(is_even, [2, 4, 6]) is True
    assert is_even.calls == 1


def test_any_counts_a_matching_none_item():
    assert any(lambda value: value is None, [1, None]) is True


def test_any_empty_and_absent():
    assert any(lambda value: True, []) is False
    assert any(None, [1, 2]) is False


def test_none():
    assert none(lambda value: value > 0, [1, 2, 3, 4]) is False
    assert none(lambda value: value > 8, [1, 0, 3, 4]) is True


# ============================================================================
# all / true_for_all
# ============================================================================


def test_all_true():
    assert all(lambda value: value > 0, [1, 2, 3, 4]) is True


def test_all_false():
    assert true_for_all(lambda value: value > 0, [1, 0, 3, 4]) is False


def test_all_visits_every_item(is_even):
    assert all(is_even, [1, 2, 3, 4]) is False
    assert is_even.calls == 4


def test_all_of_empty_is_true():
    assert all(lambda value: False, []) is True


def test_true_for_all_is_all():
    assert true_for_all is all


def test_all_with_index():
    words = ["hello 0", "hello 1", "hello 2"]
    assert all(lambda word, index: word == f"hello {index}", words) is True


def test_predicate_errors_propagate():
    def boom(value):
        raise ZeroDivisionError

    with pytest.raises(ZeroDivisionError):
        first(boom, [1])


def test_lone_target_completes_overloaded_calls():
    assert lone_target(([1, 2],)) is True
    assert lone_target((None,)) is True
    assert lone_target((lambda value: value,)) is False
    assert lone_target(("text",)) is False
    assert lone_target(([1], [2])) is False
