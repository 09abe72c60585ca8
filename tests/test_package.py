"""
Aggregated operation mapping and logging setup.
"""

import logging

import pytest

import foldkit
from foldkit import operations, setup_logger


EXPECTED = {
    "each",
    "each_until",
    "each_in_reverse",
    "each_in_reverse_until",
    "last",
    "first",
    "any",
    "none",
    "all",
    "filter",
    "map",
    "flat_map",
    "flatten",
    "uniq",
    "true_for_all",
    "reduce",
    "sort",
    "max",
    "min",
    "generate",
}


def test_operations_mapping_lists_every_operation():
    assert set(operations) == EXPECTED


def test_operations_are_the_exported_callables():
    for name, operation in operations.items():
        assert getattr(foldkit, name) is operation


def test_true_for_all_alias():
    assert operations["true_for_all"] is operations["all"]


def test_operations_mapping_is_read_only():
    with pytest.raises(TypeError):
        operations["each"] = None


def test_operations_compose():
    evens = operations["filter"](lambda value: value % 2 == 0)
    squares = operations["map"](lambda value: value * value)
    assert operations["reduce"]("+", squares(evens(range(1, 7)))) == 56


def test_partial_step_as_callback():
    first_even = foldkit.first(lambda value: value % 2 == 0)
    assert foldkit.map(first_even, [[1, 2], [3], [4, 6]]) == [2, None, 4]


def test_library_logger_is_silent_by_default():
    logger = logging.getLogger("foldkit")
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_setup_logger_reads_level_from_environment(monkeypatch):
    monkeypatch.setenv("FOLDKIT_LOG_LEVEL", "DEBUG")
    logger = setup_logger("foldkit.test_env")
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1

    setup_logger("foldkit.test_env", level="warning")
    assert logger.level == logging.WARNING
    assert len(logger.handlers) == 1


def test_errors_are_logged_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="foldkit"):
        with pytest.raises(foldkit.EmptyReductionError):
            foldkit.reduce("+", [])
    assert "empty sequence" in caplog.text
