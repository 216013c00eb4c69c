"""
Unit Tests for fibbench.demo

Tests for:
    - Index parsing (parseInt-style tokens)
    - Result rows and display truncation
    - Calculate / benchmark / clear on immutable view state
"""

import dataclasses

import pytest

from fibbench.benchmark import BenchmarkRunner
from fibbench.core import fib_iterative, format_decimal
from fibbench.demo import DemoService, DemoViewState, ResultRow, parse_indices
from fibbench.exceptions import InvalidInputError


# =============================================================================
# Input parsing
# =============================================================================

class TestParseIndices:
    @pytest.mark.parametrize("text,expected", [
        ("10, 20, 30", [10, 20, 30]),
        ("5", [5]),
        (" 7 ,8,  9 ", [7, 8, 9]),
        ("4abc, 12", [4, 12]),
        ("abc, 3", [3]),
        ("1,,2", [1, 2]),
        ("3, 3, 1", [3, 3, 1]),
        ("+6", [6]),
        ("2.9", [2]),
        ("-5, 8", [8]),
        ("٣, ７, 4", [4]),
    ])
    def test_tokens(self, text, expected):
        assert parse_indices(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", ",,,", "-1, -2"])
    def test_nothing_valid(self, text):
        assert parse_indices(text) == []


# =============================================================================
# Result rows
# =============================================================================

class TestResultRow:
    def test_short_value_unchanged(self):
        row = ResultRow(n=10, value=55)
        assert row.display == "55"
        assert not row.truncated
        assert row.to_dict() == {"n": 10, "value": "55", "display": "55", "digits": 2}

    def test_thirty_digits_not_truncated(self):
        row = ResultRow(n=0, value=10 ** 29)
        assert len(row.digits) == 30
        assert row.display == row.digits

    def test_long_value_truncated(self):
        value = fib_iterative(200)
        digits = format_decimal(value)
        row = ResultRow(n=200, value=value)
        assert row.truncated
        assert row.display == f"{digits[:15]}...{digits[-15:]}"
        assert len(row.display) == 33
        assert row.to_dict()["value"] == digits


# =============================================================================
# Demo service
# =============================================================================

@pytest.fixture
def service(fake_timer):
    return DemoService(runner=BenchmarkRunner(iterations=3, timer=fake_timer))


class TestDemoService:
    def test_initial_state_hidden(self):
        state = DemoViewState()
        assert not state.results_visible
        assert not state.benchmark_visible

    def test_calculate(self, service):
        state = service.calculate("10, 20, 30")
        assert state.results_visible
        assert not state.benchmark_visible
        assert [(r.n, r.value) for r in state.results] == [(10, 55), (20, 6765), (30, 832040)]

    def test_calculate_large_index(self, service):
        state = service.calculate("100")
        assert state.results[0].digits == "354224848179261915075"

    def test_invalid_input_raises(self, service):
        with pytest.raises(InvalidInputError, match="Please enter valid Fibonacci indices"):
            service.calculate("abc")

    def test_invalid_input_keeps_previous_state(self, service):
        state = service.calculate("5")
        with pytest.raises(InvalidInputError):
            service.calculate("", state)
        assert [r.n for r in state.results] == [5]

    def test_benchmark(self, service):
        state = service.benchmark("10, 20")
        assert state.benchmark_visible
        assert not state.results_visible
        sample = state.benchmark
        assert sample.indices == [10, 20]
        assert sample.iterations == 3
        assert sample.speedup_ratio == pytest.approx(1.0)

    def test_benchmark_invalid_input(self, service):
        with pytest.raises(InvalidInputError):
            service.benchmark(" , ")

    def test_benchmark_keeps_results(self, service):
        state = service.calculate("10")
        state = service.benchmark("10", state)
        assert state.results_visible
        assert state.benchmark_visible

    def test_operations_do_not_mutate(self, service):
        empty = DemoViewState()
        service.calculate("10", empty)
        assert not empty.results_visible
        with pytest.raises(dataclasses.FrozenInstanceError):
            empty.benchmark = None

    def test_clear(self, service):
        state = service.benchmark("1", service.calculate("1"))
        cleared = service.clear()
        assert not cleared.results_visible
        assert not cleared.benchmark_visible
        assert state.results_visible

    def test_to_dict(self, service):
        d = service.calculate("12").to_dict()
        assert d["results_visible"] is True
        assert d["benchmark"] is None
        assert d["results"][0]["value"] == "144"
