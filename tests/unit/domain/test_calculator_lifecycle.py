"""Fixture lifecycle around Calculator.

Each test gets a fresh Calculator from a function-scoped fixture while a
module-scoped tracker counts setups and teardowns, so state set by one test
can never be observed by the next.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

import pytest

from userdir.domain import Calculator

# pylint: disable=redefined-outer-name


@dataclass
class LifecycleTracker:
    """Counts fixture setups and teardowns across a module."""

    setups: int = 0
    teardowns: int = 0


@pytest.fixture(scope="module")
def tracker() -> Iterator[LifecycleTracker]:
    counts = LifecycleTracker()
    yield counts
    # runs after every test in the module that used the tracker, in any order
    assert counts.setups == counts.teardowns


def calculator_lifecycle(tracker: LifecycleTracker) -> Iterator[Calculator]:
    tracker.setups += 1
    calc = Calculator()
    yield calc
    tracker.teardowns += 1


@pytest.fixture
def tracked_calc(tracker: LifecycleTracker) -> Iterator[Calculator]:
    yield from calculator_lifecycle(tracker)


@pytest.mark.parametrize("stored", [1.0, 2.0, 3.0])
def test_each_test_gets_a_fresh_calculator(
    tracked_calc: Calculator, tracker: LifecycleTracker, stored: float
) -> None:
    assert tracked_calc.value == 0.0
    tracked_calc.value = stored
    # one teardown outstanding: this test's own
    assert tracker.setups == tracker.teardowns + 1


def test_setup_and_teardown_pair_up() -> None:
    """Run the fixture lifecycle twice outside pytest, and count both phases."""
    counts = LifecycleTracker()
    for expected in (1, 2):
        lifecycle = calculator_lifecycle(counts)
        assert isinstance(next(lifecycle), Calculator)
        assert (counts.setups, counts.teardowns) == (expected, expected - 1)
        with pytest.raises(StopIteration):
            next(lifecycle)
        assert (counts.setups, counts.teardowns) == (expected, expected)
