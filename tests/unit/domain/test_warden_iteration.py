"""Unit tests for WardenIteration.

Tests cover:
- create() ordinal validation
- is_valid aggregation (including the empty iteration)
- execution_time, including reversed timestamps
- results captured once, from any iterable
- immutability
"""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass
from datetime import datetime, timedelta

import pytest

from warden.domain.errors.iteration import InvalidIterationOrdinalError
from warden.domain.errors.kinds import InvalidArgumentError
from warden.domain.models.capabilities import Validatable
from warden.domain.models.warden_check_result import WardenCheckResult
from warden.domain.models.warden_iteration import WardenIteration


@dataclass(frozen=True)
class _Flag:
    """Minimal check result exposing only the validity capability."""

    is_valid: bool


def _result(t0: datetime, valid: bool, name: str = "api") -> WardenCheckResult:
    factory = WardenCheckResult.valid if valid else WardenCheckResult.invalid
    return factory(name, t0, t0 + timedelta(milliseconds=150))


class TestCreate:
    """Tests for WardenIteration.create."""

    @pytest.mark.parametrize("ordinal", [-1, -100])
    def test_negative_ordinal_rejected(self, t0: datetime, ordinal: int) -> None:
        """Negative ordinals are invalid arguments."""
        with pytest.raises(InvalidIterationOrdinalError) as exc_info:
            WardenIteration.create(ordinal, [], t0, t0)

        assert isinstance(exc_info.value, InvalidArgumentError)
        assert exc_info.value.ordinal == ordinal

    def test_constructor_also_rejects_negative_ordinal(self, t0: datetime) -> None:
        """The invariant holds without the factory too."""
        with pytest.raises(InvalidIterationOrdinalError):
            WardenIteration(ordinal=-1, results=(), started_at=t0, completed_at=t0)

    def test_stores_inputs(self, t0: datetime) -> None:
        """Inputs are stored verbatim."""
        t1 = t0 + timedelta(seconds=3)
        results = [_result(t0, True), _result(t0, False, "db")]

        iteration = WardenIteration.create(7, results, t0, t1)

        assert iteration.ordinal == 7
        assert iteration.results == tuple(results)
        assert iteration.started_at == t0
        assert iteration.completed_at == t1

    def test_generator_captured_once(self, t0: datetime) -> None:
        """A generator is consumed into the iteration exactly once."""
        results = (_result(t0, True, f"w{i}") for i in range(3))

        iteration = WardenIteration.create(1, results, t0, t0)

        assert len(iteration.results) == 3
        assert len(iteration.results) == 3

    def test_later_changes_to_source_list_not_seen(self, t0: datetime) -> None:
        """Appending to the source list does not change the iteration."""
        results = [_result(t0, True)]
        iteration = WardenIteration.create(1, results, t0, t0)

        results.append(_result(t0, False))

        assert len(iteration.results) == 1
        assert iteration.is_valid is True


class TestValidity:
    """Tests for is_valid."""

    def test_empty_iteration_is_valid(self, t0: datetime) -> None:
        """No results means nothing failed."""
        t1 = t0 + timedelta(seconds=1)

        iteration = WardenIteration.create(0, [], t0, t1)

        assert iteration.is_valid is True
        assert iteration.execution_time == t1 - t0

    def test_all_valid(self, t0: datetime) -> None:
        """Every result valid means the iteration is valid."""
        iteration = WardenIteration.create(
            1, [_result(t0, True), _result(t0, True, "db")], t0, t0
        )

        assert iteration.is_valid is True
        assert iteration.invalid_results == ()

    def test_any_invalid_makes_iteration_invalid(self, t0: datetime) -> None:
        """A single invalid result invalidates the iteration."""
        bad = _result(t0, False, "db")
        iteration = WardenIteration.create(
            1, [_result(t0, True), bad, _result(t0, True, "mq")], t0, t0
        )

        assert iteration.is_valid is False
        assert iteration.invalid_results == (bad,)

    def test_accepts_any_validatable(self, t0: datetime) -> None:
        """Only the is_valid capability is read."""
        results = [_Flag(True), _Flag(False)]
        assert all(isinstance(r, Validatable) for r in results)

        iteration = WardenIteration.create(2, results, t0, t0)

        assert iteration.is_valid is False


class TestTiming:
    """Tests for execution_time."""

    def test_execution_time(self, t0: datetime) -> None:
        """Execution time is completion minus start."""
        iteration = WardenIteration.create(
            1, [], t0, t0 + timedelta(minutes=2, seconds=5)
        )

        assert iteration.execution_time == timedelta(minutes=2, seconds=5)

    def test_reversed_timestamps_accepted(self, t0: datetime) -> None:
        """completed_at before started_at is not rejected."""
        iteration = WardenIteration.create(1, [], t0, t0 - timedelta(seconds=1))

        assert iteration.execution_time == timedelta(seconds=-1)


class TestImmutability:
    """Iterations can not be modified after creation."""

    def test_frozen(self, t0: datetime) -> None:
        """Assigning a field raises."""
        iteration = WardenIteration.create(1, [], t0, t0)

        with pytest.raises(FrozenInstanceError):
            iteration.ordinal = 2  # type: ignore[misc]
