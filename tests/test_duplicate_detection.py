"""
Tests for the duplicate detection strategies.

Tests cover the concrete scenarios, boundaries and agreement between
the list, set, IntHashTable and SortedSet strategies.
"""

import pytest

from structbench.algorithms.duplicate_detection import (
    DuplicateDetection,
    HashTableDuplicateDetection,
    PairwiseDuplicateDetection,
    SetDuplicateDetection,
    SortedSetDuplicateDetection,
)

ALL_STRATEGIES = [
    PairwiseDuplicateDetection,
    SetDuplicateDetection,
    HashTableDuplicateDetection,
    SortedSetDuplicateDetection,
]


@pytest.mark.parametrize("strategy_cls", ALL_STRATEGIES)
class TestDuplicateDetectionStrategies:
    """Behaviour every duplicate detection strategy must share."""

    def test_sample_has_duplicates(self, strategy_cls, sample_numbers):
        """Test [5, 3, 5, 1] reports a duplicate."""
        assert strategy_cls().has_duplicates(sample_numbers) is True

    def test_empty_input(self, strategy_cls):
        """Test empty input has no duplicates."""
        assert strategy_cls().has_duplicates([]) is False

    def test_single_element(self, strategy_cls):
        """Test a single value is never a duplicate."""
        assert strategy_cls().has_duplicates([7]) is False

    def test_two_distinct(self, strategy_cls):
        """Test [2, 1] has no duplicates."""
        assert strategy_cls().has_duplicates([2, 1]) is False

    def test_distinct_values(self, strategy_cls, distinct_numbers):
        """Test distinct values have no duplicates."""
        assert strategy_cls().has_duplicates(distinct_numbers) is False

    def test_identical_values(self, strategy_cls, identical_numbers):
        """Test all-identical input of length > 1 has duplicates."""
        assert strategy_cls().has_duplicates(identical_numbers) is True

    def test_duplicate_at_the_end(self, strategy_cls):
        """Test a repeat found only at the last position."""
        numbers = list(range(200)) + [0]

        assert strategy_cls().has_duplicates(numbers) is True

    def test_adjacent_duplicate(self, strategy_cls):
        """Test a repeat of neighbouring values."""
        assert strategy_cls().has_duplicates([1, 2, 3, 3, 4]) is True

    def test_large_and_negative_values(self, strategy_cls):
        """Test values outside the generator range are handled."""
        numbers = [-5, 2**40, -(2**40), 5, -5]

        assert strategy_cls().has_duplicates(numbers) is True
        assert strategy_cls().has_duplicates(numbers[:-1]) is False

    def test_input_not_modified(self, strategy_cls, sample_numbers):
        """Test the strategy is read-only over its input."""
        snapshot = list(sample_numbers)

        strategy_cls().has_duplicates(sample_numbers)

        assert sample_numbers == snapshot

    def test_run_returns_verdict(self, strategy_cls, sample_numbers):
        """Test run reports the verdict and the strategy label."""
        strategy = strategy_cls()

        result = strategy.run(sample_numbers)

        assert result.value is True
        assert result.algorithm_name == strategy.get_algorithm_name()

    def test_is_duplicate_detection(self, strategy_cls):
        """Test every strategy shares the capability base class."""
        assert isinstance(strategy_cls(), DuplicateDetection)


class TestDuplicateDetectionAgreement:
    """All strategies must return the same verdict on the same input."""

    def test_agreement_on_random_data(self, random_numbers):
        """Test agreement on a seeded random dataset."""
        verdicts = {cls().has_duplicates(random_numbers) for cls in ALL_STRATEGIES}

        assert len(verdicts) == 1

    @pytest.mark.parametrize(
        "numbers",
        [
            [],
            [1],
            [1, 1],
            [1, 2],
            [3, 1, 2],
            [3, 1, 2, 1],
            list(range(50)),
            list(range(50)) * 2,
        ],
    )
    def test_agreement_on_small_inputs(self, numbers):
        """Test agreement on hand-picked inputs."""
        verdicts = [cls().has_duplicates(numbers) for cls in ALL_STRATEGIES]

        assert verdicts == [verdicts[0]] * len(ALL_STRATEGIES)


class TestStrategyNames:
    """Labels used in the timing report."""

    def test_labels(self):
        """Test each strategy's report label."""
        assert PairwiseDuplicateDetection().get_algorithm_name() == (
            "Duplicate check using list"
        )
        assert SetDuplicateDetection().get_algorithm_name() == (
            "Duplicate check using set"
        )
        assert str(HashTableDuplicateDetection()) == (
            "Duplicate check using IntHashTable"
        )
        assert str(SortedSetDuplicateDetection()) == "Duplicate check using SortedSet"

    def test_hash_table_slots_power(self):
        """Test the initial table size is configurable."""
        strategy = HashTableDuplicateDetection(num_slots_power=10)

        assert strategy.num_slots_power == 10
        assert strategy.has_duplicates(list(range(5000)) + [4999]) is True

    @pytest.mark.parametrize("power", [-1, 0, 1, 2])
    def test_hash_table_slots_power_too_small(self, power):
        """Test an undersized table is rejected at construction."""
        with pytest.raises(ValueError, match="num_slots_power"):
            HashTableDuplicateDetection(num_slots_power=power)
