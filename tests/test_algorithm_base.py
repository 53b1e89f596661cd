"""
Tests for Algorithm base class and RunResult.

Tests cover the interface contract, input validation and timing.
"""

from unittest.mock import patch

import pytest

from structbench.algorithms.algorithm import Algorithm, RunResult


class TestRunResult:
    """Test suite for RunResult dataclass."""

    def test_basic_initialization(self):
        """Test basic RunResult initialization."""
        result = RunResult(value=True, time_taken=0.25, algorithm_name="Example")

        assert result.value is True
        assert result.time_taken == 0.25
        assert result.algorithm_name == "Example"
        assert result.additional_info is None  # default

    def test_time_ms(self):
        """Test conversion of the run time to milliseconds."""
        result = RunResult(value=[], time_taken=0.5, algorithm_name="Example")

        assert result.time_ms == 500.0

    def test_equality(self):
        """Test RunResult equality comparison."""
        result1 = RunResult([1, 2], 0.001, "A")
        result2 = RunResult([1, 2], 0.001, "A")
        result3 = RunResult([2, 1], 0.001, "A")

        assert result1 == result2
        assert result1 != result3


class TestAlgorithmBase:
    """Test suite for Algorithm base class."""

    def setup_method(self):
        """Set up test fixtures."""

        class SumAlgorithm(Algorithm):
            def execute(self, numbers):
                self.additional_info = {"count": len(numbers)}
                return sum(numbers)

            def get_algorithm_name(self) -> str:
                return "SumAlgorithm"

        self.SumAlgorithm = SumAlgorithm

    def test_abstract_instantiation(self):
        """Test that Algorithm cannot be instantiated directly."""
        with pytest.raises(TypeError):
            Algorithm()

    def test_abstract_methods_enforcement(self):
        """Test that abstract methods must be implemented."""

        class MissingExecute(Algorithm):
            def get_algorithm_name(self) -> str:
                return "MissingExecute"

        class MissingName(Algorithm):
            def execute(self, numbers):
                return None

        with pytest.raises(TypeError):
            MissingExecute()

        with pytest.raises(TypeError):
            MissingName()

    def test_run_returns_result(self):
        """Test that run wraps execute in a RunResult."""
        algorithm = self.SumAlgorithm()

        result = algorithm.run([1, 2, 3])

        assert isinstance(result, RunResult)
        assert result.value == 6
        assert result.algorithm_name == "SumAlgorithm"
        assert result.additional_info == {"count": 3}
        assert result.time_taken >= 0

    def test_run_measures_with_perf_counter(self):
        """Test that the clock is read right before and after execute."""
        algorithm = self.SumAlgorithm()

        with patch(
            "structbench.algorithms.algorithm.time.perf_counter",
            side_effect=[10.0, 10.25],
        ) as clock:
            result = algorithm.run([4, 5])

        assert clock.call_count == 2
        assert result.time_taken == 0.25
        assert result.time_ms == 250.0

    def test_run_resets_additional_info(self):
        """Test that stale info from a previous run is not reported."""

        class SilentAlgorithm(Algorithm):
            def execute(self, numbers):
                return len(numbers)

            def get_algorithm_name(self) -> str:
                return "Silent"

        algorithm = SilentAlgorithm()
        algorithm.additional_info = {"stale": True}

        result = algorithm.run([1])

        assert result.additional_info is None

    @pytest.mark.parametrize(
        "numbers",
        [[], [0], [1, 2, 3], (4, 5, 6), list(range(100))],
    )
    def test_validate_numbers_valid(self, numbers):
        """Test validate_numbers with integer sequences."""
        algorithm = self.SumAlgorithm()

        assert algorithm.validate_numbers(numbers) is True

    @pytest.mark.parametrize(
        "numbers",
        [None, 42, "123", b"123", [1, "2"], [1.5], [True, False], {1, 2}, {1: 2}],
    )
    def test_validate_numbers_invalid(self, numbers):
        """Test validate_numbers with non-integer input."""
        algorithm = self.SumAlgorithm()

        assert algorithm.validate_numbers(numbers) is False

    def test_run_rejects_invalid_input(self):
        """Test that run raises TypeError on invalid input."""
        algorithm = self.SumAlgorithm()

        with pytest.raises(TypeError, match="SumAlgorithm"):
            algorithm.run(["a", "b"])

    def test_string_representation(self):
        """Test string representation of algorithm."""
        algorithm = self.SumAlgorithm()

        assert str(algorithm) == "SumAlgorithm"
