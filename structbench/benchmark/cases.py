"""
The data structure efficiency cases.

Each case pairs strategies that must agree on their output, times every
strategy over its own copy of one dataset and then asserts equivalence.
"""

import statistics
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Sequence

from ..algorithms.algorithm import Algorithm
from ..algorithms.duplicate_detection import (
    HashTableDuplicateDetection,
    PairwiseDuplicateDetection,
    SetDuplicateDetection,
    SortedSetDuplicateDetection,
)
from ..algorithms.frequency_counting import (
    HashMapFrequencyCounting,
    HashTableFrequencyCounting,
    OrderedMapFrequencyCounting,
)
from ..algorithms.sorting import BubbleSort, LibrarySort
from ..data.generate import (
    DEFAULT_UPPER_BOUND,
    DUPLICATE_CHECK_SIZE,
    FREQUENCY_COUNT_SIZE,
    SORTING_SIZE,
    generate_random_integers,
)
from .equivalence import (
    assert_same_frequencies,
    assert_same_sorted,
    assert_same_verdict,
)


@dataclass
class BenchmarkCase:
    """A set of interchangeable strategies compared over one dataset."""

    name: str
    dataset_size: int
    strategies: List[Callable[[], Algorithm]]
    assert_equivalent: Callable[[Any, Any], None]
    upper_bound: int = DEFAULT_UPPER_BOUND

    def __post_init__(self):
        if not self.strategies:
            raise ValueError("A case needs at least one strategy")
        if self.dataset_size < 0:
            raise ValueError("dataset_size must be non-negative")

    def make_strategies(self) -> List[Algorithm]:
        return [factory() for factory in self.strategies]


@dataclass
class StrategyOutcome:
    """Timing and output of one strategy within a case run"""

    label: str
    value: Any
    time_ms: float
    measurements: List[float]
    additional_info: Optional[dict] = None


@dataclass
class CaseResult:
    """Outcome of a full case run"""

    case_name: str
    dataset_size: int
    outcomes: List[StrategyOutcome] = field(default_factory=list)

    def outcome(self, label: str) -> StrategyOutcome:
        for outcome in self.outcomes:
            if outcome.label == label:
                return outcome
        raise KeyError(label)

    @property
    def speedup(self) -> float:
        """Slowest median time over fastest median time."""
        times = [outcome.time_ms for outcome in self.outcomes]
        fastest = min(times)
        if fastest <= 0:
            return float("inf") if max(times) > 0 else 1.0
        return max(times) / fastest


def run_case(
    case: BenchmarkCase,
    numbers: Optional[Sequence[int]] = None,
    size: Optional[int] = None,
    trials: int = 1,
    warmup_runs: int = 0,
    seed: Optional[int] = None,
) -> CaseResult:
    """
    Run every strategy of a case and assert that they agree.

    Args:
        case: The case to run
        numbers: Dataset to use; generated from the case settings if None
        size: Overrides the case's dataset size when generating
        trials: Timed runs per strategy; the median is reported
        warmup_runs: Untimed runs per strategy before measuring
        seed: Seed for the generated dataset

    Returns:
        A CaseResult holding each strategy's output and timings

    Raises:
        EquivalenceError: If any strategy disagrees with the first one
    """
    if trials < 1:
        raise ValueError("trials must be at least 1")
    if warmup_runs < 0:
        raise ValueError("warmup_runs must be non-negative")

    if numbers is None:
        count = case.dataset_size if size is None else size
        numbers = generate_random_integers(count, case.upper_bound, seed)

    print(f"\n{case.name} (N={len(numbers):,})")

    result = CaseResult(case_name=case.name, dataset_size=len(numbers))
    for algorithm in case.make_strategies():
        for _ in range(warmup_runs):
            algorithm.run(list(numbers))

        measurements: List[float] = []
        run_result = None
        for _ in range(trials):
            # copy outside the timed region so in-place strategies never share input
            data = list(numbers)
            run_result = algorithm.run(data)
            measurements.append(run_result.time_ms)

        outcome = StrategyOutcome(
            label=run_result.algorithm_name,
            value=run_result.value,
            time_ms=statistics.median(measurements),
            measurements=measurements,
            additional_info=run_result.additional_info,
        )
        print(f"{outcome.label} took: {outcome.time_ms:.0f} ms")
        result.outcomes.append(outcome)

    reference = result.outcomes[0]
    for other in result.outcomes[1:]:
        case.assert_equivalent(reference.value, other.value)

    return result


DUPLICATE_CHECKING = BenchmarkCase(
    name="Duplicate Verification: List vs. Set",
    dataset_size=DUPLICATE_CHECK_SIZE,
    strategies=[PairwiseDuplicateDetection, SetDuplicateDetection],
    assert_equivalent=assert_same_verdict,
)

FREQUENCY_COUNTING = BenchmarkCase(
    name="Frequency Counting: dict vs. SortedDict",
    dataset_size=FREQUENCY_COUNT_SIZE,
    strategies=[HashMapFrequencyCounting, OrderedMapFrequencyCounting],
    assert_equivalent=assert_same_frequencies,
)

SORTING_PERFORMANCE = BenchmarkCase(
    name="Sorting Performance: Bubble Sort vs. list.sort",
    dataset_size=SORTING_SIZE,
    strategies=[BubbleSort, LibrarySort],
    assert_equivalent=assert_same_sorted,
)

DUPLICATE_CHECKING_ALL_CONTAINERS = BenchmarkCase(
    name="Duplicate Verification: list, set, IntHashTable and SortedSet",
    dataset_size=DUPLICATE_CHECK_SIZE,
    strategies=[
        PairwiseDuplicateDetection,
        SetDuplicateDetection,
        HashTableDuplicateDetection,
        SortedSetDuplicateDetection,
    ],
    assert_equivalent=assert_same_verdict,
)

FREQUENCY_COUNTING_ALL_CONTAINERS = BenchmarkCase(
    name="Frequency Counting: dict, SortedDict and IntHashTable",
    dataset_size=FREQUENCY_COUNT_SIZE,
    strategies=[
        HashMapFrequencyCounting,
        OrderedMapFrequencyCounting,
        HashTableFrequencyCounting,
    ],
    assert_equivalent=assert_same_frequencies,
)

CASES: Dict[str, BenchmarkCase] = {
    "duplicate_checking": DUPLICATE_CHECKING,
    "frequency_counting": FREQUENCY_COUNTING,
    "sorting_performance": SORTING_PERFORMANCE,
    "duplicate_checking_all_containers": DUPLICATE_CHECKING_ALL_CONTAINERS,
    "frequency_counting_all_containers": FREQUENCY_COUNTING_ALL_CONTAINERS,
}
