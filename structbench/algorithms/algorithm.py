import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Sequence


@dataclass
class RunResult:
    """
    Result of a single timed strategy run.

    Attributes:
        value: Observable output of the strategy (verdict, mapping or sorted list)
        time_taken: Wall-clock time of the run in seconds
        algorithm_name: Label of the strategy that produced the value
        additional_info: Any additional algorithm-specific information
    """

    value: Any
    time_taken: float
    algorithm_name: str
    additional_info: Optional[dict] = None

    @property
    def time_ms(self) -> float:
        """Time taken in milliseconds."""
        return self.time_taken * 1000


class Algorithm(ABC):
    """
    Abstract base class for benchmarked strategies.

    Subclasses implement `execute` over a sequence of integers; `run` wraps it
    with a monotonic clock read immediately before and after the call.
    Strategies that mutate their input expect the caller to hand them a
    private copy.
    """

    def __init__(self):
        self.additional_info: Optional[dict] = None

    @abstractmethod
    def execute(self, numbers: list[int]) -> Any:
        """
        Run the strategy over the numbers.

        Args:
            numbers: The dataset to process

        Returns:
            The observable result of the strategy
        """
        pass

    @abstractmethod
    def get_algorithm_name(self) -> str:
        """
        Get the name of the algorithm.

        Returns:
            A string used as the strategy label in reports
        """
        pass

    def validate_numbers(self, numbers: Sequence[int]) -> bool:
        """
        Validate that the input is a sequence of integers.

        Args:
            numbers: The dataset to validate

        Returns:
            True if every element is an int (bools excluded), False otherwise
        """
        if isinstance(numbers, (str, bytes)) or not isinstance(numbers, Sequence):
            return False
        return all(type(n) is int for n in numbers)

    def run(self, numbers: list[int]) -> RunResult:
        """Time a single execution of the strategy."""
        if not self.validate_numbers(numbers):
            raise TypeError(
                f"{self.get_algorithm_name()} expects a sequence of integers"
            )

        self.additional_info = None
        start_time = time.perf_counter()
        value = self.execute(numbers)
        end_time = time.perf_counter()

        return RunResult(
            value=value,
            time_taken=end_time - start_time,
            algorithm_name=self.get_algorithm_name(),
            additional_info=self.additional_info,
        )

    def __str__(self) -> str:
        """String representation of the algorithm."""
        return f"{self.get_algorithm_name()}"
