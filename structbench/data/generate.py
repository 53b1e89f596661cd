from typing import Iterator, Optional

from mimesis import Numeric

DEFAULT_UPPER_BOUND = 1_000_000

# Dataset sizes used by the benchmark cases
DUPLICATE_CHECK_SIZE = 1_000_000
FREQUENCY_COUNT_SIZE = 1_000_000
SORTING_SIZE = 50_000


class RandomIntegerGenerator:
    """Generates integers drawn uniformly from [0, upper_bound) using mimesis."""

    def __init__(
        self, upper_bound: int = DEFAULT_UPPER_BOUND, seed: Optional[int] = None
    ):
        if upper_bound <= 0:
            raise ValueError("upper_bound must be positive")
        self.upper_bound = upper_bound
        self.numeric = Numeric(seed=seed)

    def generate_integer(self) -> int:
        """Generate a single integer."""
        # integer_number is inclusive on both ends
        return self.numeric.integer_number(start=0, end=self.upper_bound - 1)

    def generate_batch(self, count: int) -> Iterator[int]:
        """Generate a batch of integers."""
        if count < 0:
            raise ValueError("count must be non-negative")
        for _ in range(count):
            yield self.generate_integer()


def generate_random_integers(
    count: int, upper_bound: int = DEFAULT_UPPER_BOUND, seed: Optional[int] = None
) -> list[int]:
    """
    Generate a fresh list of random integers.

    Args:
        count: Number of integers to generate (0 yields an empty list)
        upper_bound: Exclusive upper bound of the value range
        seed: Optional seed for a reproducible sequence

    Returns:
        A new list owned by the caller
    """
    generator = RandomIntegerGenerator(upper_bound=upper_bound, seed=seed)
    return list(generator.generate_batch(count))
